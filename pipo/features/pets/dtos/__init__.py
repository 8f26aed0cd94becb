"""Pet profile data transfer objects."""

from .pets_dto import (
    ActivateTagRequest,
    ListPetsResponse,
    PetProfileResponse,
    PetViewResponse,
    PhotoResponse,
    PublicPetResponse,
    UpdatePetRequest,
)

__all__ = [
    "ActivateTagRequest",
    "ListPetsResponse",
    "PetProfileResponse",
    "PetViewResponse",
    "PhotoResponse",
    "PublicPetResponse",
    "UpdatePetRequest",
]
