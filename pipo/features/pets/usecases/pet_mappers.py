"""Conversions from PetProfile rows to response models."""

from pipo.features.pets.dtos import PetProfileResponse, PublicPetResponse
from pipo.features.pets.models import PetProfile


def _public_fields(pet: PetProfile, code: str) -> dict:
    return {
        "id": str(pet.id),
        "code": code,
        "name": pet.name,
        "species": pet.species,
        "breed": pet.breed,
        "birth_date": pet.birth_date,
        "sex": pet.sex,
        "notes": pet.notes,
        "photo_url": pet.photo_url,
        "contact_name": pet.contact_name,
        "phone": pet.phone,
        "contact_channel": pet.contact_channel,
        "secondary_phone": pet.secondary_phone,
    }


def to_public_pet(pet: PetProfile, code: str) -> PublicPetResponse:
    return PublicPetResponse(**_public_fields(pet, code))


def to_pet_profile(pet: PetProfile, code: str) -> PetProfileResponse:
    return PetProfileResponse(
        **_public_fields(pet, code),
        created_at=pet.created_at,
        updated_at=pet.updated_at,
    )
