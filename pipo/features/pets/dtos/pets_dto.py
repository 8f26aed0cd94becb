"""Pet profile data transfer objects."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from pipo.features.pets.models import (
    BREED_MAX_LENGTH,
    CONTACT_NAME_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    SEX_MAX_LENGTH,
    SPECIES_MAX_LENGTH,
    ContactChannel,
)
from pipo.features.tags.models import PetTagStatus


class ActivateTagRequest(BaseModel):
    """Request model for registering a pet on an unbound tag.

    ``contact_name`` and ``phone`` are checked by the use case so a missing
    and a blank value are reported the same way.
    """

    contact_name: str | None = Field(default=None, max_length=CONTACT_NAME_MAX_LENGTH)
    phone: str | None = Field(default=None, max_length=PHONE_MAX_LENGTH)
    contact_channel: ContactChannel = ContactChannel.MESSAGE
    secondary_phone: str | None = Field(default=None, max_length=PHONE_MAX_LENGTH)
    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    species: str | None = Field(default=None, max_length=SPECIES_MAX_LENGTH)
    breed: str | None = Field(default=None, max_length=BREED_MAX_LENGTH)
    birth_date: date | None = None
    sex: str | None = Field(default=None, max_length=SEX_MAX_LENGTH)
    notes: str | None = None


class UpdatePetRequest(BaseModel):
    """Request model for a partial update.

    Omitted fields are left unchanged; fields sent as null are cleared.
    ``photo_url`` only accepts null, which removes the current photo. A new
    photo can only be set by uploading it.
    """

    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    species: str | None = Field(default=None, max_length=SPECIES_MAX_LENGTH)
    breed: str | None = Field(default=None, max_length=BREED_MAX_LENGTH)
    birth_date: date | None = None
    sex: str | None = Field(default=None, max_length=SEX_MAX_LENGTH)
    notes: str | None = None
    photo_url: None = None
    contact_name: str | None = Field(default=None, max_length=CONTACT_NAME_MAX_LENGTH)
    phone: str | None = Field(default=None, max_length=PHONE_MAX_LENGTH)
    contact_channel: ContactChannel | None = None
    secondary_phone: str | None = Field(default=None, max_length=PHONE_MAX_LENGTH)


class PublicPetResponse(BaseModel):
    """What a finder sees after scanning a tag."""

    id: str
    code: str
    name: str | None
    species: str | None
    breed: str | None
    birth_date: date | None
    sex: str | None
    notes: str | None
    photo_url: str | None
    contact_name: str
    phone: str
    contact_channel: ContactChannel
    secondary_phone: str | None


class PetProfileResponse(PublicPetResponse):
    """The owner's view of a pet profile."""

    created_at: datetime
    updated_at: datetime | None


class PetViewResponse(BaseModel):
    """Result of looking up a scanned code.

    ``is_owner`` only drives which controls a client shows; every write
    re-checks ownership.
    """

    code: str
    status: PetTagStatus
    needs_activation: bool = False
    activation_path: str | None = None
    pet: PublicPetResponse | None = None
    is_owner: bool = False


class ListPetsResponse(BaseModel):
    """Response model for a tutor's own pets."""

    pets: list[PetProfileResponse]


class PhotoResponse(BaseModel):
    """Response model after a photo upload or removal."""

    photo_url: str | None
