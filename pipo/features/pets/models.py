"""Database models for registered pets."""

import enum
import uuid
from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pipo.db.session import Base, utcnow
from pipo.features.tags.models import PetTag

# Column widths, shared with the request models so oversized input is
# rejected before it reaches the database.
NAME_MAX_LENGTH = 100
SPECIES_MAX_LENGTH = 50
BREED_MAX_LENGTH = 100
SEX_MAX_LENGTH = 20
CONTACT_NAME_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 30


class ContactChannel(enum.Enum):
    """How a finder should reach the tutor."""

    MESSAGE = "message"
    CALL = "call"


class PetProfile(Base):
    """The public profile created when a tag is activated."""

    __tablename__ = "pet_profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # UNIQUE: at most one profile per tag, whatever the interleaving
    tag_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("pet_tags.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    # Display fields
    name: Mapped[str | None] = mapped_column(String(NAME_MAX_LENGTH), nullable=True)
    species: Mapped[str | None] = mapped_column(
        String(SPECIES_MAX_LENGTH), nullable=True
    )
    breed: Mapped[str | None] = mapped_column(String(BREED_MAX_LENGTH), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    sex: Mapped[str | None] = mapped_column(String(SEX_MAX_LENGTH), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Only ever written by the photo upload, never taken from a request body
    photo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Contact fields
    contact_name: Mapped[str] = mapped_column(
        String(CONTACT_NAME_MAX_LENGTH), nullable=False
    )
    phone: Mapped[str] = mapped_column(String(PHONE_MAX_LENGTH), nullable=False)
    contact_channel: Mapped[ContactChannel] = mapped_column(
        SAEnum(ContactChannel), nullable=False, default=ContactChannel.MESSAGE
    )
    secondary_phone: Mapped[str | None] = mapped_column(
        String(PHONE_MAX_LENGTH), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, onupdate=utcnow
    )

    tag: Mapped[PetTag] = relationship(lazy="joined")
