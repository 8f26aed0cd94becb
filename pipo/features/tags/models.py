"""Database models for printable pet tags."""

import enum
import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from pipo.db.session import Base, utcnow


class PetTagStatus(enum.Enum):
    """Lifecycle of a tag. BOUND is terminal."""

    UNBOUND = "unbound"
    BOUND = "bound"


class PetTag(Base):
    """A physical tag identified by a fixed-width code."""

    __tablename__ = "pet_tags"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # UNIQUE so a concurrent generation collides instead of duplicating codes
    code: Mapped[str] = mapped_column(
        String(5), nullable=False, unique=True, index=True
    )
    status: Mapped[PetTagStatus] = mapped_column(
        SAEnum(PetTagStatus), nullable=False, default=PetTagStatus.UNBOUND
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True
    )
    bound_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
