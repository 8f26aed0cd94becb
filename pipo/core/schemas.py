import enum
import uuid

from pydantic import BaseModel


class UserRole(enum.Enum):
    """Defines the roles a user can have."""

    ADMIN = "admin"
    TUTOR = "tutor"


class AuthenticatedUser(BaseModel):
    """Represents an authenticated user."""

    user_id: uuid.UUID
    role: UserRole
