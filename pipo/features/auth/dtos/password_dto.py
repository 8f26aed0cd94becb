"""Password change data transfer objects."""

from pydantic import BaseModel


class ChangePasswordRequest(BaseModel):
    """Request model for changing the signed-in account's password."""

    current_password: str
    new_password: str


class ChangePasswordResponse(BaseModel):
    """Response model for a successful password change."""

    message: str
