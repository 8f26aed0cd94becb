"""Signup data transfer objects."""

from pydantic import BaseModel, EmailStr


class SignupRequest(BaseModel):
    """Request model for creating a tutor account."""

    email: EmailStr
    password: str
    name: str | None = None


class SignupResponse(BaseModel):
    """Response model for successful signup."""

    message: str
    user_id: str
    email: str
