"""Authentication data transfer objects."""

from .login_dto import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    RefreshTokenResponse,
)
from .password_dto import ChangePasswordRequest, ChangePasswordResponse
from .setup_dto import (
    SetupAdminRequest,
    SetupAdminResponse,
    SetupRequiredResponse,
)
from .signup_dto import SignupRequest, SignupResponse

__all__ = [
    "ChangePasswordRequest",
    "ChangePasswordResponse",
    "CurrentUserResponse",
    "LoginRequest",
    "LoginResponse",
    "RefreshTokenResponse",
    "SetupAdminRequest",
    "SetupAdminResponse",
    "SetupRequiredResponse",
    "SignupRequest",
    "SignupResponse",
]
