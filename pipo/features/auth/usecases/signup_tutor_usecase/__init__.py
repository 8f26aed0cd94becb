"""Signup tutor use case module."""

from .errors import (
    EmailAlreadyExistsError,
    PasswordTooShortError,
    SignupFailedError,
    ValidationError,
)
from .signup_tutor_usecase import SignupTutorUseCaseImpl

__all__ = [
    "SignupTutorUseCaseImpl",
    "ValidationError",
    "PasswordTooShortError",
    "EmailAlreadyExistsError",
    "SignupFailedError",
]
