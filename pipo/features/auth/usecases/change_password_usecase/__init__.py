"""Change password use case module."""

from pipo.features.auth.usecases.signup_tutor_usecase.errors import (
    PasswordTooShortError,
)

from .change_password_usecase import ChangePasswordUseCaseImpl
from .errors import (
    AccountNotFoundError,
    ChangePasswordFailedError,
    InvalidCurrentPasswordError,
)

__all__ = [
    "ChangePasswordUseCaseImpl",
    "AccountNotFoundError",
    "ChangePasswordFailedError",
    "InvalidCurrentPasswordError",
    "PasswordTooShortError",
]
