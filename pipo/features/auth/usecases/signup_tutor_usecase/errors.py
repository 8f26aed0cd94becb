"""Custom exceptions for the signup use case."""


class ValidationError(ValueError):
    """Base class for validation errors."""

    pass


class PasswordTooShortError(ValidationError):
    """Raised when password is too short."""

    def __init__(self):
        super().__init__("Password must be at least 8 characters long")


class EmailAlreadyExistsError(ValueError):
    """Raised when the email is already registered."""

    def __init__(self):
        super().__init__("An account with this email already exists")


class SignupFailedError(ValueError):
    """Raised when signup process fails for unexpected reasons."""

    def __init__(self, detail: str = "Failed to create account"):
        super().__init__(detail)
