"""Custom exceptions for the change password use case."""


class InvalidCurrentPasswordError(ValueError):
    """Raised when the current password does not match."""

    def __init__(self):
        super().__init__("Current password is incorrect")


class AccountNotFoundError(ValueError):
    """Raised when the signed-in account no longer exists or is disabled."""

    def __init__(self):
        super().__init__("Account not found")


class ChangePasswordFailedError(ValueError):
    """Raised when the new password could not be stored."""

    def __init__(self, detail: str = "Failed to change password"):
        super().__init__(detail)
