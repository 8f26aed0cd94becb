"""Domain exceptions shared by the tag and pet use cases.

Every error carries a ``retryable`` flag so callers can tell a terminal
condition (``AlreadyActivatedError``) from one worth resubmitting
(``StorageError``). Route handlers translate them with ``to_http_exception``.
"""

from fastapi import HTTPException, status


class PipoError(Exception):
    """Base class for domain errors."""

    retryable: bool = False
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class TagNotFoundError(PipoError):
    """Raised when no tag exists with the given code or id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, detail: str = "Pet tag not registered"):
        super().__init__(detail)


class PetNotFoundError(PipoError):
    """Raised when a pet profile does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, detail: str = "Pet not found"):
        super().__init__(detail)


class AlreadyActivatedError(PipoError):
    """Raised when activating a tag that is already bound to a pet."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, code: str):
        super().__init__(f"Pet tag {code} is already registered")
        self.code = code


class UnauthenticatedError(PipoError):
    """Raised when an operation needs a signed-in account."""

    retryable = True
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(detail)


class SignInRequiredError(UnauthenticatedError):
    """Raised when an anonymous visitor reaches an unregistered tag.

    ``next_path`` is where the visitor should land after signing in.
    """

    def __init__(self, next_path: str):
        super().__init__("Sign in to register this pet tag")
        self.next_path = next_path


class ForbiddenError(PipoError):
    """Raised when the account is authenticated but not allowed."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, detail: str = "Forbidden"):
        super().__init__(detail)


class ValidationError(PipoError):
    """Raised for malformed or missing input."""

    retryable = True
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCountError(ValidationError):
    """Raised when a batch size falls outside the allowed range."""

    def __init__(self, count: int, maximum: int):
        super().__init__(f"Count must be between 1 and {maximum}, got {count}")
        self.count = count


class StorageError(PipoError):
    """Raised when the database call fails for infrastructure reasons."""

    retryable = True
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class TagAllocationConflictError(StorageError):
    """Raised when a concurrent generation already claimed the allocated codes."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self):
        super().__init__("Tag codes were allocated concurrently, please retry")


class FormatError(PipoError):
    """Raised when a stored tag code is not a valid fixed-width number."""

    def __init__(self, detail: str):
        super().__init__(detail)


def to_http_exception(error: PipoError) -> HTTPException:
    """Translate a domain error into the HTTP error returned to the client."""
    headers: dict[str, str] | None = None
    if isinstance(error, UnauthenticatedError):
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(
        status_code=error.status_code,
        detail=error.detail,
        headers=headers,
    )
