"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Each class corresponds to one error kind of the API; the HTTP status
is assigned only in exception_handlers.py.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """
    Raised when a resource does not exist or is not owned by the caller.

    The two cases are deliberately indistinguishable.
    """

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class UserNotFoundError(ApplicationError):
    """Raised when the authenticated user no longer exists."""

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message, code="AUTH_USER_NOT_FOUND")


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class AuthenticationError(ApplicationError):
    """Raised when the bearer credential is missing, malformed or expired."""

    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__(message, code="AUTH_UNAUTHORIZED")


class InvalidCredentialsError(ApplicationError):
    """Raised when a username/password pair does not verify."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message, code="AUTH_INVALID_CREDENTIALS")


class ConflictError(ApplicationError):
    """Raised when there is a state conflict."""

    def __init__(self, message: str = "Resource conflict") -> None:
        super().__init__(message, code="RES_CONFLICT")


class DuplicateUserError(ConflictError):
    """Raised when registering a username that already exists."""

    def __init__(self, message: str = "User already exists") -> None:
        super().__init__(message)
        self.code = "AUTH_DUPLICATE_USER"


class DatabaseError(ApplicationError):
    """Raised when a database operation fails."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")
