"""Exception classes shared by the services and the HTTP layer."""


class AppError(Exception):
    """Base application error, carries the HTTP status it maps to."""

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when a payload is rejected before anything is written."""

    def __init__(self, message="Validation failed."):
        super().__init__(message, 400)


class NotFoundError(AppError):
    def __init__(self, message="Resource not found."):
        super().__init__(message, 404)


class ConflictError(AppError):
    """Raised when a write would leave dangling references."""

    def __init__(self, message="Resource is still in use."):
        super().__init__(message, 409)


class InvalidTransitionError(AppError):
    """Raised for a backward status move when strict transitions are on."""

    def __init__(self, current, requested):
        super().__init__(f"Cannot move match from '{current}' to '{requested}'", 409)
        self.current = current
        self.requested = requested


class PersistenceError(AppError):
    """Raised when the database read or write failed."""

    def __init__(self, message="Operation failed."):
        super().__init__(message, 500)
