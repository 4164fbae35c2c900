class DomainError(Exception):
    """Base exception for errors reported back to the API caller."""

    status_code = 500


class ValidationError(DomainError):
    """Raised when input data is missing or invalid."""

    status_code = 400


class NoFieldsProvided(ValidationError):
    """Raised when a partial update carries no updatable field."""

    def __init__(self, message: str = "No fields to update"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when the referenced record does not exist."""

    status_code = 404


class StoreUnavailable(DomainError):
    """Raised when no database is configured for this process."""

    status_code = 503

    def __init__(self, message: str = "Database not available"):
        super().__init__(message)


class StoreError(DomainError):
    """Raised when the database rejects or fails a statement."""

    status_code = 500
