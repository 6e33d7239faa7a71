"""Custom exceptions for the billing API."""


class BillingException(Exception):
    """Base exception for the billing application."""

    pass


class NotFoundError(BillingException):
    """Raised when a requested row does not exist."""

    def __init__(self, resource: str, identifier: object) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"No such {resource}: {identifier}")


class ConstraintViolationError(BillingException):
    """Raised when the database rejects a write (foreign key, unique, not-null)."""

    pass


class DatabaseError(BillingException):
    """Raised when a database operation fails."""

    pass


class ConfigurationError(BillingException):
    """Raised when configuration is invalid."""

    pass
