class DomainError(Exception):
    """Base exception for the employee API."""


class PersistenceError(DomainError):
    """Raised when the backing store fails (connectivity, constraints, SQL errors)."""
