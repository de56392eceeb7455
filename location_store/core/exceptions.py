"""
Service-level errors.

The repository layer never raises these; it lets SQLAlchemy errors through
and reports absence as None.
"""


class LocationStoreError(Exception):
    """Base error for the location service."""


class LocationNotFoundError(LocationStoreError):
    """Requested location or location tag does not exist."""

    def __init__(self, kind: str, key):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key}")


class ValidationError(LocationStoreError):
    """Input rejected before reaching the database."""
