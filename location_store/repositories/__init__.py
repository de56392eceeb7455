"""
Repository layer for database operations.

- LocationRepository: Location and LocationTag persistence
"""
from location_store.repositories.location_repository import LocationRepository

__all__ = [
    "LocationRepository",
]
