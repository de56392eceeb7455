from location_store.services.location_service import LocationService

__all__ = ["LocationService"]
