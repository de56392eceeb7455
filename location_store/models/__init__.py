from location_store.models.location import (
    Location,
    LocationNameTranslation,
    LocationTag,
    LocationTagNameTranslation,
    location_tag_map,
)

__all__ = [
    "Location",
    "LocationNameTranslation",
    "LocationTag",
    "LocationTagNameTranslation",
    "location_tag_map",
]
