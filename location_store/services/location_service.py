"""
Location management service.

Sits on top of LocationRepository: validates input, implements retiring,
and turns missing records into LocationNotFoundError for callers that need
a record to exist.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from location_store.core.comparator import MetadataComparator
from location_store.core.config import settings
from location_store.core.exceptions import LocationNotFoundError, ValidationError
from location_store.models.location import Location, LocationTag
from location_store.repositories.location_repository import LocationRepository

logger = logging.getLogger(__name__)


def _require_name(obj) -> None:
    if obj.name is None or not obj.name.strip():
        raise ValidationError(f"{obj.__class__.__name__} name is required")


def _require_reason(reason: Optional[str]) -> None:
    if reason is None or not reason.strip():
        raise ValidationError("A reason is required when retiring")


class LocationService:
    """Higher-level operations over locations and location tags."""

    def __init__(self, db: Session, repository: Optional[LocationRepository] = None):
        self.db = db
        self.repository = repository or LocationRepository(db)

    # ==================== LOCATIONS ====================

    def save_location(self, location: Location) -> Location:
        _require_name(location)
        return self.repository.save_location(location)

    def get_location(self, location_id: int) -> Optional[Location]:
        return self.repository.get_location(location_id)

    def get_location_by_name(self, name: str, locale: Optional[str] = None) -> Optional[Location]:
        return self.repository.get_location_by_name(name, locale=locale)

    def get_location_by_uuid(self, uuid: str) -> Optional[Location]:
        return self.repository.get_location_by_uuid(uuid)

    def require_location(self, uuid: str) -> Location:
        """
        Get location by UUID or fail.

        Raises:
            LocationNotFoundError: If no location has this UUID
        """
        location = self.repository.get_location_by_uuid(uuid)
        if location is None:
            raise LocationNotFoundError("Location", uuid)
        return location

    def get_all_locations(self, include_retired: bool = True, locale: Optional[str] = None) -> List[Location]:
        return self.repository.get_all_locations(include_retired, locale=locale)

    def get_locations(self, search: Optional[str], locale: Optional[str] = None) -> List[Location]:
        return self.repository.get_locations(search, locale=locale)

    def get_locations_by_tag(
        self,
        tag: LocationTag,
        include_retired: bool = False,
        locale: Optional[str] = None
    ) -> List[Location]:
        """
        Get the locations carrying ``tag``.

        Args:
            tag: Location tag to filter by
            include_retired: Whether retired locations are returned
            locale: Locale used for sorting

        Returns:
            Tagged locations sorted by localized name
        """
        locations = [loc for loc in tag.locations if include_retired or not loc.retired]
        return MetadataComparator(locale).sort(locations)

    def get_default_location(self) -> Optional[Location]:
        """
        Get the configured default location.

        Falls back to the first non-retired location when no location
        carries the configured name.
        """
        location = self.repository.get_location_by_name(settings.default_location_name)
        if location is not None:
            return location
        logger.warning(
            f"Default location {settings.default_location_name!r} not found, using first active location"
        )
        active = self.repository.get_all_locations(include_retired=False)
        return active[0] if active else None

    def retire_location(self, location: Location, reason: str) -> Location:
        _require_reason(reason)
        location.retired = True
        location.retire_reason = reason
        location.date_retired = datetime.now(timezone.utc)
        logger.info(f"Retiring location {location.id}: {reason}")
        return self.repository.save_location(location)

    def unretire_location(self, location: Location) -> Location:
        location.retired = False
        location.retire_reason = None
        location.date_retired = None
        logger.info(f"Unretiring location {location.id}")
        return self.repository.save_location(location)

    def purge_location(self, location: Location) -> None:
        self.repository.delete_location(location)

    def set_parent_location(self, location: Location, parent: Optional[Location]) -> None:
        """
        Attach ``location`` under ``parent`` (or detach it when None).

        Raises:
            ValidationError: If ``parent`` is ``location`` or one of its descendants
        """
        ancestor = parent
        while ancestor is not None:
            if ancestor is location:
                raise ValidationError("A location cannot be placed under itself or one of its descendants")
            ancestor = ancestor.parent_location
        location.parent_location = parent

    def set_localized_names(self, obj, translations: Dict[str, str]) -> None:
        """
        Apply per-locale name translations to a location or location tag.

        Raises:
            ValidationError: If a locale key is not a valid locale
        """
        for locale, value in translations.items():
            try:
                obj.set_localized_name(locale, value)
            except ValueError as e:
                raise ValidationError(str(e)) from e

    # ==================== LOCATION TAGS ====================

    def save_location_tag(self, tag: LocationTag) -> LocationTag:
        _require_name(tag)
        return self.repository.save_location_tag(tag)

    def get_location_tag(self, location_tag_id: int) -> Optional[LocationTag]:
        return self.repository.get_location_tag(location_tag_id)

    def get_location_tag_by_name(self, name: str, locale: Optional[str] = None) -> Optional[LocationTag]:
        return self.repository.get_location_tag_by_name(name, locale=locale)

    def get_location_tag_by_uuid(self, uuid: str) -> Optional[LocationTag]:
        return self.repository.get_location_tag_by_uuid(uuid)

    def require_location_tag(self, uuid: str) -> LocationTag:
        """
        Get location tag by UUID or fail.

        Raises:
            LocationNotFoundError: If no tag has this UUID
        """
        tag = self.repository.get_location_tag_by_uuid(uuid)
        if tag is None:
            raise LocationNotFoundError("LocationTag", uuid)
        return tag

    def get_all_location_tags(self, include_retired: bool = True, locale: Optional[str] = None) -> List[LocationTag]:
        return self.repository.get_all_location_tags(include_retired, locale=locale)

    def get_location_tags(self, search: Optional[str], locale: Optional[str] = None) -> List[LocationTag]:
        return self.repository.get_location_tags(search, locale=locale)

    def retire_location_tag(self, tag: LocationTag, reason: str) -> LocationTag:
        _require_reason(reason)
        tag.retired = True
        tag.retire_reason = reason
        tag.date_retired = datetime.now(timezone.utc)
        logger.info(f"Retiring location tag {tag.id}: {reason}")
        return self.repository.save_location_tag(tag)

    def unretire_location_tag(self, tag: LocationTag) -> LocationTag:
        tag.retired = False
        tag.retire_reason = None
        tag.date_retired = None
        logger.info(f"Unretiring location tag {tag.id}")
        return self.repository.save_location_tag(tag)

    def purge_location_tag(self, tag: LocationTag) -> None:
        self.repository.delete_location_tag(tag)
