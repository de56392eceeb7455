"""
Location repository.

Handles Location and LocationTag database operations. The repository
flushes so new records receive identifiers, but never commits: the
transaction belongs to whoever owns the session.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from location_store.core.comparator import MetadataComparator
from location_store.core.locale import resolve_locale
from location_store.db.criteria import localized_eq, localized_prefix
from location_store.models.location import Location, LocationTag

logger = logging.getLogger(__name__)


class LocationRepository:
    """Repository for location and location tag operations."""

    def __init__(self, db: Session):
        """
        Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    # ==================== LOCATIONS ====================

    def save_location(self, location: Location) -> Location:
        """
        Insert or update a location.

        When the location already exists, children that were never saved
        are saved first so the child collection update has rows to point at.

        Args:
            location: Location to persist, possibly with unsaved children

        Returns:
            The same Location instance
        """
        if location.child_locations and location.id is not None:
            for child in location.child_locations:
                if child.id is None:
                    self.save_location(child)

        self.db.add(location)
        self.db.flush()
        logger.info(f"Saved location {location.id} ({location.name})")
        return location

    def get_location(self, location_id: int) -> Optional[Location]:
        """
        Get location by ID.

        Args:
            location_id: Location ID

        Returns:
            Location or None
        """
        return self.db.get(Location, location_id)

    def get_location_by_name(self, name: str, locale: Optional[str] = None) -> Optional[Location]:
        """
        Get the first location whose localized name is exactly ``name``.

        Args:
            name: Location name (case-sensitive)
            locale: Locale to match translations in, defaults to the current one

        Returns:
            First matching Location or None
        """
        locale = resolve_locale(locale)
        logger.debug(f"Looking up location by name {name!r} in {locale}")
        return self.db.query(Location).filter(
            localized_eq(Location, name, locale)
        ).order_by(Location.id).first()

    def get_all_locations(
        self,
        include_retired: bool = True,
        locale: Optional[str] = None
    ) -> List[Location]:
        """
        Get all locations.

        Args:
            include_retired: Whether retired locations are returned
            locale: Locale used for sorting, defaults to the current one

        Returns:
            Locations sorted by localized name
        """
        query = self.db.query(Location)
        if not include_retired:
            query = query.filter(Location.retired == False)
        return MetadataComparator(locale).sort(query.all())

    def get_locations(self, search: Optional[str], locale: Optional[str] = None) -> List[Location]:
        """
        Get locations whose localized name starts with ``search``.

        A blank search returns every location, retired ones included.

        Args:
            search: Name prefix, matched case-insensitively
            locale: Locale to match and sort in, defaults to the current one

        Returns:
            Matching locations sorted by localized name
        """
        if not search:
            return self.get_all_locations(True, locale=locale)

        locale = resolve_locale(locale)
        locations = self.db.query(Location).filter(
            localized_prefix(Location, search, locale)
        ).all()
        return MetadataComparator(locale).sort(locations)

    def delete_location(self, location: Location) -> None:
        """
        Permanently remove a location.

        Args:
            location: Location to delete
        """
        self.db.delete(location)
        self.db.flush()
        logger.info(f"Deleted location {location.id} ({location.name})")

    def get_location_by_uuid(self, uuid: str) -> Optional[Location]:
        """
        Get location by UUID.

        Args:
            uuid: Location UUID, matched exactly

        Returns:
            Location or None
        """
        return self.db.query(Location).filter(Location.uuid == uuid).one_or_none()

    # ==================== LOCATION TAGS ====================

    def save_location_tag(self, tag: LocationTag) -> LocationTag:
        """
        Insert or update a location tag.

        Args:
            tag: LocationTag to persist

        Returns:
            The same LocationTag instance
        """
        self.db.add(tag)
        self.db.flush()
        logger.info(f"Saved location tag {tag.id} ({tag.name})")
        return tag

    def get_location_tag(self, location_tag_id: int) -> Optional[LocationTag]:
        """
        Get location tag by ID.

        Args:
            location_tag_id: LocationTag ID

        Returns:
            LocationTag or None
        """
        return self.db.get(LocationTag, location_tag_id)

    def get_location_tag_by_name(self, name: str, locale: Optional[str] = None) -> Optional[LocationTag]:
        """
        Get the first location tag whose localized name is exactly ``name``.

        Args:
            name: Tag name (case-sensitive)
            locale: Locale to match translations in, defaults to the current one

        Returns:
            First matching LocationTag or None
        """
        locale = resolve_locale(locale)
        logger.debug(f"Looking up location tag by name {name!r} in {locale}")
        return self.db.query(LocationTag).filter(
            localized_eq(LocationTag, name, locale)
        ).order_by(LocationTag.id).first()

    def get_all_location_tags(
        self,
        include_retired: bool = True,
        locale: Optional[str] = None
    ) -> List[LocationTag]:
        """
        Get all location tags.

        Args:
            include_retired: Whether retired tags are returned
            locale: Locale used for sorting, defaults to the current one

        Returns:
            Location tags sorted by localized name
        """
        query = self.db.query(LocationTag)
        if not include_retired:
            query = query.filter(LocationTag.retired == False)
        return MetadataComparator(locale).sort(query.all())

    def get_location_tags(self, search: Optional[str], locale: Optional[str] = None) -> List[LocationTag]:
        """
        Get location tags whose localized name starts with ``search``.

        A blank search matches every tag.

        Args:
            search: Name prefix, matched case-insensitively
            locale: Locale to match and sort in, defaults to the current one

        Returns:
            Matching location tags sorted by localized name
        """
        if not search:
            return self.get_all_location_tags(True, locale=locale)

        locale = resolve_locale(locale)
        tags = self.db.query(LocationTag).filter(
            localized_prefix(LocationTag, search, locale)
        ).all()
        return MetadataComparator(locale).sort(tags)

    def delete_location_tag(self, tag: LocationTag) -> None:
        """
        Permanently remove a location tag.

        Args:
            tag: LocationTag to delete
        """
        self.db.delete(tag)
        self.db.flush()
        logger.info(f"Deleted location tag {tag.id} ({tag.name})")

    def get_location_tag_by_uuid(self, uuid: str) -> Optional[LocationTag]:
        """Get location tag by UUID (exact match)."""
        return self.db.query(LocationTag).filter(LocationTag.uuid == uuid).one_or_none()
