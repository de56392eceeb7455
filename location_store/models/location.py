from uuid import uuid4
from typing import Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from location_store.core.locale import language_of, normalize_locale
from location_store.db.base import Base


# ----------------------------
# SHARED BEHAVIOUR
# ----------------------------

class MetadataMixin:
    """
    Common columns and behaviour of named, retirable metadata.

    Subclasses declare ``name_translations`` (relationship) and
    ``translation_class`` (the mapped translation model).
    """

    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)

    retired = Column(Boolean, default=False, nullable=False, index=True)
    date_retired = Column(DateTime(timezone=True), nullable=True)
    retire_reason = Column(String(255), nullable=True)

    uuid = Column(String(38), unique=True, nullable=False, index=True)
    date_created = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __init__(self, **kwargs):
        kwargs.setdefault("uuid", str(uuid4()))
        kwargs.setdefault("retired", False)
        super().__init__(**kwargs)

    def localized_name(self, locale: Optional[str] = None) -> Optional[str]:
        """
        Name in ``locale``: exact locale first, then its language, then the
        unlocalized name.
        """
        if locale is None:
            return self.name
        locale = normalize_locale(locale)
        by_locale = {t.locale: t.value for t in self.name_translations}
        if locale in by_locale:
            return by_locale[locale]
        language = language_of(locale)
        if language in by_locale:
            return by_locale[language]
        return self.name

    def set_localized_name(self, locale: str, value: str) -> None:
        """Add or replace the translation of the name for ``locale``."""
        locale = normalize_locale(locale)
        for translation in self.name_translations:
            if translation.locale == locale:
                translation.value = value
                return
        self.name_translations.append(self.translation_class(locale=locale, value=value))

    def __repr__(self):
        return f"<{self.__class__.__name__} id={self.id} name={self.name!r}>"


# ----------------------------
# NAME TRANSLATIONS
# ----------------------------

class LocationNameTranslation(Base):
    __tablename__ = "location_names"
    __table_args__ = (UniqueConstraint("location_id", "locale", name="uq_location_names_locale"),)

    id = Column(Integer, primary_key=True)
    location_id = Column(Integer, ForeignKey("locations.id", ondelete="CASCADE"), nullable=False)
    locale = Column(String(10), nullable=False)
    value = Column(String(255), nullable=False, index=True)


class LocationTagNameTranslation(Base):
    __tablename__ = "location_tag_names"
    __table_args__ = (UniqueConstraint("location_tag_id", "locale", name="uq_location_tag_names_locale"),)

    id = Column(Integer, primary_key=True)
    location_tag_id = Column(Integer, ForeignKey("location_tags.id", ondelete="CASCADE"), nullable=False)
    locale = Column(String(10), nullable=False)
    value = Column(String(255), nullable=False, index=True)


# ----------------------------
# MASTER TABLES
# ----------------------------

location_tag_map = Table(
    "location_tag_map",
    Base.metadata,
    Column("location_id", Integer, ForeignKey("locations.id", ondelete="CASCADE"), primary_key=True),
    Column("location_tag_id", Integer, ForeignKey("location_tags.id", ondelete="CASCADE"), primary_key=True),
)


class LocationTag(MetadataMixin, Base):
    __tablename__ = "location_tags"

    translation_class = LocationTagNameTranslation

    id = Column(Integer, primary_key=True)

    name_translations = relationship(
        "LocationTagNameTranslation", cascade="all, delete-orphan", lazy="selectin"
    )
    locations = relationship("Location", secondary=location_tag_map, back_populates="tags")


class Location(MetadataMixin, Base):
    __tablename__ = "locations"

    translation_class = LocationNameTranslation

    id = Column(Integer, primary_key=True)

    address1 = Column(String(255), nullable=True)
    address2 = Column(String(255), nullable=True)
    city_village = Column(String(255), nullable=True)
    state_province = Column(String(255), nullable=True)
    country = Column(String(100), nullable=True)
    postal_code = Column(String(50), nullable=True)
    latitude = Column(String(50), nullable=True)
    longitude = Column(String(50), nullable=True)

    parent_location_id = Column(Integer, ForeignKey("locations.id"), nullable=True, index=True)

    name_translations = relationship(
        "LocationNameTranslation", cascade="all, delete-orphan", lazy="selectin"
    )
    parent_location = relationship(
        "Location", remote_side="Location.id", back_populates="child_locations"
    )
    child_locations = relationship("Location", back_populates="parent_location")
    tags = relationship("LocationTag", secondary=location_tag_map, back_populates="locations")

    def add_child_location(self, child: "Location") -> None:
        if child is self:
            raise ValueError("A location cannot be its own child")
        if child not in self.child_locations:
            self.child_locations.append(child)
