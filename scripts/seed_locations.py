"""
Script to create the default location and the standard location tags
"""
import logging

from location_store.core.config import settings
from location_store.db.base import Base
from location_store.db.session import SessionLocal, engine
from location_store.models.location import Location, LocationTag
from location_store.services.location_service import LocationService


DEFAULT_TAGS = [
    ("Login Location", "A location that a user may log in to"),
    ("Admission Location", "Patients may be admitted to this location"),
    ("Visit Location", "Visits are only allowed to happen at this location"),
]


def seed_locations():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        service = LocationService(db)

        tags = []
        for name, description in DEFAULT_TAGS:
            tag = service.get_location_tag_by_name(name)
            if tag is None:
                tag = service.save_location_tag(LocationTag(name=name, description=description))
                print(f"✅ Created location tag {name!r}")
            tags.append(tag)

        location = service.get_location_by_name(settings.default_location_name)
        if location is None:
            location = Location(name=settings.default_location_name, tags=tags)
            service.save_location(location)
            print(f"✅ Created default location {location.name!r} ({location.uuid})")
        else:
            print(f"✅ Default location already exists: {location.name!r}")

        db.commit()
    except Exception as e:
        print(f"❌ Error seeding locations: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    seed_locations()
