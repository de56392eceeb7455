import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from location_store.db.base import Base
from location_store.db.session import build_engine, get_db
from location_store.main import app
from location_store.models.location import Location, LocationTag
from location_store.repositories import LocationRepository


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def repo(db):
    return LocationRepository(db)


@pytest.fixture
def make_location(repo):
    def _make(name, retired=False, **kwargs):
        return repo.save_location(Location(name=name, retired=retired, **kwargs))
    return _make


@pytest.fixture
def make_tag(repo):
    def _make(name, retired=False, **kwargs):
        return repo.save_location_tag(LocationTag(name=name, retired=retired, **kwargs))
    return _make


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
