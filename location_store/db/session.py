"""
Engine and session factory.

``get_db`` is the FastAPI dependency (one session per request, committed
when the request finishes). ``session_scope`` is the same unit of work for
scripts and services running outside a request.
"""
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from location_store.core.config import settings
from location_store.core.exceptions import LocationStoreError

logger = logging.getLogger(__name__)


def _unicode_lower(value):
    return value.lower() if value is not None else None


def build_engine(database_url: str, **kwargs):
    """
    Create an engine for ``database_url``.

    SQLite's built-in ``lower()`` only folds ASCII, which breaks
    case-insensitive name searches on accented names, so it is replaced
    on every new SQLite connection.
    """
    if database_url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args

    engine = create_engine(database_url, **kwargs)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _register_unicode_lower(dbapi_conn, connection_record):
            dbapi_conn.create_function("lower", 1, _unicode_lower)

    return engine


engine = build_engine(settings.database_url, echo=settings.sql_echo)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except LocationStoreError as e:
        logger.debug(f"Rolling back session: {e}")
        db.rollback()
        raise
    except Exception as e:
        logger.warning(f"Rolling back session: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def get_db():
    with session_scope() as db:
        yield db
