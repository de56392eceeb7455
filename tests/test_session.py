import logging

import pytest

from location_store.core.exceptions import LocationNotFoundError, ValidationError
from location_store.db.session import session_scope


@pytest.mark.parametrize("error", [
    LocationNotFoundError("Location", "missing"),
    ValidationError("Location name is required"),
])
def test_session_scope_rolls_back_service_errors_quietly(caplog, error):
    with caplog.at_level(logging.DEBUG, logger="location_store.db.session"):
        with pytest.raises(type(error)):
            with session_scope():
                raise error

    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert any("Rolling back session" in r.getMessage() for r in caplog.records)


def test_session_scope_warns_on_unexpected_errors(caplog):
    with caplog.at_level(logging.DEBUG, logger="location_store.db.session"):
        with pytest.raises(RuntimeError):
            with session_scope():
                raise RuntimeError("database went away")

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "database went away" in warnings[0].getMessage()


def test_unicode_lower_on_sqlite_connections(engine):
    with engine.connect() as conn:
        assert conn.exec_driver_sql("SELECT lower('ÉLAN Ürgent')").scalar() == "élan ürgent"
