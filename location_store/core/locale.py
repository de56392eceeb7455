"""
Locale resolution for the current unit of work.

The active locale lives in a ContextVar so each request (thread or asyncio
task) sees its own value. When nothing has been set the configured
default locale is used.
"""
import re
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from location_store.core.config import settings

_LOCALE_PATTERN = re.compile(r"^([A-Za-z]{2,3})(?:[_-]([A-Za-z]{2}|\d{3}))?$")

_current_locale: ContextVar[Optional[str]] = ContextVar("current_locale", default=None)


def normalize_locale(value: str) -> str:
    """
    Normalize a locale string to ``language[_COUNTRY]`` form.

    Args:
        value: Locale such as ``"en"``, ``"en-us"`` or ``"fr_CA"``

    Returns:
        Normalized locale, e.g. ``"en_US"``

    Raises:
        ValueError: If the value is blank or not a recognizable locale
    """
    if value is None or not value.strip():
        raise ValueError("Locale must not be blank")
    match = _LOCALE_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid locale: {value!r}")
    language, country = match.groups()
    if country:
        return f"{language.lower()}_{country.upper()}"
    return language.lower()


def language_of(locale: str) -> str:
    """Return the language part of a normalized locale (``en_US`` -> ``en``)."""
    return locale.split("_", 1)[0]


def get_locale() -> str:
    """Return the locale of the current context, falling back to the default."""
    locale = _current_locale.get()
    if locale is None:
        return normalize_locale(settings.default_locale)
    return locale


def resolve_locale(locale: Optional[str] = None) -> str:
    """Return ``locale`` normalized when given, otherwise the context locale."""
    if locale is None:
        return get_locale()
    return normalize_locale(locale)


@contextmanager
def use_locale(locale: str) -> Iterator[str]:
    """
    Set the active locale for the duration of a block.

    Usage:
        with use_locale("fr_FR"):
            repo.get_all_locations()
    """
    token = _current_locale.set(normalize_locale(locale))
    try:
        yield _current_locale.get()
    finally:
        _current_locale.reset(token)
