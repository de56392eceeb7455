"""
Query criteria for localized name columns.

A name matches when either the unlocalized ``name`` column matches, or a
translation for the requested locale (or its bare language) matches.
"""
from sqlalchemy import and_, or_

from location_store.core.locale import language_of

ESCAPE_CHAR = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input is matched literally."""
    return (
        value.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2)
        .replace("%", ESCAPE_CHAR + "%")
        .replace("_", ESCAPE_CHAR + "_")
    )


def _locales(locale: str):
    language = language_of(locale)
    if language == locale:
        return [locale]
    return [locale, language]


def localized_eq(entity, value: str, locale: str):
    """Case-sensitive exact match on the localized name of ``entity``."""
    translation = entity.translation_class
    return or_(
        entity.name == value,
        entity.name_translations.any(
            and_(translation.locale.in_(_locales(locale)), translation.value == value)
        ),
    )


def localized_prefix(entity, value: str, locale: str):
    """Case-insensitive "starts with" match on the localized name of ``entity``."""
    translation = entity.translation_class
    pattern = escape_like(value) + "%"
    return or_(
        entity.name.ilike(pattern, escape=ESCAPE_CHAR),
        entity.name_translations.any(
            and_(
                translation.locale.in_(_locales(locale)),
                translation.value.ilike(pattern, escape=ESCAPE_CHAR),
            )
        ),
    )
