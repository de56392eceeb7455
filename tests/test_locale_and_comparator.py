from types import SimpleNamespace

import pytest

from location_store.core.comparator import MetadataComparator, collation_key
from location_store.core.locale import get_locale, language_of, normalize_locale, resolve_locale, use_locale
from location_store.models.location import Location


@pytest.mark.parametrize("raw,expected", [
    ("en", "en"),
    ("EN", "en"),
    ("en-us", "en_US"),
    ("fr_CA", "fr_CA"),
    (" pt_br ", "pt_BR"),
    ("es-419", "es_419"),
])
def test_normalize_locale(raw, expected):
    assert normalize_locale(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", None, "english", "en_USA", "e"])
def test_normalize_locale_rejects_invalid(raw):
    with pytest.raises(ValueError):
        normalize_locale(raw)


def test_language_of():
    assert language_of("en_US") == "en"
    assert language_of("fr") == "fr"


def test_use_locale_is_scoped():
    assert get_locale() == "en_US"
    with use_locale("fr-fr") as active:
        assert active == "fr_FR"
        assert get_locale() == "fr_FR"
        with use_locale("es"):
            assert get_locale() == "es"
        assert get_locale() == "fr_FR"
    assert get_locale() == "en_US"


def test_resolve_locale_prefers_explicit_value():
    with use_locale("fr"):
        assert resolve_locale() == "fr"
        assert resolve_locale("de-de") == "de_DE"


def test_collation_key_ignores_case_and_accents():
    assert collation_key("Élan") == collation_key("elan")
    assert collation_key("STRASSE") == collation_key("straße")


def test_comparator_orders_by_name_with_missing_names_last():
    items = [
        SimpleNamespace(name=None),
        SimpleNamespace(name="banana"),
        SimpleNamespace(name="Apple"),
    ]

    ordered = MetadataComparator("en").sort(items)

    assert [item.name for item in ordered] == ["Apple", "banana", None]


def test_comparator_is_a_three_way_compare():
    comparator = MetadataComparator("en")
    a, b = SimpleNamespace(name="a"), SimpleNamespace(name="B")

    assert comparator(a, b) == -1
    assert comparator(b, a) == 1
    assert comparator(a, SimpleNamespace(name="a")) == 0


def test_comparator_uses_localized_name():
    ward = Location(name="Ward")
    ward.set_localized_name("es", "Ala Norte")
    clinic = Location(name="Clinic")

    assert [loc.name for loc in MetadataComparator("en").sort([ward, clinic])] == ["Clinic", "Ward"]
    assert [loc.name for loc in MetadataComparator("es_ES").sort([clinic, ward])] == ["Ward", "Clinic"]


def test_comparator_defaults_to_context_locale():
    with use_locale("de_DE"):
        assert MetadataComparator().locale == "de_DE"


def test_localized_name_fallbacks():
    location = Location(name="Laboratory")
    location.set_localized_name("fr", "Laboratoire")
    location.set_localized_name("fr_CA", "Labo")

    assert location.localized_name() == "Laboratory"
    assert location.localized_name("fr_CA") == "Labo"
    assert location.localized_name("fr_BE") == "Laboratoire"
    assert location.localized_name("de") == "Laboratory"


def test_set_localized_name_replaces_existing_translation():
    location = Location(name="Kitchen")
    location.set_localized_name("fr", "Cuisine")
    location.set_localized_name("FR", "Cuisine Centrale")

    assert len(location.name_translations) == 1
    assert location.localized_name("fr") == "Cuisine Centrale"
