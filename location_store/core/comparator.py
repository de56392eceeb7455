"""
Locale-aware ordering for named metadata (locations, location tags).
"""
import functools
import unicodedata
from typing import Any, Iterable, List, Optional, Tuple

from location_store.core.locale import resolve_locale


def collation_key(value: str) -> str:
    """
    Primary collation key: accents stripped, case folded.

    ``"Élan"`` and ``"elan"`` share the same key so they sort together.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


class MetadataComparator:
    """
    Compares metadata objects by their name in a given locale.

    Objects exposing ``localized_name(locale)`` are compared by that value,
    anything else by its ``name`` attribute. Missing names sort last.
    """

    def __init__(self, locale: Optional[str] = None):
        self.locale = resolve_locale(locale)

    def _name(self, obj: Any) -> Optional[str]:
        if hasattr(obj, "localized_name"):
            return obj.localized_name(self.locale)
        return getattr(obj, "name", None)

    def sort_key(self, obj: Any) -> Tuple[int, str, str]:
        name = self._name(obj)
        if name is None:
            return (1, "", "")
        return (0, collation_key(name), name)

    def __call__(self, a: Any, b: Any) -> int:
        key_a, key_b = self.sort_key(a), self.sort_key(b)
        if key_a < key_b:
            return -1
        if key_a > key_b:
            return 1
        return 0

    def sort(self, items: Iterable[Any]) -> List[Any]:
        """Return a new list ordered by this comparator."""
        return sorted(items, key=functools.cmp_to_key(self))
