from __future__ import annotations

"""Named equality predicates for comparing sequence units."""

from typing import Any, Dict

from ..utils.text import remove_diacritics
from .jaro_winkler import Equals


def exact(a: Any, b: Any) -> bool:
    return a == b


def casefold(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def accent_insensitive(a: str, b: str) -> bool:
    """Treat ``"é"`` and ``"E"`` as the same unit."""

    return remove_diacritics(a).casefold() == remove_diacritics(b).casefold()


_COMPARERS: Dict[str, Equals] = {
    "exact": exact,
    "casefold": casefold,
    "accent-insensitive": accent_insensitive,
}


def get_comparer(name: str) -> Equals:
    try:
        return _COMPARERS[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown comparer '{name}', expected one of {sorted(_COMPARERS)}"
        ) from exc


def register_comparer(name: str, func: Equals) -> None:
    """Register *func* under *name*, replacing any previous entry."""

    if not name:
        raise ValueError("Comparer name must not be empty")
    _COMPARERS[name] = func


def available_comparers() -> Dict[str, Equals]:
    """Return the currently registered comparer mapping."""

    return dict(_COMPARERS)


__all__ = [
    "accent_insensitive",
    "available_comparers",
    "casefold",
    "exact",
    "get_comparer",
    "register_comparer",
]
