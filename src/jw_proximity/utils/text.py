from __future__ import annotations

"""Text pre-processing applied before comparing strings."""

import unicodedata
from typing import Optional


def remove_diacritics(text: Optional[str]) -> str:
    """Strip combining marks from *text* after NFKD decomposition.

    ``None`` and the empty string both give ``""``. Compatibility
    decomposition also folds ligatures and full-width forms, e.g.
    ``"ﬁ"`` becomes ``"fi"``.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if unicodedata.category(c) != "Mn")


def prepare(text: str, *, upper: bool = True, strip_accents: bool = True) -> str:
    """Uppercase and strip diacritics, in that order."""

    if upper:
        text = text.upper()
    if strip_accents:
        text = remove_diacritics(text)
    return text
