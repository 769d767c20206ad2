from __future__ import annotations

"""Jaro-Winkler proximity and distance."""

import logging
from typing import Any, Callable, Optional, Sequence

from ..config import DEFAULT_SETTINGS, ProximitySettings

logger = logging.getLogger(__name__)

Equals = Callable[[Any, Any], bool]


class InvalidArgumentError(ValueError):
    """Raised when a sequence argument is missing."""


def _default_equals(a: Any, b: Any) -> bool:
    return a == b


def _check_sequences(seq1: Optional[Sequence[Any]], seq2: Optional[Sequence[Any]]) -> None:
    if seq1 is None or seq2 is None:
        raise InvalidArgumentError("Both sequences are required, got None")


def jaro(
    seq1: Sequence[Any], seq2: Sequence[Any], equals: Optional[Equals] = None
) -> float:
    """Return the plain Jaro weight of *seq1* and *seq2* in [0, 1].

    Each unit of *seq1* is matched, in order, to the first unmatched equal
    unit of *seq2* inside the search window. Matched units that appear in a
    different order count as half transpositions.
    """

    _check_sequences(seq1, seq2)
    equals = equals or _default_equals

    len1 = len(seq1)
    len2 = len(seq2)
    if len1 == 0:
        return 1.0 if len2 == 0 else 0.0

    search_range = max(0, max(len1, len2) // 2 - 1)

    matched1 = [False] * len1
    matched2 = [False] * len2

    num_common = 0
    for i in range(len1):
        start = max(0, i - search_range)
        end = min(i + search_range + 1, len2)
        for j in range(start, end):
            if matched2[j]:
                continue
            if not equals(seq1[i], seq2[j]):
                continue
            matched1[i] = True
            matched2[j] = True
            num_common += 1
            break

    if num_common == 0:
        return 0.0

    num_half_transposed = 0
    k = 0
    for i in range(len1):
        if not matched1[i]:
            continue
        while not matched2[k]:
            k += 1
        if not equals(seq1[i], seq2[k]):
            num_half_transposed += 1
        k += 1
    num_transposed = num_half_transposed // 2

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "num_common=%d num_half_transposed=%d num_transposed=%d",
            num_common,
            num_half_transposed,
            num_transposed,
        )

    common = float(num_common)
    return (
        common / len1
        + common / len2
        + (num_common - num_transposed) / common
    ) / 3.0


def common_prefix(
    seq1: Sequence[Any],
    seq2: Sequence[Any],
    equals: Optional[Equals] = None,
    *,
    limit: int = DEFAULT_SETTINGS.prefix_size,
) -> int:
    """Count leading positions where both sequences agree, up to *limit*."""

    equals = equals or _default_equals
    stop = min(limit, len(seq1), len(seq2))
    pos = 0
    while pos < stop and equals(seq1[pos], seq2[pos]):
        pos += 1
    return pos


def proximity(
    seq1: Sequence[Any],
    seq2: Sequence[Any],
    equals: Optional[Equals] = None,
    *,
    settings: Optional[ProximitySettings] = None,
) -> float:
    """Return the Jaro-Winkler proximity: 0 for no match, 1 for a perfect match.

    The Winkler prefix boost is applied only when the Jaro weight is above
    ``settings.weight_threshold``.
    """

    settings = settings or DEFAULT_SETTINGS
    weight = jaro(seq1, seq2, equals)
    if weight <= settings.weight_threshold:
        return weight
    pos = common_prefix(seq1, seq2, equals, limit=settings.prefix_size)
    if pos == 0:
        return weight
    return weight + settings.prefix_scale * pos * (1.0 - weight)


def distance(
    seq1: Sequence[Any],
    seq2: Sequence[Any],
    equals: Optional[Equals] = None,
    *,
    settings: Optional[ProximitySettings] = None,
) -> float:
    """Return ``1 - proximity``: 0 for a perfect match, 1 for no match."""

    return 1.0 - proximity(seq1, seq2, equals, settings=settings)


__all__ = [
    "Equals",
    "InvalidArgumentError",
    "common_prefix",
    "distance",
    "jaro",
    "proximity",
]
