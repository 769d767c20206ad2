from __future__ import annotations

import logging

import pytest

from jw_proximity.config import ProximitySettings
from jw_proximity.scoring import (
    InvalidArgumentError,
    common_prefix,
    distance,
    jaro,
    proximity,
)


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("MARTHA", "MARHTA", 0.9611),
        ("DWAYNE", "DUANE", 0.8400),
        ("DIXON", "DICKSONX", 0.8133),
    ],
)
def test_reference_values(first: str, second: str, expected: float) -> None:
    assert proximity(first, second) == pytest.approx(expected, abs=1e-4)


def test_no_common_units_is_zero() -> None:
    assert proximity("ABC", "XYZ") == 0.0
    assert distance("ABC", "XYZ") == 1.0


def test_empty_inputs() -> None:
    assert proximity("", "") == 1.0
    assert proximity("", "ABC") == 0.0
    assert proximity("ABC", "") == 0.0


def test_identity() -> None:
    assert proximity("JONES", "JONES") == 1.0
    assert distance("JONES", "JONES") == 0.0


def test_jaro_without_prefix_boost() -> None:
    # 6 matches, one transposition: (1 + 1 + 5/6) / 3
    assert jaro("MARTHA", "MARHTA") == pytest.approx(17 / 18)
    assert proximity("MARTHA", "MARHTA") > jaro("MARTHA", "MARHTA")


def test_weight_below_threshold_is_not_boosted() -> None:
    weight = jaro("ABCDEF", "ABXXXX")
    assert weight <= 0.7
    assert proximity("ABCDEF", "ABXXXX") == weight


def test_no_shared_prefix_is_not_boosted() -> None:
    weight = jaro("XMARTHA", "YMARTHA")
    assert weight > 0.7
    assert proximity("XMARTHA", "YMARTHA") == weight


def test_prefix_boost_is_monotonic() -> None:
    # One unmatched character at position p: identical Jaro weight, prefix p.
    word = "ABCDEFGHIJ"
    variants = [word[:p] + "#" + word[p + 1 :] for p in range(5)]
    weights = [jaro(word, variant) for variant in variants]
    scores = [proximity(word, variant) for variant in variants]

    assert len(set(weights)) == 1
    assert weights[0] == pytest.approx((0.9 + 0.9 + 1.0) / 3)
    assert scores[0] == weights[0]
    for previous, current in zip(scores, scores[1:]):
        assert current > previous


def test_common_prefix_is_capped() -> None:
    assert common_prefix("ABCDEFG", "ABCDEFG", limit=4) == 4
    assert common_prefix("AB", "ABCD", limit=4) == 2
    assert common_prefix("XBC", "ABC", limit=4) == 0


def test_custom_equality_predicate() -> None:
    def caseless(a: str, b: str) -> bool:
        return a.lower() == b.lower()

    assert proximity("martha", "MARHTA") < 1.0
    assert proximity("martha", "MARHTA", caseless) == proximity("MARTHA", "MARHTA")


def test_crossing_matches_count_as_transposition() -> None:
    # B pairs with seq2[1] and A with seq2[0]; both aligned pairs differ.
    assert jaro("BAQR", "ABQR") == pytest.approx((1 + 1 + 3 / 4) / 3)
    assert proximity("BAQR", "ABQR") == jaro("BAQR", "ABQR")


def test_works_on_non_string_sequences() -> None:
    assert proximity([1, 2, 3, 4], (1, 2, 3, 4)) == 1.0
    assert proximity(["M", "A", "R", "T", "H", "A"], "MARHTA") == proximity(
        "MARTHA", "MARHTA"
    )


def test_none_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        proximity(None, "ABC")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        distance("ABC", None)  # type: ignore[arg-type]


def test_settings_change_the_boost() -> None:
    no_boost = ProximitySettings(prefix_size=0)
    assert proximity("MARTHA", "MARHTA", settings=no_boost) == jaro("MARTHA", "MARHTA")

    stronger = ProximitySettings(prefix_scale=0.2)
    assert proximity("MARTHA", "MARHTA", settings=stronger) > proximity("MARTHA", "MARHTA")

    strict = ProximitySettings(weight_threshold=0.95)
    assert proximity("MARTHA", "MARHTA", settings=strict) == jaro("MARTHA", "MARHTA")


def test_debug_logging_reports_counts(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="jw_proximity.scoring.jaro_winkler"):
        proximity("MARTHA", "MARHTA")
    assert "num_common=6" in caplog.text
    assert "num_transposed=1" in caplog.text


def test_concurrent_calls_agree() -> None:
    from concurrent.futures import ThreadPoolExecutor

    pairs = [("MARTHA", "MARHTA"), ("DWAYNE", "DUANE"), ("DIXON", "DICKSONX")] * 50
    expected = [proximity(a, b) for a, b in pairs]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda pair: proximity(*pair), pairs))
    assert results == expected
