from itertools import count
from types import SimpleNamespace

import pytest

from kanjikey.strokes import (
    largest_residual_stroke_count,
    residual_stroke_count,
    residual_stroke_count_from_rsc_sort_key,
)


def _all_counts():
    counts = []
    for key in count(1):
        try:
            counts.append(residual_stroke_count_from_rsc_sort_key(key))
        except ValueError:
            return counts


def test_first_key_is_radical_itself():
    assert residual_stroke_count_from_rsc_sort_key(1) == 0


def test_second_key_has_one_residual_stroke():
    assert residual_stroke_count_from_rsc_sort_key(2) == 1


def test_second_radical_starts_at_zero():
    # The 一 group holds 12 keys, so key 13 is the radical 二.
    assert residual_stroke_count_from_rsc_sort_key(13) == 0


def test_largest_matches_table_maximum():
    counts = _all_counts()
    assert counts
    assert largest_residual_stroke_count() == max(counts)


def test_largest_value():
    assert largest_residual_stroke_count() == 22


def test_counts_are_within_bounds():
    largest = largest_residual_stroke_count()
    assert all(0 <= c <= largest for c in _all_counts())


@pytest.mark.parametrize("key", [0, -1])
def test_key_below_range_raises(key):
    with pytest.raises(ValueError):
        residual_stroke_count_from_rsc_sort_key(key)


def test_key_past_end_raises():
    last = len(_all_counts())
    residual_stroke_count_from_rsc_sort_key(last)
    with pytest.raises(ValueError):
        residual_stroke_count_from_rsc_sort_key(last + 1)


@pytest.mark.parametrize("key", [1, 2, 13, 100, 500])
def test_entry_uses_sort_key(key):
    entry = SimpleNamespace(rsc_sort_key=key)
    assert residual_stroke_count(entry) == residual_stroke_count_from_rsc_sort_key(
        key
    )


def test_entry_with_invalid_key_raises():
    with pytest.raises(ValueError):
        residual_stroke_count(SimpleNamespace(rsc_sort_key=0))