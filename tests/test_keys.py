import pytest

from kanjikey.keys import (
    KANJI_KEY_COUNT,
    KANJI_KEYS_ROW_0,
    KANJI_KEYS_ROW_1,
    KANJI_KEYS_ROW_2,
    KANJI_KEYS_ROW_3,
    KEY_INDEX_TO_CHAR_MAP,
    MAPPABLE_CHAR_COUNT,
    char_to_key_index,
    char_to_key_index_or_raise,
    col_index,
    row_index,
)


def test_map_length_matches_key_count():
    indices = {char_to_key_index(ch) for ch in KEY_INDEX_TO_CHAR_MAP}
    assert indices == set(range(MAPPABLE_CHAR_COUNT))


def test_round_trip_every_key():
    for index, ch in enumerate(KEY_INDEX_TO_CHAR_MAP):
        assert char_to_key_index(ch) == index
        assert char_to_key_index_or_raise(ch) == index


def test_first_key_is_one():
    assert char_to_key_index("1") == 0


def test_shifted_letters_follow_unshifted():
    for lower in "qwertyuiopasdfghjklzxcvbnm":
        assert (
            char_to_key_index(lower.upper())
            == char_to_key_index(lower) + KANJI_KEY_COUNT
        )


def test_unused_key_has_no_index():
    assert char_to_key_index(" ") is None
    assert char_to_key_index("\\") is None
    assert char_to_key_index("`") is None


def test_or_raise_rejects_unused_key():
    with pytest.raises(ValueError):
        char_to_key_index_or_raise(" ")


@pytest.mark.parametrize("bad", ["", "ab", "\x00", "あ", "\x80"])
def test_invalid_chars_raise(bad):
    with pytest.raises(ValueError):
        char_to_key_index(bad)


def test_row_sizes():
    rows = [row_index(i) for i in range(KANJI_KEY_COUNT)]
    assert rows.count(0) == KANJI_KEYS_ROW_0
    assert rows.count(1) == KANJI_KEYS_ROW_1
    assert rows.count(2) == KANJI_KEYS_ROW_2
    assert rows.count(3) == KANJI_KEYS_ROW_3
    assert rows == sorted(rows)


def test_columns_start_at_zero_per_row():
    for i in range(KANJI_KEY_COUNT):
        if i == 0 or row_index(i) != row_index(i - 1):
            assert col_index(i) == 0
        else:
            assert col_index(i) == col_index(i - 1) + 1


def test_shifted_keys_share_position():
    for i in range(KANJI_KEY_COUNT):
        assert row_index(i + KANJI_KEY_COUNT) == row_index(i)
        assert col_index(i + KANJI_KEY_COUNT) == col_index(i)


def test_home_row_position():
    a = char_to_key_index("a")
    assert row_index(a) == 2
    assert col_index(a) == 0