"""Keyboard layout: the keys that kanji and kana codes may use, and their positions."""

KANJI_KEYS_ROW_0 = 12
KANJI_KEYS_ROW_1 = 12
KANJI_KEYS_ROW_2 = 11
KANJI_KEYS_ROW_3 = 10

KANJI_KEYS_ROWS_01 = KANJI_KEYS_ROW_0 + KANJI_KEYS_ROW_1
KANJI_KEYS_ROWS_012 = KANJI_KEYS_ROWS_01 + KANJI_KEYS_ROW_2
KANJI_KEY_COUNT = KANJI_KEYS_ROWS_012 + KANJI_KEYS_ROW_3

MAPPABLE_CHAR_COUNT = KANJI_KEY_COUNT * 2

# Unshifted keys first, then the same keys with shift held, row by row.
KEY_INDEX_TO_CHAR_MAP = (
    "1234567890-="
    "qwertyuiop[]"
    "asdfghjkl;'"
    "zxcvbnm,./"
    "!@#$%^&*()_+"
    "QWERTYUIOP{}"
    'ASDFGHJKL:"'
    "ZXCVBNM<>?"
)

_CHAR_TO_KEY_INDEX = {ch: i for i, ch in enumerate(KEY_INDEX_TO_CHAR_MAP)}


def _check_char(ch):
    if not isinstance(ch, str) or len(ch) != 1 or not 0 < ord(ch) < 128:
        raise ValueError(f"not a single ASCII key character: {ch!r}")


def char_to_key_index(ch):
    """Return the key index of ``ch``, or None for keys codes never use."""
    _check_char(ch)
    return _CHAR_TO_KEY_INDEX.get(ch)


def char_to_key_index_or_raise(ch):
    """Return the key index of ``ch``; raise ValueError if it has none."""
    index = char_to_key_index(ch)
    if index is None:
        raise ValueError(f"char has no key index: {ch!r}")
    return index


def col_index(key_index):
    """Column of a key within its row; shifted keys share their base key's column."""
    key_index %= KANJI_KEY_COUNT
    if key_index < KANJI_KEYS_ROW_0:
        return key_index
    if key_index < KANJI_KEYS_ROWS_01:
        return key_index - KANJI_KEYS_ROW_0
    if key_index < KANJI_KEYS_ROWS_012:
        return key_index - KANJI_KEYS_ROWS_01
    return key_index - KANJI_KEYS_ROWS_012


def row_index(key_index):
    """Row of a key: 0 is the number row, 3 is the bottom row."""
    key_index %= KANJI_KEY_COUNT
    if key_index < KANJI_KEYS_ROW_0:
        return 0
    if key_index < KANJI_KEYS_ROWS_01:
        return 1
    if key_index < KANJI_KEYS_ROWS_012:
        return 2
    return 3