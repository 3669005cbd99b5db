"""Input-code mappings: ordering, conflict checks and ergonomic ranking."""

from bisect import bisect_left
from dataclasses import dataclass

from kanjikey.keys import (
    KANJI_KEY_COUNT,
    char_to_key_index_or_raise,
    col_index,
    row_index,
)

# Longest input code, in keys.
MAX_CODE_LEN = 4

_COLUMN_VALUE = (3, 2, 1, 0, 4, 4, 0, 1, 2, 3, 5, 7)


@dataclass(frozen=True)
class KeyMapping:
    """An input code (``orig``) and the text it produces (``conv``)."""

    orig: str
    conv: str

    def __str__(self):
        return f"{self.orig}->{self.conv}"


class MappingConflictError(ValueError):
    """Raised when codes in a mapping collide or one is a prefix of another."""

    def __init__(self, conflicts):
        self.conflicts = list(conflicts)
        super().__init__(
            "\n".join(f"コード衝突: {a} と {b}" for a, b in self.conflicts)
        )


def _code_key(code):
    return (len(code), code)


def code_cmp(a, b):
    """Compare two codes: shorter first, then by character value."""
    ka, kb = _code_key(a), _code_key(b)
    return (ka > kb) - (ka < kb)


def incomplete_code_is_prefix_for_code_len(mappings, incomplete_code, length):
    """Return a mapping of exactly ``length`` keys starting with the code, or None.

    ``mappings`` must be sorted by code.
    """
    so_far = len(incomplete_code)
    if so_far > MAX_CODE_LEN - 1:
        raise ValueError(f"incomplete code too long: {incomplete_code!r}")
    if length < so_far or length > MAX_CODE_LEN:
        raise ValueError(f"length out of range: {length} ({incomplete_code!r})")

    extended = incomplete_code + "\x01" * (length - so_far)
    target = _code_key(extended)
    i = bisect_left(mappings, target, key=lambda m: _code_key(m.orig))
    if i < len(mappings) and mappings[i].orig == extended:
        raise ValueError(f"no code can match {incomplete_code!r}")
    if i >= len(mappings):
        return None

    found = mappings[i]
    if not found.orig.startswith(incomplete_code) or len(found.orig) != length:
        return None
    return found


def incomplete_code_is_prefix(mappings, incomplete_code):
    """Return a longer mapping whose code starts with ``incomplete_code``, or None.

    ``mappings`` must be sorted by code.
    """
    for length in range(len(incomplete_code) + 1, MAX_CODE_LEN + 1):
        match = incomplete_code_is_prefix_for_code_len(
            mappings, incomplete_code, length
        )
        if match:
            return match
    return None


def find_conflicts(mappings):
    """Sort ``mappings`` in place by code and return the conflicting pairs."""
    mappings.sort(key=lambda m: _code_key(m.orig))
    conflicts = []
    prev = None
    for m in mappings:
        prefix_conflict = incomplete_code_is_prefix(mappings, m.orig)
        if prefix_conflict:
            conflicts.append((m, prefix_conflict))
        if prev is not None and prev.orig == m.orig:
            if prev.conv > m.conv:
                conflicts.append((m, prev))
            else:
                conflicts.append((prev, m))
        prev = m
    return conflicts


def sort_and_validate_no_conflicts(mappings):
    """Sort ``mappings`` in place; raise MappingConflictError on any conflict."""
    conflicts = find_conflicts(mappings)
    if conflicts:
        raise MappingConflictError(conflicts)


def _hand(ch, six_is_rh):
    if not six_is_rh and ch == "6":
        return 0
    return 0 if col_index(char_to_key_index_or_raise(ch)) < 5 else 1


def _column_value(key_index):
    if key_index == char_to_key_index_or_raise("6"):
        return 6
    return _COLUMN_VALUE[col_index(key_index)]


def ergonomic_lt_same_first_key(first_key, second_a, second_b, six_is_rh):
    """True if ``first_key+second_a`` is easier to type than ``first_key+second_b``.

    An empty second key stands for a one-key code, which is always easiest.
    Criteria in order: code length, alternating hands, row of the second key
    (home, top, bottom, number), then the finger's column.
    """
    if second_a == second_b:
        raise ValueError(f"identical codes compared: {first_key}{second_a}")

    if not second_a or not second_b:
        return not second_a

    alt_a = _hand(first_key, six_is_rh) != _hand(second_a, six_is_rh)
    alt_b = _hand(first_key, six_is_rh) != _hand(second_b, six_is_rh)
    if alt_a != alt_b:
        return alt_a

    index_a = char_to_key_index_or_raise(second_a)
    index_b = char_to_key_index_or_raise(second_b)
    row_a, row_b = row_index(index_a), row_index(index_b)
    if row_a != row_b:
        if not row_a or not row_b:
            return not row_b
        if row_a == 3 or row_b == 3:
            return row_b == 3
        return row_b == 1

    value_a, value_b = _column_value(index_a), _column_value(index_b)
    if value_a == value_b:
        raise ValueError(
            f"columns expected to differ: {first_key}{second_a} and "
            f"{first_key}{second_b}"
        )
    return value_a < value_b


def ergonomic_lt(a, b, six_is_rh):
    """True if code ``a`` is easier to type than code ``b``."""
    first_a = char_to_key_index_or_raise(a[0]) % KANJI_KEY_COUNT
    first_b = char_to_key_index_or_raise(b[0]) % KANJI_KEY_COUNT
    if first_a != first_b:
        return first_a < first_b
    return ergonomic_lt_same_first_key(a[0], a[1:2], b[1:2], six_is_rh)