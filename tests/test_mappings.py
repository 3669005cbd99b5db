import pytest

from kanjikey.mappings import (
    KeyMapping,
    MappingConflictError,
    code_cmp,
    ergonomic_lt,
    ergonomic_lt_same_first_key,
    find_conflicts,
    incomplete_code_is_prefix,
    incomplete_code_is_prefix_for_code_len,
    sort_and_validate_no_conflicts,
)


def build(*pairs):
    return [KeyMapping(orig, conv) for orig, conv in pairs]


def conflict_lines(exc_info):
    return [f"コード衝突: {a} と {b}" for a, b in exc_info.value.conflicts]


def test_code_cmp_orders_by_length_then_value():
    assert code_cmp("ka", "kar") == -1
    assert code_cmp("za", "ka") == 1
    assert code_cmp("ka", "ka") == 0
    assert code_cmp("z", "aa") == -1


def test_check_conflicts_one_code():
    a = build(("xxa", "ぁ"))
    sort_and_validate_no_conflicts(a)
    assert [str(m) for m in a] == ["xxa->ぁ"]


def test_check_conflicts_two_codes_ok():
    a = build(("xxa", "ぁ"), ("ya", "や"))
    sort_and_validate_no_conflicts(a)
    assert [str(m) for m in a] == ["ya->や", "xxa->ぁ"]


@pytest.mark.parametrize(
    "pairs, expected",
    [
        ((("me", "め"), ("me", "眼")), ["コード衝突: me->め と me->眼"]),
        (
            (("me", "め"), ("yu", "ゆ"), ("me", "眼")),
            ["コード衝突: me->め と me->眼"],
        ),
        (
            (("me", "め"), ("yu", "ゆ"), ("me", "眼"), ("YU", "湯")),
            ["コード衝突: me->め と me->眼"],
        ),
        (
            (("yu", "ゆ"), ("ka", "か"), ("ka", "蚊"), ("YU", "湯")),
            ["コード衝突: ka->か と ka->蚊"],
        ),
        (
            (
                ("yu", "ゆ"),
                ("ka", "か"),
                ("ka", "蚊"),
                ("YU", "湯"),
                ("za", "ざ"),
            ),
            ["コード衝突: ka->か と ka->蚊"],
        ),
        (
            (
                ("ka", "か"),
                ("za", "ざ"),
                ("ka", "蚊"),
                ("YU", "湯"),
                ("za", "座"),
            ),
            ["コード衝突: ka->か と ka->蚊", "コード衝突: za->ざ と za->座"],
        ),
        ((("k", "ん"), ("ka", "か")), ["コード衝突: k->ん と ka->か"]),
        ((("ka", "か"), ("kar", "車")), ["コード衝突: ka->か と kar->車"]),
        (
            (("hwwa", "ふぁ"), ("hwwa", "ふ!")),
            ["コード衝突: hwwa->ふ! と hwwa->ふぁ"],
        ),
    ],
)
def test_conflicts_reported(pairs, expected):
    a = build(*pairs)
    with pytest.raises(MappingConflictError) as exc_info:
        sort_and_validate_no_conflicts(a)
    assert conflict_lines(exc_info) == expected
    assert str(exc_info.value) == "\n".join(expected)


def test_find_conflicts_returns_pairs_without_raising():
    a = build(("me", "眼"), ("me", "め"))
    conflicts = find_conflicts(a)
    assert conflicts == [(KeyMapping("me", "め"), KeyMapping("me", "眼"))]


def test_no_conflicts_3_codes():
    a = build(("ka", "か"), ("za", "ざ"), ("yu", "ゆ"))
    sort_and_validate_no_conflicts(a)
    assert [str(m) for m in a] == ["ka->か", "yu->ゆ", "za->ざ"]


def test_incomplete_code_is_prefix_1():
    a = build(("ka", "か"), ("za", "ざ"), ("yu", "ゆ"), ("tye", "ちぇ"))
    sort_and_validate_no_conflicts(a)
    result = {
        code: bool(incomplete_code_is_prefix(a, code))
        for code in ("k", "f", "y", "ty", "tt")
    }
    assert result == {"k": True, "f": False, "y": True, "ty": True, "tt": False}


def test_incomplete_code_is_prefix_2():
    a = build(("ga", "が"), ("fa", "ふぁ"), ("mu", "む"), ("tta", "台"))
    sort_and_validate_no_conflicts(a)
    result = {
        code: bool(incomplete_code_is_prefix(a, code))
        for code in ("k", "f", "y", "ty", "tt")
    }
    assert result == {"k": False, "f": True, "y": False, "ty": False, "tt": True}


def test_incomplete_code_prefix_returns_the_mapping():
    a = build(("ka", "か"), ("tye", "ちぇ"))
    sort_and_validate_no_conflicts(a)
    assert incomplete_code_is_prefix(a, "ty") == KeyMapping("tye", "ちぇ")
    assert incomplete_code_is_prefix_for_code_len(a, "t", 3) == KeyMapping(
        "tye", "ちぇ"
    )
    assert incomplete_code_is_prefix_for_code_len(a, "t", 2) is None


def test_incomplete_code_prefix_length_out_of_range():
    a = build(("ka", "か"))
    with pytest.raises(ValueError):
        incomplete_code_is_prefix_for_code_len(a, "k", 5)
    with pytest.raises(ValueError):
        incomplete_code_is_prefix_for_code_len(a, "ka", 1)
    with pytest.raises(ValueError):
        incomplete_code_is_prefix_for_code_len(a, "kaka", 4)


def test_key_mapping_str():
    assert str(KeyMapping("xxa", "ぁ")) == "xxa->ぁ"


@pytest.mark.parametrize(
    "first, a, b, six_is_rh",
    [
        ("a", "j", "u", 0),
        ("j", "j", "u", 0),
        ("a", "5", "6", 0),
        ("a", "6", "5", 1),
        ("k", "6", "7", 0),
        ("k", "7", "6", 1),
        ("p", "u", "p", 0),
        ("p", "u", "p", 1),
        ("p", "j", "k", 0),
        ("f", "a", "r", 0),
    ],
)
def test_ergonomic_lt_same_first_key(first, a, b, six_is_rh):
    assert ergonomic_lt_same_first_key(first, a, b, six_is_rh)
    assert not ergonomic_lt_same_first_key(first, b, a, six_is_rh)


def test_ergonomic_shorter_code_wins():
    assert ergonomic_lt_same_first_key("a", "", "j", 0)
    assert not ergonomic_lt_same_first_key("a", "j", "", 0)


def test_ergonomic_same_second_key_raises():
    with pytest.raises(ValueError):
        ergonomic_lt_same_first_key("a", "j", "j", 0)


def test_ergonomic_lt_compares_first_key_then_second():
    assert ergonomic_lt("1a", "qa", 0)
    assert not ergonomic_lt("qa", "1a", 0)
    assert ergonomic_lt("aj", "au", 0)
    assert not ergonomic_lt("au", "aj", 0)


def test_ergonomic_lt_treats_shifted_first_key_as_same():
    assert ergonomic_lt("A", "aj", 0)
    assert not ergonomic_lt("aj", "A", 0)