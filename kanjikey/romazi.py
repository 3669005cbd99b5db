"""Romaji and kana input codes, and the command-line flags that shape them."""

from dataclasses import dataclass
from enum import Enum

from kanjikey.mappings import KeyMapping

COMBINING_DAKUTEN = "\u3099"

_HIRAGANA_FIRST = "\u3041"
_HIRAGANA_LAST = "\u3096"
_KATAKANA_OFFSET = 0x60


class Kakko(Enum):
    """How brackets and quotation marks are entered."""

    NONE = "none"
    # Opening marks on "[?" and closing marks on "]?", all typed with the left hand.
    SPREAD = "spread"
    # Every mark on "]?"; some rare brackets become harder to type.
    PACK = "pack"


@dataclass
class RomaziConfig:
    """Options that decide which kana codes are generated."""

    # A single key that types を; no ヲ code is made for it.
    hiragana_wo_key: str = ""
    # Shift+digit single-key codes for the kanji numerals.
    include_kanji_numerals: bool = False
    # wo=を and WO=ヲ.
    classic_wo: bool = False
    # Frequent kana on single keys, moving あ-row vowels (other than い),
    # っ and ん to two-key codes.
    optimize_keystrokes: bool = False
    kakko: Kakko = Kakko.NONE

    @classmethod
    def for_cli(cls):
        """The defaults used when options come from the command line."""
        return cls(include_kanji_numerals=True, classic_wo=True, kakko=Kakko.SPREAD)


def hiragana_to_katakana(text):
    """Return ``text`` with every hiragana replaced by its katakana."""
    return "".join(
        chr(ord(ch) + _KATAKANA_OFFSET)
        if _HIRAGANA_FIRST <= ch <= _HIRAGANA_LAST
        else ch
        for ch in text
    )


_SIMPLE_FLAGS = {
    "--no-classic-wo": ("classic_wo", False),
    "--no-kanji-nums": ("include_kanji_numerals", False),
    "--romazi-optimize-keystrokes": ("optimize_keystrokes", True),
    "--pack-kakko": ("kakko", Kakko.PACK),
    "--no-kakko": ("kakko", Kakko.NONE),
}


def parse_romazi_flags(args, config):
    """Apply the romaji flag at the start of ``args`` to ``config``.

    Returns how many arguments were consumed, or 0 if the first argument is
    not a romaji flag.
    """
    if not args:
        return 0
    flag = args[0]
    if flag in _SIMPLE_FLAGS:
        attr, value = _SIMPLE_FLAGS[flag]
        setattr(config, attr, value)
        return 1
    if flag == "--hiragana-wo-key" and len(args) > 1 and len(args[1]) == 1:
        config.hiragana_wo_key = args[1]
        return 2
    return 0


_KATAKANA_ONLY = (
    ("BW7", "ヴャ"), ("BW8", "ヴュ"), ("BW9", "ヴョ"),
    ("BWA", "ヴァ"), ("BWI", "ヴィ"), ("BWU", "ヴ"), ("BWE", "ヴェ"), ("BWO", "ヴォ"),
    ("TSA", "ツァ"), ("TSI", "ツィ"), ("TSE", "ツェ"), ("TSO", "ツォ"),
    ("THA", "テャ"), ("THI", "ティ"), ("THU", "テュ"), ("THE", "テェ"), ("THO", "テョ"),
    ("DHA", "デャ"), ("DHI", "ディ"), ("DHU", "デュ"), ("DHE", "デェ"), ("DHO", "デョ"),
    ("TWA", "トァ"), ("TWI", "トィ"), ("TWU", "トゥ"), ("TWE", "トェ"), ("TWO", "トォ"),
    ("DWA", "ドァ"), ("DWI", "ドィ"), ("DWU", "ドゥ"), ("DWE", "ドェ"), ("DWO", "ドォ"),
    ("HW7", "フャ"), ("HW8", "フュ"), ("HW9", "フョ"),
    ("HWA", "ファ"), ("HWI", "フィ"), ("HWE", "フェ"), ("HWO", "フォ"),
    ("XA", "ァ"), ("XI", "ィ"), ("XU", "ゥ"), ("XE", "ェ"), ("XO", "ォ"),
    ("YE", "イェ"),
    ("GHA", "ジャ"), ("GHI", "ジィ"), ("GHU", "ジュ"), ("GHE", "ジェ"), ("GHO", "ジョ"),
    ("GWA", "グァ"), ("GWI", "グィ"), ("GWU", "グゥ"), ("GWE", "グェ"), ("GWO", "グォ"),
    ("KWA", "クァ"), ("KWI", "クィ"), ("KWU", "クゥ"), ("KWE", "クェ"), ("KWO", "クォ"),
    ("TSU", "ツ"),
    ("WI", "ウィ"), ("WE", "ウェ"),
    ("WHA", "ウァ"), ("WHI", "ウィ"), ("WHU", "ウゥ"), ("WHE", "ウェ"), ("WHO", "ウォ"),
    ("-", "ー"),
)

# (normal code, code when keystrokes are optimized or None, hiragana)
_HIRAGANA = (
    ("a", ";a", "あ"), ("i", None, "い"), ("u", ";u", "う"),
    ("e", ";e", "え"), ("o", ";o", "お"),
    ("ka", None, "か"), ("ki", None, "き"), ("ku", None, "く"),
    ("ke", None, "け"), ("ko", None, "こ"),
    (",a", None, "ゕ"), (",e", None, "ゖ"),
    ("ga", None, "が"), ("gi", None, "ぎ"), ("gu", None, "ぐ"),
    ("ge", None, "げ"), ("go", None, "ご"),
    ("sa", None, "さ"), ("si", "f", "し"), ("su", None, "す"),
    ("se", None, "せ"), ("so", None, "そ"),
    ("za", None, "ざ"), ("zi", None, "じ"), ("zu", None, "ず"),
    ("ze", None, "ぜ"), ("zo", None, "ぞ"),
    ("ta", "a", "た"), ("ti", None, "ち"), ("tu", None, "つ"),
    ("j", "to", "っ"), ("te", "u", "て"), ("to", "q", "と"),
    ("da", None, "だ"), ("di", None, "ぢ"), ("du", None, "づ"),
    ("de", None, "で"), ("do", None, "ど"),
    ("na", "o", "な"), ("ni", "e", "に"), ("nu", None, "ぬ"),
    ("ne", None, "ね"), ("no", "j", "の"),
    ("ha", "l", "は"), ("hi", None, "ひ"), ("hu", None, "ふ"),
    ("he", None, "へ"), ("ho", None, "ほ"),
    ("ba", None, "ば"), ("bi", None, "び"), ("bu", None, "ぶ"),
    ("be", None, "べ"), ("bo", None, "ぼ"),
    ("pa", None, "ぱ"), ("pi", None, "ぴ"), ("pu", None, "ぷ"),
    ("pe", None, "ぺ"), ("po", None, "ぽ"),
    ("ma", None, "ま"), ("mi", None, "み"), ("mu", None, "む"),
    ("me", None, "め"), ("mo", None, "も"),
    ("ya", None, "や"), ("yu", None, "ゆ"), ("yo", None, "よ"),
    ("ra", None, "ら"), ("ri", None, "り"), ("ru", "v", "る"),
    ("re", "c", "れ"), ("ro", None, "ろ"),
    ("wa", None, "わ"), ("xxl", None, "を"), ("f", ";n", "ん"),
    ("xxa", None, "ぁ"), ("xxi", None, "ぃ"), ("xxu", None, "ぅ"),
    ("xxe", None, "ぇ"), ("xxo", None, "ぉ"),
    ("xx7", None, "ゃ"), ("xx8", None, "ゅ"), ("xx9", None, "ょ"),
    ("xxd", None, "ゑ"), ("xxk", None, "ゐ"), ("xxw", None, "ゎ"),
    ("xxv", None, "ゔ"),
)

_I_RETSU = (
    ("k", "き"), ("g", "ぎ"), ("s", "し"), ("z", "じ"),
    ("t", "ち"), ("d", "ぢ"), ("n", "に"), ("h", "ひ"),
    ("b", "び"), ("p", "ぴ"), ("m", "み"), ("r", "り"),
)

# Third key of a "?y?" code and the kana that follow the i-row kana.
_I_RETSU_SUFFIXES = (
    ("a", "ゃ"), ("s", "ゃう"), ("i", "ぃ"), ("u", "ゅ"),
    ("y", "ゅう"), ("e", "ぇ"), ("o", "ょ"), ("p", "ょう"),
)

_KANJI_NUMERALS = (
    ("!", "一"), ("@", "二"), ("#", "三"), ("$", "四"), ("%", "五"),
    ("^", "六"), ("&", "七"), ("*", "八"), ("(", "九"), (")", "十"),
)

_DAKUTEN_KANA = (
    ("xxj", "わ" + COMBINING_DAKUTEN), ("xxc", "ゑ" + COMBINING_DAKUTEN),
    ("xx,", "ゐ" + COMBINING_DAKUTEN), ("xx.", "を" + COMBINING_DAKUTEN),
    ("XXJ", "ヷ"), ("XXC", "ヹ"), ("XX,", "ヸ"), ("XX.", "ヺ"),
)

_KAKKO = {
    Kakko.NONE: (),
    Kakko.PACK: (
        ("]1", "‘"), ("]2", "’"), ("]3", "“"), ("]4", "”"),
        ("]q", "〈"), ("]w", "〉"), ("]e", "《"), ("]r", "》"),
        ("]a", "「"), ("]s", "」"), ("]d", "『"), ("]f", "』"),
        ("]z", "【"), ("]x", "】"), ("]c", "〔"), ("]v", "〕"),
        ("]y", "〖"), ("]u", "〗"), ("]h", "〘"), ("]j", "〙"),
        ("]n", "〝"), ("]m", "〟"), ("]7", "｟"), ("]8", "｠"),
    ),
    Kakko.SPREAD: (
        ("[q", "‘"), ("]q", "’"), ("[a", "“"), ("]a", "”"),
        ("[e", "〈"), ("]e", "〉"), ("[r", "《"), ("]r", "》"),
        ("[s", "「"), ("]s", "」"), ("[d", "『"), ("]d", "』"),
        ("[f", "【"), ("]f", "】"), ("[w", "〔"), ("]w", "〕"),
        ("[v", "〖"), ("]v", "〗"), ("[c", "〘"), ("]c", "〙"),
        ("[g", "〝"), ("]g", "〟"), ("[x", "｟"), ("]x", "｠"),
    ),
}


def _with_katakana(orig, conv):
    """The hiragana mapping and its katakana twin on the upper-cased code."""
    upper = "".join(ch.upper() if "a" <= ch <= "z" else ch for ch in orig)
    yield KeyMapping(orig, conv)
    yield KeyMapping(upper, hiragana_to_katakana(conv))


def _generate(config):
    for orig, conv in _KATAKANA_ONLY:
        yield KeyMapping(orig, conv)

    for normal, optimized, conv in _HIRAGANA:
        orig = optimized if config.optimize_keystrokes and optimized else normal
        yield from _with_katakana(orig, conv)

    for first_key, kana in _I_RETSU:
        for third_key, rest in _I_RETSU_SUFFIXES:
            yield from _with_katakana(first_key + "y" + third_key, kana + rest)

    if config.include_kanji_numerals:
        for orig, conv in _KANJI_NUMERALS:
            yield KeyMapping(orig, conv)

    if config.hiragana_wo_key:
        yield KeyMapping(config.hiragana_wo_key, "を")

    if config.classic_wo:
        yield from _with_katakana("wo", "を")

    for orig, conv in _DAKUTEN_KANA:
        yield KeyMapping(orig, conv)

    for orig, conv in _KAKKO[config.kakko]:
        yield KeyMapping(orig, conv)


def get_romazi_codes(config):
    """Return the kana and symbol mappings that ``config`` selects, unsorted."""
    if config.kakko not in _KAKKO:
        raise ValueError(f"invalid bracket setting: {config.kakko!r}")
    return list(_generate(config))