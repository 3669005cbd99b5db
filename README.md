# kanjikey

Building blocks for a keyboard-driven Japanese input scheme in which every
kana is reached through a short code of ASCII keystrokes. The package
generates the kana codes, checks a set of codes for collisions, ranks two-key
codes by how easy they are to type, and provides small helpers for drawing
in a terminal.

## Modules

- `kanjikey.keys` — the key layout: 45 unshifted and 45 shifted keys in four
  rows (`KEY_INDEX_TO_CHAR_MAP`). `char_to_key_index` returns a key's index,
  or `None` for a character that codes never use; `char_to_key_index_or_raise`
  raises `ValueError` instead. Both raise `ValueError` for anything that is
  not a single ASCII character. `row_index` (0 is the number row, 3 the bottom
  row) and `col_index` give a key's position; shifted keys share the position
  of their unshifted key.
- `kanjikey.romazi` — the kana codes. `RomaziConfig` holds the options
  (`hiragana_wo_key`, `include_kanji_numerals`, `classic_wo`,
  `optimize_keystrokes` and `kakko`, a `Kakko` value: `NONE`, `SPREAD` or
  `PACK`). `RomaziConfig.for_cli()` gives the command-line defaults: kanji
  numerals on Shift+digit, `wo`/`WO` for を/ヲ, and spread brackets.
  `parse_romazi_flags(args, config)` applies the flag at the start of `args`
  (`--no-classic-wo`, `--hiragana-wo-key KEY`, `--no-kanji-nums`,
  `--romazi-optimize-keystrokes`, `--pack-kakko`, `--no-kakko`) and returns
  how many arguments it consumed, or 0 if the first argument is not one of
  these. `get_romazi_codes(config)` returns an unsorted list of `KeyMapping`s:
  lower-case codes for hiragana, the same codes upper-cased for katakana, plus
  katakana-only combinations, small kana, kana with combining dakuten,
  numerals and brackets as configured. `hiragana_to_katakana` converts text
  such as `"きゃ"` to `"キャ"`.
- `kanjikey.mappings` — `KeyMapping(orig, conv)` is a frozen pair of a code
  and its output, shown as `orig->conv`. `code_cmp` orders codes by length,
  then by character. `find_conflicts` sorts a list of mappings in place and
  returns the pairs that collide: equal codes, or one code being a prefix of
  another. `sort_and_validate_no_conflicts` does the same and raises
  `MappingConflictError` (whose `conflicts` attribute holds the pairs and whose
  message has one `コード衝突: a と b` line per pair). On a sorted list,
  `incomplete_code_is_prefix` returns a longer mapping that a partly typed
  code can still become, and `incomplete_code_is_prefix_for_code_len` does so
  for one code length only. `ergonomic_lt(a, b, six_is_rh)` and
  `ergonomic_lt_same_first_key` tell whether one code is easier to type than
  another: one-key codes first, then codes that alternate hands, then by the
  row of the second key (home, top, bottom, number), then by finger. The
  `six_is_rh` flag says whether the 6 key belongs to the right hand.
- `kanjikey.strokes` — residual stroke counts (strokes beyond the radical).
  `residual_stroke_count_from_rsc_sort_key` looks one up by a 1-based
  radical+stroke sort key and raises `ValueError` out of range;
  `residual_stroke_count(entry)` reads `entry.rsc_sort_key`;
  `largest_residual_stroke_count()` gives the maximum.
- `kanjikey.rank_coverage` — `RankCoverage(target_rank, key_capacity)`.
  Add kanji by frequency rank with `add_kanji`; it returns `UNFILLED` (32767)
  until as many kanji as keys have been added, and from then on the number of
  kept kanji between the target rank and the highest kept rank. Adding a rank
  twice raises `ValueError`; `reset` starts over.
- `kanjikey.output` — `PacketizedOutput(stream, packetized=False)` writes
  bytes (or UTF-8 encoded text) to a binary stream. Unpacketized, each `add`
  is written at once; packetized, data is buffered and each chunk of at most
  255 bytes is written as a `0x04` marker, a length byte and the data, on a
  full buffer or on `flush`.
- `kanjikey.windows` — `Windows(output)` draws the regions listed in
  `WindowType` (`CUTOFF_GUIDE`, `RSC_LIST`, `INPUT_LINE`) one at a time with
  `start_window`, `add_newline` and `finish_window`. Once `enable`d it emits
  escape sequences: `to_top_of_screen` moves the cursor home (clearing the
  screen first when `request_clear` was called, as it is on a terminal
  resize where `SIGWINCH` exists), lines are cleared to their end, and a
  window drawn shorter than last time is padded with blank lines. While
  disabled, windows are written as plain lines.

## Example

```python
from kanjikey.mappings import MappingConflictError, sort_and_validate_no_conflicts
from kanjikey.romazi import RomaziConfig, get_romazi_codes, hiragana_to_katakana

config = RomaziConfig.for_cli()
codes = get_romazi_codes(config)

try:
    sort_and_validate_no_conflicts(codes)
except MappingConflictError as exc:
    print(exc)

print(hiragana_to_katakana("じょ"))   # ジョ
```

## What it does not do

The package holds no kanji dictionary: it does not assign kanji to codes,
and `residual_stroke_count` works on any object with an `rsc_sort_key`
supplied by the caller. There is no command-line program and no interactive
input screen; `parse_romazi_flags`, `PacketizedOutput` and `Windows` are
pieces for building one.

## Requirements

Python 3.10 or later, with no runtime dependencies. The tests use pytest,
available through the `test` extra.