# tagfuzz

Helpers for editing comma-separated image-generation tag prompts, and the
Levenshtein distance and alignment functions used to compare tags.

## Installation

    pip install tagfuzz

## Text helpers

`tagfuzz.text_utils` works on the prompt text:

- `booru_to_image_tag(tag)` replaces underscores with spaces and escapes
  parentheses with a backslash, so `"hatsune_miku_(cosplay)"` becomes
  `"hatsune miku \(cosplay\)"`. An empty tag gives `""`.
- `get_span_at_cursor(text, pos)` returns `(start, end)` of the
  comma-separated item around cursor position `pos`; `start` is just after
  the preceding comma, `end` is at the next comma or the end of the text.
- `trim(text)` strips spaces and tabs (only those) from both ends.
- `utf8_has_multibyte(data)` tells whether bytes or a string hold anything
  outside ASCII.
- `utf8_to_unicode(data)` decodes UTF-8 bytes, turning invalid sequences into
  U+FFFD; `unicode_to_utf8(text)` encodes to UTF-8, turning unpaired
  surrogates into U+FFFD.
- `fullpath(filename)` resolves `filename` against the directory of the
  running program (`sys.argv[0]`, or the interpreter when there is none).

## Distances

`tagfuzz.levenshtein` works on any sequences of hashable items, strings
included:

    from tagfuzz.levenshtein import levenshtein_distance
    from tagfuzz.types import LevenshteinWeightTable

    levenshtein_distance("kitten", "sitting")                                # 3
    levenshtein_distance("kitten", "sitting", LevenshteinWeightTable(1, 1, 2))  # 5

- `levenshtein_distance(s1, s2, weights, score_cutoff, score_hint)` picks the
  cheapest method for the weights: unit costs, insert/delete only (when a
  replacement costs at least an insertion plus a deletion), or a general
  weighted table.
- `uniform_levenshtein_distance(s1, s2, score_cutoff, score_hint)` is the
  unit-cost distance.
- `generalized_levenshtein_distance(s1, s2, weights, max_dist)` is the
  weighted distance computed row by row.
- `levenshtein_maximum(len1, len2, weights)` and
  `levenshtein_min_distance(s1, s2, weights)` give the bounds that the
  lengths alone allow.

`weights` defaults to unit costs. When the distance exceeds `score_cutoff`
(or `max_dist`) the result is the cutoff plus one. `score_hint` never changes
a result; a negative hint raises `ValueError`.

`tagfuzz.levenshtein_align.levenshtein_editops(s1, s2, score_hint)` returns a
minimal `Editops` turning `s1` into `s2`. Common prefixes and suffixes produce
no operations.

## Edit operations

`tagfuzz.types` defines:

- `EditType` (`NONE`, `REPLACE`, `INSERT`, `DELETE`), and the frozen
  dataclasses `EditOp`, `Opcode` and `LevenshteinWeightTable`.
- `ScoreAlignment`, a score with the aligned source and destination ranges.
- `Editops` and `Opcodes`, mutable sequences of operations that also carry
  `src_len` and `dest_len`. Two of them are equal when the operations and
  both lengths are equal.

`Opcodes.from_editops(...)` and `Editops.from_opcodes(...)` convert between
the two forms. Both classes have `slice(start, stop, step)` (also reachable as
`ops[start:stop:step]`; a zero or negative step raises `ValueError`),
`reverse()` and `inverse()`, which swaps source and destination. `Editops`
also has `remove_slice(...)`, which deletes in place, and
`remove_subsequence(other)`, which drops the operations of `other` and shifts
the remaining source positions; it raises `ValueError` when `other` is not a
subsequence.

`tagfuzz.sentence.SplittedSentence` holds a list of words. `dedupe()` drops
adjacent duplicate words and returns how many went, `join()` joins the words
with single spaces, and `len()` is the length of that joined text.

## What it does not do

The package holds the building blocks only. It has no tag dictionary, no
suggestion search or ranking, no similarity ratios, and no command-line tool.

## Running the tests

    pip install tagfuzz[test]
    pytest