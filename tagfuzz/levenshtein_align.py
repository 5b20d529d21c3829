"""Alignment of two sequences as a minimal list of Levenshtein edit operations."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from .levenshtein import _strip_common_affix
from .types import EditOp, Editops, EditType


def _common_prefix_len(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    limit = min(len(s1), len(s2))
    prefix = 0
    while prefix < limit and s1[prefix] == s2[prefix]:
        prefix += 1
    return prefix


def _vertical_deltas(
    s1: Sequence[Hashable], s2: Sequence[Hashable]
) -> tuple[list[int], list[int], int]:
    """Run the bit-parallel algorithm with ``s1`` as pattern and keep every row.

    Bit ``i`` of ``vp[row]`` is set when the distance grows by one going from
    ``s1[:i]`` to ``s1[:i + 1]`` against ``s2[:row + 1]``; ``vn`` marks a drop.
    """
    length = len(s1)
    masks: dict[Hashable, int] = {}
    for pos, ch in enumerate(s1):
        masks[ch] = masks.get(ch, 0) | (1 << pos)
    full = (1 << length) - 1
    last = 1 << (length - 1)

    vp, vn = full, 0
    dist = length
    vp_rows: list[int] = []
    vn_rows: list[int] = []
    for ch in s2:
        x = masks.get(ch, 0)
        d0 = ((((x & vp) + vp) ^ vp) | x | vn) & full
        hp = vn | (~(d0 | vp) & full)
        hn = d0 & vp

        if hp & last:
            dist += 1
        if hn & last:
            dist -= 1

        hp = ((hp << 1) | 1) & full
        hn = (hn << 1) & full
        vp = hn | (~(d0 | hp) & full)
        vn = hp & d0
        vp_rows.append(vp)
        vn_rows.append(vn)
    return vp_rows, vn_rows, dist


def _align(
    s1: Sequence[Hashable], s2: Sequence[Hashable], src_pos: int, dest_pos: int
) -> list[EditOp]:
    """Recover edit operations from the recorded bit matrix, in order."""
    if s1 and s2:
        vp_rows, vn_rows, _ = _vertical_deltas(s1, s2)
    else:
        vp_rows, vn_rows = [], []

    col, row = len(s1), len(s2)
    backwards: list[EditOp] = []

    while row and col:
        if (vp_rows[row - 1] >> (col - 1)) & 1:
            col -= 1
            backwards.append(EditOp(EditType.DELETE, col + src_pos, row + dest_pos))
            continue
        row -= 1
        if row and (vn_rows[row - 1] >> (col - 1)) & 1:
            backwards.append(EditOp(EditType.INSERT, col + src_pos, row + dest_pos))
        else:
            col -= 1
            if s1[col] != s2[row]:
                backwards.append(EditOp(EditType.REPLACE, col + src_pos, row + dest_pos))

    while col:
        col -= 1
        backwards.append(EditOp(EditType.DELETE, col + src_pos, row + dest_pos))

    while row:
        row -= 1
        backwards.append(EditOp(EditType.INSERT, col + src_pos, row + dest_pos))

    backwards.reverse()
    return backwards


def levenshtein_editops(
    s1: Sequence[Hashable], s2: Sequence[Hashable], score_hint: int | None = None
) -> Editops:
    """Return a minimal list of edit operations turning ``s1`` into ``s2``.

    ``score_hint`` is an expected distance; it only guides the amount of work
    and never changes the result.
    """
    if score_hint is not None and score_hint < 0:
        raise ValueError("score_hint must not be negative")

    # The common prefix and suffix need no operations.
    prefix = _common_prefix_len(s1, s2)
    core1, core2 = _strip_common_affix(s1, s2)
    ops = _align(core1, core2, prefix, prefix)
    return Editops(ops, len(s1), len(s2))