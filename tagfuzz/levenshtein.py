"""Levenshtein distance with uniform and weighted edit costs."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from .types import LevenshteinWeightTable

_UNIFORM = LevenshteinWeightTable(1, 1, 1)

# Each byte encodes one edit sequence, two bits per operation:
# 01 = delete, 10 = insert, 11 = substitute.  Rows are indexed by the
# maximum edit distance (1..3) and the length difference of the strings.
_MBLEVEN2018_MATRIX: tuple[tuple[int, ...], ...] = (
    # max edit distance 1
    (0x03,),  # len_diff 0
    (0x01,),  # len_diff 1
    # max edit distance 2
    (0x0F, 0x09, 0x06),  # len_diff 0
    (0x0D, 0x07),  # len_diff 1
    (0x05,),  # len_diff 2
    # max edit distance 3
    (0x3F, 0x27, 0x2D, 0x39, 0x36, 0x1E, 0x1B),  # len_diff 0
    (0x3D, 0x37, 0x1F, 0x25, 0x19, 0x16),  # len_diff 1
    (0x35, 0x1D, 0x17),  # len_diff 2
    (0x15,),  # len_diff 3
)


def _ceil_div(value: int, divisor: int) -> int:
    return -(-value // divisor)


def _cap(dist: int, limit: int | None) -> int:
    """Return ``dist`` if it is within ``limit``, otherwise ``limit + 1``."""
    if limit is None or dist <= limit:
        return dist
    return limit + 1


def _strip_common_affix(
    s1: Sequence[Hashable], s2: Sequence[Hashable]
) -> tuple[Sequence[Hashable], Sequence[Hashable]]:
    """Drop the common prefix and suffix; they never change the distance."""
    limit = min(len(s1), len(s2))
    prefix = 0
    while prefix < limit and s1[prefix] == s2[prefix]:
        prefix += 1
    limit -= prefix
    suffix = 0
    while suffix < limit and s1[-1 - suffix] == s2[-1 - suffix]:
        suffix += 1
    return s1[prefix : len(s1) - suffix], s2[prefix : len(s2) - suffix]


def _pattern_masks(pattern: Sequence[Hashable]) -> dict[Hashable, int]:
    masks: dict[Hashable, int] = {}
    for pos, ch in enumerate(pattern):
        masks[ch] = masks.get(ch, 0) | (1 << pos)
    return masks


def _hyyro2003(pattern: Sequence[Hashable], text: Sequence[Hashable]) -> int:
    """Bit-parallel Levenshtein distance; ``pattern`` must not be empty."""
    length = len(pattern)
    masks = _pattern_masks(pattern)
    full = (1 << length) - 1
    last = 1 << (length - 1)

    vp, vn = full, 0
    dist = length
    for ch in text:
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
    return dist


def _mbleven2018(s1: Sequence[Hashable], s2: Sequence[Hashable], max_dist: int) -> int:
    """Distance for ``max_dist`` below 4; strings must differ at both ends."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    len1, len2 = len(s1), len(s2)
    len_diff = len1 - len2

    if max_dist == 1:
        return max_dist + int(len_diff == 1 or len1 != 1)

    row = _MBLEVEN2018_MATRIX[(max_dist + max_dist * max_dist) // 2 + len_diff - 1]
    dist = max_dist + 1
    for ops in row:
        i = j = 0
        cur_dist = 0
        while i < len1 and j < len2:
            if s1[i] != s2[j]:
                cur_dist += 1
                if not ops:
                    break
                if ops & 1:
                    i += 1
                if ops & 2:
                    j += 1
                ops >>= 2
            else:
                i += 1
                j += 1
        cur_dist += (len1 - i) + (len2 - j)
        dist = min(dist, cur_dist)

    return _cap(dist, max_dist)


def _indel_distance(
    s1: Sequence[Hashable], s2: Sequence[Hashable], score_cutoff: int | None
) -> int:
    """Insertion/deletion distance via a bit-parallel longest common subsequence."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    lcs = 0
    if s2:
        masks = _pattern_masks(s2)
        full = (1 << len(s2)) - 1
        state = full
        for ch in s1:
            matches = state & masks.get(ch, 0)
            state = ((state + matches) | (state - matches)) & full
        lcs = len(s2) - bin(state).count("1")
    return _cap(len(s1) + len(s2) - 2 * lcs, score_cutoff)


def _wagner_fischer(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    weights: LevenshteinWeightTable,
    max_dist: int | None,
) -> int:
    cache = [i * weights.delete_cost for i in range(len(s1) + 1)]
    for ch2 in s2:
        temp = cache[0]
        cache[0] += weights.insert_cost
        for i, ch1 in enumerate(s1):
            if ch1 != ch2:
                temp = min(
                    cache[i] + weights.delete_cost,
                    cache[i + 1] + weights.insert_cost,
                    temp + weights.replace_cost,
                )
            cache[i + 1], temp = temp, cache[i + 1]
    return _cap(cache[-1], max_dist)


def levenshtein_maximum(len1: int, len2: int, weights: LevenshteinWeightTable | None = None) -> int:
    """Largest distance possible for strings of these lengths under ``weights``."""
    weights = weights or _UNIFORM
    max_dist = len1 * weights.delete_cost + len2 * weights.insert_cost
    if len1 >= len2:
        alt = len2 * weights.replace_cost + (len1 - len2) * weights.delete_cost
    else:
        alt = len1 * weights.replace_cost + (len2 - len1) * weights.insert_cost
    return min(max_dist, alt)


def levenshtein_min_distance(
    s1: Sequence[Hashable], s2: Sequence[Hashable], weights: LevenshteinWeightTable | None = None
) -> int:
    """Smallest distance possible given only the lengths of the strings."""
    weights = weights or _UNIFORM
    if len(s1) > len(s2):
        return (len(s1) - len(s2)) * weights.delete_cost
    return (len(s2) - len(s1)) * weights.insert_cost


def generalized_levenshtein_distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    weights: LevenshteinWeightTable | None = None,
    max_dist: int | None = None,
) -> int:
    """Weighted Levenshtein distance; above ``max_dist`` gives ``max_dist + 1``."""
    weights = weights or _UNIFORM
    if max_dist is not None and levenshtein_min_distance(s1, s2, weights) > max_dist:
        return max_dist + 1
    s1, s2 = _strip_common_affix(s1, s2)
    return _wagner_fischer(s1, s2, weights, max_dist)


def uniform_levenshtein_distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    score_cutoff: int | None = None,
    score_hint: int | None = None,
) -> int:
    """Levenshtein distance with unit costs; above ``score_cutoff`` gives ``score_cutoff + 1``.

    ``score_hint`` is an expected distance; it only affects how the work is
    done, never the result, and the big-integer search here does not need it.
    """
    if score_hint is not None and score_hint < 0:
        raise ValueError("score_hint must not be negative")
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    cutoff = len(s1) if score_cutoff is None else min(score_cutoff, len(s1))

    if cutoff == 0:
        return int(list(s1) != list(s2))

    if cutoff < len(s1) - len(s2):
        return cutoff + 1

    s1, s2 = _strip_common_affix(s1, s2)
    if not s1 or not s2:
        return len(s1) + len(s2)

    if cutoff < 4:
        return _mbleven2018(s1, s2, cutoff)

    return _cap(_hyyro2003(s2, s1), cutoff)


def levenshtein_distance(
    s1: Sequence[Hashable],
    s2: Sequence[Hashable],
    weights: LevenshteinWeightTable | None = None,
    score_cutoff: int | None = None,
    score_hint: int | None = None,
) -> int:
    """Levenshtein distance under ``weights``; above ``score_cutoff`` gives ``score_cutoff + 1``."""
    weights = weights or _UNIFORM
    if weights.insert_cost == weights.delete_cost:
        cost = weights.insert_cost
        if cost == 0:
            return 0

        new_cutoff = None if score_cutoff is None else _ceil_div(score_cutoff, cost)
        if cost == weights.replace_cost:
            new_hint = None if score_hint is None else _ceil_div(score_hint, cost)
            dist = uniform_levenshtein_distance(s1, s2, new_cutoff, new_hint) * cost
            return _cap(dist, score_cutoff)
        if weights.replace_cost >= weights.insert_cost + weights.delete_cost:
            dist = _indel_distance(s1, s2, new_cutoff) * cost
            return _cap(dist, score_cutoff)

    return generalized_levenshtein_distance(s1, s2, weights, score_cutoff)