"""Damerau-Levenshtein distance with true transpositions.

Uses the Lowrance-Wagner dynamic program, which prices an adjacent
transposition as a single edit even when other edits happen between the
swapped characters. Unlike the restricted "optimal string alignment"
variant, the result is a proper metric.

The table has one extra row and column on each side of the usual
``(len(s1) + 1) x (len(s2) + 1)`` layout. The outer border holds a
sentinel larger than any reachable distance, so transposition lookups
that point before the start of either string never win the minimum.
"""

from typing import Dict, List

from fuzzycompare._utils import require_str


def _lowrance_wagner(s1: str, s2: str) -> int:
    len1, len2 = len(s1), len(s2)
    inf = len1 + len2

    # Last row of s1 in which each character was seen
    da: Dict[str, int] = dict.fromkeys(s1, 0)
    da.update(dict.fromkeys(s2, 0))

    h: List[List[int]] = [[0] * (len2 + 2) for _ in range(len1 + 2)]
    h[0][0] = inf
    for i in range(len1 + 1):
        h[i + 1][0] = inf
        h[i + 1][1] = i
    for j in range(len2 + 1):
        h[0][j + 1] = inf
        h[1][j + 1] = j

    for i in range(1, len1 + 1):
        c1 = s1[i - 1]
        db = 0
        for j in range(1, len2 + 1):
            c2 = s2[j - 1]
            i1 = da[c2]
            j1 = db
            if c1 == c2:
                cost = 0
                db = j
            else:
                cost = 1
            h[i + 1][j + 1] = min(
                h[i][j] + cost,
                h[i + 1][j] + 1,
                h[i][j + 1] + 1,
                h[i1][j1] + (i - i1 - 1) + 1 + (j - j1 - 1),
            )
        da[c1] = i

    return h[len1 + 1][len2 + 1]


def damerau_levenshtein(s1: str, s2: str) -> int:
    """Edit distance counting adjacent transpositions as one edit.

    Comparison is case-sensitive.

    Example:
        >>> damerau_levenshtein("ca", "ac")
        1
        >>> damerau_levenshtein("ca", "abc")
        2
    """
    require_str(s1, "s1")
    require_str(s2, "s2")
    if s1 == s2:
        return 0
    return _lowrance_wagner(s1, s2)


def damerau_levenshtein_similarity(s1: str, s2: str) -> float:
    """Damerau-Levenshtein distance normalized by the combined length.

    Returns ``1 - distance / (len(s1) + len(s2))``. Equal strings, including
    two empty strings, short-circuit to 1.0 without building the table.

    Example:
        >>> damerau_levenshtein_similarity("ca", "ac")
        0.75
    """
    require_str(s1, "s1")
    require_str(s2, "s2")
    if s1 == s2:
        return 1.0
    return 1.0 - _lowrance_wagner(s1, s2) / (len(s1) + len(s2))


__all__ = ["damerau_levenshtein", "damerau_levenshtein_similarity"]
