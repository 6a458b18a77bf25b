"""Similarity dispatcher.

``compare`` selects an algorithm by :class:`~fuzzycompare.Mode` and returns
a normalized score in [0.0, 1.0], where 1.0 means identical under the chosen
metric.

Example:
    >>> from fuzzycompare import Mode, compare
    >>> compare("The Quick Fox", "quick fox the", Mode.BAG_OF_WORDS)
    1.0
    >>> compare("abc", "xyz")
    0.0
"""

import logging
from typing import Union

from fuzzycompare._utils import require_str, resolve_mode
from fuzzycompare.damerau import damerau_levenshtein_similarity
from fuzzycompare.enums import Mode
from fuzzycompare.levenshtein import levenshtein_similarity
from fuzzycompare.tokenizer import tokenize

logger = logging.getLogger(__name__)


def bag_of_words_similarity(s1: str, s2: str) -> float:
    """Share of normalized words two strings have in common.

    Counts the words both strings contain (a word repeated in both counts as
    many times as it appears in the string using it less) and divides by the
    larger word count. Identical strings score 1.0; two strings without any
    words score 0.0.

    Example:
        >>> bag_of_words_similarity("red_apple", "Apple pie")
        0.5
    """
    require_str(s1, "s1")
    require_str(s2, "s2")
    if s1 == s2:
        return 1.0
    words1 = tokenize(s1)
    words2 = tokenize(s2)
    total = max(sum(words1.values()), sum(words2.values()))
    if total == 0:
        return 0.0
    similar = sum((words1 & words2).values())
    return similar / total


_DISPATCH = {
    Mode.BAG_OF_WORDS: bag_of_words_similarity,
    Mode.LEVENSHTEIN: levenshtein_similarity,
    Mode.DAMERAU_LEVENSHTEIN: damerau_levenshtein_similarity,
}


def compare(s1: str, s2: str, mode: Union[str, Mode] = Mode.LEVENSHTEIN) -> float:
    """Compare two strings with the selected algorithm.

    Args:
        s1: First string to compare.
        s2: Second string to compare.
        mode: Algorithm to use (Mode enum or its string value). Options:
            - "bag_of_words": Overlap of normalized word tokens
            - "levenshtein": Case-insensitive edit distance (default)
            - "damerau_levenshtein": Edit distance with transpositions

    Returns:
        Similarity ratio between 0.0 and 1.0. An unrecognized mode returns
        0.0 rather than raising; use :func:`fuzzycompare.parse_mode` first
        if a bad mode should be an error.

    Raises:
        InvalidArgument: If s1 or s2 is None or not a string.

    Example:
        >>> compare("ca", "ac", Mode.DAMERAU_LEVENSHTEIN)
        0.75
        >>> compare("ca", "ac", Mode.LEVENSHTEIN)
        0.0
    """
    require_str(s1, "s1")
    require_str(s2, "s2")
    resolved = resolve_mode(mode)
    if resolved is None:
        logger.warning("Unknown comparison mode %r, returning 0.0", mode)
        return 0.0
    return _DISPATCH[resolved](s1, s2)


__all__ = ["bag_of_words_similarity", "compare"]
