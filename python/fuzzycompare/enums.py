"""Enums for fuzzycompare API."""

from enum import Enum


class Mode(str, Enum):
    """Available similarity algorithms.

    This enum provides type-safe algorithm selection for ``compare`` and the
    batch helpers. String values are accepted wherever a Mode is expected.

    Example:
        >>> from fuzzycompare import Mode, compare
        >>> compare("ca", "ac", Mode.DAMERAU_LEVENSHTEIN)
        0.75
    """

    BAG_OF_WORDS = "bag_of_words"
    """Share of normalized words the two strings have in common"""

    LEVENSHTEIN = "levenshtein"
    """Case-insensitive edit distance (insertions, deletions, substitutions)"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Edit distance including transpositions (e.g., 'ca' -> 'ac' is 1 edit)"""


__all__ = ["Mode"]
