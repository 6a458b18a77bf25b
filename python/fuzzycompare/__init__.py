"""
fuzzycompare - Fuzzy string similarity scores

A small library for approximately matching human-entered or extracted text
(file names, labels, titles) where exact equality is too strict. Every
comparison returns a score between 0.0 and 1.0.

Example usage:
    >>> import fuzzycompare as fc

    # Case-insensitive Levenshtein similarity (the default mode)
    >>> round(fc.compare("kitten", "sitting"), 4)
    0.5714

    # Transpositions count as a single edit
    >>> fc.compare("ca", "ac", fc.Mode.DAMERAU_LEVENSHTEIN)
    0.75

    # Word overlap ignores order, case and separators
    >>> fc.compare("The Quick Fox", "quick fox the", fc.Mode.BAG_OF_WORDS)
    1.0
    >>> sorted(fc.tokenize("FooBar_baz.Qux"))
    ['bar', 'baz', 'foo', 'qux']
"""

from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzycompare.expr  # noqa: F401
from fuzzycompare import batch
from fuzzycompare._utils import parse_mode
from fuzzycompare.batch import MatchResult
from fuzzycompare.damerau import damerau_levenshtein, damerau_levenshtein_similarity
from fuzzycompare.dispatch import bag_of_words_similarity, compare
from fuzzycompare.enums import Mode
from fuzzycompare.exceptions import FuzzyCompareError, InvalidArgument, InvalidMode
from fuzzycompare.levenshtein import levenshtein, levenshtein_similarity
from fuzzycompare.tokenizer import normalize_words, tokenize

__version__ = _get_version("fuzzycompare")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzyCompareError",
    "InvalidArgument",
    "InvalidMode",
    # Enums
    "Mode",
    "parse_mode",
    # Dispatcher
    "compare",
    # Distance/similarity functions
    "levenshtein",
    "levenshtein_similarity",
    "damerau_levenshtein",
    "damerau_levenshtein_similarity",
    "bag_of_words_similarity",
    # Tokenization
    "tokenize",
    "normalize_words",
    # Batch processing
    "batch",
    "MatchResult",
]


# Convenience aliases
edit_distance = levenshtein
similarity = compare
