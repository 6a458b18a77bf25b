"""Word tokenization for bag-of-words comparison.

Strings are normalized through a fixed pipeline before being split on
spaces. The order of the steps matters: punctuation is stripped before
separators are rewritten, and whitespace runs are collapsed before the
camel-case split inserts its own single spaces.

Example:
    >>> from fuzzycompare import tokenize
    >>> sorted(tokenize("FooBar_baz.Qux"))
    ['bar', 'baz', 'foo', 'qux']
    >>> tokenize("the cat and the hat")["the"]
    2
"""

import re
from collections import Counter

from fuzzycompare._utils import require_str

_POSSESSIVE = "'s"
_PUNCTUATION = re.compile(r"[?!#%'(),]")
_SEPARATORS = re.compile(r"[_\-.]")
_WHITESPACE_RUN = re.compile(r"\s{2,}", re.ASCII)
# Lower-case letter followed by a capitalized word: "FooBar" -> "Foo Bar", "FOO" untouched
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z][a-z])")


def normalize_words(s: str) -> str:
    """Apply the tokenizer's normalization pipeline without splitting.

    Args:
        s: Text to normalize.

    Returns:
        Lower-cased text with possessives and punctuation removed, ``_``,
        ``-`` and ``.`` turned into spaces, whitespace runs collapsed and
        camel-case words separated.

    Raises:
        InvalidArgument: If s is None or not a string.

    Example:
        >>> normalize_words("John's  Report-2020.PDF")
        'john report 2020 pdf'
    """
    require_str(s, "s")
    s = s.replace(_POSSESSIVE, "")
    s = _PUNCTUATION.sub("", s)
    s = _SEPARATORS.sub(" ", s)
    s = _WHITESPACE_RUN.sub(" ", s)
    s = _CAMEL_BOUNDARY.sub(" ", s)
    return s.lower()


def tokenize(s: str) -> "Counter[str]":
    """Split a string into a multiset of normalized words.

    Repeated words are counted rather than deduplicated, so the k-th
    occurrence of a word is still visible to overlap counting. Empty tokens
    produced by leading, trailing or adjacent separators are discarded.

    Args:
        s: Text to tokenize.

    Returns:
        Counter mapping each normalized word to its number of occurrences.
        Empty for input without any words.

    Raises:
        InvalidArgument: If s is None or not a string.
    """
    return Counter(token for token in normalize_words(s).split(" ") if token)


__all__ = ["normalize_words", "tokenize"]
