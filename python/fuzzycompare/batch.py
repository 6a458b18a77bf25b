"""Batch operations API for fuzzycompare.

This module provides list-based helpers built on :func:`fuzzycompare.compare`.
Unlike ``compare``, every function here parses its mode strictly and raises
:class:`~fuzzycompare.InvalidMode` for an unknown name.

Example usage:
    >>> import fuzzycompare.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [(r.text, r.score) for r in results]
    [('hello', 0.8), ('hallo', 0.6), ('world', 0.2)]

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"])
    [0.8, 0.8]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fuzzycompare._utils import parse_mode, require_str, require_unit_interval
from fuzzycompare.exceptions import InvalidArgument
from fuzzycompare.dispatch import compare

if TYPE_CHECKING:
    from fuzzycompare.enums import Mode

__all__ = [
    "MatchResult",
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
    "distance_matrix",  # Deprecated alias for similarity_matrix
]


@dataclass(frozen=True)
class MatchResult:
    """A scored candidate string.

    Attributes:
        text: The candidate string.
        score: Similarity to the query, between 0.0 and 1.0.
        id: Index of the candidate in the input list.
    """

    text: str
    score: float
    id: int


def _require_strings(strings: list[str], name: str) -> list[str]:
    if strings is None:
        raise InvalidArgument(f"{name} must not be None")
    for i, s in enumerate(strings):
        require_str(s, f"{name}[{i}]")
    return strings


def similarity(
    strings: list[str],
    query: str,
    mode: str | Mode = "levenshtein",
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        mode: Similarity algorithm to use (string or Mode enum). Options:
            - "bag_of_words": Overlap of normalized word tokens
            - "levenshtein": Normalized Levenshtein similarity (default)
            - "damerau_levenshtein": Normalized Damerau-Levenshtein similarity

    Returns:
        List of MatchResult objects in the same order as input strings.
        Each result's `id` is the original index in the input list.
    """
    algo = parse_mode(mode)
    require_str(query, "query")
    _require_strings(strings, "strings")
    return [
        MatchResult(text=s, score=compare(s, query, algo), id=i)
        for i, s in enumerate(strings)
    ]


def best_matches(
    strings: list[str],
    query: str,
    mode: str | Mode = "levenshtein",
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Computes similarity scores for all strings against the query, filters
    by minimum similarity, sorts by score descending (earlier strings first
    on ties), and returns the top matches up to the specified limit.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        mode: Similarity algorithm to use (string or Mode enum).
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).

    Returns:
        List of MatchResult objects sorted by score descending.

    Raises:
        InvalidArgument: If limit is negative or min_similarity is not a
            finite number in [0.0, 1.0].
    """
    if limit < 0:
        raise InvalidArgument(f"limit must be non-negative, got {limit}")
    threshold = require_unit_interval(min_similarity, "min_similarity")
    results = [r for r in similarity(strings, query, mode) if r.score >= threshold]
    results.sort(key=lambda r: (-r.score, r.id))
    return results[:limit]


def pairwise(
    left: list[str],
    right: list[str],
    mode: str | Mode = "levenshtein",
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        mode: Similarity algorithm to use (string or Mode enum).

    Returns:
        List of similarity scores (0.0 to 1.0), one for each pair.

    Raises:
        InvalidArgument: If left and right have different lengths.
    """
    algo = parse_mode(mode)
    _require_strings(left, "left")
    _require_strings(right, "right")
    if len(left) != len(right):
        raise InvalidArgument(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )
    return [compare(a, b, algo) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    mode: str | Mode = "levenshtein",
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    algo = parse_mode(mode)
    _require_strings(queries, "queries")
    _require_strings(choices, "choices")
    return [[compare(q, c, algo) for c in choices] for q in queries]


def distance_matrix(
    queries: list[str],
    choices: list[str],
    mode: str | Mode = "levenshtein",
) -> list[list[float]]:
    """Deprecated: Use similarity_matrix() instead.

    This function returns similarity scores (0.0-1.0), not distances.

    .. deprecated:: 0.2.0
        Use :func:`similarity_matrix` instead.
    """
    import warnings

    warnings.warn(
        "distance_matrix() is deprecated and will be removed in a future version. "
        "Use similarity_matrix() instead.",
        DeprecationWarning,
        stacklevel=2,
    )
    return similarity_matrix(queries, choices, mode)
