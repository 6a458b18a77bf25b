"""Polars expression namespace for fuzzy string comparison.

This module registers a `.fuzzy` namespace on Polars expressions,
enabling chainable comparisons directly in Polars expression contexts.
Every method evaluates row by row through ``map_elements``.

Null handling:
    similarity, is_similar and distance treat null values as empty
    strings. best_match and tokens map null values to null.

Example:
    >>> import polars as pl
    >>> import fuzzycompare  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").fuzzy.is_similar("John", min_similarity=0.7)
    ... )
"""

from typing import Union

import polars as pl

from fuzzycompare._utils import parse_mode, require_str, require_unit_interval
from fuzzycompare.batch import best_matches
from fuzzycompare.damerau import damerau_levenshtein
from fuzzycompare.enums import Mode
from fuzzycompare.exceptions import InvalidMode
from fuzzycompare.levenshtein import levenshtein
from fuzzycompare.dispatch import compare
from fuzzycompare.tokenizer import tokenize

_DISTANCE_FUNCS = {
    Mode.LEVENSHTEIN: levenshtein,
    Mode.DAMERAU_LEVENSHTEIN: damerau_levenshtein,
}


def _as_text(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string comparison namespace for Polars expressions.

    Provides chainable methods for fuzzy matching directly on columns.
    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(self, other: Union[str, pl.Expr], func, return_dtype) -> pl.Expr:
        if isinstance(other, str):
            # Compare against a literal string
            return self._expr.map_elements(
                lambda s: func(_as_text(s), other),
                return_dtype=return_dtype,
                skip_nulls=False,
            )
        # Compare against another column
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_as_text(row["_left"]), _as_text(row["_right"])),
            return_dtype=return_dtype,
        )

    def similarity(
        self,
        other: Union[str, pl.Expr],
        mode: Union[str, Mode] = Mode.LEVENSHTEIN,
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            mode: Similarity algorithm to use (string or Mode enum)

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").fuzzy.similarity("John")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").fuzzy.similarity(pl.col("name2"), "bag_of_words")
            ... )
        """
        algo = parse_mode(mode)
        return self._pairwise(other, lambda a, b: compare(a, b, algo), pl.Float64)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        mode: Union[str, Mode] = Mode.LEVENSHTEIN,
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Args:
            other: String literal or column expression to compare against
            min_similarity: Minimum similarity score to return True (0.0 to 1.0)
            mode: Similarity algorithm to use (string or Mode enum)

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_similar("John", min_similarity=0.75))
        """
        threshold = require_unit_interval(min_similarity, "min_similarity")
        return self.similarity(other, mode=mode) >= threshold

    def distance(
        self,
        other: Union[str, pl.Expr],
        mode: Union[str, Mode] = Mode.LEVENSHTEIN,
    ) -> pl.Expr:
        """
        Calculate edit distance between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            mode: "levenshtein" or "damerau_levenshtein"

        Returns:
            Expression producing integer distances

        Example:
            >>> df.with_columns(
            ...     dist=pl.col("name").fuzzy.distance("John")
            ... )
        """
        algo = parse_mode(mode)
        if algo not in _DISTANCE_FUNCS:
            raise InvalidMode(
                f"Mode {algo.value!r} has no edit distance. "
                f"Valid: {[m.value for m in _DISTANCE_FUNCS]}"
            )
        return self._pairwise(other, _DISTANCE_FUNCS[algo], pl.Int64)

    def best_match(
        self,
        choices: list[str],
        mode: Union[str, Mode] = Mode.LEVENSHTEIN,
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: List of strings to match against
            mode: Similarity algorithm to use (string or Mode enum)
            min_similarity: Minimum score to return a match (otherwise null)

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").fuzzy.best_match(categories)
            ... )
        """
        algo = parse_mode(mode)
        threshold = require_unit_interval(min_similarity, "min_similarity")
        for i, choice in enumerate(choices):
            require_str(choice, f"choices[{i}]")

        def find_best(value):
            if value is None:
                return None
            results = best_matches(
                choices, str(value), mode=algo, limit=1, min_similarity=threshold
            )
            return results[0].text if results else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)

    def tokens(self) -> pl.Expr:
        """
        Split strings into their sorted, distinct normalized words.

        Example:
            >>> df.with_columns(words=pl.col("filename").fuzzy.tokens())
        """

        def split(value):
            if value is None:
                return None
            return sorted(tokenize(str(value)))

        return self._expr.map_elements(split, return_dtype=pl.List(pl.Utf8))
