"""Exception hierarchy for fuzzycompare."""


class FuzzyCompareError(Exception):
    """Base class for all errors raised by fuzzycompare."""


class InvalidArgument(FuzzyCompareError, TypeError):
    """An input is missing or has the wrong type.

    Raised when a string argument is ``None`` or not a ``str``, and by the
    batch helpers for arguments that cannot be satisfied (mismatched list
    lengths, out-of-range thresholds).
    """


class InvalidMode(FuzzyCompareError, ValueError):
    """A mode name does not match any :class:`~fuzzycompare.Mode` member."""


__all__ = ["FuzzyCompareError", "InvalidArgument", "InvalidMode"]
