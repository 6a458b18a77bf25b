"""Internal utilities for fuzzycompare."""

import math
from typing import Any, Optional, Union

from fuzzycompare.enums import Mode
from fuzzycompare.exceptions import InvalidArgument, InvalidMode

# Valid mode names (lowercase)
VALID_MODES = frozenset(m.value for m in Mode)


def require_str(value: Any, name: str) -> str:
    """Return ``value`` unchanged if it is a string, else raise InvalidArgument."""
    if value is None:
        raise InvalidArgument(f"{name} must not be None")
    if not isinstance(value, str):
        raise InvalidArgument(f"{name} must be str, got {type(value).__name__}")
    return value


def require_unit_interval(value: float, name: str) -> float:
    """Check that a threshold is a finite number in [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{name} must be a number, got {type(value).__name__}")
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidArgument(f"{name} must be between 0.0 and 1.0, got {value}")
    return float(value)


def resolve_mode(mode: Any) -> Optional[Mode]:
    """Map a Mode or mode name to a Mode member, or None if unrecognized."""
    if isinstance(mode, Mode):
        return mode
    if isinstance(mode, str):
        key = mode.lower()
        if key in VALID_MODES:
            return Mode(key)
        # Also accept member names such as "BAG_OF_WORDS"
        return Mode.__members__.get(mode.upper())
    return None


def parse_mode(mode: Union[str, Mode]) -> Mode:
    """Convert a mode name to a Mode member, rejecting unknown names.

    Args:
        mode: Either a Mode enum value or a string mode name.

    Returns:
        The matching Mode member.

    Raises:
        InvalidMode: If the mode name is not recognized.
        InvalidArgument: If mode is not a string or Mode enum.

    Example:
        >>> parse_mode("levenshtein")
        <Mode.LEVENSHTEIN: 'levenshtein'>
        >>> parse_mode("DAMERAU_LEVENSHTEIN")
        <Mode.DAMERAU_LEVENSHTEIN: 'damerau_levenshtein'>
    """
    if not isinstance(mode, str):
        raise InvalidArgument(
            f"mode must be str or Mode enum, got {type(mode).__name__}"
        )
    resolved = resolve_mode(mode)
    if resolved is None:
        raise InvalidMode(
            f"Unknown mode: '{mode}'. Valid options: {sorted(VALID_MODES)}"
        )
    return resolved


__all__ = [
    "parse_mode",
    "require_str",
    "require_unit_interval",
    "resolve_mode",
    "VALID_MODES",
]
