"""Case-insensitive Levenshtein edit distance."""

from fuzzycompare._utils import require_str


def _edit_distance(s1: str, s2: str) -> int:
    # costs[j] holds the distance between the first i chars of s1 and the
    # first j chars of s2; last_value carries the diagonal predecessor.
    costs = list(range(len(s2) + 1))
    for i in range(1, len(s1) + 1):
        last_value = i
        for j in range(1, len(s2) + 1):
            new_value = costs[j - 1]
            if s1[i - 1] != s2[j - 1]:
                new_value = min(new_value, last_value, costs[j]) + 1
            costs[j - 1] = last_value
            last_value = new_value
        costs[len(s2)] = last_value
    return costs[len(s2)]


def levenshtein(s1: str, s2: str) -> int:
    """Minimum number of single-character edits turning s1 into s2.

    Insertions, deletions and substitutions each cost 1. Comparison ignores
    case.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
        >>> levenshtein("Hello", "hELLO")
        0
    """
    require_str(s1, "s1")
    require_str(s2, "s2")
    return _edit_distance(s1.lower(), s2.lower())


def levenshtein_similarity(s1: str, s2: str) -> float:
    """Levenshtein distance normalized by the longer string's length.

    Returns ``(len(longer) - distance) / len(longer)``. Two empty strings
    are treated as identical and score 1.0.

    Example:
        >>> round(levenshtein_similarity("kitten", "sitting"), 4)
        0.5714
        >>> levenshtein_similarity("", "")
        1.0
    """
    require_str(s1, "s1")
    require_str(s2, "s2")
    # Lengths are taken after case folding so that a length-changing
    # lowercase mapping can never produce a negative score.
    longer, shorter = s1.lower(), s2.lower()
    if len(longer) < len(shorter):
        longer, shorter = shorter, longer
    longer_length = len(longer)
    if longer_length == 0:
        return 1.0
    return (longer_length - _edit_distance(longer, shorter)) / longer_length


__all__ = ["levenshtein", "levenshtein_similarity"]
