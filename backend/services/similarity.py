"""Edit-distance string similarity used as the fuzzy fallback in matching."""

from rapidfuzz.distance import Levenshtein

# Pairs scoring strictly above this are "close enough" for a fuzzy match.
# Untuned; changing it shifts every fuzzy-tier score in the system.
FUZZY_THRESHOLD = 0.6


def levenshtein(a: str, b: str) -> int:
    """Unit-cost edit distance (insert, delete, substitute) over code points."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Normalized similarity in [0, 1]: ``1 - distance / max(len(a), len(b))``.

    Two empty strings are identical and score 1.0.
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1 - levenshtein(a, b) / max_len


def is_close(a: str, b: str, threshold: float = FUZZY_THRESHOLD) -> bool:
    return similarity(a, b) > threshold
