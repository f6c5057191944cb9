"""Edit-distance similarity between survey question phrasings."""

import re

from rapidfuzz.distance import Levenshtein

_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
_NON_WORD_RE = re.compile(r"[^가-힣a-zA-Z0-9]")


def strip_parentheticals(text: str) -> str:
    """Remove every ``(...)`` span from text."""
    return _PARENTHETICAL_RE.sub("", text)


def normalize_question(text: str) -> str:
    """Reduce a question to Hangul syllables, ASCII letters and digits."""
    return _NON_WORD_RE.sub("", strip_parentheticals(text))


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute distance between two strings."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Return a score in [0, 1]; 1 means the normalized phrasings are equal.

    Both inputs are normalized first, so two strings that reduce to the
    same (possibly empty) text score 1.
    """
    norm_a = normalize_question(a)
    norm_b = normalize_question(b)
    if norm_a == norm_b:
        return 1.0
    if not norm_a or not norm_b:
        return 0.0
    distance = levenshtein_distance(norm_a, norm_b)
    return 1.0 - distance / max(len(norm_a), len(norm_b))
