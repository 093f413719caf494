"""Fuzzy spelling correction for search queries.

Pure, synchronous and side-effect free. A suggestion comes from an exact
known-misspelling lookup first, then from the closest canonical term by
normalized Levenshtein similarity.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from searchhub.application.services.spelling_dictionary import COMMON_WORDS
from searchhub.core.constants import (
    MIN_CORRECTABLE_QUERY_LENGTH,
    SPELLING_SIMILARITY_THRESHOLD,
)


def levenshtein_distance(a: str, b: str) -> int:
    """Return the edit distance between a and b.

    Unit cost for insertion, deletion and substitution; no transpositions.
    Case-sensitive: callers lower-case first when they need to.
    """
    rows = len(b) + 1
    cols = len(a) + 1
    matrix = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j
    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[j - 1] == b[i - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )
    return matrix[rows - 1][cols - 1]


def string_similarity(a: str, b: str) -> float:
    """Return similarity in [0, 1]: 1 - distance / max length, case-insensitive.

    Two empty strings are identical (1.0); one empty string shares nothing (0.0).
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    a = a.lower()
    b = b.lower()
    distance = levenshtein_distance(a, b)
    return 1.0 - distance / max(len(a), len(b))


def find_closest_match(
    query: str,
    candidates: Iterable[str],
    threshold: float = SPELLING_SIMILARITY_THRESHOLD,
) -> str | None:
    """Return the candidate most similar to query, if strictly above threshold.

    On ties the earliest candidate wins.
    """
    best_match: str | None = None
    best_score = threshold
    for candidate in candidates:
        score = string_similarity(query, candidate)
        if score > best_score:
            best_score = score
            best_match = candidate
    return best_match


class SpellingCorrector:
    """Suggests corrections against a canonical-term -> misspellings dictionary."""

    def __init__(
        self,
        dictionary: Mapping[str, Sequence[str]] = COMMON_WORDS,
        threshold: float = SPELLING_SIMILARITY_THRESHOLD,
        min_length: int = MIN_CORRECTABLE_QUERY_LENGTH,
    ) -> None:
        self._dictionary = dictionary
        self._threshold = threshold
        self._min_length = min_length
        self._typo_index: dict[str, str] = {}
        for canonical, typos in dictionary.items():
            for typo in typos:
                self._typo_index.setdefault(typo.lower(), canonical)

    def suggest(self, query: str) -> str | None:
        """Return a corrected query, or None when no correction applies.

        - queries shorter than min_length are never corrected
        - a known misspelling maps to its canonical term
        - otherwise the closest canonical term above the threshold
        - a suggestion equal to the query itself is not a correction
        """
        if len(query) < self._min_length:
            return None
        lowered = query.lower()
        known = self._typo_index.get(lowered)
        if known is not None:
            return known
        match = find_closest_match(lowered, self._dictionary.keys(), self._threshold)
        if match is None or match == lowered:
            return None
        return match


_default_corrector = SpellingCorrector()


def suggest_spelling_correction(query: str) -> str | None:
    """Suggest a correction using the built-in real-estate dictionary."""
    return _default_corrector.suggest(query)
