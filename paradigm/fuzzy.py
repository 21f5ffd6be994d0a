"""
LEXIKON - Fuzzy Matcher

Ranks candidate surface forms by closeness to an observed string.

The score adds two normalized Damerau-Levenshtein similarities: one on the
strings as written (NFC) and one with diacritics stripped. Accents and
breathings therefore count, but less than letters. A perfect match scores
2.0, a match up to diacritics at least 1.0.
"""
from __future__ import annotations

import unicodedata
from typing import Iterable, List, Optional, Tuple

from rapidfuzz.distance import DamerauLevenshtein

from config import get_config
from core.types import Score


def strip_diacritics(text: str) -> str:
    """Remove accents, breathings and iota subscripts."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return unicodedata.normalize("NFC", stripped)


def similarity(observed: str, candidate: str) -> Score:
    """Combined similarity in [0, 2]."""
    a = unicodedata.normalize("NFC", observed)
    b = unicodedata.normalize("NFC", candidate)
    return (
        DamerauLevenshtein.normalized_similarity(a, b)
        + DamerauLevenshtein.normalized_similarity(strip_diacritics(a), strip_diacritics(b))
    )


def rank(observed: str, candidates: Iterable[str]) -> List[Tuple[str, Score]]:
    """Candidates with their scores, best first; ties keep input order."""
    scored = [(candidate, similarity(observed, candidate)) for candidate in candidates]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)


def closest(observed: str, candidates: Iterable[str]) -> Optional[str]:
    """Best candidate, or None when there are none."""
    ranked = rank(observed, candidates)
    return ranked[0][0] if ranked else None


def plausible(observed: str, candidates: Iterable[str], min_score: Score = 0.0) -> List[Tuple[str, Score]]:
    """Ranked candidates scoring strictly above ``min_score``."""
    return [pair for pair in rank(observed, candidates) if pair[1] > min_score]


class FuzzyMatcher:
    """Configured matcher; never raises on empty input."""

    def __init__(self, min_score: Optional[Score] = None):
        if min_score is None:
            min_score = get_config().matching.min_score
        self.min_score = min_score

    def rank(self, observed: str, candidates: Iterable[str]) -> List[Tuple[str, Score]]:
        return plausible(observed, candidates, self.min_score)

    def closest(self, observed: str, candidates: Iterable[str]) -> Optional[Tuple[str, Score]]:
        ranked = self.rank(observed, candidates)
        return ranked[0] if ranked else None
