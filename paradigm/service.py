"""
LEXIKON - Form Correction Service

Given a lexicon entry, the grammatical analysis of an observed word and the
word as observed, picks the attested form the observation most likely
stands for. Used when importing annotated texts whose spelling drifts from
the reference paradigms.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from core.errors import ResolveError
from core.types import Score
from grammar.categories import WordClass
from grammar.declension import Declension
from observability.logging import get_logger
from observability.tracing import span_decorator
from paradigm.fuzzy import FuzzyMatcher
from paradigm.lexicon import LexiconEntry

logger = get_logger(__name__)

# Word classes whose only form is the lemma
UNINFLECTED = frozenset({WordClass.PARTICLE})


@dataclass
class Correction:
    """Outcome of correcting one observed form."""

    observed: str
    corrected: str
    lemma: str
    score: Optional[Score] = None
    candidates: List[Tuple[str, Score]] = field(default_factory=list)
    error: Optional[ResolveError] = None

    @property
    def changed(self) -> bool:
        return self.corrected != self.observed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "observed": self.observed,
            "corrected": self.corrected,
            "lemma": self.lemma,
            "score": self.score,
            "changed": self.changed,
            "candidates": [list(pair) for pair in self.candidates],
            "error": self.error.to_dict() if self.error else None,
        }


class FormCorrector:
    """Resolves a declension in an entry and snaps the observation to it."""

    def __init__(self, matcher: Optional[FuzzyMatcher] = None):
        self.matcher = matcher or FuzzyMatcher()

    @span_decorator("paradigm.correct_form")
    def correct(self, entry: LexiconEntry, declension: Declension, observed: str) -> Correction:
        """
        Indeclinable words, particles and entries without paradigms are
        corrected to the lemma. Otherwise the closest attested spelling
        wins. A resolution failure leaves the observation unchanged and is
        reported on the result.
        """
        if (
            declension.is_indeclinable
            or declension.part_of_speech.word_class in UNINFLECTED
            or not entry.paradigms
        ):
            return Correction(observed=observed, corrected=entry.lemma, lemma=entry.lemma)

        try:
            forms = entry.find_inflection(declension)
        except ResolveError as e:
            logger.warning(
                "Cannot resolve observed form",
                lemma=entry.lemma,
                observed=observed,
                error=e,
            )
            return Correction(observed=observed, corrected=observed, lemma=entry.lemma, error=e)

        spellings = [spelling for form in forms for spelling in form.spellings]
        candidates = self.matcher.rank(observed, spellings)
        if not candidates:
            return Correction(observed=observed, corrected=observed, lemma=entry.lemma)

        best, score = candidates[0]
        return Correction(
            observed=observed,
            corrected=best,
            lemma=entry.lemma,
            score=score,
            candidates=candidates,
        )


def correct_form(entry: LexiconEntry, declension: Declension, observed: str) -> Correction:
    """Correct with a default-configured FormCorrector."""
    return FormCorrector().correct(entry, declension, observed)
