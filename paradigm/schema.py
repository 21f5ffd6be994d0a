"""
LEXIKON - Paradigm Schemas

Declarative description of how each part of speech's paradigm is nested.

A schema is an ordered tuple of Dimensions. Building and resolving share a
single walk over it; they differ only in where each dimension's values
come from (the cell's tags, or the query's slots).

A dimension may replace the remainder of the schema depending on its
value. The verb schema uses this at Mood: participles continue with a
voice plus the nominal dimensions, infinitives with a voice only, and
finite moods with voice, number and person.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Type

from core.errors import UnsupportedPartOfSpeech
from grammar.categories import (
    Case,
    Contraction,
    Degree,
    Gender,
    Mood,
    Number,
    PartOfSpeech,
    Person,
    Tense,
    Theme,
    Voice,
    WordClass,
    dimension_name,
)


@dataclass(frozen=True)
class Dimension:
    """One nesting level of a paradigm."""

    category: Type[Enum]
    required: bool = True
    default: Optional[Enum] = None
    # Used while building only; a query must still name the value
    build_default: Optional[Enum] = None
    branches: Mapping[Enum, Tuple["Dimension", ...]] = field(default_factory=dict)
    otherwise: Optional[Tuple["Dimension", ...]] = None

    @property
    def name(self) -> str:
        return dimension_name(self.category)

    def fallback(self, building: bool = False) -> Optional[Enum]:
        """Value taken when neither the cell nor the query names one."""
        if building and self.build_default is not None:
            return self.build_default
        return self.default

    def continuation(self, value: Enum, rest: Tuple["Dimension", ...]) -> Tuple["Dimension", ...]:
        """Dimensions that follow once this one took ``value``."""
        if value in self.branches:
            return self.branches[value]
        if self.otherwise is not None:
            return self.otherwise
        return rest


@dataclass(frozen=True)
class ParadigmSchema:
    """Nesting of one part of speech's paradigm."""

    key: str
    dimensions: Tuple[Dimension, ...] = ()
    # Forms like "λέγει(ν)" stand for both "λέγει" and "λέγειν"
    optional_endings: bool = False

    @property
    def invariant(self) -> bool:
        return not self.dimensions


NOMINAL = (
    Dimension(Gender),
    Dimension(Number),
    Dimension(Case),
)

ADJECTIVAL = (Dimension(Degree, default=Degree.POSITIVE),) + NOMINAL

# Participle tables give gender columns only
PARTICIPLE = (
    Dimension(Voice),
    Dimension(Gender),
    Dimension(Number, build_default=Number.SINGULAR),
    Dimension(Case, build_default=Case.NOMINATIVE),
)

INFINITIVE = (Dimension(Voice),)

FINITE = (
    Dimension(Voice),
    Dimension(Number),
    Dimension(Person),
)

VERBAL = (
    Dimension(Tense),
    Dimension(Theme, default=Theme.THEMATIC),
    Dimension(Contraction, default=Contraction.CONTRACTED),
    Dimension(
        Mood,
        branches={Mood.PARTICIPLE: PARTICIPLE, Mood.INFINITIVE: INFINITIVE},
        otherwise=FINITE,
    ),
)

SCHEMAS: Dict[WordClass, ParadigmSchema] = {
    WordClass.NOUN: ParadigmSchema("noun", NOMINAL),
    WordClass.ARTICLE: ParadigmSchema("article", NOMINAL),
    WordClass.PRONOUN: ParadigmSchema("pronoun", NOMINAL),
    WordClass.NUMERAL: ParadigmSchema("numeral", NOMINAL),
    WordClass.QUANTIFIER: ParadigmSchema("quantifier", NOMINAL),
    WordClass.ADJECTIVE: ParadigmSchema("adjective", ADJECTIVAL),
    WordClass.VERB: ParadigmSchema("verb", VERBAL, optional_endings=True),
    WordClass.ADVERB: ParadigmSchema("adverb"),
    WordClass.PARTICLE: ParadigmSchema("particle"),
    WordClass.PREPOSITION: ParadigmSchema("preposition"),
    WordClass.CONJUNCTION: ParadigmSchema("conjunction"),
    WordClass.INTERJECTION: ParadigmSchema("interjection"),
}


def schema_for(
    part_of_speech: PartOfSpeech,
    schemas: Mapping[WordClass, ParadigmSchema] = SCHEMAS,
) -> ParadigmSchema:
    """
    Raises:
        UnsupportedPartOfSpeech: no schema is registered for the word class
    """
    word_class = part_of_speech.word_class if isinstance(part_of_speech, PartOfSpeech) else part_of_speech
    try:
        return schemas[word_class]
    except KeyError:
        raise UnsupportedPartOfSpeech(part_of_speech) from None


# Returns the values to descend into; empty means "skip this level"
Chooser = Callable[[Dimension], Sequence[Enum]]


def walk(schema: ParadigmSchema, choose: Chooser) -> List[Tuple[str, ...]]:
    """
    Every branch path selected by ``choose``, each starting with the
    schema key. ``choose`` may return several values (fan-out) and may
    raise to abort the walk.
    """
    paths: List[Tuple[str, ...]] = []

    def step(dimensions: Tuple[Dimension, ...], prefix: Tuple[str, ...]) -> None:
        if not dimensions:
            paths.append(prefix)
            return
        dimension, rest = dimensions[0], dimensions[1:]
        values = choose(dimension)
        if not values:
            step(rest, prefix)
            return
        for value in values:
            step(dimension.continuation(value, rest), prefix + (value.value,))

    step(schema.dimensions, (schema.key,))
    return paths


def expand_optional_ending(form: str) -> List[str]:
    """
    Split a form with a parenthesized optional ending into both variants.

    >>> expand_optional_ending("λέγει(ν)")
    ['λέγει', 'λέγειν']
    """
    if not form.endswith(")") or "(" not in form:
        return [form]
    stem, _, ending = form.partition("(")
    return [stem, stem + ending.replace("(", "").replace(")", "")]
