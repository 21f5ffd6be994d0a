"""
LEXIKON - Grammatical Categories

Closed enumerations for every grammatical dimension a paradigm can be
indexed by, plus the part-of-speech value that selects a paradigm shape.

A *tag* is a member of any of these enumerations. The enumeration a tag
belongs to is its dimension. Word classes are tags too: a header that
names a part of speech ("adverb") classifies to a WordClass member.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type


class Number(Enum):
    """Grammatical number."""
    SINGULAR = "singular"
    DUAL = "dual"
    PLURAL = "plural"


class Case(Enum):
    """Grammatical cases."""
    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    VOCATIVE = "vocative"


class Gender(Enum):
    """Grammatical gender."""
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class Mood(Enum):
    """Verbal moods, including the non-finite forms."""
    INDICATIVE = "indicative"
    SUBJUNCTIVE = "subjunctive"
    OPTATIVE = "optative"
    IMPERATIVE = "imperative"
    INFINITIVE = "infinitive"
    PARTICIPLE = "participle"


class Tense(Enum):
    """Verbal tenses."""
    PRESENT = "present"
    IMPERFECT = "imperfect"
    FUTURE = "future"
    FUTURE_PERFECT = "future_perfect"
    AORIST = "aorist"
    AORIST_2ND = "aorist_2nd"
    PERFECT = "perfect"
    PERFECT_2ND = "perfect_2nd"
    PLUPERFECT = "pluperfect"


class Voice(Enum):
    """Verbal voices."""
    ACTIVE = "active"
    MIDDLE = "middle"
    PASSIVE = "passive"


class Person(Enum):
    """Verbal person."""
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class Theme(Enum):
    THEMATIC = "thematic"
    ATHEMATIC = "athematic"


class Contraction(Enum):
    CONTRACTED = "contracted"
    UNCONTRACTED = "uncontracted"


class DeclensionType(Enum):
    """Nominal declension class."""
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    INDECLINABLE = "indeclinable"


class Dialect(Enum):
    ATTIC = "attic"
    KOINE = "koine"
    EPIC = "epic"
    LACONIAN = "laconian"
    DORIC = "doric"
    IONIC = "ionic"
    AEOLIC = "aeolic"
    HOMERIC = "homeric"
    ARCADOCYPRIOT = "arcadocypriot"
    CRETAN = "cretan"
    MACEDONIAN = "macedonian"


class Degree(Enum):
    """Adjective degree."""
    POSITIVE = "positive"
    COMPARATIVE = "comparative"
    SUPERLATIVE = "superlative"


class WordClass(Enum):
    """Parts of speech."""
    NOUN = "noun"
    ARTICLE = "article"
    PRONOUN = "pronoun"
    NUMERAL = "numeral"
    ADJECTIVE = "adjective"
    VERB = "verb"
    ADVERB = "adverb"
    PARTICLE = "particle"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    QUANTIFIER = "quantifier"
    INTERJECTION = "interjection"


class NounKind(Enum):
    COMMON = "common"
    PROPER = "proper"


class ArticleKind(Enum):
    DEFINITE = "definite"
    INDEFINITE = "indefinite"


class PronounKind(Enum):
    RELATIVE = "relative"
    INTERROGATIVE = "interrogative"
    INDEFINITE = "indefinite"
    RECIPROCAL = "reciprocal"
    REFLEXIVE = "reflexive"
    DEMONSTRATIVE = "demonstrative"
    PERSONAL = "personal"


class NumeralKind(Enum):
    CARDINAL = "cardinal"
    ORDINAL = "ordinal"


# Dimension name -> enumeration, in the order Declension declares its slots
DIMENSIONS: Dict[str, Type[Enum]] = {
    "number": Number,
    "case": Case,
    "gender": Gender,
    "mood": Mood,
    "tense": Tense,
    "voice": Voice,
    "person": Person,
    "theme": Theme,
    "contraction": Contraction,
    "declension_type": DeclensionType,
    "dialect": Dialect,
    "degree": Degree,
}

_DIMENSION_NAMES: Dict[Type[Enum], str] = {cls: name for name, cls in DIMENSIONS.items()}

# Sub-kind enumeration allowed for each word class
SUB_KINDS: Dict[WordClass, Type[Enum]] = {
    WordClass.NOUN: NounKind,
    WordClass.ARTICLE: ArticleKind,
    WordClass.PRONOUN: PronounKind,
    WordClass.NUMERAL: NumeralKind,
}

# Any member of the enumerations above
Tag = Enum


def dimension_name(category: Type[Enum]) -> str:
    """Name of a dimension enumeration, e.g. ``Case`` -> ``"case"``."""
    if category is WordClass:
        return "part_of_speech"
    try:
        return _DIMENSION_NAMES[category]
    except KeyError:
        raise ValueError(f"{category.__name__} is not a grammatical dimension") from None


def values_of(tags: Iterable[Tag], category: Type[Enum]) -> List[Enum]:
    """Members of ``category`` present in ``tags``, in declaration order."""
    present = set(tags)
    return [member for member in category if member in present]


@dataclass(frozen=True)
class PartOfSpeech:
    """
    A word class with its optional refinement.

    ``PartOfSpeech(WordClass.PRONOUN, PronounKind.PERSONAL)`` is a personal
    pronoun; the paradigm shape depends on ``word_class`` only.
    """

    word_class: WordClass
    sub: Optional[Enum] = None

    def __post_init__(self):
        if self.sub is not None:
            allowed = SUB_KINDS.get(self.word_class)
            if allowed is None or not isinstance(self.sub, allowed):
                raise ValueError(
                    f"{self.sub!r} does not refine {self.word_class.value}"
                )

    @property
    def key(self) -> str:
        """Top-level branch name in a paradigm tree."""
        return self.word_class.value

    def __str__(self) -> str:
        if self.sub is None:
            return self.word_class.value
        return f"{self.word_class.value} ({self.sub.value})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word_class": self.word_class.value,
            "sub": self.sub.value if self.sub is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PartOfSpeech":
        word_class = WordClass(data["word_class"])
        sub = data.get("sub")
        if sub is not None:
            sub = SUB_KINDS[word_class](sub)
        return cls(word_class, sub)


# Shorthands for the unrefined parts of speech
NOUN = PartOfSpeech(WordClass.NOUN)
ARTICLE = PartOfSpeech(WordClass.ARTICLE)
PRONOUN = PartOfSpeech(WordClass.PRONOUN)
NUMERAL = PartOfSpeech(WordClass.NUMERAL)
ADJECTIVE = PartOfSpeech(WordClass.ADJECTIVE)
VERB = PartOfSpeech(WordClass.VERB)
ADVERB = PartOfSpeech(WordClass.ADVERB)
PARTICLE = PartOfSpeech(WordClass.PARTICLE)
PREPOSITION = PartOfSpeech(WordClass.PREPOSITION)
CONJUNCTION = PartOfSpeech(WordClass.CONJUNCTION)
QUANTIFIER = PartOfSpeech(WordClass.QUANTIFIER)
INTERJECTION = PartOfSpeech(WordClass.INTERJECTION)
