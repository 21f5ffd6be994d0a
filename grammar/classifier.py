"""
LEXIKON - Category Classifier

Maps inflection-table header and title text to grammatical tags.

Recognition is a pair of declarative rule tables. Each rule names a
pattern, how it must match the (lower-cased, trimmed) text, and the tags it
contributes. Every matching rule contributes, so "masculine / feminine"
yields two genders and "middle/passive" two voices.

Usage:
    classifier = CategoryClassifier()
    classifier.classify_header("Singular")     # {Number.SINGULAR}
    classifier.classify_title("present: λέγω")  # {Tense.PRESENT}
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from grammar.categories import (
    Case,
    Contraction,
    DeclensionType,
    Degree,
    Dialect,
    Gender,
    Mood,
    Number,
    Person,
    Tag,
    Tense,
    Voice,
    WordClass,
)


class MatchMode(Enum):
    """How a rule pattern is compared with the text."""
    CONTAINS = "contains"
    EQUALS = "equals"
    PREFIX = "prefix"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class Rule:
    """One recognition rule."""

    pattern: str
    mode: MatchMode
    tags: FrozenSet[Tag]

    def matches(self, text: str) -> bool:
        if self.mode is MatchMode.CONTAINS:
            return self.pattern in text
        if self.mode is MatchMode.EQUALS:
            return text == self.pattern
        if self.mode is MatchMode.PREFIX:
            return text.startswith(self.pattern)
        return text.endswith(self.pattern)


def _rule(pattern: str, mode: MatchMode, *tags: Tag) -> Rule:
    return Rule(pattern, mode, frozenset(tags))


_C, _E, _P, _S = MatchMode.CONTAINS, MatchMode.EQUALS, MatchMode.PREFIX, MatchMode.SUFFIX

HEADER_RULES: Tuple[Rule, ...] = (
    # number and case appear inside longer headers ("nominative singular")
    _rule("singular", _C, Number.SINGULAR),
    _rule("dual", _C, Number.DUAL),
    _rule("plural", _C, Number.PLURAL),
    _rule("nominative", _C, Case.NOMINATIVE),
    _rule("genitive", _C, Case.GENITIVE),
    _rule("dative", _C, Case.DATIVE),
    _rule("accusative", _C, Case.ACCUSATIVE),
    _rule("vocative", _C, Case.VOCATIVE),
    _rule("first declension", _C, DeclensionType.FIRST),
    _rule("second declension", _C, DeclensionType.SECOND),
    _rule("third declension", _C, DeclensionType.THIRD),

    _rule("middle/passive", _E, Voice.MIDDLE, Voice.PASSIVE),
    _rule("middle", _E, Voice.MIDDLE),
    _rule("passive", _E, Voice.PASSIVE),
    _rule("active", _E, Voice.ACTIVE),

    _rule("participle", _E, Mood.PARTICIPLE),
    _rule("infinitive", _E, Mood.INFINITIVE),
    _rule("indicative", _E, Mood.INDICATIVE),
    _rule("subjunctive", _E, Mood.SUBJUNCTIVE),
    _rule("optative", _E, Mood.OPTATIVE),
    _rule("imperative", _E, Mood.IMPERATIVE),

    _rule("first", _E, Person.FIRST),
    _rule("second", _E, Person.SECOND),
    _rule("third", _E, Person.THIRD),
    _rule("1st", _E, Person.FIRST),
    _rule("2nd", _E, Person.SECOND),
    _rule("3rd", _E, Person.THIRD),

    _rule("m", _E, Gender.MASCULINE),
    _rule("masculine", _E, Gender.MASCULINE),
    _rule("f", _E, Gender.FEMININE),
    _rule("feminine", _E, Gender.FEMININE),
    _rule("n", _E, Gender.NEUTER),
    _rule("neuter", _E, Gender.NEUTER),
    _rule("masculine / feminine", _E, Gender.MASCULINE, Gender.FEMININE),

    _rule("adverb", _E, WordClass.ADVERB),
    _rule("positive", _E, WordClass.ADJECTIVE, Degree.POSITIVE),
    _rule("comparative", _E, WordClass.ADJECTIVE, Degree.COMPARATIVE),
    _rule("superlative", _E, WordClass.ADJECTIVE, Degree.SUPERLATIVE),
)

TITLE_RULES: Tuple[Rule, ...] = (
    _rule("present:", _P, Tense.PRESENT),
    _rule("imperfect:", _P, Tense.IMPERFECT),
    _rule("future:", _P, Tense.FUTURE),
    _rule("aorist:", _P, Tense.AORIST),
    _rule("2nd aorist:", _P, Tense.AORIST_2ND),
    _rule("second aorist:", _P, Tense.AORIST_2ND),
    _rule("perfect:", _P, Tense.PERFECT),
    _rule("2nd perfect:", _P, Tense.PERFECT_2ND),
    _rule("second perfect:", _P, Tense.PERFECT_2ND),
    _rule("pluperfect:", _P, Tense.PLUPERFECT),
    _rule("future perfect:", _P, Tense.FUTURE_PERFECT),
    _rule("(contracted)", _S, Contraction.CONTRACTED),
    _rule("(uncontracted)", _S, Contraction.UNCONTRACTED),
    # a title may also name the voice and mood of the whole table,
    # e.g. "present: active indicative"
    _rule(": active", _C, Voice.ACTIVE),
    _rule(": middle/passive", _C, Voice.MIDDLE, Voice.PASSIVE),
    _rule(": middle ", _C, Voice.MIDDLE),
    _rule(": passive ", _C, Voice.PASSIVE),
) + tuple(
    _rule(f" {mood.value}", _S, mood) for mood in Mood
) + tuple(_rule(dialect.value, _C, dialect) for dialect in Dialect)

# "(uncontracted)", "(attic)" and the like, closing a title
TRAILING_QUALIFIERS = re.compile(r"(\s*\([^()]*\))+$")


def normalize(text: str) -> str:
    """Lower-case, trim and collapse inner whitespace."""
    return " ".join(text.split()).lower()


class CategoryClassifier:
    """Classifies header and title text into tag sets."""

    def __init__(
        self,
        header_rules: Sequence[Rule] = HEADER_RULES,
        title_rules: Sequence[Rule] = TITLE_RULES,
        notes_header: str = "notes",
    ):
        self.header_rules = tuple(header_rules)
        self.title_rules = tuple(title_rules)
        self.notes_header = notes_header.lower()

    def with_rules(
        self,
        header_rules: Iterable[Rule] = (),
        title_rules: Iterable[Rule] = (),
    ) -> "CategoryClassifier":
        """Copy of this classifier with extra rules appended."""
        return CategoryClassifier(
            self.header_rules + tuple(header_rules),
            self.title_rules + tuple(title_rules),
            self.notes_header,
        )

    def classify_header(self, text: str) -> FrozenSet[Tag]:
        """Tags implied by a header cell. Unrecognized text yields no tags."""
        return self._apply(self.header_rules, normalize(text))

    def classify_title(self, title: Optional[str]) -> FrozenSet[Tag]:
        """Tags implied by a table title (tense, voice, mood, contraction, dialect)."""
        if not title:
            return frozenset()
        text = normalize(title)
        tags = self._apply(self.title_rules, text)
        # suffix rules ("... indicative") also see the title without its qualifiers
        bare = TRAILING_QUALIFIERS.sub("", text)
        if bare != text:
            tags |= self._apply(self.title_rules, bare)
        return tags

    def is_notes(self, text: str) -> bool:
        """True for the "notes" meta header, with or without a trailing colon."""
        return normalize(text).rstrip(":").rstrip() == self.notes_header

    @staticmethod
    def _apply(rules: Sequence[Rule], text: str) -> FrozenSet[Tag]:
        tags: set = set()
        for rule in rules:
            if rule.matches(text):
                tags.update(rule.tags)
        return frozenset(tags)
