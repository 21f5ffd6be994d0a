"""
LEXIKON - Declension

A grammatical description: a part of speech plus an optional value for
each dimension. Used both as a resolution query and as word metadata.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional, Type

from core.errors import ClassificationConflict
from grammar.categories import (
    DIMENSIONS,
    Case,
    Contraction,
    DeclensionType,
    Degree,
    Dialect,
    Gender,
    Mood,
    Number,
    PartOfSpeech,
    Person,
    Tag,
    Tense,
    Theme,
    Voice,
    WordClass,
    dimension_name,
)


@dataclass(frozen=True)
class Declension:
    """Grammatical description of one word form."""

    part_of_speech: PartOfSpeech
    number: Optional[Number] = None
    case: Optional[Case] = None
    gender: Optional[Gender] = None
    mood: Optional[Mood] = None
    tense: Optional[Tense] = None
    voice: Optional[Voice] = None
    person: Optional[Person] = None
    theme: Optional[Theme] = None
    contraction: Optional[Contraction] = None
    declension_type: Optional[DeclensionType] = None
    dialect: Optional[Dialect] = None
    degree: Optional[Degree] = None

    def __post_init__(self):
        for name, category in DIMENSIONS.items():
            value = getattr(self, name)
            if value is not None and not isinstance(value, category):
                raise TypeError(f"{name} must be a {category.__name__}, got {value!r}")

    def get(self, category: Type[Enum]) -> Optional[Enum]:
        """Value of the slot for ``category``, e.g. ``get(Case)``."""
        if category is WordClass:
            return self.part_of_speech.word_class
        return getattr(self, dimension_name(category))

    def tags(self) -> FrozenSet[Tag]:
        """All set slots as a tag set."""
        return frozenset(
            value for value in (getattr(self, name) for name in DIMENSIONS) if value is not None
        )

    def replace(self, **changes: Any) -> "Declension":
        return dataclasses.replace(self, **changes)

    @property
    def is_indeclinable(self) -> bool:
        return self.declension_type is DeclensionType.INDECLINABLE

    @classmethod
    def from_tags(cls, part_of_speech: PartOfSpeech, tags: Iterable[Tag]) -> "Declension":
        """
        Build a declension from a tag set.

        Raises:
            ClassificationConflict: two values of the same dimension are present
        """
        slots: Dict[str, Enum] = {}
        for tag in tags:
            if isinstance(tag, WordClass):
                continue
            name = dimension_name(type(tag))
            if name in slots and slots[name] is not tag:
                raise ClassificationConflict(
                    f"conflicting {name}: {slots[name].value} and {tag.value}",
                    candidates=[slots[name], tag],
                )
            slots[name] = tag
        return cls(part_of_speech=part_of_speech, **slots)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"part_of_speech": self.part_of_speech.to_dict()}
        for name in DIMENSIONS:
            value = getattr(self, name)
            data[name] = value.value if value is not None else None
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Declension":
        slots = {
            name: category(data[name])
            for name, category in DIMENSIONS.items()
            if data.get(name) is not None
        }
        return cls(part_of_speech=PartOfSpeech.from_dict(data["part_of_speech"]), **slots)
