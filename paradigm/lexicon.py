"""
LEXIKON - Lexicon Entry

A lemma with its paradigm set and definitions: the durable record handed
to the document store.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from core.types import DefinitionDict, LexiconEntryDict
from grammar.declension import Declension
from paradigm.query import INFLECTIONS_FIELD
from paradigm.resolver import resolve_first
from paradigm.tree import ParadigmTree, SurfaceForm


class DefinitionKind(Enum):
    LITERAL = "literal"
    FORM_OF = "form_of"


@dataclass(frozen=True)
class Definition:
    """A gloss, or a pointer to the lemma this word is an inflection of."""

    kind: DefinitionKind
    text: str = ""
    lemma: Optional[str] = None

    @classmethod
    def literal(cls, text: str) -> "Definition":
        return cls(DefinitionKind.LITERAL, text)

    @classmethod
    def form_of(cls, lemma: str, text: str = "") -> "Definition":
        return cls(DefinitionKind.FORM_OF, text, lemma)

    def to_dict(self) -> DefinitionDict:
        data: DefinitionDict = {"kind": self.kind.value, "text": self.text}
        if self.lemma is not None:
            data["lemma"] = self.lemma
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Definition":
        return cls(DefinitionKind(data["kind"]), data.get("text", ""), data.get("lemma"))


@dataclass
class LexiconEntry:
    """Everything known about one lemma."""

    lemma: str
    paradigms: List[ParadigmTree] = field(default_factory=list)
    definitions: List[Definition] = field(default_factory=list)

    def merge(self, trees: Iterable[ParadigmTree]) -> "LexiconEntry":
        """
        Fold trees into the paradigm set. A tree with the same dialect set
        as an existing one is merged into it; others are appended as
        copies.
        """
        for tree in trees:
            for existing in self.paradigms:
                if existing.dialects == tree.dialects:
                    existing.merge(tree)
                    break
            else:
                self.paradigms.append(ParadigmTree.from_dict(tree.to_dict()))
        return self

    def add_definitions(self, definitions: Iterable[Definition]) -> "LexiconEntry":
        for definition in definitions:
            if definition not in self.definitions:
                self.definitions.append(definition)
        return self

    def find_inflection(self, declension: Declension) -> List[SurfaceForm]:
        """
        Forms of this lemma under ``declension``.

        Raises:
            MissingRequiredDimension: the query lacks a required slot
            FormNotAttested: no paradigm attests the branch
        """
        return resolve_first(self.paradigms, declension)

    @property
    def base_lemma(self) -> Optional[str]:
        """Lemma this entry is a form of, from its first form-of definition."""
        for definition in self.definitions:
            if definition.kind is DefinitionKind.FORM_OF:
                return definition.lemma
        return None

    def to_dict(self) -> LexiconEntryDict:
        return {
            "lemma": self.lemma,
            INFLECTIONS_FIELD: [tree.to_dict() for tree in self.paradigms],
            "definitions": [definition.to_dict() for definition in self.definitions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LexiconEntry":
        return cls(
            lemma=data["lemma"],
            paradigms=[ParadigmTree.from_dict(tree) for tree in data.get(INFLECTIONS_FIELD, [])],
            definitions=[Definition.from_dict(d) for d in data.get("definitions", [])],
        )
