"""
LEXIKON - Centralized Type Definitions

Type aliases and TypedDicts describing the serialized shape of the
engine's durable artifacts, as handed to a document store.

Usage:
    from core.types import LexiconEntryDict, Position

    def save(entry: LexiconEntryDict) -> None:
        ...
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple, TypedDict, Union

# =============================================================================
# TYPE ALIASES - Simple type shortcuts
# =============================================================================

Position = Tuple[int, int]  # (x, y), column then row
Lemma = str
InflectionPath = Tuple[str, ...]  # e.g. ("noun", "masculine", "singular", "nominative")
Score = float  # 0.0 to 2.0, see paradigm.fuzzy

CellKindLiteral = Literal["header", "data"]
DefinitionKindLiteral = Literal["literal", "form_of"]


# =============================================================================
# TYPED DICTS - Serialized documents
# =============================================================================

class SurfaceFormDict(TypedDict, total=False):
    """Dictionary representation of one surface form."""
    contracted: Optional[str]
    uncontracted: Optional[List[str]]


# Nested mapping of dimension values ending in a list of surface forms
BranchDict = Dict[str, Union["BranchDict", List[SurfaceFormDict]]]


class ParadigmTreeDict(TypedDict, total=False):
    """Dictionary representation of a paradigm tree."""
    dialects: List[str]
    declension_type: Optional[str]
    branches: Dict[str, Any]


class DefinitionDict(TypedDict, total=False):
    """Dictionary representation of a lexicon definition."""
    kind: DefinitionKindLiteral
    text: str
    lemma: Optional[str]


class LexiconEntryDict(TypedDict, total=False):
    """Dictionary representation of a lexicon entry."""
    lemma: str
    inflections: List[ParadigmTreeDict]
    definitions: List[DefinitionDict]


class DeclensionDict(TypedDict, total=False):
    """Dictionary representation of a grammatical description."""
    part_of_speech: Dict[str, Optional[str]]
    number: Optional[str]
    case: Optional[str]
    gender: Optional[str]
    mood: Optional[str]
    tense: Optional[str]
    voice: Optional[str]
    person: Optional[str]
    theme: Optional[str]
    contraction: Optional[str]
    declension_type: Optional[str]
    dialect: Optional[str]
    degree: Optional[str]
