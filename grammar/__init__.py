"""
LEXIKON - Grammar Package

Grammatical categories, the Declension description, header/title
classification and morphology-code decoding.
"""
from grammar.categories import (
    Number,
    Case,
    Gender,
    Mood,
    Tense,
    Voice,
    Person,
    Theme,
    Contraction,
    DeclensionType,
    Dialect,
    Degree,
    WordClass,
    NounKind,
    ArticleKind,
    PronounKind,
    NumeralKind,
    PartOfSpeech,
    Tag,
    DIMENSIONS,
    dimension_name,
    values_of,
)
from grammar.declension import Declension
from grammar.classifier import CategoryClassifier, MatchMode, Rule, HEADER_RULES, TITLE_RULES
from grammar.codes import decode, fix_declension

__all__ = [
    "Number",
    "Case",
    "Gender",
    "Mood",
    "Tense",
    "Voice",
    "Person",
    "Theme",
    "Contraction",
    "DeclensionType",
    "Dialect",
    "Degree",
    "WordClass",
    "NounKind",
    "ArticleKind",
    "PronounKind",
    "NumeralKind",
    "PartOfSpeech",
    "Tag",
    "DIMENSIONS",
    "dimension_name",
    "values_of",
    "Declension",
    "CategoryClassifier",
    "MatchMode",
    "Rule",
    "HEADER_RULES",
    "TITLE_RULES",
    "decode",
    "fix_declension",
]
