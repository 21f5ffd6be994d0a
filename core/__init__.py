"""
LEXIKON - Core Module

Foundational pieces shared by every other package:
- Unified error handling
- Type definitions for serialized documents

Core is dependency-free from other LEXIKON modules.

Usage:
    from core import LexikonError, FormNotAttested

    try:
        forms = resolve(tree, declension)
    except FormNotAttested as e:
        logger.warning("Form missing", path=e.path)
"""

from core.errors import (
    LexikonError,
    ConfigError,
    FormatError,
    CellError,
    ClassificationConflict,
    MissingDimension,
    ResolveError,
    MissingRequiredDimension,
    FormNotAttested,
    UnsupportedPartOfSpeech,
    CodeDecodeError,
    ErrorContext,
    ErrorSeverity,
)

from core.types import (
    Position,
    Lemma,
    InflectionPath,
    Score,
    SurfaceFormDict,
    ParadigmTreeDict,
    DefinitionDict,
    LexiconEntryDict,
    DeclensionDict,
)

__all__ = [
    # Errors
    "LexikonError",
    "ConfigError",
    "FormatError",
    "CellError",
    "ClassificationConflict",
    "MissingDimension",
    "ResolveError",
    "MissingRequiredDimension",
    "FormNotAttested",
    "UnsupportedPartOfSpeech",
    "CodeDecodeError",
    "ErrorContext",
    "ErrorSeverity",
    # Types
    "Position",
    "Lemma",
    "InflectionPath",
    "Score",
    "SurfaceFormDict",
    "ParadigmTreeDict",
    "DefinitionDict",
    "LexiconEntryDict",
    "DeclensionDict",
]
