"""
LEXIKON - Paradigm Package

Extraction of paradigm trees from inflection tables and their resolution.

Flow:
    RawTable -> build_grid -> associate -> ParadigmBuilder -> ParadigmTree
    ParadigmTree + Declension -> ParadigmResolver -> SurfaceForms
    SurfaceForms + observed text -> FuzzyMatcher -> best form

Usage:
    from paradigm import ParadigmBuilder, resolve, closest

    result = ParadigmBuilder().build(tables, VERB)
    forms = resolve(result.paradigms[0], declension)
    best = closest("λεγω", [f.contracted for f in forms])
"""
from paradigm.grid import CellKind, RawCell, RawTable, PlacedCell, Grid, build_grid, parse_span
from paradigm.html import table_from_html, tables_from_html
from paradigm.associator import ParsedCell, associate, governing_headers
from paradigm.schema import (
    Dimension,
    ParadigmSchema,
    SCHEMAS,
    schema_for,
    walk,
    expand_optional_ending,
)
from paradigm.tree import SurfaceForm, ParadigmTree
from paradigm.builder import ParadigmBuilder, ExtractionResult
from paradigm.resolver import ParadigmResolver, resolve, resolve_first, resolve_path
from paradigm.fuzzy import FuzzyMatcher, strip_diacritics, similarity, rank, closest, plausible
from paradigm.query import inflection_key, lexicon_filter
from paradigm.lexicon import Definition, DefinitionKind, LexiconEntry
from paradigm.service import Correction, FormCorrector, correct_form

__all__ = [
    # Grid
    "CellKind",
    "RawCell",
    "RawTable",
    "PlacedCell",
    "Grid",
    "build_grid",
    "parse_span",
    "table_from_html",
    "tables_from_html",
    # Association
    "ParsedCell",
    "associate",
    "governing_headers",
    # Schemas and trees
    "Dimension",
    "ParadigmSchema",
    "SCHEMAS",
    "schema_for",
    "walk",
    "expand_optional_ending",
    "SurfaceForm",
    "ParadigmTree",
    "ParadigmBuilder",
    "ExtractionResult",
    # Resolution
    "ParadigmResolver",
    "resolve",
    "resolve_first",
    "resolve_path",
    "FuzzyMatcher",
    "strip_diacritics",
    "similarity",
    "rank",
    "closest",
    "plausible",
    "inflection_key",
    "lexicon_filter",
    # Entries
    "Definition",
    "DefinitionKind",
    "LexiconEntry",
    "Correction",
    "FormCorrector",
    "correct_form",
]
