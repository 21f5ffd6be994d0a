"""
LEXIKON - Paradigm Resolver

Answers "what is the form of this lemma under this declension?" by
walking the part of speech's schema with the Declension's slots.

Defaulted dimensions fall back to their default when the query leaves
them unset; any other unset dimension the schema needs is an error.
Build-time defaults (participle number and case) are not applied here.
"""
from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Tuple

from core.errors import FormNotAttested, MissingRequiredDimension
from grammar.categories import WordClass
from grammar.declension import Declension
from observability.logging import get_logger
from observability.tracing import span_decorator
from paradigm.schema import SCHEMAS, Dimension, ParadigmSchema, schema_for, walk
from paradigm.tree import ParadigmTree, SurfaceForm

logger = get_logger(__name__)


def resolve_path(
    declension: Declension,
    schemas: Mapping[WordClass, ParadigmSchema] = SCHEMAS,
) -> Tuple[str, ...]:
    """
    Branch path selected by ``declension``.

    Raises:
        UnsupportedPartOfSpeech: no schema for the declension's part of speech
        MissingRequiredDimension: a required slot is unset
    """
    schema = schema_for(declension.part_of_speech, schemas)

    def choose(dimension: Dimension):
        value = declension.get(dimension.category)
        if value is not None:
            return [value]
        default = dimension.fallback()
        if default is not None:
            return [default]
        if dimension.required:
            raise MissingRequiredDimension(dimension.name)
        return []

    return walk(schema, choose)[0]


class ParadigmResolver:
    """Looks up surface forms in paradigm trees."""

    def __init__(self, schemas: Mapping[WordClass, ParadigmSchema] = SCHEMAS):
        self.schemas = schemas

    def resolve(self, tree: ParadigmTree, declension: Declension) -> List[SurfaceForm]:
        """
        Forms of ``tree`` under ``declension``.

        Raises:
            MissingRequiredDimension: the query lacks a required slot
            FormNotAttested: the branch was never populated
        """
        path = resolve_path(declension, self.schemas)
        forms = tree.leaf(path)
        if not forms:
            raise FormNotAttested(path)
        return list(forms)

    @span_decorator("paradigm.resolve")
    def resolve_first(self, paradigms: Sequence[ParadigmTree], declension: Declension) -> List[SurfaceForm]:
        """
        Forms from the first tree of ``paradigms`` that attests ``declension``.

        A declension with a dialect only considers trees of that dialect.

        Raises:
            MissingRequiredDimension: the query lacks a required slot
            FormNotAttested: no tree attests the branch
        """
        path = resolve_path(declension, self.schemas)
        candidates = [
            tree for tree in paradigms
            if declension.dialect is None or declension.dialect in tree.dialects
        ]
        for tree in candidates:
            forms = tree.leaf(path)
            if forms:
                return list(forms)

        logger.debug(
            "Form not attested",
            path=".".join(path),
            dialect=declension.dialect.value if declension.dialect else None,
            trees=len(candidates),
        )
        raise FormNotAttested(path)


_default_resolver: Optional[ParadigmResolver] = None


def _resolver() -> ParadigmResolver:
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ParadigmResolver()
    return _default_resolver


def resolve(tree: ParadigmTree, declension: Declension) -> List[SurfaceForm]:
    """Module-level shortcut for ``ParadigmResolver().resolve``."""
    return _resolver().resolve(tree, declension)


def resolve_first(paradigms: Sequence[ParadigmTree], declension: Declension) -> List[SurfaceForm]:
    """Module-level shortcut for ``ParadigmResolver().resolve_first``."""
    return _resolver().resolve_first(paradigms, declension)
