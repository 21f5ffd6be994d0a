"""
LEXIKON - Paradigm Builder

Assembles tagged cells into ParadigmTrees.

Each cell is routed to a part-of-speech branch (its own part-of-speech
marker if it carries one, otherwise the page's), then placed by walking
that part of speech's schema with the cell's tags. A dimension with
several tags fans out, so a "middle/passive" cell lands under both voices.

Cell-level failures are collected and logged; the rest of the table is
still built. A malformed table is rejected as a whole.

Usage:
    builder = ParadigmBuilder()
    result = builder.build(tables, VERB, lemma="λέγω")
    for tree in result.paradigms:
        ...
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from config import ExtractionConfig, get_config
from core.errors import (
    CellError,
    ClassificationConflict,
    ErrorContext,
    FormatError,
    LexikonError,
    MissingDimension,
)
from grammar.categories import (
    DeclensionType,
    Dialect,
    PartOfSpeech,
    Tag,
    WordClass,
    values_of,
)
from grammar.classifier import CategoryClassifier
from observability.logging import ExtractionLogger
from observability.tracing import span_decorator
from paradigm.associator import ParsedCell, associate
from paradigm.grid import RawTable, build_grid
from paradigm.schema import SCHEMAS, Dimension, ParadigmSchema, expand_optional_ending, schema_for, walk
from paradigm.tree import ParadigmTree, SurfaceForm


@dataclass
class ExtractionResult:
    """Paradigms built from a page plus what had to be skipped."""

    paradigms: List[ParadigmTree] = field(default_factory=list)
    table_errors: List[LexikonError] = field(default_factory=list)
    cell_errors: List[CellError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.table_errors and not self.cell_errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "paradigms": [tree.to_dict() for tree in self.paradigms],
            "table_errors": [error.to_dict() for error in self.table_errors],
            "cell_errors": [error.to_dict() for error in self.cell_errors],
        }


class ParadigmBuilder:
    """Builds paradigm trees from raw tables."""

    def __init__(
        self,
        classifier: Optional[CategoryClassifier] = None,
        config: Optional[ExtractionConfig] = None,
        schemas: Mapping[WordClass, ParadigmSchema] = SCHEMAS,
    ):
        self.config = config or get_config().extraction
        self.classifier = classifier or CategoryClassifier(notes_header=self.config.notes_header)
        self.schemas = schemas
        self.logger = ExtractionLogger("builder")

    # ------------------------------------------------------------------
    # Cell insertion
    # ------------------------------------------------------------------

    def route(self, cell: ParsedCell, part_of_speech: PartOfSpeech) -> PartOfSpeech:
        """
        Part of speech a cell belongs to.

        Raises:
            ClassificationConflict: the cell's headers name more than one
        """
        markers = values_of(cell.tags, WordClass)
        if not markers:
            return part_of_speech
        if len(markers) > 1:
            raise ClassificationConflict(
                f"cell implies {', '.join(m.value for m in markers)}",
                candidates=markers,
                text=cell.text,
                position=cell.position,
            )
        if markers[0] is part_of_speech.word_class:
            return part_of_speech
        return PartOfSpeech(markers[0])

    def paths(self, cell: ParsedCell, schema: ParadigmSchema) -> List[Tuple[str, ...]]:
        """
        Every branch path the cell's tags select.

        Raises:
            MissingDimension: a required dimension has neither tag nor default
        """

        def choose(dimension: Dimension):
            values = values_of(cell.tags, dimension.category)
            if values:
                return values
            default = dimension.fallback(building=True)
            if default is not None:
                return [default]
            if dimension.required:
                raise MissingDimension(
                    f"{dimension.name} required for {schema.key}",
                    dimension=dimension.name,
                    text=cell.text,
                    position=cell.position,
                )
            return []

        return walk(schema, choose)

    def forms(self, text: str, schema: ParadigmSchema) -> List[SurfaceForm]:
        """One SurfaceForm per alternative in ``text``."""
        forms: List[SurfaceForm] = []
        for part in text.split(self.config.line_break):
            part = part.strip()
            if not part:
                continue
            variants = expand_optional_ending(part) if schema.optional_endings else [part]
            forms.extend(SurfaceForm(contracted=variant) for variant in variants)
        return forms

    def insert(self, tree: ParadigmTree, cell: ParsedCell, part_of_speech: PartOfSpeech) -> int:
        """
        Place one cell in ``tree``.

        Returns:
            Number of new forms added

        Raises:
            CellError: the cell cannot be placed
        """
        schema = schema_for(self.route(cell, part_of_speech), self.schemas)
        forms = self.forms(cell.text, schema)
        added = 0
        for path in self.paths(cell, schema):
            added += tree.add(path, forms)
        return added

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    @span_decorator("paradigm.build_table")
    def build_table(
        self,
        table: RawTable,
        part_of_speech: PartOfSpeech,
        extra_tags: Iterable[Tag] = (),
    ) -> Tuple[ParadigmTree, List[CellError]]:
        """
        Build the tree for one table.

        Raises:
            FormatError: the table's spans are malformed
            UnsupportedPartOfSpeech: no schema for ``part_of_speech``
        """
        schema_for(part_of_speech, self.schemas)
        self.logger.table_started(table.title, str(part_of_speech))

        extra_tags = frozenset(extra_tags)
        grid = build_grid(table)
        cells = associate(grid, self.classifier, extra_tags, self.config)

        table_tags = self.classifier.classify_title(table.title) | extra_tags
        declension_types = {
            tag for cell in cells for tag in cell.tags if isinstance(tag, DeclensionType)
        }
        tree = ParadigmTree(
            dialects=frozenset(values_of(table_tags, Dialect)),
            declension_type=declension_types.pop() if len(declension_types) == 1 else None,
        )

        errors: List[CellError] = []
        for cell in cells:
            try:
                self.insert(tree, cell, part_of_speech)
            except CellError as e:
                if e.context is None:
                    e.context = ErrorContext(
                        operation="insert", component="builder",
                        table_title=table.title, position=cell.position,
                    )
                self.logger.cell_skipped(cell.text, cell.position, e)
                errors.append(e)

        self.logger.table_completed(table.title, len(cells) - len(errors), len(errors))
        return tree, errors

    def build_invariant(self, lemma: str, part_of_speech: PartOfSpeech) -> ParadigmTree:
        """Tree for a word that does not inflect: its only form is the lemma."""
        schema = schema_for(part_of_speech, self.schemas)
        tree = ParadigmTree()
        tree.add((schema.key,), [SurfaceForm(contracted=lemma)])
        return tree

    @span_decorator("paradigm.build")
    def build(
        self,
        tables: Sequence[RawTable],
        part_of_speech: PartOfSpeech,
        lemma: Optional[str] = None,
        extra_tags: Iterable[Tag] = (),
    ) -> ExtractionResult:
        """
        Build every table of a page.

        Trees with the same dialect set are merged. When an invariant part
        of speech has no tables, the lemma becomes its single form.
        """
        schema = schema_for(part_of_speech, self.schemas)
        extra_tags = frozenset(extra_tags)
        result = ExtractionResult()

        for table in tables:
            try:
                tree, errors = self.build_table(table, part_of_speech, extra_tags)
            except FormatError as e:
                self.logger.table_rejected(table.title, e)
                result.table_errors.append(e)
                continue
            result.cell_errors.extend(errors)
            if not tree.is_empty():
                _merge_into(result.paradigms, tree)

        if not result.paradigms and schema.invariant and lemma:
            result.paradigms.append(self.build_invariant(lemma, part_of_speech))

        return result


def _merge_into(paradigms: List[ParadigmTree], tree: ParadigmTree) -> None:
    for existing in paradigms:
        if existing.dialects == tree.dialects:
            existing.merge(tree)
            return
    paradigms.append(tree)
