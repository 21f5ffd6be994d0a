"""
LEXIKON - Cell Associator

Attaches to every data cell the tags of the headers that govern it.

For a data coordinate (x, y) the governing headers are:

- row headers: every header claiming (x', y) with x' < x
- column headers: walking up from y - 1, every header claiming (x, y');
  the walk stops at the first header-less row once a header was found

A data cell spanning several coordinates is associated once per
coordinate. A cell governed by the notes header is discarded, as is one
whose text is empty or the no-form glyph.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from config import ExtractionConfig, get_config
from core.types import Position
from grammar.categories import Tag
from grammar.classifier import CategoryClassifier
from paradigm.grid import Grid, PlacedCell


@dataclass(frozen=True)
class ParsedCell:
    """A data cell's text with the tags that locate it in a paradigm."""

    text: str
    tags: FrozenSet[Tag]
    position: Position

    def has(self, tag: Tag) -> bool:
        return tag in self.tags


def governing_headers(grid: Grid, x: int, y: int) -> List[PlacedCell]:
    """Headers governing coordinate (x, y), row headers first."""
    headers: List[PlacedCell] = []

    for column in range(x):
        header = grid.header_at(column, y)
        if header is not None:
            headers.append(header)

    found = False
    for row in range(y - 1, -1, -1):
        header = grid.header_at(x, row)
        if header is None:
            if found:
                break
            continue
        found = True
        headers.append(header)

    return headers


def associate(
    grid: Grid,
    classifier: Optional[CategoryClassifier] = None,
    table_tags: Iterable[Tag] = (),
    config: Optional[ExtractionConfig] = None,
) -> List[ParsedCell]:
    """
    Tag every data cell of ``grid``.

    Args:
        grid: Placed table cells
        classifier: Header/title classifier
        table_tags: Extra tags applied to every cell (e.g. the tense of a
            participle page, which the table itself does not state)
        config: Extraction markers

    Returns:
        Parsed cells in grid order, without (text, tags) duplicates
    """
    config = config or get_config().extraction
    classifier = classifier or CategoryClassifier(notes_header=config.notes_header)
    base_tags = classifier.classify_title(grid.title) | frozenset(table_tags)

    parsed: List[ParsedCell] = []
    seen = set()

    for cell in grid.data_cells():
        text = cell.text.strip()
        if not text or text == config.no_form_glyph:
            continue

        for x, y in cell.coords:
            headers = governing_headers(grid, x, y)
            if any(classifier.is_notes(header.text) for header in headers):
                continue

            tags = set(base_tags)
            for header in headers:
                tags.update(classifier.classify_header(header.text))

            key = (text, frozenset(tags))
            if key in seen:
                continue
            seen.add(key)
            parsed.append(ParsedCell(text=text, tags=frozenset(tags), position=(x, y)))

    return parsed
