"""
LEXIKON - Grid Builder

Turns a raw inflection table (rows of header/data cells with row and
column spans) into a dense coordinate grid.

Placement is first-fit: within a row the cursor skips every position whose
span rectangle would overlap a coordinate already claimed by a cell from
an earlier row. A coordinate is never claimed twice.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from core.errors import ErrorContext, FormatError
from core.types import Position


class CellKind(Enum):
    HEADER = "header"
    DATA = "data"


Span = Union[int, str, None]


@dataclass
class RawCell:
    """A table cell as read from the source, spans possibly still strings."""

    kind: CellKind
    text: str
    rowspan: Span = 1
    colspan: Span = 1

    @classmethod
    def header(cls, text: str, rowspan: Span = 1, colspan: Span = 1) -> "RawCell":
        return cls(CellKind.HEADER, text, rowspan, colspan)

    @classmethod
    def data(cls, text: str, rowspan: Span = 1, colspan: Span = 1) -> "RawCell":
        return cls(CellKind.DATA, text, rowspan, colspan)


@dataclass
class RawTable:
    """One inflection table: an optional title and rows of raw cells."""

    rows: List[List[RawCell]] = field(default_factory=list)
    title: str = ""


@dataclass(frozen=True)
class PlacedCell:
    """A cell anchored at (x, y) and covering width x height coordinates."""

    kind: CellKind
    text: str
    x: int
    y: int
    width: int = 1
    height: int = 1

    @property
    def is_header(self) -> bool:
        return self.kind is CellKind.HEADER

    @property
    def coords(self) -> Tuple[Position, ...]:
        return tuple(
            (self.x + dx, self.y + dy)
            for dy in range(self.height)
            for dx in range(self.width)
        )


class Grid:
    """Placed cells plus a coordinate index."""

    def __init__(self, title: str = ""):
        self.title = title
        self.cells: List[PlacedCell] = []
        self._claims: Dict[Position, PlacedCell] = {}

    def is_free(self, x: int, y: int, width: int, height: int) -> bool:
        return all(
            (x + dx, y + dy) not in self._claims
            for dy in range(height)
            for dx in range(width)
        )

    def place(self, cell: PlacedCell) -> None:
        for coord in cell.coords:
            if coord in self._claims:
                raise FormatError(
                    f"coordinate {coord} already claimed",
                    context=ErrorContext(
                        operation="place", component="grid", table_title=self.title, position=coord,
                    ),
                )
        for coord in cell.coords:
            self._claims[coord] = cell
        self.cells.append(cell)

    def at(self, x: int, y: int) -> Optional[PlacedCell]:
        return self._claims.get((x, y))

    def header_at(self, x: int, y: int) -> Optional[PlacedCell]:
        cell = self._claims.get((x, y))
        return cell if cell is not None and cell.is_header else None

    def data_cells(self) -> Iterator[PlacedCell]:
        return (cell for cell in self.cells if not cell.is_header)

    @property
    def claimed(self) -> Dict[Position, PlacedCell]:
        return dict(self._claims)

    @property
    def width(self) -> int:
        return max((x for x, _ in self._claims), default=-1) + 1

    @property
    def height(self) -> int:
        return max((y for _, y in self._claims), default=-1) + 1


def parse_span(value: Span, attribute: str, title: str = "") -> int:
    """
    Parse a rowspan/colspan attribute. Missing means 1.

    Raises:
        FormatError: the value is not a positive integer
    """
    if value is None:
        return 1
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = value
    else:
        text = str(value).strip()
        parsed = int(text) if text.isascii() and text.isdigit() else None
    if parsed is None or parsed < 1:
        raise FormatError(
            f"invalid {attribute} {value!r}",
            attribute=attribute,
            actual_value=value,
            context=ErrorContext(operation="parse_span", component="grid", table_title=title),
        )
    return parsed


def build_grid(table: RawTable) -> Grid:
    """
    Place every cell of ``table`` on a coordinate grid.

    Raises:
        FormatError: a span attribute is malformed
    """
    grid = Grid(table.title)

    for y, row in enumerate(table.rows):
        x = 0
        for raw in row:
            height = parse_span(raw.rowspan, "rowspan", table.title)
            width = parse_span(raw.colspan, "colspan", table.title)

            while not grid.is_free(x, y, width, height):
                x += 1

            grid.place(PlacedCell(raw.kind, raw.text, x, y, width, height))
            x += width

    return grid
