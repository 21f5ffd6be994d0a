"""
LEXIKON - HTML Table Adapter

Reads inflection frames from reference-site markup into RawTables.

A frame holds a title element and one table. Header cells keep their
lower-cased text. Data cells prefer the form spans inside them:

- the last form span is the form; earlier ones are transliterations
- a trailing span holding only the movable nu marks an optional ending
  and is rendered as "(ν)" after the form
- a <br> inside the form span separates alternative forms
"""
from __future__ import annotations

from typing import List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from config import ExtractionConfig, get_config
from paradigm.grid import RawCell, RawTable
from grammar.classifier import normalize


Markup = Union[str, Tag]


def _soup(markup: Markup) -> Tag:
    if isinstance(markup, Tag):
        return markup
    return BeautifulSoup(markup, "html.parser")


def _form_text(span: Tag, line_break: str) -> str:
    parts: List[str] = []
    for child in span.children:
        if isinstance(child, NavigableString):
            parts.append(str(child))
        elif child.name == "br":
            parts.append(line_break)
        else:
            parts.append(child.get_text())
    lines = [line.strip() for line in "".join(parts).split(line_break)]
    return line_break.join(line for line in lines if line)


def _data_text(cell: Tag, config: ExtractionConfig) -> str:
    forms = cell.select(config.form_selector)
    suffix = ""
    if forms and forms[-1].get_text().strip() == config.movable_nu:
        forms = forms[:-1]
        suffix = f"({config.movable_nu})"

    if forms:
        text = _form_text(forms[-1], config.line_break)
    else:
        text = cell.get_text().strip()
    return text + suffix


def table_from_html(frame: Markup, config: Optional[ExtractionConfig] = None) -> RawTable:
    """
    Convert one inflection frame into a RawTable.

    Span attributes are passed through untouched; malformed ones are
    rejected later by the grid builder.
    """
    config = config or get_config().extraction
    root = _soup(frame)

    title_element = root.select_one(config.title_selector)
    title = normalize(title_element.get_text()) if title_element else ""

    rows: List[List[RawCell]] = []
    for tr in root.find_all("tr"):
        row: List[RawCell] = []
        for cell in tr.find_all(["th", "td"], recursive=False):
            rowspan = cell.get("rowspan")
            colspan = cell.get("colspan")
            if cell.name == "th":
                row.append(RawCell.header(normalize(cell.get_text(" ")), rowspan, colspan))
            else:
                row.append(RawCell.data(_data_text(cell, config), rowspan, colspan))
        rows.append(row)

    return RawTable(rows=rows, title=title)


def tables_from_html(
    markup: Markup,
    selector: Optional[str] = None,
    config: Optional[ExtractionConfig] = None,
) -> List[RawTable]:
    """
    Convert every frame matching ``selector`` into a RawTable.

    The caller chooses the selector for the page section it wants, e.g.
    ``".NavFrame.grc-decl.grc-adecl"`` for adjective declensions.
    """
    config = config or get_config().extraction
    root = _soup(markup)
    return [table_from_html(frame, config) for frame in root.select(selector or config.table_selector)]
