"""
LEXIKON - Test Configuration

Pytest fixtures and table builders shared by all tests.
"""
from typing import List, Sequence

import pytest

from config import ExtractionConfig
from grammar.classifier import CategoryClassifier
from paradigm.builder import ParadigmBuilder
from paradigm.grid import RawCell, RawTable


def rows_of(rows: Sequence[Sequence[object]]) -> List[List[RawCell]]:
    """
    Build table rows from shorthand: strings starting with "#" are headers,
    other strings are data cells, RawCell instances pass through.
    """
    built = []
    for row in rows:
        cells = []
        for item in row:
            if isinstance(item, RawCell):
                cells.append(item)
            elif item.startswith("#"):
                cells.append(RawCell.header(item[1:]))
            else:
                cells.append(RawCell.data(item))
        built.append(cells)
    return built


@pytest.fixture
def table_rows():
    """Row shorthand builder for tests that assemble their own tables."""
    return rows_of


@pytest.fixture
def extraction_config() -> ExtractionConfig:
    """Extraction markers with their stock values."""
    return ExtractionConfig(
        no_form_glyph="—",
        notes_header="notes",
        table_selector=".NavFrame",
        title_selector=".NavHead",
        form_selector=".Polyt",
    )


@pytest.fixture
def classifier() -> CategoryClassifier:
    return CategoryClassifier()


@pytest.fixture
def builder(classifier, extraction_config) -> ParadigmBuilder:
    return ParadigmBuilder(classifier=classifier, config=extraction_config)


@pytest.fixture
def present_active_table() -> RawTable:
    """Present active indicative of λέγω with a spanning mood/voice column."""
    return RawTable(
        title="present: λέγω",
        rows=rows_of([
            ["#", "#", "#", "#singular", "#plural"],
            [RawCell.header("indicative", rowspan=3), RawCell.header("active", rowspan=3),
             "#first", "λέγω", "λέγομεν"],
            ["#second", "λέγεις", "λέγετε"],
            ["#third", "λέγει", "λέγουσι(ν)"],
        ]),
    )


@pytest.fixture
def middle_passive_table() -> RawTable:
    """Present middle/passive infinitive and indicative of λέγω."""
    return RawTable(
        title="present: λέγομαι",
        rows=rows_of([
            ["#", "#", "#", "#singular", "#plural"],
            [RawCell.header("indicative", rowspan=2), RawCell.header("middle/passive", rowspan=2),
             "#first", "λέγομαι", "λεγόμεθα"],
            ["#third", "λέγεται", "λέγονται"],
            ["#infinitive", "#middle/passive", "#", RawCell.data("λέγεσθαι", colspan=2)],
        ]),
    )


@pytest.fixture
def noun_table() -> RawTable:
    """Attic second-declension paradigm of λόγος with a notes row."""
    return RawTable(
        title="second declension of λόγος (attic)",
        rows=rows_of([
            ["#case / #", "#singular", "#dual", "#plural"],
            ["#nominative", "λόγος", "λόγω", "λόγοι"],
            ["#genitive", "λόγου", "λόγοιν", "λόγων"],
            ["#dative", "λόγῳ", "λόγοιν", "λόγοις"],
            ["#accusative", "λόγον", "λόγω", "λόγους"],
            ["#vocative", "λόγε", "λόγω", "λόγοι"],
            ["#notes:", RawCell.data("This table gives Attic inflectional endings.", colspan=3)],
        ]),
    )


@pytest.fixture
def adjective_table() -> RawTable:
    """Positive degree of καλός, genders across the top."""
    return RawTable(
        title="first/second declension of καλός",
        rows=rows_of([
            ["#number", RawCell.header("singular", colspan=3), RawCell.header("plural", colspan=3)],
            ["#case/gender", "#masculine", "#feminine", "#neuter",
             "#masculine", "#feminine", "#neuter"],
            ["#nominative", "καλός", "καλή", "καλόν", "καλοί", "καλαί", "καλά"],
            ["#genitive", "καλοῦ", "καλῆς", "καλοῦ", "καλῶν", "καλῶν", "καλῶν"],
            ["#derived forms", "#adverb", "#comparative", "#superlative"],
            ["#", "καλῶς", "καλλίων", "κάλλιστος"],
        ]),
    )


@pytest.fixture
def sample_greek_text() -> str:
    """Sample Greek text for testing."""
    return "Ἐν ἀρχῇ ἦν ὁ λόγος καὶ ὁ λόγος ἦν πρὸς τὸν θεόν"
