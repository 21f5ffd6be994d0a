"""
Tests for paradigm.html - reading inflection frames from markup.
"""
import pytest

from paradigm.grid import CellKind, build_grid
from paradigm.html import table_from_html, tables_from_html


VERB_FRAME = """
<div class="NavFrame grc-conj">
  <div class="NavHead">Present:  λέγω</div>
  <div class="NavContent">
    <table>
      <tr><th colspan="2"></th><th>Singular</th><th>Plural</th></tr>
      <tr>
        <th rowspan="2">Indicative</th><th>first</th>
        <td><span class="tr Latn">légō</span><span class="Polyt">λέγω</span></td>
        <td><span class="Polyt">λέγομεν</span></td>
      </tr>
      <tr>
        <th>third</th>
        <td><span class="Polyt">λέγει</span></td>
        <td><span class="Polyt">λέγουσι</span><span class="Polyt">ν</span></td>
      </tr>
    </table>
  </div>
</div>
"""

NOUN_FRAME = """
<div class="NavFrame grc-decl">
  <div class="NavHead">Second declension of ὁ λόγος</div>
  <table>
    <tr><th>Case / #</th><th>Singular</th></tr>
    <tr><th>Nominative<br>Vocative</th><td><span class="Polyt">ὁ λόγος<br> ὦ λόγε </span></td></tr>
    <tr><th>Locative</th><td>—</td></tr>
  </table>
</div>
"""


@pytest.fixture
def verb_table(extraction_config):
    return table_from_html(VERB_FRAME, extraction_config)


class TestTableFromHtml:
    """table_from_html."""

    def test_title_normalized(self, verb_table):
        assert verb_table.title == "present: λέγω"

    def test_headers_lower_cased(self, verb_table):
        header_row = verb_table.rows[0]
        assert [cell.text for cell in header_row] == ["", "singular", "plural"]
        assert all(cell.kind is CellKind.HEADER for cell in header_row)

    def test_spans_passed_through(self, verb_table):
        assert verb_table.rows[0][0].colspan == "2"
        assert verb_table.rows[1][0].rowspan == "2"
        assert verb_table.rows[1][1].rowspan is None

    def test_last_form_span_wins(self, verb_table):
        assert verb_table.rows[1][2].text == "λέγω"

    def test_movable_nu_becomes_optional_ending(self, verb_table):
        assert verb_table.rows[2][2].text == "λέγουσι(ν)"

    def test_grid_builds_from_adapter_output(self, verb_table):
        grid = build_grid(verb_table)
        assert grid.header_at(0, 2).text == "indicative"
        assert grid.at(2, 2).text == "λέγει"


class TestNounFrame:
    """Line breaks and fallbacks."""

    @pytest.fixture
    def noun_table(self, extraction_config):
        return table_from_html(NOUN_FRAME, extraction_config)

    def test_break_separates_alternatives(self, noun_table):
        assert noun_table.rows[1][1].text == "ὁ λόγος\nὦ λόγε"

    def test_header_break_becomes_space(self, noun_table):
        assert noun_table.rows[1][0].text == "nominative vocative"

    def test_cell_without_form_span_uses_text(self, noun_table):
        assert noun_table.rows[2][1].text == "—"


class TestTablesFromHtml:
    """tables_from_html."""

    def test_all_frames(self, extraction_config):
        tables = tables_from_html(VERB_FRAME + NOUN_FRAME, config=extraction_config)
        assert [table.title for table in tables] == [
            "present: λέγω",
            "second declension of ὁ λόγος",
        ]

    def test_selector_narrows(self, extraction_config):
        tables = tables_from_html(VERB_FRAME + NOUN_FRAME, ".NavFrame.grc-decl", extraction_config)
        assert len(tables) == 1
        assert tables[0].title == "second declension of ὁ λόγος"

    def test_no_frames(self, extraction_config):
        assert tables_from_html("<p>nothing here</p>", config=extraction_config) == []
