"""
Property-Based Tests for Paradigm Build and Resolution

Tests that what the builder inserts is exactly what the resolver returns.
"""
from hypothesis import given, settings, strategies as st

from config import ExtractionConfig
from grammar.categories import NOUN, Case, Gender, Number
from grammar.classifier import CategoryClassifier
from grammar.declension import Declension
from paradigm.associator import ParsedCell
from paradigm.builder import ParadigmBuilder
from paradigm.grid import RawCell, RawTable
from paradigm.query import inflection_key
from paradigm.resolver import resolve, resolve_path
from paradigm.tree import ParadigmTree, SurfaceForm
from tests.property.strategies import declension, greek_word, greek_words

BUILDER = ParadigmBuilder(classifier=CategoryClassifier(), config=ExtractionConfig())


class TestBuildResolveRoundTrip:
    """Property-based tests tying insertion to resolution."""

    @given(declension, greek_words)
    @settings(max_examples=300)
    def test_inserted_forms_resolve(self, query, words):
        """A cell tagged with a declension's slots resolves under it."""
        tree = ParadigmTree()
        cell = ParsedCell("\n".join(words), query.tags(), (0, 0))
        BUILDER.insert(tree, cell, query.part_of_speech)

        resolved = resolve(tree, query)
        assert [form.contracted for form in resolved] == list(dict.fromkeys(words))

    @given(declension, greek_words)
    @settings(max_examples=200)
    def test_reinsertion_reconstructs_leaf(self, query, words):
        """Re-inserting resolved forms under the query's tags gives an equal leaf."""
        tree = ParadigmTree()
        BUILDER.insert(tree, ParsedCell("\n".join(words), query.tags(), (0, 0)), query.part_of_speech)
        resolved = resolve(tree, query)

        rebuilt = ParadigmTree()
        rebuilt.add(resolve_path(query), resolved)
        assert rebuilt.leaf(resolve_path(query)) == tree.leaf(resolve_path(query))
        assert rebuilt.branches == tree.branches

    @given(declension)
    @settings(max_examples=200)
    def test_key_matches_path(self, query):
        """Store keys and resolver paths never disagree."""
        assert inflection_key(query).split(".") == list(resolve_path(query))


@st.composite
def noun_paradigm(draw):
    """A gender and a form for every number and case."""
    gender = draw(st.sampled_from(list(Gender)))
    forms = {
        (number, case): draw(greek_word)
        for number in Number
        for case in Case
    }
    return gender, forms


def _noun_table(forms) -> RawTable:
    rows = [[RawCell.header("")] + [RawCell.header(number.value) for number in Number]]
    for case in Case:
        rows.append(
            [RawCell.header(case.value)] + [RawCell.data(forms[(number, case)]) for number in Number]
        )
    return RawTable(rows=rows, title="declension (attic)")


class TestTableRoundTrip:
    """Whole tables built, then every cell resolved."""

    @given(noun_paradigm())
    @settings(max_examples=100)
    def test_every_cell_resolves(self, paradigm):
        gender, forms = paradigm
        result = BUILDER.build([_noun_table(forms)], NOUN, extra_tags={gender})

        assert result.ok
        assert len(result.paradigms) == 1
        tree = result.paradigms[0]
        for (number, case), text in forms.items():
            query = Declension(NOUN, gender=gender, number=number, case=case)
            assert resolve(tree, query) == [SurfaceForm(text)]
