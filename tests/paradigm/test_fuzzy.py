"""
Tests for paradigm.fuzzy - ranking candidate forms against an observation.
"""
import pytest

from paradigm.fuzzy import FuzzyMatcher, closest, plausible, rank, similarity, strip_diacritics


class TestStripDiacritics:
    @pytest.mark.parametrize("text,expected", [
        ("λόγος", "λογος"),
        ("ἀρχῇ", "αρχη"),
        ("Ἐν", "Εν"),
        ("logos", "logos"),
    ])
    def test_strip(self, text, expected):
        assert strip_diacritics(text) == expected


class TestSimilarity:
    def test_identical(self):
        assert similarity("λόγος", "λόγος") == pytest.approx(2.0)

    def test_normalization_form_ignored(self):
        decomposed = "\u03bb\u03bf\u0301\u03b3\u03bf\u03c2"
        assert similarity(decomposed, "λόγος") == pytest.approx(2.0)

    def test_accent_only_difference(self):
        assert similarity("λογος", "λόγος") == pytest.approx(1.8)

    def test_letter_difference_costs_more(self):
        assert similarity("λαγος", "λόγος") == pytest.approx(1.6)

    def test_bounds(self):
        score = similarity("λόγος", "ἄνθρωπος")
        assert 0.0 <= score <= 2.0


class TestRank:
    def test_self_scores_two(self):
        assert rank("λόγος", ["λόγος"]) == [("λόγος", pytest.approx(2.0))]

    def test_accent_beats_letter(self):
        ranked = rank("λόγος", ["λαγος", "λογος"])
        assert [candidate for candidate, _ in ranked] == ["λογος", "λαγος"]

    def test_ties_keep_input_order(self):
        ranked = rank("λόγος", ["λόγοσ", "λόγοι", "λόγος"])
        assert ranked[0][0] == "λόγος"
        assert [candidate for candidate, _ in ranked[1:]] == ["λόγοσ", "λόγοι"]

    def test_empty(self):
        assert rank("λόγος", []) == []
        assert closest("λόγος", []) is None

    def test_closest(self):
        assert closest("λεγει", ["λέγω", "λέγει", "λέγειν"]) == "λέγει"

    def test_plausible_threshold(self):
        assert plausible("λόγος", ["λόγος", "ἄνθρωπος"], min_score=1.5) == [("λόγος", pytest.approx(2.0))]


class TestFuzzyMatcher:
    def test_explicit_threshold(self):
        matcher = FuzzyMatcher(min_score=1.9)
        assert matcher.closest("λογος", ["λόγος"]) is None
        assert matcher.closest("λόγος", ["λόγος"]) == ("λόγος", pytest.approx(2.0))

    def test_default_threshold_from_config(self):
        matcher = FuzzyMatcher()
        assert matcher.min_score == 0.0

    def test_never_raises_on_empty(self):
        assert FuzzyMatcher(min_score=0.0).rank("", []) == []
