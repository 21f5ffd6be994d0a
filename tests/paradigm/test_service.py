"""
Tests for paradigm.service - snapping observed forms to attested ones.
"""
import pytest

from core.errors import FormNotAttested, MissingRequiredDimension
from grammar.categories import (
    NOUN,
    PARTICLE,
    Case,
    DeclensionType,
    Gender,
    Number,
)
from grammar.declension import Declension
from paradigm.fuzzy import FuzzyMatcher
from paradigm.lexicon import LexiconEntry
from paradigm.service import FormCorrector, correct_form
from paradigm.tree import ParadigmTree, SurfaceForm

GEN_SG = Declension(NOUN, gender=Gender.MASCULINE, number=Number.SINGULAR, case=Case.GENITIVE)


@pytest.fixture
def entry():
    tree = ParadigmTree()
    tree.add(("noun", "masculine", "singular", "genitive"), [SurfaceForm("λόγου")])
    tree.add(("noun", "masculine", "plural", "genitive"), [SurfaceForm("λόγων")])
    return LexiconEntry("λόγος", [tree])


@pytest.fixture
def corrector():
    return FormCorrector(FuzzyMatcher(min_score=0.0))


class TestFormCorrector:
    def test_snaps_to_attested_form(self, corrector, entry):
        correction = corrector.correct(entry, GEN_SG, "λογου")
        assert correction.corrected == "λόγου"
        assert correction.changed
        assert correction.score == pytest.approx(1.8)
        assert correction.error is None

    def test_exact_form_unchanged(self, corrector, entry):
        correction = corrector.correct(entry, GEN_SG, "λόγου")
        assert correction.corrected == "λόγου"
        assert not correction.changed

    def test_indeclinable_uses_lemma(self, corrector, entry):
        declension = Declension(NOUN, declension_type=DeclensionType.INDECLINABLE)
        correction = corrector.correct(entry, declension, "Ἀβραάμ")
        assert correction.corrected == "λόγος"
        assert correction.score is None

    def test_particle_uses_lemma(self, corrector):
        correction = corrector.correct(LexiconEntry("δέ"), Declension(PARTICLE), "δ᾽")
        assert correction.corrected == "δέ"

    def test_entry_without_paradigms_uses_lemma(self, corrector):
        correction = corrector.correct(LexiconEntry("λόγος"), GEN_SG, "λογου")
        assert correction.corrected == "λόγος"

    def test_unattested_form_reported(self, corrector, entry):
        correction = corrector.correct(entry, GEN_SG.replace(case=Case.DATIVE), "λογω")
        assert correction.corrected == "λογω"
        assert not correction.changed
        assert isinstance(correction.error, FormNotAttested)

    def test_incomplete_analysis_reported(self, corrector, entry):
        correction = corrector.correct(entry, GEN_SG.replace(case=None), "λογου")
        assert isinstance(correction.error, MissingRequiredDimension)

    def test_threshold_filters_everything(self, entry):
        correction = FormCorrector(FuzzyMatcher(min_score=1.99)).correct(entry, GEN_SG, "λογου")
        assert correction.corrected == "λογου"
        assert correction.candidates == []

    def test_to_dict(self, corrector, entry):
        data = corrector.correct(entry, GEN_SG, "λογου").to_dict()
        assert data["corrected"] == "λόγου"
        assert data["changed"] is True
        assert data["candidates"][0][0] == "λόγου"
        assert data["error"] is None

    def test_module_shortcut(self, entry):
        assert correct_form(entry, GEN_SG, "λόγου").corrected == "λόγου"
