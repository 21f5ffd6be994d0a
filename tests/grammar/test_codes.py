"""
Tests for grammar.codes - morphology code decoding.
"""
import pytest

from core.errors import CodeDecodeError
from grammar.categories import (
    ADJECTIVE,
    ArticleKind,
    Case,
    DeclensionType,
    Gender,
    Mood,
    NounKind,
    Number,
    NumeralKind,
    PartOfSpeech,
    Person,
    PronounKind,
    Tense,
    Voice,
    WordClass,
)
from grammar.codes import decode, fix_declension, is_cardinal, is_ordinal
from grammar.declension import Declension


class TestNominalCodes:
    """Nouns, articles, pronouns and adjectives."""

    def test_noun(self):
        declension = decode(["noun", "nom-si-mas"])
        assert declension.part_of_speech == PartOfSpeech(WordClass.NOUN, NounKind.COMMON)
        assert declension.case is Case.NOMINATIVE
        assert declension.number is Number.SINGULAR
        assert declension.gender is Gender.MASCULINE
        assert declension.person is None
        assert declension.mood is None

    def test_proper_noun(self):
        declension = decode(["noun (name)", "gen-si-fem"])
        assert declension.part_of_speech.sub is NounKind.PROPER
        assert declension.case is Case.GENITIVE

    def test_definite_article_has_no_person(self):
        declension = decode(["def art", "gen-pl-fem"])
        assert declension.part_of_speech.sub is ArticleKind.DEFINITE
        assert declension.person is None
        assert declension.number is Number.PLURAL
        assert declension.gender is Gender.FEMININE

    def test_personal_pronoun_person_from_part_of_speech(self):
        declension = decode(["1st pers pron", "nom-si"])
        assert declension.part_of_speech.sub is PronounKind.PERSONAL
        assert declension.person is Person.FIRST
        assert declension.gender is None

    def test_third_person_singular_pronoun_has_gender(self):
        declension = decode(["3rd pers pron", "acc-si-fem"])
        assert declension.person is Person.THIRD
        assert declension.gender is Gender.FEMININE
        assert declension.case is Case.ACCUSATIVE

    def test_relative_pronoun(self):
        declension = decode(["rel pron", "dat-pl-neu"])
        assert declension.person is None
        assert declension.gender is Gender.NEUTER

    def test_crasis_suffix_ignored(self):
        assert decode(["noun+kai", "nom-si-mas+kai"]) == decode(["noun", "nom-si-mas"])

    def test_indeclinable(self):
        declension = decode(["noun", "indeclinable"])
        assert declension.declension_type is DeclensionType.INDECLINABLE
        assert declension.case is None


class TestVerbalCodes:
    """Finite and non-finite verbs."""

    def test_finite(self):
        declension = decode(["verb", "pres-act-ind", "3rd-p si"])
        assert declension.tense is Tense.PRESENT
        assert declension.voice is Voice.ACTIVE
        assert declension.mood is Mood.INDICATIVE
        assert declension.person is Person.THIRD
        assert declension.number is Number.SINGULAR
        assert declension.case is None
        assert declension.gender is None

    def test_imperfect_indicative(self):
        declension = decode(["verb", "imp-mid-ind", "1st-p pl"])
        assert declension.tense is Tense.IMPERFECT
        assert declension.mood is Mood.INDICATIVE
        assert declension.voice is Voice.MIDDLE
        assert declension.number is Number.PLURAL

    def test_present_imperative(self):
        declension = decode(["verb", "pres-act-imp", "2nd-p si"])
        assert declension.mood is Mood.IMPERATIVE
        assert declension.tense is Tense.PRESENT

    def test_participle(self):
        declension = decode(["verb", "aor-act-par", "nom-si-mas"])
        assert declension.mood is Mood.PARTICIPLE
        assert declension.tense is Tense.AORIST
        assert declension.case is Case.NOMINATIVE
        assert declension.gender is Gender.MASCULINE
        assert declension.number is Number.SINGULAR
        assert declension.person is None

    def test_infinitive(self):
        declension = decode(["verb", "pres-pas-inf"])
        assert declension.mood is Mood.INFINITIVE
        assert declension.voice is Voice.PASSIVE
        assert declension.number is None
        assert declension.person is None


class TestUninflectedCodes:
    def test_conjunction_is_a_particle(self):
        declension = decode(["conjunction"])
        assert declension.part_of_speech.word_class is WordClass.PARTICLE
        assert declension.tags() == frozenset()

    def test_adverb(self):
        assert decode(["adverb"]).part_of_speech.word_class is WordClass.ADVERB


class TestDecodeErrors:
    def test_unknown_part_of_speech(self):
        with pytest.raises(CodeDecodeError) as exc_info:
            decode(["gerund", "nom-si"])
        assert exc_info.value.component == "part_of_speech"

    def test_missing_number(self):
        with pytest.raises(CodeDecodeError) as exc_info:
            decode(["noun", "nom-mas"])
        assert exc_info.value.component == "number"

    def test_missing_mood(self):
        with pytest.raises(CodeDecodeError) as exc_info:
            decode(["verb", "pres-act", "3rd-p si"])
        assert exc_info.value.component == "mood"


class TestNumberWords:
    @pytest.mark.parametrize("gloss", ["three", "seven", "thirteen", "hundred"])
    def test_cardinal(self, gloss):
        assert is_cardinal(gloss)

    @pytest.mark.parametrize("gloss", ["good", "teen", "for"])
    def test_not_cardinal(self, gloss):
        assert not is_cardinal(gloss)

    @pytest.mark.parametrize("gloss", ["seventh", "fifth"])
    def test_ordinal(self, gloss):
        assert is_ordinal(gloss)

    def test_not_ordinal(self):
        assert not is_ordinal("north")


class TestFixDeclension:
    def test_quantifier(self):
        declension = Declension(ADJECTIVE, case=Case.NOMINATIVE)
        fixed = fix_declension("πας", "all", declension)
        assert fixed.part_of_speech.word_class is WordClass.QUANTIFIER
        assert fixed.case is Case.NOMINATIVE

    def test_cardinal_numeral(self):
        fixed = fix_declension("ἑπτά", "seven", Declension(ADJECTIVE))
        assert fixed.part_of_speech == PartOfSpeech(WordClass.NUMERAL, NumeralKind.CARDINAL)

    def test_ordinal_numeral(self):
        fixed = fix_declension("ἕβδομος", "seventh", Declension(ADJECTIVE))
        assert fixed.part_of_speech == PartOfSpeech(WordClass.NUMERAL, NumeralKind.ORDINAL)

    def test_ordinary_adjective_unchanged(self):
        declension = Declension(ADJECTIVE, gender=Gender.NEUTER)
        assert fix_declension("καλόν", "good", declension) == declension
