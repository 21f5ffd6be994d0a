"""
Tests for paradigm.schema - declarative paradigm shapes and the shared walk.
"""
import pytest

from core.errors import UnsupportedPartOfSpeech
from grammar.categories import (
    ADVERB,
    NOUN,
    VERB,
    Case,
    Gender,
    Mood,
    Number,
    PartOfSpeech,
    Person,
    Tense,
    Voice,
    WordClass,
)
from paradigm.schema import (
    SCHEMAS,
    Dimension,
    ParadigmSchema,
    expand_optional_ending,
    schema_for,
    walk,
)


def chooser(values, building=False):
    """Chooser picking from a {category: [values]} map, defaults otherwise."""

    def choose(dimension):
        if dimension.category in values:
            return values[dimension.category]
        default = dimension.fallback(building)
        if default is not None:
            return [default]
        return []

    return choose


class TestSchemas:
    """Registered schemas."""

    def test_every_word_class_registered(self):
        assert set(SCHEMAS) == set(WordClass)

    def test_invariant_classes(self):
        assert SCHEMAS[WordClass.ADVERB].invariant
        assert SCHEMAS[WordClass.PARTICLE].invariant
        assert not SCHEMAS[WordClass.NOUN].invariant

    def test_only_verbs_expand_optional_endings(self):
        assert SCHEMAS[WordClass.VERB].optional_endings
        assert not SCHEMAS[WordClass.NOUN].optional_endings

    def test_schema_for(self):
        assert schema_for(NOUN).key == "noun"
        assert schema_for(PartOfSpeech(WordClass.VERB)).key == "verb"

    def test_unsupported(self):
        with pytest.raises(UnsupportedPartOfSpeech):
            schema_for(VERB, {WordClass.NOUN: SCHEMAS[WordClass.NOUN]})

    def test_dimension_name(self):
        assert Dimension(Case).name == "case"

    def test_build_default_only_when_building(self):
        dimension = Dimension(Case, build_default=Case.NOMINATIVE)
        assert dimension.fallback(building=True) is Case.NOMINATIVE
        assert dimension.fallback() is None

    def test_default_applies_both_ways(self):
        dimension = Dimension(Number, default=Number.SINGULAR)
        assert dimension.fallback() is Number.SINGULAR
        assert dimension.fallback(building=True) is Number.SINGULAR


class TestWalk:
    """walk over the registered schemas."""

    def test_noun_path(self):
        paths = walk(schema_for(NOUN), chooser({
            Gender: [Gender.MASCULINE], Number: [Number.SINGULAR], Case: [Case.NOMINATIVE],
        }))
        assert paths == [("noun", "masculine", "singular", "nominative")]

    def test_finite_verb_path(self):
        paths = walk(schema_for(VERB), chooser({
            Tense: [Tense.PRESENT], Mood: [Mood.INDICATIVE], Voice: [Voice.ACTIVE],
            Number: [Number.SINGULAR], Person: [Person.FIRST],
        }))
        assert paths == [
            ("verb", "present", "thematic", "contracted", "indicative", "active", "singular", "first"),
        ]

    def test_infinitive_branch(self):
        paths = walk(schema_for(VERB), chooser({
            Tense: [Tense.AORIST], Mood: [Mood.INFINITIVE], Voice: [Voice.ACTIVE],
            Number: [Number.SINGULAR], Person: [Person.FIRST],
        }))
        assert paths == [("verb", "aorist", "thematic", "contracted", "infinitive", "active")]

    def test_participle_branch_build_defaults(self):
        paths = walk(schema_for(VERB), chooser({
            Tense: [Tense.PRESENT], Mood: [Mood.PARTICIPLE], Voice: [Voice.ACTIVE],
            Gender: [Gender.NEUTER],
        }, building=True))
        assert paths == [
            ("verb", "present", "thematic", "contracted", "participle", "active", "neuter", "singular", "nominative"),
        ]

    def test_fan_out(self):
        paths = walk(schema_for(VERB), chooser({
            Tense: [Tense.PRESENT], Mood: [Mood.INFINITIVE], Voice: [Voice.MIDDLE, Voice.PASSIVE],
        }))
        assert [path[-1] for path in paths] == ["middle", "passive"]

    def test_empty_choice_skips_level(self):
        paths = walk(schema_for(NOUN), chooser({Case: [Case.DATIVE]}))
        assert paths == [("noun", "dative")]

    def test_invariant_schema(self):
        assert walk(schema_for(ADVERB), chooser({})) == [("adverb",)]

    def test_choose_may_abort(self):
        def choose(dimension):
            raise LookupError(dimension.name)

        with pytest.raises(LookupError):
            walk(ParadigmSchema("x", (Dimension(Case),)), choose)


class TestOptionalEnding:
    @pytest.mark.parametrize("form,expected", [
        ("λέγει(ν)", ["λέγει", "λέγειν"]),
        ("λέγουσι(ν)", ["λέγουσι", "λέγουσιν"]),
        ("λέγω", ["λέγω"]),
        ("λέγ(ει", ["λέγ(ει"]),
    ])
    def test_expand(self, form, expected):
        assert expand_optional_ending(form) == expected
