"""
LEXIKON - Morphology Code Decoder

Decodes the terse morphological codes used by interlinear reference sites
into a Declension. A code arrives as up to three components:

    ["noun", "nom-si-mas"]
    ["verb", "pres-act-ind", "3rd-p si"]
    ["verb", "aor-act-par", "nom-si-mas"]
    ["1st pers pron", "nom-si"]

Each component may carry a "+kai" crasis suffix, which is ignored.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from core.errors import CodeDecodeError
from grammar.categories import (
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
from grammar.declension import Declension

PARTS_OF_SPEECH: Dict[str, PartOfSpeech] = {
    "noun": PartOfSpeech(WordClass.NOUN, NounKind.COMMON),
    "noun (name)": PartOfSpeech(WordClass.NOUN, NounKind.PROPER),
    "verb": PartOfSpeech(WordClass.VERB),
    "participle": PartOfSpeech(WordClass.VERB),
    "def art": PartOfSpeech(WordClass.ARTICLE, ArticleKind.DEFINITE),
    "conjunction": PartOfSpeech(WordClass.PARTICLE),
    "preposition": PartOfSpeech(WordClass.PREPOSITION),
    "rel pron": PartOfSpeech(WordClass.PRONOUN, PronounKind.RELATIVE),
    "dem pron": PartOfSpeech(WordClass.PRONOUN, PronounKind.DEMONSTRATIVE),
    "adjective": PartOfSpeech(WordClass.ADJECTIVE),
    "adjective (name)": PartOfSpeech(WordClass.ADJECTIVE),
    "adverb": PartOfSpeech(WordClass.ADVERB),
}

# First matching code wins, so order matters where codes overlap ("imp")
MOOD_CODES: Tuple[Tuple[str, Mood], ...] = (
    ("ind", Mood.INDICATIVE),
    ("sub", Mood.SUBJUNCTIVE),
    ("imp", Mood.IMPERATIVE),
    ("opt", Mood.OPTATIVE),
    ("inf", Mood.INFINITIVE),
    ("par", Mood.PARTICIPLE),
)

TENSE_CODES: Tuple[Tuple[str, Tense], ...] = (
    ("pres", Tense.PRESENT),
    ("imp", Tense.IMPERFECT),
    ("fut", Tense.FUTURE),
    ("aor", Tense.AORIST),
    ("2aor", Tense.AORIST_2ND),
    ("perf", Tense.PERFECT),
    ("2perf", Tense.PERFECT_2ND),
    ("plup", Tense.PLUPERFECT),
)

VOICE_CODES: Tuple[Tuple[Tuple[str, ...], Voice], ...] = (
    (("act",), Voice.ACTIVE),
    (("mid", "mde", "mi/pde", "mi/pas"), Voice.MIDDLE),
    (("pas", "pde"), Voice.PASSIVE),
)

CASE_CODES: Tuple[Tuple[str, Case], ...] = (
    ("nom", Case.NOMINATIVE),
    ("gen", Case.GENITIVE),
    ("dat", Case.DATIVE),
    ("acc", Case.ACCUSATIVE),
    ("voc", Case.VOCATIVE),
)

NUMBER_CODES: Tuple[Tuple[str, Number], ...] = (
    ("si", Number.SINGULAR),
    ("pl", Number.PLURAL),
)

PERSON_CODES: Tuple[Tuple[str, Person], ...] = (
    ("1st", Person.FIRST),
    ("2nd", Person.SECOND),
    ("3rd", Person.THIRD),
)

GENDER_SUFFIXES: Tuple[Tuple[str, Gender], ...] = (
    ("-mas", Gender.MASCULINE),
    ("-fem", Gender.FEMININE),
    ("-neu", Gender.NEUTER),
)

# Word classes that never inflect for these dimensions
_UNINFLECTED = {WordClass.PARTICLE, WordClass.PREPOSITION, WordClass.ADVERB}
_NO_PERSON = _UNINFLECTED | {WordClass.NOUN, WordClass.ADJECTIVE, WordClass.INTERJECTION}

QUANTIFIER_FORMS = frozenset({"πας", "παση", "πασαι"})

_NUMBER_WORD_PARTS = (
    "one", "two", "three", "four", "five", "six", "seven", "height", "nine", "ten",
    "eleven", "twelve", "thir", "fif", "twen", "for", "hundred", "thousand",
    "mi", "bi", "tri", "quadr", "teen", "ty", "illion",
)


def _clean(component: str) -> str:
    component = component.lower()
    cut = component.find("+kai")
    if cut >= 0:
        component = component[:cut]
    return component.strip()


def _pick(codes, parts: Sequence[str], what: str, raw: Sequence[str]):
    for code, value in codes:
        if code in parts:
            return value
    raise CodeDecodeError(f"cannot find {what} in {list(raw)}", component=what)


def _part_of_speech(component: str, raw: Sequence[str]) -> PartOfSpeech:
    if component in PARTS_OF_SPEECH:
        return PARTS_OF_SPEECH[component]
    if component.endswith("pers pron"):
        return PartOfSpeech(WordClass.PRONOUN, PronounKind.PERSONAL)
    raise CodeDecodeError(f"unknown part of speech {component!r} in {list(raw)}", component="part_of_speech")


def decode(components: Sequence[str]) -> Declension:
    """
    Decode morphology code components into a Declension.

    Raises:
        CodeDecodeError: a component the part of speech requires is missing
            or unrecognized
    """
    comps = [_clean(c) for c in components] + ["", "", ""]
    head, first, second = comps[0], comps[1], comps[2]
    pos = _part_of_speech(head, components)
    word_class = pos.word_class

    if first == "indeclinable":
        return Declension(part_of_speech=pos, declension_type=DeclensionType.INDECLINABLE)

    first_parts = first.split("-")
    second_dash = second.split("-")
    second_space = second.split(" ")

    mood: Optional[Mood] = None
    if word_class is WordClass.VERB:
        mood = _pick(MOOD_CODES, first_parts, "mood", components)
    non_finite = mood in (Mood.INFINITIVE, Mood.PARTICIPLE)

    person: Optional[Person] = None
    if word_class not in _NO_PERSON and not (word_class is WordClass.VERB and non_finite):
        if word_class is WordClass.ARTICLE and pos.sub is ArticleKind.DEFINITE:
            pass
        elif word_class is WordClass.PRONOUN and pos.sub in (PronounKind.RELATIVE, PronounKind.DEMONSTRATIVE):
            pass
        else:
            source = {WordClass.VERB: second, WordClass.PRONOUN: head}.get(word_class, first)
            person = _pick_contained(PERSON_CODES, source, "person", components)

    number: Optional[Number] = None
    if word_class not in _UNINFLECTED and mood is not Mood.INFINITIVE:
        if word_class is WordClass.VERB:
            parts = second_dash if mood is Mood.PARTICIPLE else second_space
        else:
            parts = first_parts
        number = _pick(NUMBER_CODES, parts, "number", components)

    gender: Optional[Gender] = None
    gender_source = second if mood is Mood.PARTICIPLE else first
    if word_class is WordClass.PRONOUN and pos.sub is PronounKind.PERSONAL:
        if person is Person.THIRD and number is Number.SINGULAR:
            gender = _gender(gender_source, components)
    elif word_class in (WordClass.NOUN, WordClass.PRONOUN, WordClass.ARTICLE, WordClass.ADJECTIVE):
        gender = _gender(gender_source, components)
    elif mood is Mood.PARTICIPLE:
        gender = _gender(gender_source, components)

    case: Optional[Case] = None
    if word_class is WordClass.VERB:
        if mood is Mood.PARTICIPLE:
            case = _pick(CASE_CODES, second_dash, "case", components)
    elif word_class not in _UNINFLECTED:
        case = _pick(CASE_CODES, first_parts, "case", components)

    voice: Optional[Voice] = None
    tense: Optional[Tense] = None
    if word_class is WordClass.VERB:
        voice = _voice(first_parts, components)
        tense = _pick(TENSE_CODES, first_parts, "tense", components)

    return Declension(
        part_of_speech=pos,
        number=number,
        case=case,
        gender=gender,
        mood=mood,
        tense=tense,
        voice=voice,
        person=person,
    )


def _pick_contained(codes, text: str, what: str, raw: Sequence[str]):
    for code, value in codes:
        if code in text:
            return value
    raise CodeDecodeError(f"cannot find {what} in {list(raw)}", component=what)


def _gender(component: str, raw: Sequence[str]) -> Gender:
    for suffix, gender in GENDER_SUFFIXES:
        if component.endswith(suffix):
            return gender
    raise CodeDecodeError(f"cannot find gender in {list(raw)}", component="gender")


def _voice(parts: List[str], raw: Sequence[str]) -> Voice:
    for codes, voice in VOICE_CODES:
        if any(code in parts for code in codes):
            return voice
    raise CodeDecodeError(f"cannot find voice in {list(raw)}", component="voice")


def is_cardinal(gloss: str) -> bool:
    """True if an English gloss is spelled entirely from number-word pieces."""
    if gloss in ("teen", "for", "bi", "tri"):
        return False
    remainder = gloss
    for part in _NUMBER_WORD_PARTS:
        remainder = remainder.replace(part, "")
    return remainder == ""


def is_ordinal(gloss: str) -> bool:
    for suffix in ("st", "nd", "rd", "th"):
        if gloss.endswith(suffix):
            return is_cardinal(gloss.replace(suffix, ""))
    return False


def fix_declension(greek: str, english: str, declension: Declension) -> Declension:
    """
    Correct part-of-speech labels the code set gets wrong.

    Forms of πας are quantifiers, and adjectives glossed as a cardinal or
    ordinal number are numerals.
    """
    if greek in QUANTIFIER_FORMS:
        declension = declension.replace(part_of_speech=PartOfSpeech(WordClass.QUANTIFIER))

    if declension.part_of_speech.word_class is WordClass.ADJECTIVE:
        if is_cardinal(english):
            declension = declension.replace(
                part_of_speech=PartOfSpeech(WordClass.NUMERAL, NumeralKind.CARDINAL)
            )
        elif is_ordinal(english):
            declension = declension.replace(
                part_of_speech=PartOfSpeech(WordClass.NUMERAL, NumeralKind.ORDINAL)
            )

    return declension
