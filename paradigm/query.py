"""
LEXIKON - Store Query Construction

Derives document-store paths and filters from a Declension. The dotted
key is produced by the same schema walk the resolver uses, so a stored
``ParadigmTree.to_dict()`` and a query always agree on the path.

    inflection_key(Declension(NOUN, gender=MASCULINE, number=SINGULAR, case=NOMINATIVE))
    -> "noun.masculine.singular.nominative"
"""
from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional

from grammar.categories import WordClass
from grammar.declension import Declension
from paradigm.resolver import resolve_path
from paradigm.schema import SCHEMAS, ParadigmSchema

# Field holding ParadigmTree.to_dict() documents in a LexiconEntry document
INFLECTIONS_FIELD = "inflections"
BRANCHES_FIELD = "branches"


def inflection_key(
    declension: Declension,
    schemas: Mapping[WordClass, ParadigmSchema] = SCHEMAS,
) -> str:
    """
    Dotted branch path for ``declension``.

    Raises:
        MissingRequiredDimension: a required slot is unset
        UnsupportedPartOfSpeech: no schema for the part of speech
    """
    return ".".join(resolve_path(declension, schemas))


def lexicon_filter(
    lemma: Optional[str] = None,
    declension: Optional[Declension] = None,
    word: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Document-store filter for lexicon entries.

    Args:
        lemma: Case-insensitive lemma match
        declension: Restrict to entries attesting this branch
        word: With ``declension``, the attested form must match this text

    Raises:
        ValueError: ``word`` without ``declension``
    """
    query: Dict[str, Any] = {}

    if lemma:
        query["lemma"] = {"$regex": f"^{re.escape(lemma)}$", "$options": "i"}

    if declension is not None:
        field = f"{BRANCHES_FIELD}.{inflection_key(declension)}.contracted"
        if word:
            condition: Dict[str, Any] = {"$regex": f"^{re.escape(word)}$", "$options": "i"}
        else:
            condition = {"$exists": True}
        query[INFLECTIONS_FIELD] = {"$elemMatch": {field: condition}}
    elif word:
        raise ValueError("a word filter needs a declension to locate the form")

    return query
