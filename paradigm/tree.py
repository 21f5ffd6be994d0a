"""
LEXIKON - Paradigm Tree

Nested mapping from dimension values to surface forms for one lemma and
one dialect set. Branches are created only when a form lands in them, so
an absent branch means "not attested".

Document shape::

    {
        "dialects": ["attic"],
        "declension_type": "second",
        "branches": {
            "noun": {"masculine": {"singular": {"nominative": [
                {"contracted": "λόγος"}
            ]}}}
        }
    }
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

from core.types import InflectionPath, ParadigmTreeDict, SurfaceFormDict
from grammar.categories import DeclensionType, Dialect


@dataclass(frozen=True)
class SurfaceForm:
    """An attested form, optionally with its uncontracted spellings."""

    contracted: Optional[str] = None
    uncontracted: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if self.uncontracted is not None and not isinstance(self.uncontracted, tuple):
            object.__setattr__(self, "uncontracted", tuple(self.uncontracted))

    @property
    def spellings(self) -> List[str]:
        """Every spelling of this form, contracted first."""
        found = [self.contracted] if self.contracted else []
        found.extend(self.uncontracted or ())
        return found

    def to_dict(self) -> SurfaceFormDict:
        data: SurfaceFormDict = {"contracted": self.contracted}
        if self.uncontracted is not None:
            data["uncontracted"] = list(self.uncontracted)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SurfaceForm":
        uncontracted = data.get("uncontracted")
        return cls(
            contracted=data.get("contracted"),
            uncontracted=tuple(uncontracted) if uncontracted is not None else None,
        )


@dataclass
class ParadigmTree:
    """Every attested form of one lemma in one dialect set."""

    dialects: FrozenSet[Dialect] = frozenset()
    declension_type: Optional[DeclensionType] = None
    branches: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.dialects = frozenset(self.dialects)

    def is_empty(self) -> bool:
        return not self.branches

    def leaf(self, path: Sequence[str]) -> Optional[List[SurfaceForm]]:
        """Forms at ``path``, or None when the branch was never populated."""
        node: Any = self.branches
        for key in path:
            if not isinstance(node, dict) or key not in node:
                return None
            node = node[key]
        return node if isinstance(node, list) else None

    def get_or_create(self, path: Sequence[str]) -> List[SurfaceForm]:
        """Leaf list at ``path``, creating intermediate nodes as needed."""
        if not path:
            raise ValueError("empty paradigm path")
        node = self.branches
        for key in path[:-1]:
            child = node.setdefault(key, {})
            if not isinstance(child, dict):
                raise ValueError(f"{'.'.join(path)} passes through a leaf at {key}")
            node = child
        leaf = node.setdefault(path[-1], [])
        if not isinstance(leaf, list):
            raise ValueError(f"{'.'.join(path)} ends at an inner node")
        return leaf

    def add(self, path: Sequence[str], forms: Iterable[SurfaceForm]) -> int:
        """Append forms not already present at ``path``. Returns how many were added."""
        forms = list(forms)
        if not forms:
            return 0
        leaf = self.get_or_create(path)
        added = 0
        for form in forms:
            if form not in leaf:
                leaf.append(form)
                added += 1
        return added

    def iter_leaves(self) -> Iterator[Tuple[InflectionPath, List[SurfaceForm]]]:
        """Depth-first (path, forms) pairs in insertion order."""
        def visit(prefix: InflectionPath, node: Dict[str, Any]):
            for key, child in node.items():
                path = prefix + (key,)
                if isinstance(child, list):
                    yield path, child
                else:
                    yield from visit(path, child)

        return visit((), self.branches)

    def merge(self, other: "ParadigmTree") -> "ParadigmTree":
        """Fold ``other``'s forms into this tree in place."""
        for path, forms in other.iter_leaves():
            self.add(path, forms)
        if self.declension_type is None:
            self.declension_type = other.declension_type
        return self

    def to_dict(self) -> ParadigmTreeDict:
        return {
            "dialects": sorted(dialect.value for dialect in self.dialects),
            "declension_type": self.declension_type.value if self.declension_type else None,
            "branches": _branches_to_dict(self.branches),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParadigmTree":
        declension_type = data.get("declension_type")
        return cls(
            dialects=frozenset(Dialect(d) for d in data.get("dialects", [])),
            declension_type=DeclensionType(declension_type) if declension_type else None,
            branches=_branches_from_dict(data.get("branches", {})),
        )


def _branches_to_dict(node: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: [form.to_dict() for form in child] if isinstance(child, list) else _branches_to_dict(child)
        for key, child in node.items()
    }


def _branches_from_dict(node: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: [SurfaceForm.from_dict(form) for form in child] if isinstance(child, list) else _branches_from_dict(child)
        for key, child in node.items()
    }
