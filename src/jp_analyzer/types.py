from __future__ import annotations
import collections.abc
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Tuple
from .tags import CATEGORIES


@dataclass(frozen=True)
class Morpheme:
    surface: str
    pos: str
    pos_detail_1: str = ""
    pos_detail_2: str = ""
    pos_detail_3: str = ""
    conjugated_type: str = ""
    conjugated_form: str = ""
    basic_form: str = ""
    reading: str = ""
    pronunciation: str = ""

    def __post_init__(self) -> None:
        # unknown words carry no lemma or reading; fall back to the surface
        if not self.basic_form:
            object.__setattr__(self, "basic_form", self.surface)
        if not self.reading:
            object.__setattr__(self, "reading", self.surface)
        if not self.pronunciation:
            object.__setattr__(self, "pronunciation", self.reading)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Morpheme":
        # tokenizer dicts use surface_form
        surface = data.get("surface") or data.get("surface_form") or ""
        return cls(
            surface=surface,
            pos=data.get("pos") or "",
            pos_detail_1=data.get("pos_detail_1") or "",
            pos_detail_2=data.get("pos_detail_2") or "",
            pos_detail_3=data.get("pos_detail_3") or "",
            conjugated_type=data.get("conjugated_type") or "",
            conjugated_form=data.get("conjugated_form") or "",
            basic_form=data.get("basic_form") or "",
            reading=data.get("reading") or "",
            pronunciation=data.get("pronunciation") or "",
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "surface": self.surface,
            "pos": self.pos,
            "pos_detail_1": self.pos_detail_1,
            "pos_detail_2": self.pos_detail_2,
            "pos_detail_3": self.pos_detail_3,
            "conjugated_type": self.conjugated_type,
            "conjugated_form": self.conjugated_form,
            "basic_form": self.basic_form,
            "reading": self.reading,
            "pronunciation": self.pronunciation,
        }


@dataclass(frozen=True)
class DependencyEdge:
    from_index: int
    to_index: int
    label: str

    def to_dict(self) -> Dict[str, Any]:
        return {"from_index": self.from_index, "to_index": self.to_index, "label": self.label}


@dataclass(frozen=True)
class RoleElement:
    category: str
    text: str
    # positions into the morpheme sequence, never shared objects
    morpheme_indices: Tuple[int, ...]
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "text": self.text,
            "morpheme_indices": list(self.morpheme_indices),
            "confidence": self.confidence,
        }


@dataclass
class RoleResult(collections.abc.Mapping):
    who: List[RoleElement] = field(default_factory=list)
    what: List[RoleElement] = field(default_factory=list)
    when: List[RoleElement] = field(default_factory=list)
    where: List[RoleElement] = field(default_factory=list)
    why: List[RoleElement] = field(default_factory=list)
    how: List[RoleElement] = field(default_factory=list)

    def __getitem__(self, category: str) -> List[RoleElement]:
        if category not in CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)

    def __iter__(self) -> Iterator[str]:
        return iter(CATEGORIES)

    def __len__(self) -> int:
        return len(CATEGORIES)

    def categories(self) -> Tuple[str, ...]:
        return CATEGORIES

    def is_empty(self) -> bool:
        return not any(elems for _, elems in self.items())

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {c: [e.to_dict() for e in elems] for c, elems in self.items()}


@dataclass
class AnalysisResult:
    morphemes: List[Morpheme]
    edges: List[DependencyEdge]
    roles: RoleResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "morphemes": [m.to_dict() for m in self.morphemes],
            "edges": [e.to_dict() for e in self.edges],
            "roles": self.roles.to_dict(),
        }
