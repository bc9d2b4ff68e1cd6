from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence
from .config import AnalyzerConfig
from .gazetteers import (
    SUBJECT_MARKERS, OBJECT_MARKERS, LOCATION_MARKERS, METHOD_MARKERS, REASON_MARKERS,
    TIME_ADVERBS, MANNER_ADVERBS,
    has_next_surface, matches_exactly, is_person_noun, is_time_noun,
)
from .tags import (
    NOUN, VERB, ADVERB, PARTICLE, PRONOUN, PROPER_NOUN, REGION,
    WHO, WHAT, WHEN, WHERE, WHY, HOW,
)
from .types import DependencyEdge, Morpheme, RoleElement, RoleResult

logger = logging.getLogger(__name__)


def _elem(category: str, text: str, index: int, confidence: float) -> RoleElement:
    return RoleElement(category, text, (index,), confidence)


@dataclass
class RoleExtractor:
    """
    5W1H extraction. each pass is a single left-to-right scan and does not
    look at the other passes; edges are accepted but no rule reads them yet
    """
    cfg: AnalyzerConfig = AnalyzerConfig()

    def extract(
        self,
        morphemes: Sequence[Morpheme],
        edges: Optional[Sequence[DependencyEdge]] = None,
    ) -> RoleResult:
        res = RoleResult(
            who=self.extract_who(morphemes),
            what=self.extract_what(morphemes),
            when=self.extract_when(morphemes),
            where=self.extract_where(morphemes),
            why=self.extract_why(morphemes),
            how=self.extract_how(morphemes),
        )
        logger.debug(
            "extracted roles: %s",
            ", ".join(f"{c}={len(elems)}" for c, elems in res.items()),
        )
        return res

    def extract_who(self, morphemes: Sequence[Morpheme]) -> List[RoleElement]:
        out: List[RoleElement] = []
        for i, m in enumerate(morphemes):
            person_like = m.pos == NOUN and (
                m.pos_detail_1 in (PROPER_NOUN, PRONOUN) or is_person_noun(m.surface)
            )
            if not (person_like or m.pos == PRONOUN):
                continue
            conf = 0.8 if has_next_surface(morphemes, i, SUBJECT_MARKERS) else 0.4
            if conf > self.cfg.who_min_confidence:
                out.append(_elem(WHO, m.surface, i, conf))
        return out

    def extract_what(self, morphemes: Sequence[Morpheme]) -> List[RoleElement]:
        out: List[RoleElement] = []
        for i, m in enumerate(morphemes):
            # action
            if m.pos == VERB:
                out.append(_elem(WHAT, m.basic_form, i, 0.7))
            # object
            if m.pos == NOUN and has_next_surface(morphemes, i, OBJECT_MARKERS):
                out.append(_elem(WHAT, m.surface, i, 0.8))
        return out

    def extract_when(self, morphemes: Sequence[Morpheme]) -> List[RoleElement]:
        out: List[RoleElement] = []
        for i, m in enumerate(morphemes):
            if m.pos == NOUN and is_time_noun(m.surface):
                out.append(_elem(WHEN, m.surface, i, 0.9))
            if m.pos == ADVERB and matches_exactly(m.surface, TIME_ADVERBS):
                out.append(_elem(WHEN, m.surface, i, 0.8))
        return out

    def extract_where(self, morphemes: Sequence[Morpheme]) -> List[RoleElement]:
        out: List[RoleElement] = []
        for i, m in enumerate(morphemes):
            if m.pos != NOUN:
                continue
            if has_next_surface(morphemes, i, LOCATION_MARKERS):
                out.append(_elem(WHERE, m.surface, i, 0.8))
            # place names; may duplicate the marker hit above
            if m.pos_detail_1 == PROPER_NOUN and m.pos_detail_2 == REGION:
                out.append(_elem(WHERE, m.surface, i, 0.9))
        return out

    def extract_why(self, morphemes: Sequence[Morpheme]) -> List[RoleElement]:
        out: List[RoleElement] = []
        for i, m in enumerate(morphemes):
            if m.pos != PARTICLE or not matches_exactly(m.surface, REASON_MARKERS):
                continue
            # only the single preceding token is cited as the reason
            if i == 0:
                continue
            out.append(RoleElement(WHY, morphemes[i - 1].surface, (i - 1, i), 0.7))
        return out

    def extract_how(self, morphemes: Sequence[Morpheme]) -> List[RoleElement]:
        out: List[RoleElement] = []
        for i, m in enumerate(morphemes):
            if m.pos == ADVERB and matches_exactly(m.surface, MANNER_ADVERBS):
                out.append(_elem(HOW, m.surface, i, 0.7))
            if m.pos == NOUN and has_next_surface(morphemes, i, METHOD_MARKERS):
                out.append(_elem(HOW, m.surface, i, 0.6))
        return out


def extract(
    morphemes: Sequence[Morpheme],
    edges: Optional[Sequence[DependencyEdge]] = None,
    cfg: AnalyzerConfig = AnalyzerConfig(),
) -> RoleResult:
    return RoleExtractor(cfg).extract(morphemes, edges)
