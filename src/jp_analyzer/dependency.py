from __future__ import annotations
import logging
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple
from .tags import (
    NOUN, VERB, ADJECTIVE, ADVERB, PARTICLE, AUX_VERB, SYMBOL,
    CASE_RELATION, ADNOMINAL, ADVERBIAL, PREDICATE, GENERAL,
)
from .types import DependencyEdge, Morpheme

logger = logging.getLogger(__name__)

# source pos -> pos set accepted as attachment target, scanned left to right.
# empty set: attach straight to the sentence-final morpheme
TARGET_RULES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    NOUN: (PARTICLE, VERB, ADJECTIVE),
    VERB: (AUX_VERB, SYMBOL),
    ADJECTIVE: (NOUN, AUX_VERB),
    ADVERB: (VERB, ADJECTIVE),
    PARTICLE: (VERB, ADJECTIVE, NOUN),
    AUX_VERB: (),
})
DEFAULT_TARGETS: Tuple[str, ...] = (VERB, NOUN, ADJECTIVE)

# (from pos, to pos) -> label, first match wins
LABEL_RULES: Tuple[Tuple[str, str, str], ...] = (
    (NOUN, PARTICLE, CASE_RELATION),
    (ADJECTIVE, NOUN, ADNOMINAL),
    (ADVERB, VERB, ADVERBIAL),
    (PARTICLE, VERB, CASE_RELATION),
    (VERB, AUX_VERB, PREDICATE),
)


def find_target(morphemes: Sequence[Morpheme], index: int) -> int:
    """
    nearest following morpheme accepted by the rule for morphemes[index].pos,
    else the last index. caller guarantees index < len(morphemes) - 1
    """
    last = len(morphemes) - 1
    targets = TARGET_RULES.get(morphemes[index].pos, DEFAULT_TARGETS)
    if not targets:
        return last
    for j in range(index + 1, len(morphemes)):
        if morphemes[j].pos in targets:
            return j
    return last


def label_for(from_pos: str, to_pos: str) -> str:
    for src, dst, label in LABEL_RULES:
        if from_pos == src and to_pos == dst:
            return label
    return GENERAL


class DependencyResolver:
    """
    rule-table attachment: every non-final morpheme gets exactly one edge
    pointing right, so the result is acyclic and sinks at the last morpheme
    """

    def resolve(self, morphemes: Sequence[Morpheme]) -> List[DependencyEdge]:
        n = len(morphemes)
        edges: List[DependencyEdge] = []
        for i in range(n - 1):
            t = find_target(morphemes, i)
            edges.append(DependencyEdge(i, t, label_for(morphemes[i].pos, morphemes[t].pos)))
        logger.debug("resolved %d edges over %d morphemes", len(edges), n)
        return edges


def resolve(morphemes: Sequence[Morpheme]) -> List[DependencyEdge]:
    return DependencyResolver().resolve(morphemes)
