from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence
from .config import AnalyzerConfig
from .dependency import DependencyResolver
from .roles import RoleExtractor
from .types import AnalysisResult, Morpheme

logger = logging.getLogger(__name__)


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> Sequence[Morpheme]: ...


class TokenizerNotReadyError(RuntimeError):
    pass


@dataclass
class SentenceAnalyzer:
    tokenizer: Optional[Tokenizer] = None
    cfg: AnalyzerConfig = AnalyzerConfig()
    resolver: DependencyResolver = field(default_factory=DependencyResolver)

    def __post_init__(self) -> None:
        self.extractor = RoleExtractor(self.cfg)

    def is_ready(self) -> bool:
        if self.tokenizer is None:
            return False
        # tokenizers without a readiness hook are assumed loaded
        check = getattr(self.tokenizer, "is_ready", None)
        return bool(check()) if callable(check) else True

    def analyze(self, morphemes: Sequence[Morpheme]) -> AnalysisResult:
        morphs = list(morphemes)
        edges = self.resolver.resolve(morphs)
        roles = self.extractor.extract(morphs, edges)
        return AnalysisResult(morphemes=morphs, edges=edges, roles=roles)

    def analyze_text(self, text: str) -> AnalysisResult:
        if not self.is_ready():
            raise TokenizerNotReadyError("Tokenizer not initialized; cannot analyze raw text.")
        morphs = self.tokenizer.tokenize(text)  # type: ignore[union-attr]
        logger.debug("tokenized %d chars into %d morphemes", len(text), len(morphs))
        return self.analyze(morphs)
