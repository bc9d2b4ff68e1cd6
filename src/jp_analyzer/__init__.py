from .types import Morpheme, DependencyEdge, RoleElement, RoleResult, AnalysisResult
from .dependency import DependencyResolver, resolve
from .roles import RoleExtractor, extract
from .analyzer import SentenceAnalyzer, TokenizerNotReadyError

__all__ = [
    "Morpheme",
    "DependencyEdge",
    "RoleElement",
    "RoleResult",
    "AnalysisResult",
    "DependencyResolver",
    "resolve",
    "RoleExtractor",
    "extract",
    "SentenceAnalyzer",
    "TokenizerNotReadyError",
]
