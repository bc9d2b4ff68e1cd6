from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyzerConfig:
    # who elements at or below this confidence are dropped
    who_min_confidence: float = 0.3
    # attach english POS / label renderings to CLI and API output
    include_pos_en: bool = True
