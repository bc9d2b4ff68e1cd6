from __future__ import annotations
import logging
from typing import Dict, List, Optional
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from .analyzer import SentenceAnalyzer, Tokenizer, TokenizerNotReadyError
from .config import AnalyzerConfig
from .mecab import MecabFormatError, parse_mecab
from .pos_en import label_ja, pos_string, translate_pos, translate_pos_components
from .types import AnalysisResult, Morpheme

logger = logging.getLogger(__name__)


class MorphemeIn(BaseModel):
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


class MorphemeOut(MorphemeIn):
    index: int
    pos_en: str = ""
    pos_en_components: List[str] = []


class EdgeOut(BaseModel):
    from_index: int
    to_index: int
    label: str
    label_ja: str


class RoleElementOut(BaseModel):
    category: str
    text: str
    morpheme_indices: List[int]
    confidence: float


class AnalyzeRequest(BaseModel):
    morphemes: Optional[List[MorphemeIn]] = None
    # raw mecab output, used when morphemes is not given
    mecab: Optional[str] = None
    include_pos_en: bool = True
    who_min_confidence: float = AnalyzerConfig.who_min_confidence


class AnalyzeTextRequest(BaseModel):
    text: str
    include_pos_en: bool = True
    who_min_confidence: float = AnalyzerConfig.who_min_confidence


class AnalyzeResponse(BaseModel):
    morphemes: List[MorphemeOut]
    edges: List[EdgeOut]
    roles: Dict[str, List[RoleElementOut]]


def _to_response(res: AnalysisResult, include_pos_en: bool) -> AnalyzeResponse:
    morphs: List[MorphemeOut] = []
    for i, m in enumerate(res.morphemes):
        pos = pos_string(m)
        morphs.append(MorphemeOut(
            index=i,
            pos_en=translate_pos(pos) if include_pos_en else "",
            pos_en_components=translate_pos_components(pos) if include_pos_en else [],
            **m.to_dict(),
        ))
    edges = [
        EdgeOut(from_index=e.from_index, to_index=e.to_index, label=e.label, label_ja=label_ja(e.label))
        for e in res.edges
    ]
    roles = {
        c: [RoleElementOut(**el.to_dict()) for el in elems]
        for c, elems in res.roles.items()
    }
    return AnalyzeResponse(morphemes=morphs, edges=edges, roles=roles)


def create_app(tokenizer: Optional[Tokenizer] = None) -> FastAPI:
    app = FastAPI(title="Japanese Dependency & 5W1H Analyzer", version="1.0.0")

    @app.get("/")
    def root() -> dict:
        return {
            "name": "Japanese Dependency & 5W1H Analyzer",
            "docs": "/docs",
            "health": "/health",
            "analyze": "/analyze",
            "analyze_text": "/analyze-text",
        }

    @app.get("/health")
    def health() -> dict:
        return {"ok": True, "tokenizer_ready": SentenceAnalyzer(tokenizer).is_ready()}

    @app.post("/analyze", response_model=AnalyzeResponse)
    def analyze(req: AnalyzeRequest) -> AnalyzeResponse:
        if req.morphemes is not None:
            morphs = [Morpheme.from_dict(m.model_dump()) for m in req.morphemes]
        elif req.mecab is not None:
            try:
                morphs = parse_mecab(req.mecab)
            except MecabFormatError as e:
                raise HTTPException(status_code=422, detail=str(e))
        else:
            raise HTTPException(status_code=422, detail="Provide either 'morphemes' or 'mecab'.")
        cfg = AnalyzerConfig(who_min_confidence=req.who_min_confidence, include_pos_en=req.include_pos_en)
        res = SentenceAnalyzer(cfg=cfg).analyze(morphs)
        return _to_response(res, cfg.include_pos_en)

    @app.post("/analyze-text", response_model=AnalyzeResponse)
    def analyze_text(req: AnalyzeTextRequest) -> AnalyzeResponse:
        cfg = AnalyzerConfig(who_min_confidence=req.who_min_confidence, include_pos_en=req.include_pos_en)
        try:
            res = SentenceAnalyzer(tokenizer, cfg=cfg).analyze_text(req.text)
        except TokenizerNotReadyError as e:
            logger.warning("analyze-text rejected: %s", e)
            raise HTTPException(status_code=503, detail=str(e))
        return _to_response(res, cfg.include_pos_en)

    return app
