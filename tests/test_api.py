from fastapi.testclient import TestClient

from conftest import LESSON_MECAB
from jp_analyzer.api import create_app
from jp_analyzer.mecab import MecabTokenizer


def test_health_reports_tokenizer():
    client = TestClient(create_app())
    assert client.get("/health").json() == {"ok": True, "tokenizer_ready": False}
    client = TestClient(create_app(MecabTokenizer(lambda t: LESSON_MECAB)))
    assert client.get("/health").json()["tokenizer_ready"] is True


def test_analyze_mecab_payload():
    client = TestClient(create_app())
    r = client.post("/analyze", json={"mecab": LESSON_MECAB})
    assert r.status_code == 200
    body = r.json()
    assert len(body["morphemes"]) == 13
    assert body["morphemes"][0]["pos_en"] == "Noun / General"
    assert body["edges"][0] == {"from_index": 0, "to_index": 1, "label": "case-relation", "label_ja": "格関係"}
    assert [e["text"] for e in body["roles"]["how"]] == ["教室", "ゆっくり"]


def test_analyze_morpheme_payload():
    client = TestClient(create_app())
    payload = {
        "morphemes": [
            {"surface": "雨", "pos": "名詞", "pos_detail_1": "一般"},
            {"surface": "ので", "pos": "助詞", "pos_detail_1": "接続助詞"},
            {"surface": "休ん", "pos": "動詞", "basic_form": "休む"},
            {"surface": "だ", "pos": "助動詞"},
        ],
        "include_pos_en": False,
    }
    body = client.post("/analyze", json=payload).json()
    assert body["morphemes"][0]["pos_en"] == ""
    assert body["roles"]["why"] == [
        {"category": "why", "text": "雨", "morpheme_indices": [0, 1], "confidence": 0.7},
    ]
    assert [e["text"] for e in body["roles"]["what"]] == ["休む"]
    assert [(e["from_index"], e["to_index"]) for e in body["edges"]] == [(0, 1), (1, 2), (2, 3)]


def test_analyze_requires_input():
    client = TestClient(create_app())
    assert client.post("/analyze", json={}).status_code == 422
    assert client.post("/analyze", json={"mecab": "broken line"}).status_code == 422


def test_analyze_text_not_ready():
    client = TestClient(create_app())
    assert client.post("/analyze-text", json={"text": "先生が来た"}).status_code == 503


def test_analyze_text_with_tokenizer():
    client = TestClient(create_app(MecabTokenizer(lambda t: LESSON_MECAB)))
    r = client.post("/analyze-text", json={"text": "先生が教室で学生にゆっくり英語を教えました。"})
    assert r.status_code == 200
    assert len(r.json()["edges"]) == 12


def test_request_threshold_defaults_follow_config():
    from jp_analyzer.api import AnalyzeRequest, AnalyzeTextRequest
    from jp_analyzer.config import AnalyzerConfig
    default = AnalyzerConfig().who_min_confidence
    assert AnalyzeRequest().who_min_confidence == default
    assert AnalyzeTextRequest(text="x").who_min_confidence == default
