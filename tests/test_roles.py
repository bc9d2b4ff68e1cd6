import pytest

from conftest import m
from jp_analyzer.config import AnalyzerConfig
from jp_analyzer.dependency import resolve
from jp_analyzer.roles import RoleExtractor, extract
from jp_analyzer.tags import CATEGORIES, NOUN, VERB, ADVERB, PARTICLE, AUX_VERB, PRONOUN, SYMBOL


def _triples(elems):
    return [(e.text, e.morpheme_indices, e.confidence) for e in elems]


def test_lesson_roles(lesson):
    res = extract(lesson, resolve(lesson))
    assert _triples(res.who) == [("先生", (0,), 0.8), ("学生", (4,), 0.4)]
    assert _triples(res.what) == [("英語", (7,), 0.8), ("教える", (9,), 0.7)]
    assert res.when == []
    assert _triples(res.where) == [("教室", (2,), 0.8), ("学生", (4,), 0.8)]
    assert res.why == []
    assert _triples(res.how) == [("教室", (2,), 0.6), ("ゆっくり", (6,), 0.7)]
    assert all(e.category == c for c, elems in res.items() for e in elems)


def test_empty_input_gives_six_empty_lists():
    res = extract([])
    assert res.categories() == CATEGORIES
    assert all(res[c] == [] for c in CATEGORIES)
    assert res.is_empty()


def test_who_pronoun_and_proper_noun():
    seq = [
        m("私", NOUN, "代名詞"), m("は", PARTICLE),
        m("田中", NOUN, "固有名詞", "人名"), m("と", PARTICLE),
        m("彼", PRONOUN), m("が", PARTICLE),
        m("本", NOUN), m("。", SYMBOL),
    ]
    res = RoleExtractor().extract(seq)
    assert _triples(res.who) == [("私", (0,), 0.8), ("田中", (2,), 0.4), ("彼", (4,), 0.8)]


def test_who_threshold_from_config():
    seq = [m("友達", NOUN), m("と", PARTICLE), m("母", NOUN), m("が", PARTICLE)]
    res = RoleExtractor(AnalyzerConfig(who_min_confidence=0.5)).extract(seq)
    assert _triples(res.who) == [("母", (2,), 0.8)]


def test_who_at_sentence_end_has_no_marker():
    res = extract([m("行く", VERB), m("先生", NOUN)])
    assert _triples(res.who) == [("先生", (1,), 0.4)]


def test_when_nouns_and_adverbs():
    seq = [
        m("毎日", NOUN), m("すぐ", ADVERB), m("すぐに", ADVERB),
        m("昨日", NOUN), m("いつも", NOUN),
    ]
    res = extract(seq)
    assert _triples(res.when) == [("毎日", (0,), 0.9), ("すぐ", (1,), 0.8), ("昨日", (3,), 0.9)]


def test_where_region_can_fire_twice():
    seq = [m("東京", NOUN, "固有名詞", "地域"), m("へ", PARTICLE), m("行く", VERB)]
    res = extract(seq)
    assert _triples(res.where) == [("東京", (0,), 0.8), ("東京", (0,), 0.9)]


def test_why_cites_preceding_token():
    seq = [m("雨", NOUN), m("ので", PARTICLE), m("休む", VERB)]
    res = extract(seq)
    assert len(res.why) == 1
    el = res.why[0]
    assert (el.text, el.morpheme_indices) == ("雨", (0, 1))
    assert el.confidence == pytest.approx(0.7)


def test_why_needs_preceding_context():
    res = extract([m("ので", PARTICLE), m("休む", VERB)])
    assert res.why == []


def test_why_requires_particle():
    res = extract([m("その", NOUN), m("ため", NOUN), m("休む", VERB)])
    assert res.why == []


def test_kara_feeds_where_and_why_independently():
    seq = [m("家", NOUN), m("から", PARTICLE), m("来る", VERB)]
    res = extract(seq)
    assert _triples(res.where) == [("家", (0,), 0.8)]
    assert _triples(res.why) == [("家", (0, 1), 0.7)]


def test_how_method_markers():
    seq = [m("電話", NOUN), m("により", PARTICLE), m("バス", NOUN), m("で", PARTICLE), m("きちんと", ADVERB)]
    res = extract(seq)
    assert _triples(res.how) == [("電話", (0,), 0.6), ("バス", (2,), 0.6), ("きちんと", (4,), 0.7)]


def test_removing_nouns_keeps_verb_and_adverb_elements():
    seq = [
        m("先生", NOUN), m("が", PARTICLE), m("ゆっくり", ADVERB), m("もう", ADVERB),
        m("本", NOUN), m("を", PARTICLE), m("読ん", VERB, basic_form="読む"), m("だ", AUX_VERB),
    ]
    no_nouns = [x for x in seq if x.pos != NOUN]
    full = extract(seq)
    reduced = extract(no_nouns)

    def verb_adverb(res, seq_, cat):
        return [(e.text, e.confidence) for e in res[cat] if seq_[e.morpheme_indices[0]].pos in (VERB, ADVERB)]

    for cat in ("who", "what", "where", "when", "how"):
        assert verb_adverb(full, seq, cat) == verb_adverb(reduced, no_nouns, cat)
    assert [(e.text, e.confidence) for e in reduced.what] == [("読む", 0.7)]


def test_role_result_behaves_as_mapping():
    res = extract([m("先生", NOUN), m("が", PARTICLE)])
    assert "who" in res
    assert "agent" not in res
    assert len(res) == 6
    assert list(res) == list(CATEGORIES)
    as_dict = dict(res)
    assert set(as_dict) == set(CATEGORIES)
    assert [e.text for e in as_dict["who"]] == ["先生"]
    assert res.get("agent") is None


def test_who_person_noun_matches_substring():
    res = extract([m("留学生", NOUN), m("と", PARTICLE)])
    assert _triples(res.who) == [("留学生", (0,), 0.4)]


def test_what_uses_surface_when_lemma_missing():
    from jp_analyzer.types import Morpheme
    res = extract([Morpheme("教え", VERB)])
    assert _triples(res.what) == [("教え", (0,), 0.7)]
