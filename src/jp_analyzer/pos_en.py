from __future__ import annotations
from typing import Dict, List
from .tags import CASE_RELATION, ADNOMINAL, ADVERBIAL, PREDICATE, GENERAL
from .types import Morpheme

# english rendering of ipadic POS components
# missing components covered by Unknown(<JP>) fallback
POS_COMPONENT_EN: Dict[str, str] = {
    # coarse POS
    "名詞": "Noun",
    "動詞": "Verb",
    "形容詞": "Adjective",
    "副詞": "Adverb",
    "連体詞": "Adnominal",
    "接続詞": "Conjunction",
    "感動詞": "Interjection",
    "助詞": "Particle",
    "助動詞": "Auxiliary Verb",
    "代名詞": "Pronoun",
    "記号": "Symbol",
    "接頭詞": "Prefix",
    "フィラー": "Filler",
    "その他": "Other",
    # noun subcats
    "一般": "General",
    "固有名詞": "Proper Noun",
    "数": "Number",
    "数詞": "Numeral",
    "人名": "Person Name",
    "姓": "Surname",
    "名": "Given Name",
    "地域": "Region",
    "国": "Country",
    "組織": "Organization",
    "副詞可能": "Adverbial Possible",
    "形容動詞語幹": "Adjectival Noun Stem",
    "サ変接続": "Suru-Verb Compound",
    "ナイ形容詞語幹": "Nai-Adjective Stem",
    "接尾": "Suffix",
    "特殊": "Special",
    "引用文字列": "Quoted String",
    # verbs / adjectives
    "自立": "Independent",
    "非自立": "Non-Independent",
    # particles
    "格助詞": "Case Particle",
    "副助詞": "Adverbial Particle",
    "係助詞": "Binding Particle",
    "接続助詞": "Conjunctive Particle",
    "終助詞": "Sentence-Final Particle",
    "並立助詞": "Parallel Particle",
    "間投助詞": "Interjectory Particle",
    "連体化": "Adnominalizer",
    "副詞化": "Adverbializer",
    "引用": "Quotation",
    "連語": "Compound",
    # symbols
    "句点": "Period",
    "読点": "Comma",
    "空白": "Whitespace",
    "括弧開": "Open Bracket",
    "括弧閉": "Close Bracket",
    "アルファベット": "Alphabet",
}

LABEL_JA: Dict[str, str] = {
    CASE_RELATION: "格関係",
    ADNOMINAL: "連体修飾",
    ADVERBIAL: "連用修飾",
    PREDICATE: "述語関係",
    GENERAL: "依存関係",
}


def pos_string(m: Morpheme) -> str:
    parts = [m.pos, m.pos_detail_1, m.pos_detail_2, m.pos_detail_3]
    return "-".join(p for p in parts if p)


def translate_pos_components(pos: str) -> List[str]:
    if not pos:
        return []
    parts = [p for p in pos.split("-") if p]
    out: List[str] = []
    for p in parts:
        out.append(POS_COMPONENT_EN.get(p, f"Unknown({p})"))
    return out


def translate_pos(pos: str, sep: str = " / ") -> str:
    comps = translate_pos_components(pos)
    if not comps:
        return ""
    return sep.join(comps)


def label_ja(label: str) -> str:
    return LABEL_JA.get(label, label)
