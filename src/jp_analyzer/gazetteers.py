from __future__ import annotations
from typing import AbstractSet, Iterable, Sequence
from .types import Morpheme

# marker particles, checked one token ahead
SUBJECT_MARKERS = frozenset({"は", "が"})
OBJECT_MARKERS = frozenset({"を"})
LOCATION_MARKERS = frozenset({"で", "に", "から", "へ"})
METHOD_MARKERS = frozenset({"で", "により"})
REASON_MARKERS = frozenset({"ので", "から", "ため"})

# matched as substrings of the surface
PERSON_NOUNS = (
    "人", "方", "者", "学生", "先生", "友達", "家族",
    "母", "父", "子", "私", "僕", "君", "あなた",
)
TIME_NOUNS = (
    "今日", "昨日", "明日", "今", "いま", "朝", "昼", "夜",
    "時", "分", "秒", "年", "月", "日", "曜日",
)

# matched exactly
TIME_ADVERBS = frozenset({"いつも", "たまに", "よく", "すぐ", "もう", "まだ", "さっき", "これから"})
MANNER_ADVERBS = frozenset({"ゆっくり", "急いで", "丁寧に", "静かに", "大きく", "小さく", "しっかり", "きちんと"})


def has_next_surface(morphemes: Sequence[Morpheme], index: int, markers: AbstractSet[str]) -> bool:
    nxt = index + 1
    if nxt >= len(morphemes):
        return False
    return morphemes[nxt].surface in markers


def contains_any(surface: str, words: Iterable[str]) -> bool:
    return any(w in surface for w in words)


def matches_exactly(surface: str, words: AbstractSet[str]) -> bool:
    return surface in words


def is_person_noun(surface: str) -> bool:
    return contains_any(surface, PERSON_NOUNS)


def is_time_noun(surface: str) -> bool:
    return contains_any(surface, TIME_NOUNS)
