from __future__ import annotations
import warnings
from dataclasses import dataclass
from typing import Callable, List, Optional
from .types import Morpheme

# ipadic feature layout: pos,pos1,pos2,pos3,ctype,cform,basic,reading,pron
IPADIC_FIELDS = 9


class MecabFormatError(ValueError):
    pass


def _field(parts: List[str], i: int) -> str:
    v = parts[i] if i < len(parts) else ""
    return "" if v == "*" else v


def morpheme_from_feature(surface: str, feature: str) -> Morpheme:
    parts = feature.split(",")
    reading = _field(parts, 7) or surface
    return Morpheme(
        surface=surface,
        pos=_field(parts, 0),
        pos_detail_1=_field(parts, 1),
        pos_detail_2=_field(parts, 2),
        pos_detail_3=_field(parts, 3),
        conjugated_type=_field(parts, 4),
        conjugated_form=_field(parts, 5),
        basic_form=_field(parts, 6) or surface,
        reading=reading,
        pronunciation=_field(parts, 8) or reading,
    )


def parse_mecab(text: str) -> List[Morpheme]:
    """
    parse mecab default output (surface<TAB>feature csv, one per line, EOS per sentence)
    into morphemes. several sentences are concatenated
    """
    out: List[Morpheme] = []
    short_rows = 0
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.rstrip("\r")
        if not line.strip() or line == "EOS":
            continue
        if "\t" not in line:
            raise MecabFormatError(f"line {lineno}: expected 'surface<TAB>feature', got {line!r}")
        surface, feature = line.split("\t", 1)
        if len(feature.split(",")) < IPADIC_FIELDS:
            short_rows += 1
        out.append(morpheme_from_feature(surface, feature))
    if short_rows:
        warnings.warn(
            f"{short_rows} row(s) had fewer than {IPADIC_FIELDS} feature fields; missing fields left empty.",
            UserWarning,
        )
    return out


@dataclass
class MecabTokenizer:
    """
    wrap any callable returning mecab-formatted text, e.g. MeCab.Tagger().parse
    """
    parse_fn: Optional[Callable[[str], str]] = None

    def is_ready(self) -> bool:
        return self.parse_fn is not None

    def tokenize(self, text: str) -> List[Morpheme]:
        if self.parse_fn is None:
            raise RuntimeError("MecabTokenizer has no parse function.")
        return parse_mecab(self.parse_fn(text))
