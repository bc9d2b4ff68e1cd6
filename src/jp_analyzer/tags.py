from __future__ import annotations
from typing import Tuple

# coarse POS as emitted by IPAdic tokenizers (mecab / kuromoji)
NOUN = "名詞"
VERB = "動詞"
ADJECTIVE = "形容詞"
ADVERB = "副詞"
PARTICLE = "助詞"
AUX_VERB = "助動詞"
SYMBOL = "記号"
PRONOUN = "代名詞"
NUMERAL = "数詞"

# fine subcategories
PROPER_NOUN = "固有名詞"
REGION = "地域"

# dependency labels
CASE_RELATION = "case-relation"
ADNOMINAL = "adnominal-modification"
ADVERBIAL = "adverbial-modification"
PREDICATE = "predicate-relation"
GENERAL = "general-dependency"

LABELS: Tuple[str, ...] = (CASE_RELATION, ADNOMINAL, ADVERBIAL, PREDICATE, GENERAL)

# role categories, in result order
WHO = "who"
WHAT = "what"
WHEN = "when"
WHERE = "where"
WHY = "why"
HOW = "how"

CATEGORIES: Tuple[str, ...] = (WHO, WHAT, WHEN, WHERE, WHY, HOW)
