import pytest

from jp_analyzer.mecab import parse_mecab
from jp_analyzer.types import Morpheme

# 先生が教室で学生にゆっくり英語を教えました。 (ipadic output)
LESSON_MECAB = """\
先生\t名詞,一般,*,*,*,*,先生,センセイ,センセイ
が\t助詞,格助詞,一般,*,*,*,が,ガ,ガ
教室\t名詞,一般,*,*,*,*,教室,キョウシツ,キョーシツ
で\t助詞,格助詞,一般,*,*,*,で,デ,デ
学生\t名詞,一般,*,*,*,*,学生,ガクセイ,ガクセイ
に\t助詞,格助詞,一般,*,*,*,に,ニ,ニ
ゆっくり\t副詞,助詞類接続,*,*,*,*,ゆっくり,ユックリ,ユックリ
英語\t名詞,一般,*,*,*,*,英語,エイゴ,エイゴ
を\t助詞,格助詞,一般,*,*,*,を,ヲ,ヲ
教え\t動詞,自立,*,*,一段,連用形,教える,オシエ,オシエ
まし\t助動詞,*,*,*,特殊・マス,連用形,ます,マシ,マシ
た\t助動詞,*,*,*,特殊・タ,基本形,た,タ,タ
。\t記号,句点,*,*,*,*,。,。,。
EOS
"""


def m(surface, pos, d1="", d2="", basic_form=""):
    return Morpheme(surface=surface, pos=pos, pos_detail_1=d1, pos_detail_2=d2, basic_form=basic_form or surface)


@pytest.fixture
def lesson():
    return parse_mecab(LESSON_MECAB)
