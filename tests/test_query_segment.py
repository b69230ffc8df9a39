import pytest

from jiebaseg.dict_trie import DictTrie
from jiebaseg.hmm_model import HMMModel
from jiebaseg.query_segment import QuerySegment

DICT = """我 100 r
来到 50 v
北京 80 ns
清华 30 nz
大学 60 n
清华大学 40 nt
华大 5 n
"""

MODEL = """-0.26 -3.14e+100 -3.14e+100 -1.46
-3.14e+100 -0.51 -0.91 -3.14e+100
-0.58 -3.14e+100 -3.14e+100 -0.81
-3.14e+100 -0.33 -1.26 -3.14e+100
-0.72 -3.14e+100 -3.14e+100 -0.66
天:-1.0,气:-8.0,好:-8.0
天:-8.0,气:-1.0,好:-8.0
天:-8.0,气:-8.0,好:-8.0
天:-8.0,气:-8.0,好:-1.0
"""

SENTENCE = "我来到北京清华大学"


@pytest.fixture
def segment(tmp_path):
    dict_path = tmp_path / "dict.utf8"
    dict_path.write_text(DICT, encoding="utf-8")
    model_path = tmp_path / "hmm.utf8"
    model_path.write_text(MODEL, encoding="utf-8")
    return QuerySegment(DictTrie(dict_path), HMMModel(model_path))


def test_sub_words_added(segment):
    assert segment.cut(SENTENCE) == ["我", "来到", "北京", "清华", "华大", "大学", "清华大学"]


def test_without_hmm(segment):
    assert segment.cut(SENTENCE, False) == segment.cut(SENTENCE, True)


def test_cut_words_offsets(segment):
    data = SENTENCE.encode("utf-8")
    for word in segment.cut_words(SENTENCE):
        raw = word.word.encode("utf-8")
        assert data[word.offset : word.offset + len(raw)] == raw


def test_short_words_unchanged(segment):
    assert segment.cut("北京") == ["北京"]


def test_hmm_words_pass_through(segment):
    assert segment.cut("天气好") == ["天气", "好"]