import pytest

from jiebaseg.dict_trie import DictTrie
from jiebaseg.mp_segment import MPSegment
from jiebaseg.unicode import decode_runes

DICT = """我 100 r
来到 50 v
北京 80 ns
清华 30 nz
大学 60 n
清华大学 40 nt
华大 5 n
来 20 v
到 20 v
北 10 n
京 10 n
清 5 a
华 5 n
大 20 a
学 10 v
"""

SENTENCE = "我来到北京清华大学"


@pytest.fixture
def dict_path(tmp_path):
    path = tmp_path / "dict.utf8"
    path.write_text(DICT, encoding="utf-8")
    return path


@pytest.fixture
def segment(dict_path):
    return MPSegment(DictTrie(dict_path))


def test_cut(segment):
    assert segment.cut(SENTENCE) == ["我", "来到", "北京", "清华大学"]


def test_accepts_path(dict_path):
    assert MPSegment(dict_path).cut(SENTENCE) == ["我", "来到", "北京", "清华大学"]


def test_cut_words_offsets(segment):
    data = SENTENCE.encode("utf-8")
    position = 0
    for word in segment.cut_words(SENTENCE):
        raw = word.word.encode("utf-8")
        assert data[word.offset : word.offset + len(raw)] == raw
        assert word.unicode_offset == position
        assert word.unicode_length == len(word.word)
        position += len(word.word)


def test_max_word_len_one(segment):
    assert segment.cut(SENTENCE, 1) == list(SENTENCE)


def test_separators(segment):
    assert segment.cut("我，北京") == ["我", "，", "北京"]


def test_unknown_characters_single(segment):
    assert segment.cut("天气") == ["天", "气"]


def test_cut_range_bounds(segment):
    runes = decode_runes(SENTENCE)
    ranges = segment.cut_range(runes, 1, 5)
    assert ranges[0].left == 1
    assert ranges[-1].right == 4
    assert sum(r.length() for r in ranges) == 4


def test_tag(segment):
    assert segment.tag("我来到北京") == [("我", "r"), ("来到", "v"), ("北京", "ns")]


def test_user_single_word(segment):
    segment.dict_trie.load_user_dict(["天 n"])
    assert segment.is_user_dict_single_chinese_word(ord("天"))
    assert not segment.is_user_dict_single_chinese_word(ord("我"))