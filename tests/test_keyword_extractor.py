import pytest

from jiebaseg.dict_trie import DictTrie
from jiebaseg.keyword_extractor import Keyword, KeywordExtractor

DICT = """我 100 r
来到 50 v
北京 80 ns
清华 30 nz
大学 60 n
清华大学 40 nt
"""

MODEL = """-0.26 -3.14e+100 -3.14e+100 -1.46
-3.14e+100 -0.51 -0.91 -3.14e+100
-0.58 -3.14e+100 -3.14e+100 -0.81
-3.14e+100 -0.33 -1.26 -3.14e+100
-0.72 -3.14e+100 -3.14e+100 -0.66
天:-1.0,气:-8.0
天:-8.0,气:-1.0
天:-8.0,气:-8.0
天:-8.0,气:-8.0
"""

IDF = "北京 5.0\n清华大学 8.0\n来到 1.0\n"
SENTENCE = "我来到北京清华大学"


@pytest.fixture
def files(tmp_path):
    dict_path = tmp_path / "dict.utf8"
    dict_path.write_text(DICT, encoding="utf-8")
    model_path = tmp_path / "hmm.utf8"
    model_path.write_text(MODEL, encoding="utf-8")
    idf_path = tmp_path / "idf.utf8"
    idf_path.write_text(IDF, encoding="utf-8")
    stop_path = tmp_path / "stop.utf8"
    stop_path.write_text("来到\n", encoding="utf-8")
    return tmp_path, dict_path, model_path, idf_path, stop_path


@pytest.fixture
def extractor(files):
    _, dict_path, model_path, idf_path, stop_path = files
    return KeywordExtractor(DictTrie(dict_path), model_path, idf_path, stop_path)


def test_ranking(extractor):
    keywords = extractor.extract(SENTENCE, 5)
    assert [k.word for k in keywords] == ["清华大学", "北京"]
    assert [k.weight for k in keywords] == [8.0, 5.0]


def test_offsets(extractor):
    data = SENTENCE.encode("utf-8")
    for keyword in extractor.extract(SENTENCE, 5):
        assert keyword.offsets == [data.index(keyword.word.encode("utf-8"))]


def test_top_n_limits(extractor):
    assert [k.word for k in extractor.extract(SENTENCE, 1)] == ["清华大学"]
    assert extractor.extract(SENTENCE, 0) == []


def test_repeated_word(extractor):
    keywords = extractor.extract("北京北京", 3)
    assert len(keywords) == 1
    assert keywords[0].weight == pytest.approx(2 * 5.0)
    assert len(keywords[0].offsets) == 2


def test_unknown_word_uses_average(extractor):
    keywords = extractor.extract("大学", 3)
    assert keywords[0].weight == pytest.approx((5.0 + 8.0 + 1.0) / 3)


def test_average_counts_malformed_lines(files):
    tmp_path, dict_path, model_path, _, stop_path = files
    idf_path = tmp_path / "idf2.utf8"
    idf_path.write_text("bad\n北京 3.0\n", encoding="utf-8")
    extractor = KeywordExtractor(dict_path, model_path, idf_path, stop_path)
    assert extractor.extract("大学", 1)[0].weight == pytest.approx(3.0 / 2)


def test_empty_idf_raises(files):
    tmp_path, dict_path, model_path, _, stop_path = files
    idf_path = tmp_path / "empty.utf8"
    idf_path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        KeywordExtractor(dict_path, model_path, idf_path, stop_path)


def test_empty_stop_words_raise(files):
    tmp_path, dict_path, model_path, idf_path, _ = files
    stop_path = tmp_path / "nostop.utf8"
    stop_path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        KeywordExtractor(dict_path, model_path, idf_path, stop_path)


def test_keyword_str():
    keyword = Keyword("北京", [9], 5.0)
    assert str(keyword) == '{"word": "北京", "offset": [9], "weight": 5}'