import pytest

from jiebaseg.dict_trie import DictTrie
from jiebaseg.hmm_model import HMMModel
from jiebaseg.keyword_extractor import Keyword
from jiebaseg.textrank import TextRankExtractor, WordGraph

DICT_LINES = [
    "我 100 r",
    "来到 50 v",
    "北京 80 ns",
    "清华 30 nz",
    "清华大学 60 nt",
    "大学 40 n",
    "华大 5 j",
]

MODEL_TEXT = """# start
-0.26 -3.14e+100 -3.14e+100 -1.46
# trans
-3.14e+100 -0.51 -0.91 -3.14e+100
-0.59 -3.14e+100 -3.14e+100 -0.81
-3.14e+100 -0.33 -1.26 -3.14e+100
-0.72 -3.14e+100 -3.14e+100 -0.67
# emit
来:-3.0,北:-3.0,清:-3.0,大:-3.0
到:-3.0,京:-3.0,华:-3.0,学:-3.0
华:-5.0,大:-5.0
我:-2.0,的:-2.0
"""


@pytest.fixture(scope="module")
def extractor(tmp_path_factory):
    root = tmp_path_factory.mktemp("textrank")
    dict_path = root / "dict.utf8"
    dict_path.write_text("\n".join(DICT_LINES) + "\n", encoding="utf-8")
    model_path = root / "hmm.utf8"
    model_path.write_text(MODEL_TEXT, encoding="utf-8")
    stop_path = root / "stop.utf8"
    stop_path.write_text("的\n来到\n", encoding="utf-8")
    return TextRankExtractor(DictTrie(dict_path), HMMModel(model_path), stop_path)


def test_empty_graph_leaves_words_unchanged():
    words = {"x": Keyword("x", [0], 0.5)}
    WordGraph().rank(words)
    assert words["x"].weight == 0.5


def test_rank_names_the_added_words():
    graph = WordGraph()
    graph.add_edge("a", "b", 1.0)
    graph.add_edge("b", "c", 1.0)
    words: dict[str, Keyword] = {}
    graph.rank(words)
    assert all(key == kw.word for key, kw in words.items())
    assert max(kw.weight for kw in words.values()) == pytest.approx(1.0)


def test_hub_ranks_highest():
    graph = WordGraph()
    for leaf in ("a", "c", "d"):
        graph.add_edge("hub", leaf, 1.0)
    words: dict[str, Keyword] = {}
    graph.rank(words)
    best = max(words.values(), key=lambda kw: kw.weight)
    assert best.word == "hub"


def test_extract_top_keyword_and_offsets(extractor):
    keywords = extractor.extract("北京清华大学北京", 5)
    assert [kw.word for kw in keywords] == ["北京", "清华大学"]
    assert keywords[0].weight == pytest.approx(1.0)
    assert keywords[0].offsets == [0, 18]
    assert all(0.0 < kw.weight <= 1.0 for kw in keywords)


def test_extract_limits_count(extractor):
    keywords = extractor.extract("北京清华大学北京", 1)
    assert len(keywords) == 1


def test_extract_only_single_words_is_empty(extractor):
    assert extractor.extract("我我我", 3) == []


def test_empty_stop_word_file_is_rejected(tmp_path):
    dict_path = tmp_path / "dict.utf8"
    dict_path.write_text("\n".join(DICT_LINES) + "\n", encoding="utf-8")
    model_path = tmp_path / "hmm.utf8"
    model_path.write_text(MODEL_TEXT, encoding="utf-8")
    stop_path = tmp_path / "stop.utf8"
    stop_path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        TextRankExtractor(dict_path, model_path, stop_path)