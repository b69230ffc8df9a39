"""TextRank keyword extraction over a co-occurrence graph of words."""

from __future__ import annotations

import os
from typing import MutableMapping, Union

from .dict_trie import DictTrie
from .hmm_model import HMMModel
from .keyword_extractor import Keyword
from .mix_segment import MixSegment
from .unicode import is_single_word

PathLike = Union[str, "os.PathLike[str]"]


def _load_stop_words(path: PathLike) -> set[str]:
    with open(path, encoding="utf-8") as handle:
        words = {line.rstrip("\n") for line in handle}
    if not words:
        raise ValueError(f"stop word file {os.fspath(path)} is empty")
    return words


class WordGraph:
    """An undirected weighted graph of words, ranked by PageRank iteration."""

    def __init__(self, damping: float = 0.85) -> None:
        self.damping = damping
        self._graph: dict[str, dict[str, float]] = {}

    def add_edge(self, start: str, end: str, weight: float) -> None:
        """Add ``weight`` to the edge between ``start`` and ``end`` in both directions."""
        forward = self._graph.setdefault(start, {})
        forward[end] = forward.get(end, 0.0) + weight
        backward = self._graph.setdefault(end, {})
        backward[start] = backward.get(start, 0.0) + weight

    def rank(self, words: MutableMapping[str, Keyword], rank_time: int = 10) -> None:
        """Score the graph's words into ``words``, then scale every score in it.

        Words missing from ``words`` are added. An empty graph changes nothing.
        """
        if not self._graph:
            return
        nodes = sorted(self._graph)
        default = 1.0 / len(self._graph)
        out_sum: dict[str, float] = {}
        for node in nodes:
            keyword = words.get(node)
            if keyword is None:
                keyword = words[node] = Keyword(node)
            keyword.word = node
            keyword.weight = default
            out_sum[node] = sum(weight for _, weight in sorted(self._graph[node].items()))

        d = self.damping
        for _ in range(rank_time):
            for node in nodes:
                score = 0.0
                for neighbour, weight in sorted(self._graph[node].items()):
                    score += weight / out_sum[neighbour] * words[neighbour].weight
                words[node].weight = (1 - d) + d * score

        scores = [keyword.weight for keyword in words.values()]
        low, high = min(scores), max(scores)
        for keyword in words.values():
            keyword.weight = (keyword.weight - low / 10.0) / (high - low / 10.0)


class TextRankExtractor:
    """Extracts keywords by ranking words that occur near each other."""

    def __init__(
        self,
        dict_trie: Union[DictTrie, PathLike],
        model: Union[HMMModel, PathLike],
        stop_word_path: PathLike,
    ) -> None:
        self._segment = MixSegment(dict_trie, model)
        self._stop_words = _load_stop_words(stop_word_path)

    def _ignored(self, word: str) -> bool:
        return is_single_word(word) or word in self._stop_words

    def extract(
        self, sentence: str, top_n: int, span: int = 5, rank_time: int = 10
    ) -> list[Keyword]:
        """Return up to ``top_n`` keywords of ``sentence``, best first.

        Words within ``span`` kept words of each other are linked.
        """
        words = self._segment.cut(sentence)
        graph = WordGraph()
        table: dict[str, Keyword] = {}
        offset = 0
        for i, word in enumerate(words):
            start = offset
            offset += len(word.encode("utf-8"))
            if self._ignored(word):
                continue
            skip = 0
            j = i + 1
            while j < i + span + skip and j < len(words):
                if self._ignored(words[j]):
                    skip += 1
                else:
                    graph.add_edge(word, words[j], 1.0)
                j += 1
            table.setdefault(word, Keyword(word)).offsets.append(start)
        if offset != len(sentence.encode("utf-8")):
            raise ValueError("segmented words do not cover the sentence")

        graph.rank(table, rank_time)
        keywords = [table[word] for word in sorted(table)]
        keywords.sort(key=lambda k: k.weight, reverse=True)
        return keywords[: max(top_n, 0)]