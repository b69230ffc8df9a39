"""TF-IDF keyword extraction."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Union

from .dict_trie import DictTrie
from .hmm_model import HMMModel
from .mix_segment import MixSegment
from .strutil import split
from .unicode import is_single_word

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


@dataclass
class Keyword:
    """A keyword with the byte offsets where it occurs and its score."""

    word: str
    offsets: list[int] = field(default_factory=list)
    weight: float = 0.0

    def __str__(self) -> str:
        return f'{{"word": "{self.word}", "offset": {self.offsets}, "weight": {self.weight:g}}}'


def _load_stop_words(path: PathLike) -> set[str]:
    with open(path, encoding="utf-8") as handle:
        words = {line.rstrip("\n") for line in handle}
    if not words:
        raise ValueError(f"stop word file {os.fspath(path)} is empty")
    return words


class KeywordExtractor:
    """Scores words by term frequency times inverse document frequency."""

    def __init__(
        self,
        dict_trie: Union[DictTrie, PathLike],
        model: Union[HMMModel, PathLike],
        idf_path: PathLike,
        stop_word_path: PathLike,
    ) -> None:
        self._segment = MixSegment(dict_trie, model)
        self._idf, self._idf_average = self._load_idf(idf_path)
        self._stop_words = _load_stop_words(stop_word_path)

    @staticmethod
    def _load_idf(path: PathLike) -> tuple[dict[str, float], float]:
        idf: dict[str, float] = {}
        total = 0.0
        lineno = 0
        with open(path, encoding="utf-8") as handle:
            for lineno, raw in enumerate(handle, start=1):
                line = raw.rstrip("\n")
                if not line:
                    _log.error("idf line %d empty, skipped", lineno - 1)
                    continue
                fields = split(line, " ")
                if len(fields) != 2:
                    _log.error("idf line %d illegal, skipped: %s", lineno - 1, line)
                    continue
                value = _atof(fields[1])
                idf[fields[0]] = value
                total += value
        if lineno == 0:
            raise ValueError(f"idf file {os.fspath(path)} is empty")
        average = total / lineno
        if average <= 0.0:
            raise ValueError(f"idf file {os.fspath(path)} has no positive average")
        return idf, average

    def extract(self, sentence: str, top_n: int) -> list[Keyword]:
        """Return up to ``top_n`` keywords of ``sentence``, best first."""
        table: dict[str, Keyword] = {}
        offset = 0
        for word in self._segment.cut(sentence):
            start = offset
            offset += len(word.encode("utf-8"))
            if is_single_word(word) or word in self._stop_words:
                continue
            keyword = table.setdefault(word, Keyword(word))
            keyword.offsets.append(start)
            keyword.weight += 1.0
        if offset != len(sentence.encode("utf-8")):
            raise ValueError("segmented words do not cover the sentence")

        keywords: list[Keyword] = []
        for word in sorted(table):
            keyword = table[word]
            keyword.weight *= self._idf.get(word, self._idf_average)
            keywords.append(keyword)
        keywords.sort(key=lambda k: k.weight, reverse=True)
        return keywords[: max(top_n, 0)]