"""Maximum-probability segmentation over the dictionary word graph."""

from __future__ import annotations

import os
from typing import Sequence, Union

from .dict_trie import MIN_DOUBLE, DictTrie
from .pos_tagger import PosTagger
from .segment_base import SegmentTagged
from .trie import MAX_WORD_LENGTH, Dag
from .unicode import RuneStr, Word, WordRange


class MPSegment(SegmentTagged):
    """Picks the most probable split of each stretch into dictionary words."""

    def __init__(self, dict_trie: Union[DictTrie, str, "os.PathLike[str]"]) -> None:
        super().__init__()
        self._dict_trie = dict_trie if isinstance(dict_trie, DictTrie) else DictTrie(dict_trie)
        self._tagger = PosTagger()

    @property
    def dict_trie(self) -> DictTrie:
        return self._dict_trie

    def cut_words(self, sentence: str, max_word_len: int = MAX_WORD_LENGTH) -> list[Word]:
        """Segment a sentence into words with their offsets."""
        return self._segment(sentence, max_word_len)

    def cut(self, sentence: str, max_word_len: int = MAX_WORD_LENGTH) -> list[str]:
        """Segment a sentence into word strings."""
        return [word.word for word in self.cut_words(sentence, max_word_len)]

    def cut_range(
        self,
        runes: Sequence[RuneStr],
        begin: int,
        end: int,
        max_word_len: int = MAX_WORD_LENGTH,
    ) -> list[WordRange]:
        """Cut runes ``begin`` to ``end`` (exclusive) into word ranges."""
        dags = self._dict_trie.find_dags(runes[begin:end], max_word_len)
        self._calc_dp(dags)
        return self._cut_by_dag(begin, dags)

    def tag(self, sentence: str) -> list[tuple[str, str]]:
        """Segment a sentence and pair each word with its tag."""
        return self._tagger.tag(sentence, self)

    def is_user_dict_single_chinese_word(self, rune: int) -> bool:
        """True when a user dictionary defined this single rune as a word."""
        return self._dict_trie.is_user_dict_single_chinese_word(rune)

    def _calc_dp(self, dags: list[Dag]) -> None:
        min_weight = self._dict_trie.min_weight
        for dag in reversed(dags):
            dag.info = None
            dag.weight = MIN_DOUBLE
            for next_pos, unit in dag.nexts:
                value = dags[next_pos + 1].weight if next_pos + 1 < len(dags) else 0.0
                value += unit.weight if unit is not None else min_weight
                if value > dag.weight:
                    dag.info = unit
                    dag.weight = value

    @staticmethod
    def _cut_by_dag(begin: int, dags: list[Dag]) -> list[WordRange]:
        ranges: list[WordRange] = []
        i = 0
        while i < len(dags):
            unit = dags[i].info
            size = len(unit.word) if unit is not None else 1
            ranges.append(WordRange(begin + i, begin + i + size - 1))
            i += size
        return ranges