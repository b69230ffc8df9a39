"""Search-engine segmentation: mixed cut plus the dictionary words inside long words."""

from __future__ import annotations

import os
from typing import Sequence, Union

from .dict_trie import DictTrie
from .hmm_model import HMMModel
from .mix_segment import MixSegment
from .segment_base import SegmentBase
from .unicode import RuneStr, Word, WordRange

PathLike = Union[str, "os.PathLike[str]"]


class QuerySegment(SegmentBase):
    """Adds the two- and three-rune dictionary words found inside each longer word."""

    def __init__(
        self,
        dict_trie: Union[DictTrie, PathLike],
        model: Union[HMMModel, PathLike],
    ) -> None:
        super().__init__()
        self._mix = MixSegment(dict_trie, model)
        self.dict_trie = self._mix.dict_trie

    def cut_words(self, sentence: str, hmm: bool = True) -> list[Word]:
        """Segment a sentence into words with their offsets."""
        return self._segment(sentence, hmm)

    def cut(self, sentence: str, hmm: bool = True) -> list[str]:
        """Segment a sentence into word strings."""
        return [word.word for word in self.cut_words(sentence, hmm)]

    def _sub_words(self, runes: Sequence[RuneStr], wr: WordRange, size: int) -> list[WordRange]:
        found: list[WordRange] = []
        for start in range(wr.left, wr.right - size + 2):
            sub = WordRange(start, start + size - 1)
            if self.dict_trie.find(runes[sub.left : sub.right + 1]) is not None:
                found.append(sub)
        return found

    def cut_range(
        self, runes: Sequence[RuneStr], begin: int, end: int, hmm: bool = True
    ) -> list[WordRange]:
        """Cut runes ``begin`` to ``end`` (exclusive) into word ranges."""
        result: list[WordRange] = []
        for wr in self._mix.cut_range(runes, begin, end, hmm):
            if wr.length() > 2:
                result.extend(self._sub_words(runes, wr, 2))
            if wr.length() > 3:
                result.extend(self._sub_words(runes, wr, 3))
            result.append(wr)
        return result