"""Dictionary segmentation with HMM recovery of unknown words."""

from __future__ import annotations

import os
from typing import Sequence, Union

from .dict_trie import DictTrie
from .hmm_model import HMMModel
from .hmm_segment import HMMSegment
from .mp_segment import MPSegment
from .pos_tagger import PosTagger
from .segment_base import SegmentTagged
from .unicode import RuneStr, Word, WordRange

PathLike = Union[str, "os.PathLike[str]"]


class MixSegment(SegmentTagged):
    """Cuts with the dictionary, then regroups runs of lone characters with the HMM."""

    def __init__(
        self,
        dict_trie: Union[DictTrie, PathLike],
        model: Union[HMMModel, PathLike],
    ) -> None:
        super().__init__()
        self._mp = MPSegment(dict_trie)
        self._hmm = HMMSegment(model)
        self._tagger = PosTagger()

    @property
    def dict_trie(self) -> DictTrie:
        return self._mp.dict_trie

    def cut_words(self, sentence: str, hmm: bool = True) -> list[Word]:
        """Segment a sentence into words with their offsets."""
        return self._segment(sentence, hmm)

    def cut(self, sentence: str, hmm: bool = True) -> list[str]:
        """Segment a sentence into word strings."""
        return [word.word for word in self.cut_words(sentence, hmm)]

    def _is_lone(self, runes: Sequence[RuneStr], wr: WordRange) -> bool:
        return wr.left == wr.right and not self._mp.is_user_dict_single_chinese_word(
            runes[wr.left].rune
        )

    def cut_range(
        self, runes: Sequence[RuneStr], begin: int, end: int, hmm: bool = True
    ) -> list[WordRange]:
        """Cut runes ``begin`` to ``end`` (exclusive) into word ranges."""
        words = self._mp.cut_range(runes, begin, end)
        if not hmm:
            return words
        result: list[WordRange] = []
        i = 0
        while i < len(words):
            if not self._is_lone(runes, words[i]):
                result.append(words[i])
                i += 1
                continue
            j = i
            while j < len(words) and self._is_lone(runes, words[j]):
                j += 1
            result.extend(self._hmm.cut_range(runes, words[i].left, words[j - 1].left + 1))
            i = j
        return result

    def tag(self, sentence: str) -> list[tuple[str, str]]:
        """Segment a sentence and pair each word with its tag."""
        return self._tagger.tag(sentence, self)

    def lookup_tag(self, word: str) -> str:
        """Return the tag of a single word."""
        return self._tagger.lookup_tag(word, self)