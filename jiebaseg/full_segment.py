"""Full-mode segmentation listing every dictionary word found."""

from __future__ import annotations

import os
from typing import Sequence, Union

from .dict_trie import DictTrie
from .segment_base import SegmentBase
from .unicode import RuneStr, WordRange


class FullSegment(SegmentBase):
    """Emits all dictionary words of two or more runes, plus uncovered single runes."""

    def __init__(self, dict_trie: Union[DictTrie, str, "os.PathLike[str]"]) -> None:
        super().__init__()
        self.dict_trie = dict_trie if isinstance(dict_trie, DictTrie) else DictTrie(dict_trie)

    def cut_range(self, runes: Sequence[RuneStr], begin: int, end: int) -> list[WordRange]:
        """Cut runes ``begin`` to ``end`` (exclusive) into overlapping word ranges."""
        result: list[WordRange] = []
        max_idx = 0
        word_len = 0
        dags = self.dict_trie.find_dags(runes[begin:end])
        for u_idx, dag in enumerate(dags):
            alone = len(dag.nexts) == 1
            for next_offset, unit in dag.nexts:
                if unit is None:
                    if alone and max_idx <= u_idx:
                        result.append(WordRange(begin + u_idx, begin + next_offset))
                else:
                    word_len = len(unit.word)
                    if word_len >= 2 or (alone and max_idx <= u_idx):
                        result.append(WordRange(begin + u_idx, begin + next_offset))
                max_idx = max(max_idx, u_idx + word_len)
        return result