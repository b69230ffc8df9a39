"""Segmentation of unknown words by Viterbi decoding of an HMM."""

from __future__ import annotations

import os
from typing import Sequence, Union

from .dict_trie import MIN_DOUBLE
from .hmm_model import HMMModel
from .segment_base import SegmentBase
from .unicode import RuneStr, WordRange


def _is_letter(rune: int) -> bool:
    return ord("a") <= rune <= ord("z") or ord("A") <= rune <= ord("Z")


def _is_digit(rune: int) -> bool:
    return ord("0") <= rune <= ord("9")


def _letters_end(runes: Sequence[RuneStr], begin: int, end: int) -> int:
    if not _is_letter(runes[begin].rune):
        return begin
    pos = begin + 1
    while pos < end and (_is_letter(runes[pos].rune) or _is_digit(runes[pos].rune)):
        pos += 1
    return pos


def _number_end(runes: Sequence[RuneStr], begin: int, end: int) -> int:
    if not _is_digit(runes[begin].rune):
        return begin
    pos = begin + 1
    while pos < end and (_is_digit(runes[pos].rune) or runes[pos].rune == ord(".")):
        pos += 1
    return pos


class HMMSegment(SegmentBase):
    """Cuts runs of non-ASCII text with the HMM and ASCII text by simple rules."""

    def __init__(self, model: Union[HMMModel, str, "os.PathLike[str]"]) -> None:
        super().__init__()
        self.model = model if isinstance(model, HMMModel) else HMMModel(model)

    def cut_range(self, runes: Sequence[RuneStr], begin: int, end: int) -> list[WordRange]:
        """Cut runes ``begin`` to ``end`` (exclusive) into word ranges."""
        result: list[WordRange] = []
        left = right = begin
        while right < end:
            if runes[right].rune >= 0x80:
                right += 1
                continue
            if left != right:
                result.extend(self._internal_cut(runes, left, right))
            left = right
            right = _letters_end(runes, left, end)
            if right == left:
                right = _number_end(runes, left, end)
            if right == left:
                right = left + 1
            result.append(WordRange(left, right - 1))
            left = right
        if left != right:
            result.extend(self._internal_cut(runes, left, right))
        return result

    def _internal_cut(self, runes: Sequence[RuneStr], begin: int, end: int) -> list[WordRange]:
        ranges: list[WordRange] = []
        left = begin
        for i, state in enumerate(self._viterbi(runes, begin, end)):
            if state % 2:  # E or S closes a word
                ranges.append(WordRange(left, begin + i))
                left = begin + i + 1
        return ranges

    def _viterbi(self, runes: Sequence[RuneStr], begin: int, end: int) -> list[int]:
        model = self.model
        states = range(HMMModel.STATUS_SUM)
        chars = [r.rune for r in runes[begin:end]]

        weights = [[model.start_prob[y] + model.emit_prob(y, chars[0], MIN_DOUBLE) for y in states]]
        paths = [[-1] * HMMModel.STATUS_SUM]
        for rune in chars[1:]:
            previous = weights[-1]
            row_weights: list[float] = []
            row_paths: list[int] = []
            for y in states:
                emit = model.emit_prob(y, rune, MIN_DOUBLE)
                best, best_state = MIN_DOUBLE, HMMModel.E
                for pre_y in states:
                    candidate = previous[pre_y] + model.trans_prob[pre_y][y] + emit
                    if candidate > best:
                        best, best_state = candidate, pre_y
                row_weights.append(best)
                row_paths.append(best_state)
            weights.append(row_weights)
            paths.append(row_paths)

        last = weights[-1]
        state = HMMModel.E if last[HMMModel.E] >= last[HMMModel.S] else HMMModel.S
        status: list[int] = []
        for row in reversed(paths):
            status.append(state)
            state = row[state]
        status.reverse()
        return status