"""Common machinery of the segmenters: separators and sentence splitting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, AbstractSet, Iterator, Sequence

from .unicode import RuneStr, Word, WordRange, decode_runes, words_from_ranges

if TYPE_CHECKING:
    from .dict_trie import DictTrie

SPECIAL_SEPARATORS = " \t\n\uff0c\u3002"


def split_by_separators(
    symbols: AbstractSet[int], runes: Sequence[RuneStr]
) -> Iterator[tuple[int, int]]:
    """Yield half-open ``(begin, end)`` rune ranges between separators.

    Each separator forms a range of its own.
    """
    cursor = 0
    total = len(runes)
    while cursor < total:
        begin = cursor
        while cursor < total and runes[cursor].rune not in symbols:
            cursor += 1
        if cursor == begin:
            cursor += 1
        yield begin, cursor


class SegmentBase(ABC):
    """A segmenter that cuts each separator-free stretch of a sentence."""

    def __init__(self) -> None:
        self.symbols: set[int] = set()
        self.reset_separators(SPECIAL_SEPARATORS)

    def reset_separators(self, separators: str) -> None:
        """Replace the separator set; raise ValueError on a repeated separator."""
        symbols: set[int] = set()
        for rune in decode_runes(separators):
            if rune.rune in symbols:
                raise ValueError(f"separator {chr(rune.rune)!r} already exists")
            symbols.add(rune.rune)
        self.symbols = symbols

    @abstractmethod
    def cut_range(self, runes: Sequence[RuneStr], begin: int, end: int, *options) -> list[WordRange]:
        """Cut runes ``begin`` to ``end`` (exclusive) into word ranges."""

    def _segment(self, sentence: str, *options) -> list[Word]:
        runes = decode_runes(sentence)
        ranges: list[WordRange] = []
        for begin, end in split_by_separators(self.symbols, runes):
            ranges.extend(self.cut_range(runes, begin, end, *options))
        return words_from_ranges(sentence, runes, ranges)

    def cut_words(self, sentence: str) -> list[Word]:
        """Segment a sentence into words with their offsets."""
        return self._segment(sentence)

    def cut(self, sentence: str) -> list[str]:
        """Segment a sentence into word strings."""
        return [word.word for word in self.cut_words(sentence)]


class SegmentTagged(SegmentBase):
    """A segmenter backed by a dictionary, able to tag parts of speech."""

    @property
    @abstractmethod
    def dict_trie(self) -> "DictTrie":
        """The dictionary the segmenter looks words up in."""

    @abstractmethod
    def tag(self, sentence: str) -> list[tuple[str, str]]:
        """Segment a sentence and pair each word with its tag."""