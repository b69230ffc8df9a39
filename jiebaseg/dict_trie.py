"""Word dictionary with log-probability weights, backed by a rune trie."""

from __future__ import annotations

import enum
import math
import os
import re
from typing import Iterable, Optional, Sequence, Union

from .strutil import split
from .trie import MAX_WORD_LENGTH, Dag, DictUnit, Trie
from .unicode import RuneStr, decode_unicode

MIN_DOUBLE = -3.14e100
MAX_DOUBLE = 3.14e100
DICT_COLUMN_NUM = 3
UNKNOWN_TAG = ""

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

PathLike = Union[str, "os.PathLike[str]"]


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


class UserWordWeight(enum.Enum):
    """Which static weight a user word without a frequency receives."""

    MIN = "min"
    MEDIAN = "median"
    MAX = "max"


class DictTrie:
    """The main dictionary plus user words, searchable by runes."""

    def __init__(
        self,
        dict_path: PathLike,
        user_dict_paths: PathLike = "",
        weight_option: UserWordWeight = UserWordWeight.MEDIAN,
    ) -> None:
        units = self._load_dict(dict_path)
        if not units:
            raise ValueError(f"dictionary {os.fspath(dict_path)} holds no words")
        for unit in units:
            if unit.weight <= 0.0:
                raise ValueError(f"dictionary word has a non-positive frequency: {unit.tag!r}")
        self.freq_sum = sum(unit.weight for unit in units)
        for unit in units:
            unit.weight = math.log(unit.weight / self.freq_sum)

        ordered = sorted(unit.weight for unit in units)
        self.min_weight = ordered[0]
        self.max_weight = ordered[-1]
        self.median_weight = ordered[len(ordered) // 2]
        self.user_word_default_weight = {
            UserWordWeight.MIN: self.min_weight,
            UserWordWeight.MEDIAN: self.median_weight,
            UserWordWeight.MAX: self.max_weight,
        }[weight_option]

        self._single_words: set[int] = set()
        self._trie = Trie((unit.word for unit in units), units)
        if os.fspath(user_dict_paths):
            self.load_user_dict(user_dict_paths)

    @staticmethod
    def _make_unit(word: str, weight: float, tag: str) -> Optional[DictUnit]:
        try:
            runes = tuple(decode_unicode(word))
        except ValueError:
            return None
        return DictUnit(runes, weight, tag)

    @staticmethod
    def _load_dict(path: PathLike) -> list[DictUnit]:
        units: list[DictUnit] = []
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                line = line.rstrip("\n")
                fields = split(line, " ")
                if len(fields) != DICT_COLUMN_NUM:
                    raise ValueError(f"dictionary line must have {DICT_COLUMN_NUM} columns: {line!r}")
                word, freq, tag = fields
                units.append(DictUnit(tuple(decode_unicode(word)), _atof(freq), tag))
        return units

    def _freq_weight(self, freq: int) -> float:
        if freq < 0:
            raise ValueError(f"word frequency must not be negative: {freq}")
        if freq == 0:
            return -math.inf
        return math.log(freq / self.freq_sum)

    def insert_user_word(self, word: str, freq: int = 0, tag: str = UNKNOWN_TAG) -> bool:
        """Add a word; a zero frequency means the default user weight.

        Returns False when the word cannot be encoded.
        """
        weight = self._freq_weight(freq) if freq else self.user_word_default_weight
        unit = self._make_unit(word, weight, tag)
        if unit is None:
            return False
        self._trie.insert(unit.word, unit)
        return True

    def delete_user_word(self, word: str, tag: str = UNKNOWN_TAG) -> bool:
        """Remove the trie branch under the word's first rune."""
        unit = self._make_unit(word, self.user_word_default_weight, tag)
        if unit is None:
            return False
        self._trie.delete(unit.word)
        return True

    def find(self, runes: Sequence[Union[int, RuneStr]]) -> Optional[DictUnit]:
        """Return the entry for exactly these runes, or None."""
        return self._trie.find(runes)

    def find_dags(
        self, runes: Sequence[RuneStr], max_word_len: int = MAX_WORD_LENGTH
    ) -> list[Dag]:
        """Return the word-end graph of the runes."""
        return self._trie.find_dags(runes, max_word_len)

    def contains(self, word: str) -> bool:
        """True when the word is in the dictionary."""
        try:
            runes = decode_unicode(word)
        except ValueError:
            return False
        return self._trie.find(runes) is not None

    def is_user_dict_single_chinese_word(self, rune: int) -> bool:
        """True when a user dictionary defined this single rune as a word."""
        return rune in self._single_words

    def insert_user_dict_line(self, line: str) -> None:
        """Add one user dictionary line: ``word``, ``word tag`` or ``word freq tag``.

        Lines with any other number of columns are ignored.
        """
        fields = split(line, " ")
        if len(fields) == 1:
            unit = self._make_unit(fields[0], self.user_word_default_weight, UNKNOWN_TAG)
        elif len(fields) == 2:
            unit = self._make_unit(fields[0], self.user_word_default_weight, fields[1])
        elif len(fields) == 3:
            weight = self._freq_weight(_atoi(fields[1]))
            unit = self._make_unit(fields[0], weight, fields[2])
        else:
            return
        if unit is None or not unit.word:
            return
        self._trie.insert(unit.word, unit)
        if len(unit.word) == 1:
            self._single_words.add(unit.word[0])

    def load_user_dict(self, source: Union[PathLike, Iterable[str]]) -> None:
        """Load user words from paths separated by '|' or ';', or from lines.

        A set of lines is loaded in sorted order.
        """
        if isinstance(source, (str, os.PathLike)):
            for path in split(os.fspath(source), "|;"):
                with open(path, encoding="utf-8") as handle:
                    for line in handle:
                        line = line.rstrip("\n")
                        if line:
                            self.insert_user_dict_line(line)
            return
        lines = sorted(source) if isinstance(source, (set, frozenset)) else source
        for line in lines:
            self.insert_user_dict_line(line)