"""Prefix tree over runes mapping dictionary words to their entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Union

from .unicode import RuneStr

MAX_WORD_LENGTH = 512


@dataclass
class DictUnit:
    """A dictionary entry: the word's runes, its log weight and its tag."""

    word: tuple[int, ...]
    weight: float = 0.0
    tag: str = ""


@dataclass
class Dag:
    """Possible word ends starting at one rune of a sentence."""

    runestr: RuneStr
    nexts: list[tuple[int, Optional[DictUnit]]] = field(default_factory=list)
    info: Optional[DictUnit] = None
    weight: float = 0.0


class _TrieNode:
    __slots__ = ("next", "value")

    def __init__(self) -> None:
        self.next: Optional[dict[int, _TrieNode]] = None
        self.value: Optional[DictUnit] = None


def _rune(item: Union[int, RuneStr]) -> int:
    return item.rune if isinstance(item, RuneStr) else int(item)


class Trie:
    """A rune trie holding one DictUnit per stored word."""

    def __init__(
        self,
        keys: Iterable[Sequence[int]] = (),
        values: Iterable[DictUnit] = (),
    ) -> None:
        self._root = _TrieNode()
        keys, values = list(keys), list(values)
        if not keys or not values:
            return
        if len(keys) != len(values):
            raise ValueError("keys and values differ in length")
        for key, value in zip(keys, values):
            self.insert(key, value)

    def find(self, runes: Sequence[Union[int, RuneStr]]) -> Optional[DictUnit]:
        """Return the entry stored for exactly these runes, or None."""
        if not runes:
            return None
        node = self._root
        for item in runes:
            if node.next is None:
                return None
            node = node.next.get(_rune(item))
            if node is None:
                return None
        return node.value

    def find_dags(
        self, runes: Sequence[RuneStr], max_word_len: int = MAX_WORD_LENGTH
    ) -> list[Dag]:
        """For each rune, list the indices where a dictionary word starting there ends.

        The first entry of every Dag is the rune itself, with its entry or None.
        """
        root_children = self._root.next
        dags: list[Dag] = []
        for i, runestr in enumerate(runes):
            node = root_children.get(runestr.rune) if root_children is not None else None
            dag = Dag(runestr, [(i, node.value if node is not None else None)])
            for j, following in enumerate(runes[i + 1 : i + max_word_len], start=i + 1):
                if node is None or node.next is None:
                    break
                node = node.next.get(following.rune)
                if node is None:
                    break
                if node.value is not None:
                    dag.nexts.append((j, node.value))
            dags.append(dag)
        return dags

    def insert(self, key: Sequence[int], value: DictUnit) -> None:
        """Store ``value`` under ``key``; an empty key is ignored."""
        if not key:
            return
        node = self._root
        for rune in key:
            if node.next is None:
                node.next = {}
            node = node.next.setdefault(rune, _TrieNode())
        node.value = value

    def delete(self, key: Sequence[int]) -> None:
        """Drop the branch under the first rune of ``key``.

        Every word that starts with that rune is removed along with it.
        """
        if not key or self._root.next is None:
            return
        self._root.next.pop(key[0], None)