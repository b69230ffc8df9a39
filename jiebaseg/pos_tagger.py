"""Part-of-speech tagging by dictionary lookup with simple fallbacks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .unicode import RuneStr, decode_runes

if TYPE_CHECKING:
    from .segment_base import SegmentTagged

POS_M = "m"
POS_ENG = "eng"
POS_X = "x"


def _special_rule(runes: Sequence[RuneStr]) -> str:
    """Tag a word missing from the dictionary by the ASCII it holds."""
    limit = len(runes) // 2
    eng = digits = 0
    for rune in runes:
        if eng >= limit:
            break
        if rune.rune < 0x80:
            eng += 1
            if ord("0") <= rune.rune <= ord("9"):
                digits += 1
    if eng == 0:
        return POS_X
    if digits == eng:
        return POS_M
    return POS_ENG


class PosTagger:
    """Looks up word tags in the dictionary of a tagged segmenter."""

    def tag(self, sentence: str, segment: "SegmentTagged") -> list[tuple[str, str]]:
        """Segment ``sentence`` and pair every word with its tag."""
        return [(word, self.lookup_tag(word, segment)) for word in segment.cut(sentence)]

    def lookup_tag(self, word: str, segment: "SegmentTagged") -> str:
        """Return the dictionary tag of ``word``, or a tag guessed from its characters."""
        try:
            runes = decode_runes(word)
        except ValueError:
            return POS_X
        unit = segment.dict_trie.find(runes)
        if unit is None or not unit.tag:
            return _special_rule(runes)
        return unit.tag