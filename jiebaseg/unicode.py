"""UTF-8 rune decoding and word-range helpers used by the segmenters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

Text = Union[str, bytes, bytearray]


def _to_bytes(text: Text) -> bytes:
    if isinstance(text, str):
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"cannot encode text as UTF-8: {exc}") from exc
    return bytes(text)


@dataclass(frozen=True)
class RuneStr:
    """A decoded code point with its byte and rune position in the source."""

    rune: int
    offset: int
    length: int
    unicode_offset: int = 0
    unicode_length: int = 0

    def __str__(self) -> str:
        return f'{{"rune": "{self.rune}", "offset": {self.offset}, "len": {self.length}}}'


@dataclass(frozen=True)
class Word:
    """A segmented word with its byte offset and its rune offset and length."""

    word: str
    offset: int
    unicode_offset: int = 0
    unicode_length: int = 0

    def __str__(self) -> str:
        return f'{{"word": "{self.word}", "offset": {self.offset}}}'


@dataclass(frozen=True)
class WordRange:
    """An inclusive range [left, right] of indices into a rune list."""

    left: int
    right: int

    def length(self) -> int:
        return self.right - self.left + 1

    def is_all_ascii(self, runes: Sequence[RuneStr]) -> bool:
        return all(r.rune < 0x80 for r in runes[self.left : self.right + 1])


def decode_utf8_to_rune(data: Text) -> tuple[int, int]:
    """Decode the first rune of ``data``; return ``(rune, byte_length)``.

    A byte length of 0 means the leading bytes could not be decoded.
    """
    data = _to_bytes(data)
    if not data:
        return 0, 0
    size = len(data)
    b0 = data[0]
    if not b0 & 0x80:
        return b0 & 0x7F, 1
    if b0 <= 0xDF and size > 1:
        return ((b0 & 0x1F) << 6) | (data[1] & 0x3F), 2
    if b0 <= 0xEF and size > 2:
        return ((b0 & 0x0F) << 12) | ((data[1] & 0x3F) << 6) | (data[2] & 0x3F), 3
    if b0 <= 0xF7 and size > 3:
        rune = (
            ((b0 & 0x07) << 18)
            | ((data[1] & 0x3F) << 12)
            | ((data[2] & 0x3F) << 6)
            | (data[3] & 0x3F)
        )
        return rune, 4
    return 0, 0


def decode_runes(text: Text) -> list[RuneStr]:
    """Decode UTF-8 text into runes; raise ValueError on malformed input."""
    data = _to_bytes(text)
    runes: list[RuneStr] = []
    pos = 0
    while pos < len(data):
        rune, length = decode_utf8_to_rune(data[pos : pos + 4] if len(data) - pos > 4 else data[pos:])
        if length == 0:
            raise ValueError(f"UTF-8 decode failed at byte {pos}")
        runes.append(RuneStr(rune, pos, length, len(runes), 1))
        pos += length
    return runes


def decode_unicode(text: Text) -> list[int]:
    """Decode UTF-8 text into a list of code points."""
    return [r.rune for r in decode_runes(text)]


def is_single_word(text: Text) -> bool:
    """True when the text consists of exactly one decodable rune."""
    data = _to_bytes(text)
    _, length = decode_utf8_to_rune(data)
    return length == len(data)


def _word(data: bytes, runes: Sequence[RuneStr], left: int, right: int) -> Word:
    first, last = runes[left], runes[right]
    if last.offset < first.offset:
        raise ValueError("word range ends before it starts")
    size = last.offset - first.offset + last.length
    unicode_length = last.unicode_offset - first.unicode_offset + last.unicode_length
    chunk = data[first.offset : first.offset + size]
    return Word(chunk.decode("utf-8", errors="replace"), first.offset, first.unicode_offset, unicode_length)


def word_from_runes(data: Text, runes: Sequence[RuneStr], left: int, right: int) -> Word:
    """Build the word spanning runes ``left`` to ``right`` inclusive."""
    return _word(_to_bytes(data), runes, left, right)


def words_from_ranges(
    data: Text, runes: Sequence[RuneStr], ranges: Iterable[WordRange]
) -> list[Word]:
    """Turn word ranges over ``runes`` into words of ``data``."""
    raw = _to_bytes(data)
    return [_word(raw, runes, wr.left, wr.right) for wr in ranges]