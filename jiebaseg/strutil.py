"""String helpers: splitting, trimming and code-unit conversions."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .unicode import decode_utf8_to_rune

_C_SPACES = " \t\n\v\f\r"


def split(src: str, pattern: str, maxsplit: Optional[int] = None) -> list[str]:
    """Split ``src`` at any character of ``pattern``.

    A trailing separator yields no empty last field, and an empty ``src``
    yields no fields. After ``maxsplit`` fields the rest is kept whole.
    """
    separators = set(pattern)
    result: list[str] = []
    start = 0
    while start < len(src):
        end = next((i for i in range(start, len(src)) if src[i] in separators), None)
        if end is None or (maxsplit is not None and len(result) >= maxsplit):
            result.append(src[start:])
            return result
        result.append(src[start:end])
        start = end + 1
    return result


def is_space(c: Union[int, str]) -> bool:
    """True for the ASCII whitespace characters; False above 0xFF."""
    code = ord(c) if isinstance(c, str) else c
    if code > 0xFF:
        return False
    return chr(code) in _C_SPACES


def ltrim(s: str, ch: Optional[str] = None) -> str:
    """Strip leading whitespace, and ``ch`` too when given."""
    return s.lstrip(_C_SPACES + (ch or ""))


def rtrim(s: str, ch: Optional[str] = None) -> str:
    """Strip trailing whitespace, and ``ch`` too when given."""
    return s.rstrip(_C_SPACES + (ch or ""))


def trim(s: str, ch: Optional[str] = None) -> str:
    """Strip whitespace, and ``ch`` too when given, from both ends."""
    return ltrim(rtrim(s, ch), ch)


def utf8_to_unicode32(data: bytes) -> list[int]:
    """Decode UTF-8 bytes into code points; raise ValueError when malformed."""
    data = bytes(data)
    codes: list[int] = []
    pos = 0
    while pos < len(data):
        rune, length = decode_utf8_to_rune(data[pos : pos + 4])
        if length == 0:
            raise ValueError(f"UTF-8 decode failed at byte {pos}")
        codes.append(rune)
        pos += length
    return codes


def unicode32_to_utf8(codes: Iterable[int]) -> bytes:
    """Encode code points as UTF-8 bytes."""
    out = bytearray()
    for ui in codes:
        if ui <= 0x7F:
            out.append(ui)
        elif ui <= 0x7FF:
            out += bytes((((ui >> 6) & 0x1F) | 0xC0, (ui & 0x3F) | 0x80))
        elif ui <= 0xFFFF:
            out += bytes(
                (((ui >> 12) & 0x0F) | 0xE0, ((ui >> 6) & 0x3F) | 0x80, (ui & 0x3F) | 0x80)
            )
        else:
            out += bytes(
                (
                    ((ui >> 18) & 0x07) | 0xF0,
                    ((ui >> 12) & 0x3F) | 0x80,
                    ((ui >> 6) & 0x3F) | 0x80,
                    (ui & 0x3F) | 0x80,
                )
            )
    return bytes(out)


def utf8_to_unicode16(data: bytes) -> list[int]:
    """Decode UTF-8 bytes of at most three bytes per character into 16-bit units."""
    data = bytes(data)
    codes: list[int] = []
    pos = 0
    size = len(data)
    while pos < size:
        b0 = data[pos]
        if not b0 & 0x80:
            codes.append(b0)
            pos += 1
        elif b0 <= 0xDF and pos + 1 < size:
            codes.append(((b0 & 0x1F) << 6) | (data[pos + 1] & 0x3F))
            pos += 2
        elif b0 <= 0xEF and pos + 2 < size:
            code = ((b0 & 0x0F) << 12) | ((data[pos + 1] & 0x3F) << 6) | (data[pos + 2] & 0x3F)
            codes.append(code & 0xFFFF)
            pos += 3
        else:
            raise ValueError(f"cannot decode byte {pos} into a 16-bit unit")
    return codes


def unicode16_to_utf8(codes: Iterable[int]) -> bytes:
    """Encode 16-bit units as UTF-8 bytes."""
    out = bytearray()
    for code in codes:
        ui = code & 0xFFFF
        if ui <= 0x7F:
            out.append(ui)
        elif ui <= 0x7FF:
            out += bytes((((ui >> 6) & 0x1F) | 0xC0, (ui & 0x3F) | 0x80))
        else:
            out += bytes(
                (((ui >> 12) & 0x0F) | 0xE0, ((ui >> 6) & 0x3F) | 0x80, (ui & 0x3F) | 0x80)
            )
    return bytes(out)


def gbk_decode(data: bytes) -> list[int]:
    """Pair GBK bytes into 16-bit units; ASCII bytes stay single."""
    data = bytes(data)
    codes: list[int] = []
    pos = 0
    while pos < len(data):
        byte = data[pos]
        if not byte & 0x80:
            codes.append(byte)
            pos += 1
        elif pos + 1 < len(data):
            codes.append((byte << 8) | data[pos + 1])
            pos += 2
        else:
            raise ValueError("GBK data ends in the middle of a character")
    return codes


def gbk_encode(codes: Iterable[int]) -> bytes:
    """Turn 16-bit units back into GBK bytes."""
    out = bytearray()
    for code in codes:
        first, second = (code >> 8) & 0xFF, code & 0xFF
        if first & 0x80:
            out += bytes((first, second))
        else:
            out.append(second)
    return bytes(out)


def path_join(path1: str, path2: str) -> str:
    """Join two path parts with a single slash."""
    if path1.endswith("/"):
        return path1 + path2
    return path1 + "/" + path2