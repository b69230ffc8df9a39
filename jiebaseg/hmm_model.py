"""Hidden Markov model of word-boundary states for unknown words."""

from __future__ import annotations

import os
import re
from typing import Iterator, TextIO, Union

from .strutil import split, trim
from .unicode import decode_unicode

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _content_lines(handle: TextIO) -> Iterator[str]:
    for raw in handle:
        line = trim(raw)
        if line and not line.startswith("#"):
            yield line


def _next_line(lines: Iterator[str]) -> str:
    line = next(lines, None)
    if line is None:
        raise ValueError("HMM model file ends early")
    return line


class HMMModel:
    """Start, transition and emission log probabilities of the B/E/M/S states."""

    B, E, M, S = 0, 1, 2, 3
    STATUS_SUM = 4
    STATE_NAMES = "BEMS"

    def __init__(self, model_path: Union[str, "os.PathLike[str]"]) -> None:
        with open(model_path, encoding="utf-8") as handle:
            lines = _content_lines(handle)
            self.start_prob = self._read_row(_next_line(lines))
            self.trans_prob = [self._read_row(_next_line(lines)) for _ in range(self.STATUS_SUM)]
            self.emit_probs = [
                self._read_emit(_next_line(lines)) for _ in range(self.STATUS_SUM)
            ]

    def _read_row(self, line: str) -> list[float]:
        fields = split(line, " ")
        if len(fields) != self.STATUS_SUM:
            raise ValueError(f"expected {self.STATUS_SUM} probabilities: {line!r}")
        return [_atof(field) for field in fields]

    @staticmethod
    def _read_emit(line: str) -> dict[int, float]:
        probs: dict[int, float] = {}
        for item in split(line, ","):
            parts = split(item, ":")
            if len(parts) != 2:
                raise ValueError(f"illegal emission entry: {item!r}")
            runes = decode_unicode(parts[0])
            if len(runes) != 1:
                raise ValueError(f"emission key must be one character: {parts[0]!r}")
            probs[runes[0]] = _atof(parts[1])
        return probs

    def emit_prob(self, state: int, rune: int, default: float) -> float:
        """Return the emission log probability of ``rune`` in ``state``."""
        return self.emit_probs[state].get(rune, default)