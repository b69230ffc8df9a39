"""Key = value configuration files."""

from __future__ import annotations

import os
import re
from typing import Union

from .strutil import split, trim

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class Config:
    """Settings read from lines of ``key = value``; ``#`` starts a comment line."""

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self._values: dict[str, str] = {}
        with open(path, encoding="utf-8") as handle:
            for lineno, raw in enumerate(handle, start=1):
                line = trim(raw)
                if not line or line.startswith("#"):
                    continue
                fields = split(line, "=")
                if len(fields) != 2:
                    raise ValueError(f"line {lineno} illegal: {line!r}")
                key, value = trim(fields[0]), trim(fields[1])
                if key in self._values:
                    raise ValueError(f"key {key!r} already exists")
                self._values[key] = value

    def get(self, key: str, default: str = "") -> str:
        """Return the value of ``key``, or ``default``."""
        return self._values.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Return the leading integer of the value of ``key``, or ``default``."""
        text = self.get(key, "")
        if not text:
            return default
        match = _INT_PREFIX.match(text)
        return int(match.group(1)) if match else 0

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __bool__(self) -> bool:
        return bool(self._values)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}:{v}" for k, v in sorted(self._values.items())) + "}"