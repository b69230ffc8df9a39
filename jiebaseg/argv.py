"""Simple command-line argument splitting into positionals, options and flags."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, Union


class ArgvContext:
    """Arguments split into positionals, ``-key value`` options and lone flags.

    A word starting with '-' takes the next word as its value unless that
    word also starts with '-', in which case it is a flag.
    """

    def __init__(self, argv: Optional[Sequence[str]] = None) -> None:
        items = list(sys.argv if argv is None else argv)
        self.args: list[str] = []
        self.options: dict[str, str] = {}
        self.flags: set[str] = set()
        i = 0
        while i < len(items):
            item = items[i]
            if item.startswith("-"):
                if i + 1 < len(items) and not items[i + 1].startswith("-"):
                    self.options[item] = items[i + 1]
                    i += 1
                else:
                    self.flags.add(item)
            else:
                self.args.append(item)
            i += 1

    def __getitem__(self, key: Union[int, str]) -> str:
        """Return a positional by index or an option's value by name; '' when absent."""
        if isinstance(key, int):
            return self.args[key] if 0 <= key < len(self.args) else ""
        return self.options.get(key, "")

    def has_key(self, key: str) -> bool:
        """True when ``key`` was given as an option or a flag."""
        return key in self.options or key in self.flags

    def __str__(self) -> str:
        args = "[]" if not self.args else "[" + ", ".join(f'"{a}"' for a in self.args) + "]"
        options = "{" + ", ".join(f"{k}:{v}" for k, v in sorted(self.options.items())) + "}"
        flags = "{" + ", ".join(sorted(self.flags)) + "}"
        return args + options + flags