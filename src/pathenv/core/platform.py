"""Search-path list conventions of the host platform.

POSIX systems separate ``PATH`` entries with ``:`` and have no way to
escape it. Windows uses ``;`` and lets double quotes wrap a region in
which ``;`` is literal; a double quote itself can never appear in an
entry. The convention for this process is picked once at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class PathPlatform:
    """Name, delimiter and quoting of one platform's search-path lists."""

    name: str
    path_var: str
    delimiter: str
    quote: Optional[str] = None

    def split(self, text: str) -> Iterator[str]:
        """Lazily yield the entries of a delimited list.

        An empty string is one empty entry, and a trailing delimiter
        yields a trailing empty entry, matching how shells read ``PATH``.
        """
        if self.quote is None:
            start = 0
            while True:
                end = text.find(self.delimiter, start)
                if end < 0:
                    yield text[start:]
                    return
                yield text[start:end]
                start = end + 1

        current: list[str] = []
        quoted = False
        for ch in text:
            if ch == self.quote:
                quoted = not quoted
            elif ch == self.delimiter and not quoted:
                yield "".join(current)
                current = []
            else:
                current.append(ch)
        yield "".join(current)

    def representable(self, entry: str) -> bool:
        """Whether ``entry`` can be written into a list unambiguously."""
        if self.quote is None:
            return self.delimiter not in entry
        return self.quote not in entry

    def encode(self, entry: str) -> str:
        """Render one representable entry for the joined list."""
        if self.quote is not None and self.delimiter in entry:
            return f"{self.quote}{entry}{self.quote}"
        return entry


POSIX = PathPlatform(name="posix", path_var="PATH", delimiter=":")
WINDOWS = PathPlatform(name="windows", path_var="Path", delimiter=";", quote='"')

PLATFORM = WINDOWS if os.name == "nt" else POSIX
PATH_VAR_NAME = PLATFORM.path_var
