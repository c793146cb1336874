"""Lazy editing of search-path entries.

A ``PathSplitter`` is a single-pass iterator over the entries of a
search-path value. Edits wrap the pending iterator in another lazy stage
and hand it to a new splitter; the splitter they were called on is left
exhausted. Nothing is read from the source value until the result is
iterated or joined.

    new_path = read_path().split().remove("/opt/old/bin").prefix_entry("/opt/new/bin").join()
"""

from __future__ import annotations

import itertools
import os
from typing import Iterable, Iterator, Union

from .core.platform import PLATFORM, PathPlatform
from .errors import JoinPathsError, JoinResult, format_error
from .util.log import Log
from .var import Var

log = Log.create({"service": "splitter"})

PathArg = Union[str, "os.PathLike[str]"]

_EXHAUSTED: Iterator[str] = iter(())


def _entry(path: PathArg) -> str:
    value = os.fspath(path)
    if not isinstance(value, str):
        raise TypeError(f"path entries must be str, not {type(value).__name__}")
    return value


def _entries(paths: Iterable[PathArg]) -> Iterator[str]:
    if isinstance(paths, (str, bytes)):
        raise TypeError("expected an iterable of paths, not a single path")
    return map(_entry, paths)


def split_paths(text: str, platform: PathPlatform = PLATFORM) -> Iterator[str]:
    """Lazily yield the entries of a search-path value."""
    return platform.split(text)


def join_paths(entries: Iterable[PathArg], platform: PathPlatform = PLATFORM) -> JoinResult:
    """Join entries into one search-path value.

    Stops at the first entry the platform cannot represent and returns a
    failed result naming it.
    """
    parts = []
    for index, path in enumerate(entries):
        entry = _entry(path)
        if not platform.representable(entry):
            error = JoinPathsError(entry, index, platform)
            log.debug("join failed", {"error": format_error(error)})
            return JoinResult(error=error)
        parts.append(platform.encode(entry))
    log.debug("joined search path", {"entries": len(parts), "platform": platform.name})
    return JoinResult(value=Var(platform.delimiter.join(parts)))


class PathSplitter:
    """Single-pass pipeline of search-path entries."""

    def __init__(self, entries: Iterable[str], platform: PathPlatform = PLATFORM):
        self._entries = iter(entries)
        self.platform = platform

    @classmethod
    def parse(cls, text: str, platform: PathPlatform = PLATFORM) -> PathSplitter:
        return cls(split_paths(text, platform), platform)

    def _take(self) -> Iterator[str]:
        entries, self._entries = self._entries, _EXHAUSTED
        return entries

    def _then(self, entries: Iterable[str]) -> PathSplitter:
        return PathSplitter(entries, self.platform)

    def remove(self, path: PathArg) -> PathSplitter:
        """Drop every entry exactly equal to ``path``.

        No normalization happens: ``/usr/bin`` and ``/usr/bin/`` differ.
        """
        target = _entry(path)
        return self._then(entry for entry in self._take() if entry != target)

    def prefix_entry(self, path: PathArg) -> PathSplitter:
        """Insert one entry before all others."""
        return self._then(itertools.chain((_entry(path),), self._take()))

    def suffix_entry(self, path: PathArg) -> PathSplitter:
        """Append one entry after all others."""
        return self._then(itertools.chain(self._take(), (_entry(path),)))

    def prefix(self, paths: Iterable[PathArg]) -> PathSplitter:
        """Insert entries, in the given order, before all others."""
        return self._then(itertools.chain(_entries(paths), self._take()))

    def suffix(self, paths: Iterable[PathArg]) -> PathSplitter:
        """Append entries, in the given order, after all others."""
        return self._then(itertools.chain(self._take(), _entries(paths)))

    def join(self) -> JoinResult:
        """Consume the remaining entries into a new search-path value."""
        return join_paths(self._take(), self.platform)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return next(self._entries)
