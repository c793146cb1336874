"""Errors and result values.

Conversions that can fail on bad data return a result object instead of
raising. ``unwrap()`` on a result raises the carried error for callers
that would rather handle an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .core.platform import PathPlatform
    from .var import Var


class PathEnvError(Exception):
    """Base class for pathenv errors.

    Subclasses keep their constructor arguments in ``args`` so instances
    survive pickling, e.g. across a process pool.
    """


class VarEncodingError(PathEnvError):
    """A variable's payload is not valid Unicode text."""

    def __init__(self, raw: Var):
        super().__init__(raw)
        self.raw = raw

    def __str__(self) -> str:
        return "environment value is not valid unicode text"


class JoinPathsError(PathEnvError):
    """An entry cannot be written into a search-path list."""

    def __init__(self, entry: str, index: int, platform: PathPlatform):
        super().__init__(entry, index, platform)
        self.entry = entry
        self.index = index
        self.platform = platform

    def __str__(self) -> str:
        platform = self.platform
        char = platform.quote if platform.quote is not None else platform.delimiter
        return f"path entry {self.index} contains separator {char!r}: {self.entry!r}"


class SettingsError(PathEnvError):
    """A settings source is unreadable or invalid."""

    def __init__(self, source: str, reason: str):
        super().__init__(source, reason)
        self.source = source
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.source}: {self.reason}"


@dataclass(frozen=True)
class TextResult:
    """Outcome of converting a variable to text."""

    text: Optional[str] = None
    error: Optional[VarEncodingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def raw(self) -> Optional[Var]:
        """The untouched variable when conversion failed."""
        return self.error.raw if self.error is not None else None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        assert self.text is not None
        return self.text


@dataclass(frozen=True)
class JoinResult:
    """Outcome of joining entries into a search-path value."""

    value: Optional[Var] = None
    error: Optional[JoinPathsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Var:
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


def format_error(error: Any) -> str | None:
    """Format known pathenv errors into user-friendly messages.

    Returns None if the error type is not recognized.
    """
    if isinstance(error, JoinPathsError):
        return (
            f"Cannot join search path: entry {error.index} ({error.entry!r}) "
            f"cannot be represented on {error.platform.name}"
        )
    if isinstance(error, VarEncodingError):
        return "Environment value contains data that is not valid text"
    if isinstance(error, SettingsError):
        return f"Invalid pathenv settings in {error.source}: {error.reason}"
    return None
