"""Environment variable values.

A ``Var`` holds the value of one environment variable exactly as the
OS handed it over. On POSIX, bytes that do not decode under the file
system encoding are carried as surrogate escapes (as ``os.environ``
does), so nothing is lost until ``to_text()`` is asked for valid text.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from .core.env import Env, Environment
from .core.platform import PATH_VAR_NAME
from .errors import TextResult, VarEncodingError, format_error
from .util.log import Log

if TYPE_CHECKING:
    from .splitter import PathSplitter

log = Log.create({"service": "var"})

NativeValue = Union["Var", str, bytes, os.PathLike]


@dataclass(frozen=True, order=True)
class Var:
    """Immutable value of one environment variable."""

    payload: str

    def __post_init__(self) -> None:
        if not isinstance(self.payload, str):
            raise TypeError(f"Var payload must be str, not {type(self.payload).__name__}")

    @classmethod
    def from_text(cls, text: str) -> Var:
        return cls(text)

    @classmethod
    def from_bytes(cls, data: bytes) -> Var:
        """Build from raw OS bytes, keeping undecodable bytes as escapes."""
        return cls(os.fsdecode(data))

    def to_text(self) -> TextResult:
        """Convert to valid Unicode text.

        Fails, returning the untouched variable in the result, when the
        payload carries data no Unicode string can represent.
        """
        try:
            self.payload.encode("utf-8")
        except UnicodeEncodeError:
            error = VarEncodingError(self)
            log.debug("value is not valid text", {"error": format_error(error)})
            return TextResult(error=error)
        return TextResult(text=self.payload)

    def as_os_str(self) -> str:
        """The raw payload for OS-level APIs."""
        return self.payload

    def split(self) -> PathSplitter:
        """Split into search-path entries using this platform's rules."""
        from .splitter import PathSplitter

        return PathSplitter.parse(self.payload)

    def __str__(self) -> str:
        return self.payload

    def __bytes__(self) -> bytes:
        return os.fsencode(self.payload)


def to_native(value: NativeValue) -> str:
    """Convert anything accepted as a variable value to a native string."""
    if isinstance(value, Var):
        return value.payload
    if isinstance(value, (str, bytes, os.PathLike)):
        return os.fsdecode(value)
    raise TypeError(f"cannot use {type(value).__name__} as an environment value")


def read(name: str, env: Optional[Environment] = None) -> Optional[Var]:
    """Read variable ``name``; an unset variable gives None."""
    provider = env if env is not None else Env.current()
    value = provider.get(name)
    if value is None:
        log.debug("variable not set", {"name": name})
        return None
    return Var(value)


def read_path(env: Optional[Environment] = None) -> Optional[Var]:
    """Read the platform's search-path variable."""
    return read(PATH_VAR_NAME, env)


def write_path(value: NativeValue, env: Optional[Environment] = None) -> None:
    """Set the platform's search-path variable.

    Only this process and children it starts afterwards see the change.
    """
    provider = env if env is not None else Env.current()
    native = to_native(value)
    provider.set(PATH_VAR_NAME, native)
    log.info("search path updated", {"name": PATH_VAR_NAME, "length": len(native)})
