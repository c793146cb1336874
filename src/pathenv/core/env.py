"""Environment variable access.

All reads and writes of environment variables go through an
``Environment`` provider. The active provider is held in a ContextVar:
by default it is the real process environment, and tests swap in a
``MemoryEnvironment`` so nothing touches ``os.environ``.

The process environment is shared by every thread and no locking is
added here; concurrent writers race exactly as ``os.environ`` does.
"""

import os
from contextvars import ContextVar, Token
from typing import Dict, Iterator, Mapping, Optional, Protocol, Tuple


class Environment(Protocol):
    """Read/write capability over a set of environment variables."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class ProcessEnvironment:
    """The environment of the running process."""

    def get(self, key: str) -> Optional[str]:
        """Get variable value, or None if not set."""
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        """Set variable for this process and children started later."""
        os.environ[key] = value


class MemoryEnvironment:
    """An isolated in-memory environment.

    Keys compare case-insensitively when ``case_insensitive`` is set,
    mirroring the Windows environment block.
    """

    def __init__(
        self,
        initial: Optional[Mapping[str, str]] = None,
        case_insensitive: bool = os.name == "nt",
    ) -> None:
        self.case_insensitive = case_insensitive
        self._vars: Dict[str, Tuple[str, str]] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    @classmethod
    def snapshot(cls) -> "MemoryEnvironment":
        """Copy the current process environment."""
        return cls(dict(os.environ))

    def _key(self, key: str) -> str:
        return key.upper() if self.case_insensitive else key

    def get(self, key: str) -> Optional[str]:
        """Get variable value, or None if not set."""
        item = self._vars.get(self._key(key))
        return item[1] if item else None

    def set(self, key: str, value: str) -> None:
        """Set variable value."""
        self._vars[self._key(key)] = (key, value)

    def remove(self, key: str) -> None:
        """Remove variable if present."""
        self._vars.pop(self._key(key), None)

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate ``(name, value)`` pairs using the names as last set."""
        return iter(list(self._vars.values()))

    def __len__(self) -> int:
        return len(self._vars)


_process = ProcessEnvironment()
_env_var: ContextVar[Environment] = ContextVar("pathenv_environment", default=_process)


class Env:
    """Namespace for the active environment provider."""

    @staticmethod
    def current() -> Environment:
        """Get the provider used by the current context."""
        return _env_var.get()

    @staticmethod
    def provide(env: Environment) -> Token[Environment]:
        """Make ``env`` the provider of the current context."""
        return _env_var.set(env)

    @staticmethod
    def restore(token: Token[Environment]) -> None:
        """Undo a previous ``provide``."""
        _env_var.reset(token)

    @staticmethod
    def get(key: str) -> Optional[str]:
        """Get variable value from the active provider."""
        return _env_var.get().get(key)

    @staticmethod
    def set(key: str, value: str) -> None:
        """Set variable value in the active provider."""
        _env_var.get().set(key, value)
