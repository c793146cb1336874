"""Diagnostic records for pathenv operations.

Every module keeps one logger tagged with its ``service``. A record is a
single stderr line, either ``key=value`` pairs or a JSON object. Output
stays off until something turns the console on: an explicit
``Log.configure`` call, or the ``logging`` section of the user settings,
which is read when the first record is emitted.
"""

import json
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, TextIO


class LogLevel(str, Enum):
    """Record severities, lowest first."""
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return list(LogLevel).index(self)

    @classmethod
    def parse(cls, value: str | None) -> "LogLevel":
        if value is None:
            return cls.INFO
        text = value.strip().lower()
        try:
            return cls("warn" if text == "warning" else text)
        except ValueError:
            raise ValueError(f"unknown log level: {value}") from None


class LogFormat(str, Enum):
    """Line layout of a record."""

    KV = "kv"
    JSON = "json"


@dataclass
class _Sink:
    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.KV
    console: bool = False
    stream: Optional[TextIO] = None
    settled: bool = False


_sink = _Sink()


def _kv(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    text = str(value)
    if not text or "=" in text or any(ch.isspace() for ch in text):
        # ASCII escapes keep surrogate-escaped environment data printable.
        return json.dumps(text)
    return text


class Logger:
    """Emits records tagged with a fixed set of fields."""

    def __init__(self, tags: Optional[Dict[str, Any]] = None):
        self.tags = tags or {}

    def _emit(self, level: LogLevel, message: str, fields: Optional[Dict[str, Any]], force: bool = False) -> None:
        Log.settle()
        if not force and (not _sink.console or level.rank < _sink.level.rank):
            return

        record: Dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "level": level.value,
            "msg": message,
        }
        for key, value in {**self.tags, **(fields or {})}.items():
            if value is not None:
                record[key] = value if isinstance(value, (bool, int, float)) else str(value)

        if _sink.format == LogFormat.JSON:
            line = json.dumps(record, separators=(",", ":"))
        else:
            line = " ".join(f"{key}={_kv(value)}" for key, value in record.items())
        stream = _sink.stream or sys.stderr
        stream.write(line + "\n")
        stream.flush()

    def debug(self, message: str, fields: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.DEBUG, message, fields)

    def info(self, message: str, fields: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.INFO, message, fields)


class Log:
    """Logger factory and process-wide sink settings."""

    _loggers: Dict[str, Logger] = {}

    @classmethod
    def create(cls, tags: Dict[str, Any]) -> Logger:
        """Get the logger for ``tags["service"]``, creating it once."""
        service = tags["service"]
        if service not in cls._loggers:
            cls._loggers[service] = Logger(tags=dict(tags))
        return cls._loggers[service]

    @classmethod
    def configure(
        cls,
        *,
        level: LogLevel | None = None,
        format: LogFormat | None = None,
        console: bool | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Set sink options; unset arguments keep their current value.

        Explicit configuration also stops user settings from being
        applied later.
        """
        _sink.settled = True
        if level is not None:
            _sink.level = level
        if format is not None:
            _sink.format = format
        if console is not None:
            _sink.console = console
        if stream is not None:
            _sink.stream = stream

    @classmethod
    def level(cls) -> LogLevel:
        return _sink.level

    @classmethod
    def settle(cls) -> None:
        """Apply the user's logging settings once, on first use."""
        if _sink.settled:
            return
        _sink.settled = True

        from ..errors import SettingsError
        from ..settings import load_settings

        try:
            settings = load_settings().logging
        except SettingsError as error:
            Log.create({"service": "log"})._emit(
                LogLevel.WARN, "ignoring unusable settings", {"error": error}, force=True
            )
            return

        cls.configure(
            level=LogLevel.parse(settings.level) if settings.level else None,
            format=LogFormat(settings.format) if settings.format else None,
            console=settings.console,
        )

    @classmethod
    def reset(cls) -> None:
        """Drop all sink options, so settings are read again."""
        global _sink
        _sink = _Sink()
