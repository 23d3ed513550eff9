"""Structured event logging for solver runs and the CLI."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol, TextIO

from .exceptions import ConfigError

LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}


class Logger(Protocol):
    """Protocol for event loggers accepted by the solver."""

    def debug(self, event: str, **fields: Any) -> None:
        ...

    def info(self, event: str, **fields: Any) -> None:
        ...

    def warning(self, event: str, **fields: Any) -> None:
        ...


class NoopLogger:
    """Logger that discards all events."""

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


class StdLogger:
    """Write one line per event, either ``level event k=v ...`` or JSON.

    Args:
        level: Minimum level emitted (``"debug"``, ``"info"`` or ``"warning"``).
        json_fmt: Emit each event as a JSON object instead of key=value text.
        stream: Destination, ``sys.stderr`` by default.
    """

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        if level not in LEVELS:
            raise ConfigError(f"unknown log level {level!r}; expected one of {sorted(LEVELS)}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` with additional ``fields``."""
        if not self.enabled(level):
            return
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update(fields)
            self.stream.write(json.dumps(obj) + "\n")
        else:
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            self.stream.write(f"{level} {event} {kv}".rstrip() + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)


def make_logger(level: str | None, json_fmt: bool = False, stream: TextIO | None = None) -> Logger:
    """Return a :class:`StdLogger`, or a :class:`NoopLogger` when ``level`` is ``None``."""
    if level is None:
        return NoopLogger()
    return StdLogger(level=level, json_fmt=json_fmt, stream=stream)


__all__ = ["LEVELS", "Logger", "NoopLogger", "StdLogger", "make_logger"]
