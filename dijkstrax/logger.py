"""Structured event logging for solver runs.

Events are a name plus keyword fields. The solver emits ``relax`` at debug
level for every improved vertex and ``solve`` at info level when a run ends.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol, TextIO

from .exceptions import ConfigError

LEVELS = ("debug", "info", "warning")


class Logger(Protocol):
    """Protocol for the loggers accepted by the solver and the CLI."""

    def info(self, event: str, **fields: Any) -> None:
        ...

    def debug(self, event: str, **fields: Any) -> None:
        ...


class NoopLogger:
    """Logger that discards all events."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


class StdLogger:
    """Write one line per event to ``stream`` (stderr by default).

    Plain lines read ``<level> <event> k=v ...``; with ``json_fmt`` each line
    is a JSON object holding ``level``, ``event`` and the fields. ``level``
    is the lowest level written; ``"warning"`` silences solver events.
    """

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        if level not in LEVELS:
            raise ConfigError(f"unknown log level {level!r}, expected one of {', '.join(LEVELS)}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr
        self._threshold = LEVELS.index(level)

    def _render(self, level: str, event: str, fields: Dict[str, Any]) -> str:
        if self.json_fmt:
            # inf distances serialise as Infinity
            return json.dumps({"level": level, "event": event, **fields}, default=str)
        kv = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{level} {event} {kv}".rstrip()

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        if LEVELS.index(level) >= self._threshold:
            self.stream.write(self._render(level, event, fields) + "\n")

    def info(self, event: str, **fields: Any) -> None:
        self._emit("info", event, fields)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("debug", event, fields)
