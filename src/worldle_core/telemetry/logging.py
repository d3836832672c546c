"""Contract for gameplay telemetry and the structured-logging sink behind it."""

from __future__ import annotations

import logging
from typing import Any, Protocol


class Telemetry(Protocol):
    """Reports gameplay events such as submitted guesses and won rounds."""

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        """Publish telemetry event to the configured sink."""


class LoggingTelemetry:
    """Writes each event as a log record named after the event."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger("worldle_core.telemetry")
        self._level = level

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        self._logger.log(self._level, event_name, extra=payload)


class InMemoryTelemetry:
    """Keeps events in order; handy for tests and for inspecting a session."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        self.events.append((event_name, dict(payload)))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]
