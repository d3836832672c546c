"""Gameplay telemetry sinks."""

from .logging import InMemoryTelemetry, LoggingTelemetry, Telemetry

__all__ = ["InMemoryTelemetry", "LoggingTelemetry", "Telemetry"]
