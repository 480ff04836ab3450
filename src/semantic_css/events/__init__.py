"""Event system: bus and event types for conversion runs."""

from semantic_css.events.bus import EventBus
from semantic_css.events.types import (
    CompilationFallback,
    FileConverted,
    FileSkipped,
    RunCompleted,
    RunStarted,
)

__all__ = [
    "EventBus",
    "CompilationFallback",
    "FileConverted",
    "FileSkipped",
    "RunCompleted",
    "RunStarted",
]
