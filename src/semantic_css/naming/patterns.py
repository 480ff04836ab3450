"""High-confidence UI pattern detection over a group's combined class text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

__all__ = ["UIPattern", "UI_PATTERNS", "detect_ui_pattern", "name_for_pattern"]


def _has_all(*needles: str) -> Callable[[str], bool]:
    return lambda text: all(n in text for n in needles)


def _has_any(*needles: str) -> Callable[[str], bool]:
    return lambda text: any(n in text for n in needles)


def _both(*checks: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda text: all(check(text) for check in checks)


_EDGE_OFFSET = _has_any("top-", "bottom-")


@dataclass(frozen=True)
class UIPattern:
    """A named multi-class heuristic.

    ``suffix`` is appended to a known component context; ``generic`` is used
    when no context is available.
    """

    name: str
    suffix: str
    generic: str
    matches: Callable[[str], bool]


# Precedence order: the first matching pattern wins.
UI_PATTERNS: tuple[UIPattern, ...] = (
    UIPattern(
        "modal-overlay",
        "overlay",
        "modal-overlay",
        _both(_has_all("fixed", "inset-0"), _has_any("bg-black", "bg-gray")),
    ),
    UIPattern(
        "dropdown-menu",
        "menu",
        "dropdown-menu",
        _both(_has_all("absolute", "shadow", "bg-white"), _EDGE_OFFSET),
    ),
    UIPattern(
        "card-container",
        "card",
        "card-container",
        _both(_has_all("rounded", "shadow", "bg-white"), _has_any("p-", "px-")),
    ),
    UIPattern(
        "toast-notification",
        "toast",
        "toast-notification",
        _both(
            _has_all("fixed"),
            _EDGE_OFFSET,
            _has_any("bg-green", "bg-red", "bg-yellow", "bg-blue"),
        ),
    ),
    UIPattern(
        "hero-section",
        "hero",
        "hero-section",
        _has_all("min-h-screen", "flex", "items-center", "justify-center"),
    ),
)


def detect_ui_pattern(all_classes: str) -> UIPattern | None:
    """Return the first pattern in ``UI_PATTERNS`` matching *all_classes*."""
    for pattern in UI_PATTERNS:
        if pattern.matches(all_classes):
            return pattern
    return None


def name_for_pattern(pattern: UIPattern, component: str) -> str:
    if component:
        return f"{component}-{pattern.suffix}"
    return pattern.generic
