"""Semantic class naming for element groups.

Naming precedence (first match wins):
    1. dotted component syntax (``Otp.Root`` -> ``otp-root``)
    2. UI pattern detection over the combined class text
    3. contextual fallback from element tag, style signals and component
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from semantic_css.model.token import UtilityToken
from semantic_css.naming.component import detect_component_context
from semantic_css.naming.patterns import detect_ui_pattern, name_for_pattern

__all__ = ["SemanticNamer", "StyleSignals"]

_HEADINGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})


@dataclass(frozen=True)
class StyleSignals:
    """Coarse purpose hints derived from a group's combined class text."""

    is_interactive: bool
    is_container: bool
    is_typography: bool
    is_input: bool

    @classmethod
    def from_classes(cls, all_classes: str) -> StyleSignals:
        def has(*needles: str) -> bool:
            return any(n in all_classes for n in needles)

        return cls(
            is_interactive=has("hover:", "focus:", "active:", "cursor-pointer"),
            is_container=has("flex", "grid", "p-", "px-", "space-"),
            is_typography=has("text-", "font-"),
            is_input=has("border-") and has("w-", "h-"),
        )


def _dotted_name(element: str) -> str | None:
    # Only the first two segments are used; Foo.Bar.Baz -> foo-bar.
    parts = element.split(".")
    if len(parts) < 2:
        return None
    return f"{parts[0].lower()}-{parts[1].lower()}"


class SemanticNamer:
    """Generate descriptive CSS class names for element groups.

    A per-instance counter increases on every call and disambiguates fallback
    names; a fresh namer given the same inputs yields the same names.
    """

    def __init__(self) -> None:
        self._counter = 0

    @property
    def counter(self) -> int:
        return self._counter

    def reset(self) -> None:
        self._counter = 0

    def generate_semantic_name(
        self,
        element: str,
        tokens: Sequence[UtilityToken],
        component_context: str = "",
    ) -> str:
        self._counter += 1

        dotted = _dotted_name(element)
        if dotted is not None:
            return dotted

        class_names = [t.name for t in tokens]
        component = detect_component_context(class_names, component_context)
        all_classes = " ".join(class_names)

        pattern = detect_ui_pattern(all_classes)
        if pattern is not None:
            return name_for_pattern(pattern, component)

        clean_element = element.replace(".", "_").lower()
        return self.contextual_name(clean_element, all_classes, component, self._counter)

    @staticmethod
    def contextual_name(element: str, all_classes: str, component: str, counter: int) -> str:
        """Name a group from its tag, style signals and component context."""
        signals = StyleSignals.from_classes(all_classes)
        c = component

        if element == "button":
            if c:
                return f"{c}-button" if signals.is_interactive else f"{c}-trigger"
            return "button-primary" if signals.is_interactive else "button"

        if element == "input":
            return f"{c}-input" if c else "input-field"

        if element in _HEADINGS:
            return f"{c}-heading" if c else f"{element}-text"

        if element == "p":
            return f"{c}-text" if c else "p-text"

        if element == "div":
            return _div_name(all_classes, c, signals, counter)

        if element == "form":
            return f"{c}-form" if c else "form-container"

        if element == "nav":
            return "navigation"

        if element == "header":
            return "header-container"

        if element == "section":
            return f"{c}-section" if c else "section-container"

        if c:
            return f"{c}-{element}"
        if signals.is_interactive:
            return f"{element}-interactive"
        if signals.is_container:
            return f"{element}-container"
        return element


def _div_name(all_classes: str, component: str, signals: StyleSignals, counter: int) -> str:
    if component:
        if "min-h-screen" in all_classes or (
            signals.is_container and "justify-center" in all_classes
        ):
            return f"{component}-root"
        if signals.is_container and signals.is_input:
            return f"{component}-input-group"
        if signals.is_container and signals.is_typography:
            return f"{component}-content"
        if signals.is_container:
            return f"{component}-container"
        if signals.is_typography:
            return f"{component}-text"
        return f"{component}-element-{counter}"

    if signals.is_container and "grid-cols" in all_classes:
        return "grid-container"
    if signals.is_container and signals.is_typography:
        return "content-container"
    if signals.is_container:
        return "layout-container"
    if signals.is_typography:
        return "text-container"
    return f"container-{counter}"
