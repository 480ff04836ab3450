"""Mapping engine: resolves a utility class into CSS property assignments.

Resolution order:
    1. exact match against ``STATIC_MAPPINGS``
    2. the first matching entry of ``PATTERN_RULES`` (registration order)
    3. the modern-features sub-resolver
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from semantic_css.mapping.modern import ModernFeatures
from semantic_css.mapping.tables import (
    STATIC_MAPPINGS,
    convert_spacing,
    get_color,
    get_media_query,
    get_text_size,
)
from semantic_css.model.rule import HOVER, MEDIA, CSSProperty

__all__ = ["MappingEngine", "PatternRule", "PATTERN_RULES"]

_NUMBER = r"(\d+(?:\.\d+)?)"

_PADDING_SIDES: dict[str, tuple[str, ...]] = {
    "x": ("padding-left", "padding-right"),
    "y": ("padding-top", "padding-bottom"),
    "t": ("padding-top",),
    "r": ("padding-right",),
    "b": ("padding-bottom",),
    "l": ("padding-left",),
}

_MARGIN_SIDES: dict[str, tuple[str, ...]] = {
    side: tuple(p.replace("padding", "margin") for p in props)
    for side, props in _PADDING_SIDES.items()
}

_COLOR_PROPERTY = {
    "bg": "background-color",
    "text": "color",
    "border": "border-color",
}


@dataclass(frozen=True)
class PatternRule:
    """A (pattern, converter) pair; the converter receives the match groups."""

    name: str
    pattern: re.Pattern[str]
    convert: Callable[[tuple[str, ...]], list[CSSProperty]]

    def apply(self, token: str) -> list[CSSProperty] | None:
        match = self.pattern.match(token)
        if match is None:
            return None
        return self.convert(match.groups())


def _single(prop: str, transform: Callable[[str], str]) -> Callable[[tuple[str, ...]], list[CSSProperty]]:
    def convert(groups: tuple[str, ...]) -> list[CSSProperty]:
        return [CSSProperty(prop, transform(groups[0]))]

    return convert


def _sides(table: dict[str, tuple[str, ...]]) -> Callable[[tuple[str, ...]], list[CSSProperty]]:
    def convert(groups: tuple[str, ...]) -> list[CSSProperty]:
        direction, raw = groups
        value = convert_spacing(raw)
        return [CSSProperty(prop, value) for prop in table.get(direction, ())]

    return convert


def _color(prop: str) -> Callable[[tuple[str, ...]], list[CSSProperty]]:
    def convert(groups: tuple[str, ...]) -> list[CSSProperty]:
        family, shade = groups
        return [CSSProperty(prop, get_color(family, shade))]

    return convert


def _responsive_grid(groups: tuple[str, ...]) -> list[CSSProperty]:
    breakpoint, cols = groups
    return [
        CSSProperty(
            f"{MEDIA} {get_media_query(breakpoint)}",
            f"grid-template-columns: repeat({cols}, minmax(0, 1fr))",
        )
    ]


def _hover_color(groups: tuple[str, ...]) -> list[CSSProperty]:
    prefix, family, shade = groups
    prop = _COLOR_PROPERTY.get(prefix, "color")
    return [CSSProperty(HOVER, f"{prop}: {get_color(family, shade)}")]


def _focus_ring(groups: tuple[str, ...]) -> list[CSSProperty]:
    family, shade = groups
    return [CSSProperty("box-shadow", f"0 0 0 2px {get_color(family, shade)}")]


PATTERN_RULES: tuple[PatternRule, ...] = (
    PatternRule("gap", re.compile(rf"^gap-{_NUMBER}$"), _single("gap", convert_spacing)),
    PatternRule("padding", re.compile(rf"^p-{_NUMBER}$"), _single("padding", convert_spacing)),
    PatternRule("padding-side", re.compile(rf"^p([xytrbl])-{_NUMBER}$"), _sides(_PADDING_SIDES)),
    PatternRule("margin", re.compile(rf"^m-{_NUMBER}$"), _single("margin", convert_spacing)),
    PatternRule("margin-side", re.compile(rf"^m([xytrbl])-{_NUMBER}$"), _sides(_MARGIN_SIDES)),
    PatternRule("width", re.compile(rf"^w-{_NUMBER}$"), _single("width", convert_spacing)),
    PatternRule("height", re.compile(rf"^h-{_NUMBER}$"), _single("height", convert_spacing)),
    PatternRule(
        "text-size",
        re.compile(r"^text-(xs|sm|base|lg|xl|2xl|3xl|4xl|5xl|6xl|7xl|8xl|9xl)$"),
        _single("font-size", get_text_size),
    ),
    PatternRule("bg-color", re.compile(r"^bg-(\w+)-(\d+)$"), _color("background-color")),
    PatternRule("text-color", re.compile(r"^text-(\w+)-(\d+)$"), _color("color")),
    PatternRule("border-color", re.compile(r"^border-(\w+)-(\d+)$"), _color("border-color")),
    PatternRule(
        "responsive-grid",
        re.compile(r"^(sm|md|lg|xl|2xl):grid-cols-(\d+)$"),
        _responsive_grid,
    ),
    PatternRule("hover-color", re.compile(r"^hover:(\w+)-(\w+)-(\d+)$"), _hover_color),
    PatternRule("focus-ring", re.compile(r"^focus:ring-(\w+)-(\d+)$"), _focus_ring),
)


class MappingEngine:
    """Translate utility classes to CSS property assignments.

    The lookup tables are module-level constants; an engine instance holds
    no mutable state and may be shared freely.
    """

    def __init__(self, modern: ModernFeatures | None = None) -> None:
        self._modern = modern or ModernFeatures()

    def convert(self, token: str) -> list[CSSProperty]:
        """Resolve *token* through the static table and pattern rules only."""
        static = STATIC_MAPPINGS.get(token)
        if static is not None:
            return list(static)
        for rule in PATTERN_RULES:
            props = rule.apply(token)
            if props is not None:
                return props
        return []

    def resolve(self, token: str) -> list[CSSProperty]:
        """Resolve *token*, delegating to the modern-features resolver last.

        Returns an empty list when nothing recognizes the token.
        """
        props = self.convert(token)
        if props:
            return props
        return self._modern.convert(token)
