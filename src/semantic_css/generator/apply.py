"""@apply output: maps merged properties back to utility tokens.

The reverse mapping is best effort. Values with no utility equivalent are
skipped, so the ``@apply`` list can be shorter than the rule it came from.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, Sequence

from semantic_css.mapping.tables import COLORS, SPACING_UNIT, STATIC_MAPPINGS, TEXT_SIZES, format_number
from semantic_css.model.rule import CSSProperty, SemanticRule

__all__ = ["ApplyGenerator", "APPLY_HEADER", "EMPTY_THEME"]

APPLY_HEADER = "/* Generated CSS using @apply strategy */\n/* This CSS will be compiled to vanilla CSS */"
EMPTY_THEME = "/* No theme variables extracted */"


def _reverse_palette() -> dict[str, str]:
    palette = {"#ffffff": "white", "#000000": "black"}
    for family, shades in COLORS.items():
        for shade, hex_value in shades.items():
            palette.setdefault(hex_value, f"{family}-{shade}")
    return palette


def _reverse_static(prop_name: str) -> dict[str, str]:
    """Value -> token for single-property static utilities of *prop_name*."""
    table: dict[str, str] = {}
    for token, props in STATIC_MAPPINGS.items():
        if len(props) == 1 and props[0].name == prop_name and ":" not in token:
            table.setdefault(props[0].value, token)
    return table


COLOR_TOKENS = MappingProxyType(_reverse_palette())
FONT_SIZE_TOKENS = MappingProxyType({value: f"text-{size}" for size, value in TEXT_SIZES.items()})
RADIUS_TOKENS = MappingProxyType(_reverse_static("border-radius"))
WEIGHT_TOKENS = MappingProxyType(_reverse_static("font-weight"))
DISPLAY_TOKENS = MappingProxyType(_reverse_static("display"))
_COLOR_HEX = {name: hex_value for hex_value, name in COLOR_TOKENS.items()}

_FIXED_TOKENS: MappingProxyType[tuple[str, str], str] = MappingProxyType({
    ("flex-direction", "column"): "flex-col",
    ("flex-direction", "row"): "flex-row",
    ("align-items", "center"): "items-center",
    ("align-items", "flex-start"): "items-start",
    ("align-items", "flex-end"): "items-end",
    ("justify-content", "center"): "justify-center",
    ("justify-content", "space-between"): "justify-between",
    ("justify-content", "flex-start"): "justify-start",
    ("justify-content", "flex-end"): "justify-end",
})

_FRACTIONS = MappingProxyType({
    "100%": "full",
    "50%": "1/2",
    "33.333%": "1/3",
    "25%": "1/4",
    "100vh": "screen",
})

_SPACING_PREFIX = MappingProxyType({
    "padding": "p",
    "padding-top": "pt",
    "padding-right": "pr",
    "padding-bottom": "pb",
    "padding-left": "pl",
    "margin": "m",
    "margin-top": "mt",
    "margin-right": "mr",
    "margin-bottom": "mb",
    "margin-left": "ml",
    "gap": "gap",
})

# (first side, second side) -> axis prefix
_AXIS_PAIRS = (("pl", "pr", "px"), ("pt", "pb", "py"), ("ml", "mr", "mx"), ("mt", "mb", "my"))

_REM_RE = re.compile(r"^(\d+(?:\.\d+)?)rem$")
_SPACING_TOKEN_RE = re.compile(r"^(?:p|m|gap)[xytrbl]?-(\d+(?:\.\d+)?)$")


def spacing_step(value: str) -> str | None:
    """Scale step for a rem length (``"1rem" -> "4"``), or None."""
    if value == "0":
        return "0"
    match = _REM_RE.match(value)
    if match is None:
        return None
    return format_number(float(match.group(1)) / SPACING_UNIT)


def _size_token(prefix: str, value: str) -> str | None:
    if value in _FRACTIONS:
        return f"{prefix}-{_FRACTIONS[value]}"
    step = spacing_step(value)
    return f"{prefix}-{step}" if step is not None else None


def _token_for(prop: CSSProperty) -> str | None:
    name, value = prop.name, prop.value
    if (name, value) in _FIXED_TOKENS:
        return _FIXED_TOKENS[(name, value)]
    if name == "display":
        return DISPLAY_TOKENS.get(value)
    if name == "background-color":
        color = COLOR_TOKENS.get(value)
        return f"bg-{color}" if color else None
    if name == "color":
        color = COLOR_TOKENS.get(value)
        return f"text-{color}" if color else None
    if name == "border-color":
        color = COLOR_TOKENS.get(value)
        return f"border-{color}" if color else None
    if name in _SPACING_PREFIX:
        step = spacing_step(value)
        return f"{_SPACING_PREFIX[name]}-{step}" if step is not None else None
    if name == "width":
        return _size_token("w", value)
    if name == "height":
        return _size_token("h", value)
    if name == "border-radius":
        return RADIUS_TOKENS.get(value)
    if name == "font-weight":
        return WEIGHT_TOKENS.get(value)
    if name == "font-size":
        return FONT_SIZE_TOKENS.get(value)
    return None


def _collapse_axes(tokens: list[str]) -> list[str]:
    """Merge matching side pairs into axis tokens (``pl-4 pr-4 -> px-4``)."""
    result = list(tokens)
    for first, second, axis in _AXIS_PAIRS:
        firsts = {t.split("-", 1)[1]: t for t in result if t.startswith(f"{first}-")}
        for step, token in firsts.items():
            partner = f"{second}-{step}"
            if partner in result:
                index = result.index(token)
                result[index] = f"{axis}-{step}"
                result.remove(partner)
    return result


class ApplyGenerator:
    """Produce ``@apply`` CSS and a ``:root`` design-token sheet from rules."""

    def utility_tokens(self, properties: Iterable[CSSProperty]) -> list[str]:
        """Reverse-map *properties* to utility tokens, in property order."""
        tokens: list[str] = []
        for prop in properties:
            if prop.is_comment or prop.is_hover or prop.is_at_rule:
                continue
            token = _token_for(prop)
            if token and token not in tokens:
                tokens.append(token)
        return _collapse_axes(tokens)

    def render(self, rules: Sequence[SemanticRule]) -> str:
        blocks = [APPLY_HEADER, ""]
        for rule in rules:
            tokens = self.utility_tokens(rule.properties)
            blocks.append(f"{rule.selector} {{")
            if tokens:
                blocks.append(f"  @apply {' '.join(tokens)};")
            blocks.append("}")
            blocks.append("")
        return "\n".join(blocks)

    def theme(self, rules: Sequence[SemanticRule], component: str = "") -> str:
        """Render design tokens used by *rules* as CSS custom properties."""
        variables: dict[str, str] = {}
        for rule in rules:
            for token in self.utility_tokens(rule.properties):
                variables.update(_theme_variables(token))

        if not variables:
            return EMPTY_THEME

        label = component or "generated"
        lines = [f"/* Theme variables for {label} component */", ":root {"]
        lines.extend(f"  {name}: {variables[name]};" for name in sorted(variables))
        lines.append("}")
        return "\n".join(lines)


def _theme_variables(token: str) -> dict[str, str]:
    for prefix in ("bg-", "text-", "border-"):
        if token.startswith(prefix):
            color = token[len(prefix):]
            hex_value = _COLOR_HEX.get(color)
            if hex_value is not None:
                return {f"--color-{color}": hex_value}
            if prefix == "text-" and color in TEXT_SIZES:
                return {f"--font-size-{color}": TEXT_SIZES[color]}
            return {}

    match = _SPACING_TOKEN_RE.match(token)
    if match is not None:
        step = match.group(1)
        return {f"--spacing-{step}": f"{format_number(float(step) * SPACING_UNIT)}rem"}

    if token.startswith("rounded"):
        props = STATIC_MAPPINGS.get(token)
        if props:
            suffix = token[len("rounded"):]
            return {f"--border-radius{suffix}": props[0].value}
    return {}
