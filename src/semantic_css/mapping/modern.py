"""Modern-features resolver: container queries, layers, variants, v4 utilities.

Tokens that reach this resolver but only partly make sense (unknown
variants, layers, container queries) are kept as comment-shaped
annotations so their intent is visible in the emitted CSS.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable

from semantic_css.mapping.tables import BREAKPOINTS, convert_spacing
from semantic_css.model.rule import CSSProperty

__all__ = ["ModernFeatures", "RESPONSIVE_VARIANTS"]

RESPONSIVE_VARIANTS = frozenset(BREAKPOINTS)

_CONTAINER_QUERIES = MappingProxyType({
    "@container-sm": (CSSProperty("@container", "(min-width: 640px)"),),
    "@container-md": (CSSProperty("@container", "(min-width: 768px)"),),
    "@container-lg": (CSSProperty("@container", "(min-width: 1024px)"),),
})

_CASCADE_LAYERS = MappingProxyType({
    "@layer-base": (CSSProperty("@layer", "base"),),
    "@layer-components": (CSSProperty("@layer", "components"),),
    "@layer-utilities": (CSSProperty("@layer", "utilities"),),
})

# Variant prefix -> annotation label
_VARIANT_LABELS = MappingProxyType({
    "hover": "/* On hover */",
    "focus": "/* On focus */",
    "active": "/* When active */",
    "disabled": "/* When disabled */",
    "group-hover": "/* When parent group hovered */",
    "peer-focus": "/* When peer focused */",
})

_SIZE_RE = re.compile(r"^size-(\d+(?:\.\d+)?)$")
_GRID_COLS_RE = re.compile(r"^grid-cols-(\d+)$")
_GRID_ROWS_RE = re.compile(r"^grid-rows-(\d+)$")

_PLACE = MappingProxyType({
    "place-content-center": ("place-content", "center"),
    "place-content-start": ("place-content", "start"),
    "place-content-end": ("place-content", "end"),
    "place-items-center": ("place-items", "center"),
    "place-items-start": ("place-items", "start"),
    "place-items-end": ("place-items", "end"),
})

_CONTENT = MappingProxyType({
    "content-center": "center",
    "content-start": "flex-start",
    "content-end": "flex-end",
    "content-between": "space-between",
    "content-around": "space-around",
    "content-evenly": "space-evenly",
})


def _convert_size(token: str) -> list[CSSProperty]:
    match = _SIZE_RE.match(token)
    if match is None:
        return []
    value = convert_spacing(match.group(1))
    return [CSSProperty("width", value), CSSProperty("height", value)]


def _convert_grid(token: str) -> list[CSSProperty]:
    match = _GRID_COLS_RE.match(token)
    if match:
        return [CSSProperty("grid-template-columns", f"repeat({match.group(1)}, minmax(0, 1fr))")]
    match = _GRID_ROWS_RE.match(token)
    if match:
        return [CSSProperty("grid-template-rows", f"repeat({match.group(1)}, minmax(0, 1fr))")]
    return []


def _convert_place(token: str) -> list[CSSProperty]:
    pair = _PLACE.get(token)
    return [CSSProperty(*pair)] if pair else []


def _convert_content(token: str) -> list[CSSProperty]:
    value = _CONTENT.get(token)
    return [CSSProperty("align-content", value)] if value else []


# Checked in order; the first matching prefix owns the token.
_V4_CONVERTERS: tuple[tuple[str, Callable[[str], list[CSSProperty]]], ...] = (
    ("size-", _convert_size),
    ("grid-", _convert_grid),
    ("place-", _convert_place),
    ("content-", _convert_content),
)


class ModernFeatures:
    """Resolver for tokens the static and pattern tables do not cover."""

    def convert(self, token: str) -> list[CSSProperty]:
        if token.startswith("@container"):
            return self.convert_container_query(token)
        if token.startswith("@layer"):
            return self.convert_cascade_layer(token)
        if "--" in token:
            return self.convert_custom_property(token)
        if ":" in token:
            return self.convert_variant(token)
        return self.convert_v4_utility(token)

    def convert_container_query(self, token: str) -> list[CSSProperty]:
        known = _CONTAINER_QUERIES.get(token)
        if known is not None:
            return list(known)
        query, sep, applied = token.partition(":")
        if sep:
            return [
                CSSProperty("/* Container Query */", query),
                CSSProperty("/* Applied when */", applied),
            ]
        return [CSSProperty("/* Container Query */", token)]

    def convert_cascade_layer(self, token: str) -> list[CSSProperty]:
        known = _CASCADE_LAYERS.get(token)
        if known is not None:
            return list(known)
        return [CSSProperty("/* Cascade Layer */", token)]

    def convert_custom_property(self, token: str) -> list[CSSProperty]:
        parts = token.split("-")
        if len(parts) < 3:
            return []
        var_name = "-".join(parts[2:])
        return [CSSProperty(f"--{var_name}", "/* Custom property value */")]

    def convert_variant(self, token: str) -> list[CSSProperty]:
        variant, _, base = token.partition(":")
        label = _VARIANT_LABELS.get(variant)
        if label is not None:
            return [CSSProperty(label, base)]
        if variant.startswith("peer-"):
            state = variant[len("peer-"):]
            return [CSSProperty(f"/* When peer {state} */", base)]
        if variant in RESPONSIVE_VARIANTS:
            return [CSSProperty(f"/* Responsive: {variant} */", base)]
        return [CSSProperty(f"/* Unknown variant: {variant} */", base)]

    def convert_v4_utility(self, token: str) -> list[CSSProperty]:
        for prefix, converter in _V4_CONVERTERS:
            if token.startswith(prefix):
                return converter(token)
        return []
