"""Read-only lookup tables for utility-class translation.

All tables are built once at import time and exposed through
``MappingProxyType`` so they can be shared across converters and threads.
"""

from __future__ import annotations

from types import MappingProxyType

from semantic_css.model.rule import CSSProperty

SPACING_UNIT = 0.25  # rem per scale step

_BORDER_GRAY = "1px solid #e5e7eb"


def _props(*pairs: tuple[str, str]) -> tuple[CSSProperty, ...]:
    return tuple(CSSProperty(name, value) for name, value in pairs)


def _one(name: str, value: str) -> tuple[CSSProperty, ...]:
    return (CSSProperty(name, value),)


_STATIC: dict[str, tuple[CSSProperty, ...]] = {
    # Display
    "flex": _one("display", "flex"),
    "inline-flex": _one("display", "inline-flex"),
    "grid": _one("display", "grid"),
    "block": _one("display", "block"),
    "inline": _one("display", "inline"),
    "inline-block": _one("display", "inline-block"),
    "hidden": _one("display", "none"),
    # Flex direction
    "flex-row": _one("flex-direction", "row"),
    "flex-col": _one("flex-direction", "column"),
    "flex-row-reverse": _one("flex-direction", "row-reverse"),
    "flex-col-reverse": _one("flex-direction", "column-reverse"),
    # Alignment
    "items-start": _one("align-items", "flex-start"),
    "items-center": _one("align-items", "center"),
    "items-end": _one("align-items", "flex-end"),
    "items-stretch": _one("align-items", "stretch"),
    "items-baseline": _one("align-items", "baseline"),
    "justify-start": _one("justify-content", "flex-start"),
    "justify-center": _one("justify-content", "center"),
    "justify-end": _one("justify-content", "flex-end"),
    "justify-between": _one("justify-content", "space-between"),
    "justify-around": _one("justify-content", "space-around"),
    "justify-evenly": _one("justify-content", "space-evenly"),
    # Text alignment
    "text-left": _one("text-align", "left"),
    "text-center": _one("text-align", "center"),
    "text-right": _one("text-align", "right"),
    "text-justify": _one("text-align", "justify"),
    # Font weight
    "font-thin": _one("font-weight", "100"),
    "font-light": _one("font-weight", "300"),
    "font-normal": _one("font-weight", "400"),
    "font-medium": _one("font-weight", "500"),
    "font-semibold": _one("font-weight", "600"),
    "font-bold": _one("font-weight", "700"),
    "font-extrabold": _one("font-weight", "800"),
    "font-black": _one("font-weight", "900"),
    # Position
    "static": _one("position", "static"),
    "relative": _one("position", "relative"),
    "absolute": _one("position", "absolute"),
    "fixed": _one("position", "fixed"),
    "sticky": _one("position", "sticky"),
    "inset-0": _props(("top", "0"), ("right", "0"), ("bottom", "0"), ("left", "0")),
    # Layout
    "container": _props(("max-width", "1200px"), ("margin", "0 auto")),
    "mx-auto": _props(("margin-left", "auto"), ("margin-right", "auto")),
    "w-full": _one("width", "100%"),
    "h-full": _one("height", "100%"),
    "min-h-screen": _one("min-height", "100vh"),
    # Fixed colors
    "bg-white": _one("background-color", "#ffffff"),
    "bg-black": _one("background-color", "#000000"),
    "text-white": _one("color", "#ffffff"),
    "text-black": _one("color", "#000000"),
    # Border
    "border": _one("border", _BORDER_GRAY),
    "border-2": _one("border-width", "2px"),
    "border-b": _one("border-bottom", _BORDER_GRAY),
    "border-t": _one("border-top", _BORDER_GRAY),
    "border-l": _one("border-left", _BORDER_GRAY),
    "border-r": _one("border-right", _BORDER_GRAY),
    # Radius
    "rounded": _one("border-radius", "0.25rem"),
    "rounded-md": _one("border-radius", "0.375rem"),
    "rounded-lg": _one("border-radius", "0.5rem"),
    "rounded-xl": _one("border-radius", "0.75rem"),
    "rounded-2xl": _one("border-radius", "1rem"),
    "rounded-full": _one("border-radius", "9999px"),
    # Shadow
    "shadow": _one(
        "box-shadow",
        "0 1px 3px 0 rgba(0, 0, 0, 0.1), 0 1px 2px 0 rgba(0, 0, 0, 0.06)",
    ),
    "shadow-md": _one(
        "box-shadow",
        "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06)",
    ),
    "shadow-lg": _one(
        "box-shadow",
        "0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -2px rgba(0, 0, 0, 0.05)",
    ),
    # Transition
    "transition-shadow": _one("transition", "box-shadow 150ms ease-in-out"),
    "transition-colors": _one(
        "transition", "color, background-color, border-color 150ms ease-in-out"
    ),
    # Interaction
    "cursor-pointer": _one("cursor", "pointer"),
    # Grid
    "grid-cols-1": _one("grid-template-columns", "repeat(1, minmax(0, 1fr))"),
    "grid-cols-2": _one("grid-template-columns", "repeat(2, minmax(0, 1fr))"),
    "grid-cols-3": _one("grid-template-columns", "repeat(3, minmax(0, 1fr))"),
    "grid-cols-4": _one("grid-template-columns", "repeat(4, minmax(0, 1fr))"),
    # Focus presets
    "focus:outline-none": _one("outline", "none"),
    "focus:ring-2": _one("box-shadow", "0 0 0 2px rgba(59, 130, 246, 0.5)"),
}

STATIC_MAPPINGS: MappingProxyType[str, tuple[CSSProperty, ...]] = MappingProxyType(_STATIC)


TEXT_SIZES: MappingProxyType[str, str] = MappingProxyType({
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
    "3xl": "1.875rem",
    "4xl": "2.25rem",
    "5xl": "3rem",
    "6xl": "3.75rem",
    "7xl": "4.5rem",
    "8xl": "6rem",
    "9xl": "8rem",
})

DEFAULT_TEXT_SIZE = "1rem"


COLORS: MappingProxyType[str, MappingProxyType[str, str]] = MappingProxyType({
    "blue": MappingProxyType({
        "50": "#eff6ff",
        "100": "#dbeafe",
        "200": "#bfdbfe",
        "300": "#93c5fd",
        "400": "#60a5fa",
        "500": "#3b82f6",
        "600": "#2563eb",
        "700": "#1d4ed8",
        "800": "#1e40af",
        "900": "#1e3a8a",
    }),
    "red": MappingProxyType({
        "50": "#fef2f2",
        "100": "#fee2e2",
        "200": "#fecaca",
        "300": "#fca5a5",
        "400": "#f87171",
        "500": "#ef4444",
        "600": "#dc2626",
        "700": "#b91c1c",
        "800": "#991b1b",
        "900": "#7f1d1d",
    }),
    "green": MappingProxyType({
        "50": "#f0fdf4",
        "100": "#dcfce7",
        "200": "#bbf7d0",
        "300": "#86efac",
        "400": "#4ade80",
        "500": "#22c55e",
        "600": "#16a34a",
        "700": "#15803d",
        "800": "#166534",
        "900": "#14532d",
    }),
    "gray": MappingProxyType({
        "50": "#f9fafb",
        "100": "#f3f4f6",
        "200": "#e5e7eb",
        "300": "#d1d5db",
        "400": "#9ca3af",
        "500": "#6b7280",
        "600": "#4b5563",
        "700": "#374151",
        "800": "#1f2937",
        "900": "#111827",
    }),
    "purple": MappingProxyType({
        "50": "#faf5ff",
        "100": "#f3e8ff",
        "200": "#e9d5ff",
        "300": "#d8b4fe",
        "400": "#c084fc",
        "500": "#a855f7",
        "600": "#9333ea",
        "700": "#7c3aed",
        "800": "#6b21a8",
        "900": "#581c87",
    }),
})

FALLBACK_COLOR = "#000000"


BREAKPOINTS: MappingProxyType[str, str] = MappingProxyType({
    "sm": "(min-width: 640px)",
    "md": "(min-width: 768px)",
    "lg": "(min-width: 1024px)",
    "xl": "(min-width: 1280px)",
    "2xl": "(min-width: 1536px)",
})

DEFAULT_BREAKPOINT = "md"


def get_color(family: str, shade: str) -> str:
    """Resolve a palette color; unknown family/shade pairs fall back to black."""
    return COLORS.get(family, {}).get(shade, FALLBACK_COLOR)


def get_text_size(size: str) -> str:
    return TEXT_SIZES.get(size, DEFAULT_TEXT_SIZE)


def get_media_query(breakpoint: str) -> str:
    """Return the media condition for *breakpoint*, defaulting to ``md``."""
    return BREAKPOINTS.get(breakpoint, BREAKPOINTS[DEFAULT_BREAKPOINT])


def format_number(value: float) -> str:
    """Format *value* with no trailing zeros (``1.0 -> "1"``, ``0.50 -> "0.5"``)."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return text if text not in ("", "-0") else "0"


def convert_spacing(value: str) -> str:
    """Convert a numeric scale step into rem (``"4" -> "1rem"``)."""
    try:
        number = float(value)
    except ValueError:
        return value
    return f"{format_number(number * SPACING_UNIT)}rem"
