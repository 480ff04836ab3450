"""Component-context inference from filenames and token text."""

from __future__ import annotations

from typing import Iterable

__all__ = [
    "COMMON_COMPONENTS",
    "FRAMEWORK_PREFIXES",
    "detect_component_context",
    "extract_component_from_filename",
]

FRAMEWORK_PREFIXES = ("qwik", "react", "vue", "svelte")

# Searched in this order for substring matches.
COMMON_COMPONENTS: tuple[str, ...] = (
    "modal",
    "dropdown",
    "accordion",
    "carousel",
    "tooltip",
    "popover",
    "dialog",
    "sidebar",
    "navbar",
    "navigation",
    "header",
    "footer",
    "card",
    "button",
    "input",
    "form",
    "table",
    "grid",
    "list",
    "menu",
    "breadcrumb",
    "pagination",
    "tabs",
    "badge",
    "avatar",
    "spinner",
    "loader",
    "toast",
    "alert",
    "otp",
    "hero",
    "banner",
    "section",
)

# Keyword found in a class name -> component context
_TOKEN_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("otp", "otp"),
    ("modal", "modal"),
    ("accordion", "accordion"),
    ("dropdown", "dropdown"),
    ("card", "card"),
    ("hero", "hero"),
    ("nav", "navigation"),
)


def _basename(filename: str) -> str:
    base = filename.rsplit("/", 1)[-1]
    base = base.rsplit("\\", 1)[-1]
    stem, dot, _ext = base.rpartition(".")
    return stem if dot else base


def extract_component_from_filename(filename: str) -> str:
    """Derive a short component name from *filename*.

    >>> extract_component_from_filename("src/qwik-otp.tsx")
    'otp'
    >>> extract_component_from_filename("product-card.tsx")
    'card'
    >>> extract_component_from_filename("otp_input.tsx")
    'otp'
    """
    if not filename:
        return ""
    name = _basename(filename).lower()

    hyphen_parts = name.split("-")
    if len(hyphen_parts) >= 2:
        if hyphen_parts[0] in FRAMEWORK_PREFIXES:
            return "-".join(hyphen_parts[1:])
        return hyphen_parts[-1]

    underscore_parts = name.split("_")
    if len(underscore_parts) >= 2:
        return underscore_parts[0]

    if name in COMMON_COMPONENTS:
        return name
    for keyword in COMMON_COMPONENTS:
        if keyword in name:
            return keyword
    return name


def detect_component_context(class_names: Iterable[str], explicit: str = "") -> str:
    """Return *explicit* if given, else the first component keyword in *class_names*."""
    if explicit:
        return explicit
    for class_name in class_names:
        lowered = class_name.lower()
        for keyword, component in _TOKEN_KEYWORDS:
            if keyword in lowered:
                return component
    return ""
