"""Token classification, utility recognition, extraction and grouping."""

from __future__ import annotations

import re
from typing import Callable, Iterable

from semantic_css.mapping.tables import STATIC_MAPPINGS
from semantic_css.model.token import Category, Document, UtilityToken

__all__ = [
    "classify",
    "is_utility_class",
    "ClassExtractor",
    "group_by_element",
]


def _prefixed(*prefixes: str) -> Callable[[str], bool]:
    return lambda token: token.startswith(prefixes)


# Tested in order; first match wins.
_CATEGORY_RULES: tuple[tuple[Category, Callable[[str], bool]], ...] = (
    (
        Category.DISPLAY,
        lambda t: t.startswith(("flex", "grid", "block", "inline")) or t == "hidden",
    ),
    (Category.ALIGNMENT, _prefixed("items-", "justify-", "place-", "content-")),
    (Category.SIZING, _prefixed("w-", "h-", "min-", "max-")),
    (Category.SPACING, _prefixed("p-", "m-", "space-", "gap-")),
    (Category.TYPOGRAPHY, _prefixed("text-", "font-", "leading-", "tracking-")),
    (Category.VISUAL, _prefixed("bg-", "border-", "ring-", "shadow-")),
    (Category.EFFECTS, _prefixed("rounded", "opacity-", "scale-", "rotate-")),
    (Category.RESPONSIVE, lambda t: ":" in t),
)


def classify(token: str) -> Category:
    """Assign a coarse category to *token*. Unmatched tokens are ``UTILITY``."""
    for category, predicate in _CATEGORY_RULES:
        if predicate(token):
            return category
    return Category.UTILITY


UTILITY_PREFIXES: tuple[str, ...] = (
    "flex", "grid", "block", "inline", "hidden",
    "text-", "bg-", "border-", "p-", "m-", "w-", "h-",
    "px-", "py-", "pt-", "pr-", "pb-", "pl-",
    "mx-", "my-", "mt-", "mr-", "mb-", "ml-",
    "items-", "justify-", "gap-", "space-",
    "rounded", "ring-", "opacity-",
    "font-", "leading-", "tracking-",
    "hover:", "focus:", "active:", "disabled:", "group-hover:", "peer-",
    "sm:", "md:", "lg:", "xl:", "2xl:",
    "@container", "@layer",
)

_BARE_PREFIXES = frozenset(p.rstrip("-") for p in UTILITY_PREFIXES if p.endswith("-"))

# Families whose prefixes collide with common hand-written names
# (``content-wrapper``, ``top-bar``); only the real utility shapes count.
_SHAPED_UTILITY_RE = re.compile(
    r"""
    ^(?:
        -?(?:inset|top|right|bottom|left)(?:-[xy])?-(?:\d+(?:\.\d+)?|px|auto|full|\d+/\d+)
      | -?z-(?:\d+|auto)
      | (?:min|max)-[wh]-(?:\d+(?:\.\d+)?|px|full|screen|min|max|fit|auto|none|prose
                          |xs|sm|md|lg|xl|[2-7]xl|\d+/\d+|\[[^\]]+\])
      | size-(?:\d+(?:\.\d+)?|px|full|auto|min|max|fit|\d+/\d+)
      | place-(?:content|items|self)-(?:start|end|center|between|around|evenly|stretch|baseline|auto)
      | content-(?:start|end|center|between|around|evenly|stretch|baseline|normal|none)
      | cursor-(?:auto|default|pointer|wait|text|move|help|not-allowed|none|grab|grabbing)
      | shadow(?:-(?:sm|md|lg|xl|2xl|inner|none))?
      | transition(?:-(?:all|colors|opacity|shadow|transform|none))?
    )$
    """,
    re.VERBOSE,
)


def is_utility_class(token: str) -> bool:
    """Return True if *token* looks like a utility class rather than hand-written CSS."""
    if not token:
        return False
    if token in STATIC_MAPPINGS or token in _BARE_PREFIXES:
        return True
    return token.startswith(UTILITY_PREFIXES) or _SHAPED_UTILITY_RE.match(token) is not None


class ClassExtractor:
    """Collect the distinct utility tokens of a document with their element context."""

    def extract(self, document: Document) -> list[UtilityToken]:
        """Return tokens deduplicated by (name, category), sorted by name.

        The first element a token is seen on becomes its context.
        """
        seen: dict[tuple[str, Category], UtilityToken] = {}
        for ref in document.class_refs:
            for name in ref.classes:
                category = classify(name)
                key = (name, category)
                if key not in seen:
                    seen[key] = UtilityToken(name=name, category=category, context=ref.element)
        return sorted(seen.values(), key=lambda t: t.name)


def group_by_element(tokens: Iterable[UtilityToken]) -> dict[str, list[UtilityToken]]:
    """Group *tokens* by exact (case-sensitive) element identifier."""
    groups: dict[str, list[UtilityToken]] = {}
    for token in tokens:
        groups.setdefault(token.context, []).append(token)
    return groups
