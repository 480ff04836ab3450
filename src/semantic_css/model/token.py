"""Token model: utility-class categories, extracted tokens, and scanned documents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Coarse category of a utility class token."""

    DISPLAY = "display"
    ALIGNMENT = "alignment"
    SIZING = "sizing"
    SPACING = "spacing"
    TYPOGRAPHY = "typography"
    VISUAL = "visual"
    EFFECTS = "effects"
    RESPONSIVE = "responsive"
    UTILITY = "utility"


@dataclass(frozen=True)
class UtilityToken:
    """A single utility class found on an element.

    Attributes:
        name: Raw class text, e.g. ``"bg-blue-600"`` or ``"hover:text-red-500"``.
        category: Category assigned by the classifier.
        context: Element identifier the token was found on (``"div"``,
            ``"Accordion.Trigger"``).
    """

    name: str
    category: Category = Category.UTILITY
    context: str = ""


@dataclass(frozen=True)
class ClassRef:
    """One class attribute occurrence in a source document.

    ``classes`` holds only recognized utility tokens, in attribute order.
    ``start`` and ``end`` delimit the attribute value in the source text.
    """

    classes: tuple[str, ...]
    start: int
    end: int
    element: str


@dataclass(frozen=True)
class Document:
    """A scanned markup document with its class attribute references."""

    content: str
    class_refs: tuple[ClassRef, ...] = ()
    path: str = ""
