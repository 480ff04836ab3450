"""Markup scanning and utility-class classification."""

from semantic_css.parser.classes import ClassExtractor, classify, group_by_element, is_utility_class
from semantic_css.parser.markup import MarkupParser

__all__ = [
    "ClassExtractor",
    "MarkupParser",
    "classify",
    "group_by_element",
    "is_utility_class",
]
