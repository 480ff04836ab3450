"""Output writers: CSS modules, rewritten markup, @apply and dual output."""

from semantic_css.generator.apply import ApplyGenerator
from semantic_css.generator.css import CSSGenerator, CSSOptions
from semantic_css.generator.dual import DualOutputGenerator, GenerationResult
from semantic_css.generator.markup import MarkupRewriter

__all__ = [
    "ApplyGenerator",
    "CSSGenerator",
    "CSSOptions",
    "DualOutputGenerator",
    "GenerationResult",
    "MarkupRewriter",
]
