"""semantic_css model layer -- public type re-exports."""

from semantic_css.model.rule import (
    COMMENT_MARKER,
    UNKNOWN_CLASSES,
    ConversionResult,
    CSSProperty,
    ElementGroup,
    SemanticMapping,
    SemanticRule,
)
from semantic_css.model.token import Category, ClassRef, Document, UtilityToken

__all__ = [
    # token
    "Category",
    "UtilityToken",
    "ClassRef",
    "Document",
    # rule
    "COMMENT_MARKER",
    "UNKNOWN_CLASSES",
    "CSSProperty",
    "ElementGroup",
    "SemanticRule",
    "SemanticMapping",
    "ConversionResult",
]
