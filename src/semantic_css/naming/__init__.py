"""Semantic naming: component context, UI patterns, and contextual names."""

from semantic_css.naming.component import detect_component_context, extract_component_from_filename
from semantic_css.naming.namer import SemanticNamer, StyleSignals
from semantic_css.naming.patterns import UI_PATTERNS, UIPattern, detect_ui_pattern

__all__ = [
    "SemanticNamer",
    "StyleSignals",
    "UIPattern",
    "UI_PATTERNS",
    "detect_component_context",
    "detect_ui_pattern",
    "extract_component_from_filename",
]
