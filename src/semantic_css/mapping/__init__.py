"""Utility-class to CSS translation tables and resolvers."""

from semantic_css.mapping.engine import PATTERN_RULES, MappingEngine, PatternRule
from semantic_css.mapping.modern import ModernFeatures

__all__ = ["MappingEngine", "ModernFeatures", "PatternRule", "PATTERN_RULES"]
