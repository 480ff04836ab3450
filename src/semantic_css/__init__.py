"""semantic-css: turn utility-class markup into semantic CSS modules."""

from semantic_css.converter import Converter
from semantic_css.mapping import MappingEngine
from semantic_css.parser import ClassExtractor, MarkupParser

__version__ = "0.1.0"

__all__ = ["ClassExtractor", "Converter", "MappingEngine", "MarkupParser", "__version__"]
