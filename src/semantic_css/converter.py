"""Converter: groups extracted tokens, names each group, and assembles its rule."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from semantic_css.mapping.engine import MappingEngine
from semantic_css.model.rule import (
    UNKNOWN_CLASSES,
    ConversionResult,
    CSSProperty,
    ElementGroup,
    SemanticMapping,
    SemanticRule,
)
from semantic_css.model.token import Document, UtilityToken
from semantic_css.naming.component import extract_component_from_filename
from semantic_css.naming.namer import SemanticNamer
from semantic_css.parser.classes import ClassExtractor, group_by_element

logger = logging.getLogger(__name__)

__all__ = ["Converter", "UnknownClassResolver"]


class UnknownClassResolver(Protocol):
    """Fallback for tokens the mapping engine cannot resolve.

    Implementations must not raise; failures are reported as placeholder
    annotations.
    """

    def convert_unknown_class(self, class_name: str) -> list[CSSProperty]: ...


class Converter:
    """Turn utility tokens into semantic CSS rules.

    One converter holds one naming counter; use a fresh instance (or call
    ``reset``) per document for reproducible names.
    """

    def __init__(
        self,
        engine: MappingEngine | None = None,
        *,
        unknown_resolver: UnknownClassResolver | None = None,
    ) -> None:
        self._engine = engine or MappingEngine()
        self._namer = SemanticNamer()
        self._extractor = ClassExtractor()
        self._unknown_resolver = unknown_resolver
        self._component_context = ""
        self._used_names: set[str] = set()

    @property
    def component_context(self) -> str:
        return self._component_context

    @property
    def namer(self) -> SemanticNamer:
        return self._namer

    def reset(self) -> None:
        """Clear per-conversion state (counter, emitted names, context)."""
        self._namer.reset()
        self._used_names.clear()
        self._component_context = ""

    # ------------------------------------------------------------------
    # Conversion entry points
    # ------------------------------------------------------------------

    def convert(self, tokens: Sequence[UtilityToken]) -> ConversionResult:
        return self.convert_with_context(tokens, "")

    def convert_document(self, document: Document) -> ConversionResult:
        """Extract tokens from *document* and convert them using its path as context."""
        return self.convert_with_context(self._extractor.extract(document), document.path)

    def convert_with_context(
        self, tokens: Sequence[UtilityToken], filename: str = ""
    ) -> ConversionResult:
        self._component_context = extract_component_from_filename(filename)

        rules: list[SemanticRule] = []
        mappings: list[SemanticMapping] = []
        unresolved: list[str] = []

        for element, members in group_by_element(tokens).items():
            group = ElementGroup(element=element, tokens=tuple(members))
            name = self._unique(
                self._namer.generate_semantic_name(group.element, group.tokens, self._component_context)
            )
            properties, unknown = self._assemble(group.tokens)
            unresolved.extend(unknown)
            if not properties:
                logger.debug("Skipping empty group for element %s", element)
                continue

            rules.append(SemanticRule(selector=f".{name}", properties=tuple(properties)))
            mappings.append(
                SemanticMapping(
                    original_classes=" ".join(group.class_names),
                    semantic_name=name,
                )
            )
            logger.debug("Element %s -> .%s (%d properties)", element, name, len(properties))

        return ConversionResult(
            rules=tuple(rules),
            mappings=tuple(mappings),
            component=self._component_context,
            unresolved=tuple(unresolved),
        )

    # ------------------------------------------------------------------
    # Rule assembly
    # ------------------------------------------------------------------

    def convert_and_deduplicate_properties(
        self, tokens: Sequence[UtilityToken]
    ) -> list[CSSProperty]:
        """Merge the properties of *tokens*; later tokens override earlier ones."""
        properties, _ = self._assemble(tokens)
        return properties

    def _assemble(self, tokens: Sequence[UtilityToken]) -> tuple[list[CSSProperty], list[str]]:
        # dict keeps first-insertion order; reassignment replaces the value in place
        merged: dict[str, CSSProperty] = {}
        unknown: list[str] = []

        for token in tokens:
            props = self._engine.resolve(token.name)
            if not props and self._unknown_resolver is not None:
                props = self._unknown_resolver.convert_unknown_class(token.name)
            if not props:
                unknown.append(token.name)
                continue
            for prop in props:
                # annotations always keep their own slot
                key = f"{prop.merge_key}\x00{len(merged)}" if prop.is_comment else prop.merge_key
                merged[key] = prop

        properties = list(merged.values())
        if unknown:
            properties.append(CSSProperty(UNKNOWN_CLASSES, " ".join(unknown)))
        return properties, unknown

    def _unique(self, name: str) -> str:
        if name in self._used_names:
            name = f"{name}-{self._namer.counter}"
        self._used_names.add(name)
        return name
