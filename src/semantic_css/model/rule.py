"""Rule model: CSS property assignments, element groups, and semantic rules."""

from __future__ import annotations

from dataclasses import dataclass

from semantic_css.model.token import UtilityToken

COMMENT_MARKER = "/*"
UNKNOWN_CLASSES = "/* Unknown classes */"
HOVER = ":hover"
MEDIA = "@media"


@dataclass(frozen=True)
class CSSProperty:
    """A single ``name: value`` assignment produced by the mapping engine.

    Names that begin with ``/*`` are diagnostic annotations rather than real
    declarations. Names beginning with ``:hover`` or ``@media`` carry a full
    declaration in ``value`` that is rendered inside a sub-rule.
    """

    name: str
    value: str

    @property
    def is_comment(self) -> bool:
        return self.name.startswith(COMMENT_MARKER)

    @property
    def is_hover(self) -> bool:
        return self.name.startswith(HOVER)

    @property
    def is_media(self) -> bool:
        return self.name.startswith(MEDIA)

    @property
    def is_at_rule(self) -> bool:
        return self.name.startswith("@")

    @property
    def merge_key(self) -> str:
        """Key used when folding properties into one rule.

        Plain declarations collide on name alone. Sub-rule entries collide on
        the declared property inside them, and annotations only collide with
        an identical annotation.
        """
        if self.is_comment:
            return f"{self.name}\x00{self.value}"
        if self.is_hover or self.is_media:
            declared = self.value.split(":", 1)[0].strip()
            return f"{self.name}\x00{declared}"
        return self.name

    def __str__(self) -> str:
        if self.is_comment:
            return f"{self.name} {self.value}".rstrip()
        return f"{self.name}: {self.value}"


@dataclass(frozen=True)
class ElementGroup:
    """All utility tokens observed on one element identifier in one document."""

    element: str
    tokens: tuple[UtilityToken, ...]

    @property
    def class_names(self) -> list[str]:
        return [t.name for t in self.tokens]


@dataclass(frozen=True)
class SemanticRule:
    """A generated selector bound to its merged property list."""

    selector: str
    properties: tuple[CSSProperty, ...]

    @property
    def name(self) -> str:
        return self.selector.lstrip(".")

    @property
    def declarations(self) -> list[CSSProperty]:
        """Plain declarations, excluding annotations and sub-rule entries."""
        return [
            p for p in self.properties
            if not (p.is_comment or p.is_hover or p.is_at_rule)
        ]


@dataclass(frozen=True)
class SemanticMapping:
    """Pairs the original space-joined utility classes with their semantic name."""

    original_classes: str
    semantic_name: str


@dataclass(frozen=True)
class ConversionResult:
    """Everything one conversion run produced for a single document."""

    rules: tuple[SemanticRule, ...] = ()
    mappings: tuple[SemanticMapping, ...] = ()
    component: str = ""
    unresolved: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.rules
