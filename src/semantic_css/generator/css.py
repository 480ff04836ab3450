"""CSS module writer.

Each rule renders as its selector block (declarations first, then
annotations), followed by a ``:hover`` block and one ``@media`` block per
responsive entry:

    .card-container {
      padding: 1rem;
      /* Unknown classes */ ring-offset-2
    }

    .card-container:hover {
      background-color: #1d4ed8;
    }
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from semantic_css.errors import OutputWriteError
from semantic_css.model.rule import CSSProperty, SemanticRule

__all__ = ["CSSGenerator", "CSSOptions", "DEFAULT_HEADER", "write_text"]

DEFAULT_HEADER = "/* Generated CSS Module */\n/* Converted from Tailwind CSS classes */"


@dataclass(frozen=True)
class CSSOptions:
    """Formatting options for ``CSSGenerator.render_with_options``."""

    header: str = DEFAULT_HEADER
    imports: tuple[str, ...] = ()
    minify: bool = False
    indent_size: int = 2


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories.

    Raises OutputWriteError on any filesystem failure.
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {target}: {exc}", str(target), cause=exc) from exc
    return target


class CSSGenerator:
    """Render semantic rules as a CSS module."""

    def render(self, rules: Sequence[SemanticRule]) -> str:
        blocks = [self.render_rule(rule) for rule in rules]
        return DEFAULT_HEADER + "\n\n" + "\n\n".join(blocks) + ("\n" if blocks else "")

    def generate(self, rules: Sequence[SemanticRule], output_path: str | Path) -> Path:
        return write_text(output_path, self.render(rules))

    def render_rule(self, rule: SemanticRule) -> str:
        declarations: list[CSSProperty] = []
        annotations: list[CSSProperty] = []
        hover: list[CSSProperty] = []
        media: list[CSSProperty] = []

        for prop in rule.properties:
            if prop.is_comment:
                annotations.append(prop)
            elif prop.is_media:
                media.append(prop)
            elif prop.is_hover:
                hover.append(prop)
            elif prop.is_at_rule:
                # Other at-rules cannot live inside a selector block
                annotations.append(CSSProperty(f"/* {prop.name} */", prop.value))
            else:
                declarations.append(prop)

        lines = [f"{rule.selector} {{"]
        lines.extend(f"  {prop.name}: {prop.value};" for prop in declarations)
        lines.extend(f"  {prop}" for prop in annotations)
        lines.append("}")

        if hover:
            lines.append("")
            lines.append(f"{rule.selector}:hover {{")
            lines.extend(f"  {prop.value};" for prop in hover)
            lines.append("}")

        for prop in media:
            lines.append("")
            lines.append(f"{prop.name} {{")
            lines.append(f"  {rule.selector} {{")
            lines.append(f"    {prop.value};")
            lines.append("  }")
            lines.append("}")

        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Configurable output
    # ------------------------------------------------------------------

    def render_with_options(self, rules: Sequence[SemanticRule], options: CSSOptions) -> str:
        """Render plain declarations only, formatted per *options*.

        Annotations and sub-rule entries are omitted in this mode.
        """
        parts: list[str] = []
        if options.header:
            parts.append(options.header + "\n\n")
        for stmt in options.imports:
            parts.append(f'@import "{stmt}";\n')
        if options.imports:
            parts.append("\n")

        if options.minify:
            parts.extend(self._minified(rule) for rule in rules)
        else:
            indent = " " * options.indent_size
            parts.append("\n".join(self._formatted(rule, indent) for rule in rules))
        return "".join(parts)

    def generate_with_options(
        self, rules: Sequence[SemanticRule], output_path: str | Path, options: CSSOptions
    ) -> Path:
        return write_text(output_path, self.render_with_options(rules, options))

    @staticmethod
    def _formatted(rule: SemanticRule, indent: str) -> str:
        body = "".join(f"{indent}{p.name}: {p.value};\n" for p in rule.declarations)
        return f"{rule.selector} {{\n{body}}}\n"

    @staticmethod
    def _minified(rule: SemanticRule) -> str:
        body = "".join(f"{p.name}:{p.value};" for p in rule.declarations)
        return f"{rule.selector}{{{body}}}"
