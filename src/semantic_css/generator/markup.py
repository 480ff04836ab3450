"""Markup rewriter: swaps utility class lists for CSS-module references."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from semantic_css.generator.css import write_text
from semantic_css.model.rule import SemanticMapping
from semantic_css.model.token import Document
from semantic_css.parser.classes import is_utility_class
from semantic_css.parser.markup import CLASS_ATTR_RE

__all__ = ["MarkupRewriter", "module_import"]

_MODULE_IMPORT_RE = re.compile(r"""import\s+.*from\s+['"].*\.module\.css['"]|import\s+styles\s+from\s""")


def module_import(module_name: str, suffix: str = ".module.css") -> str:
    return f"import styles from './{module_name}{suffix}';"


class MarkupRewriter:
    """Rewrite class attributes to reference generated semantic classes.

    For every class attribute the mapping sharing the most utility tokens is
    chosen (ties keep the earliest mapping). Utility classes are dropped from
    the attribute, hand-written classes are kept:

        className="flex p-4 nav-shell"
        -> className={["nav-shell", styles.navigation].join(' ')}
    """

    def __init__(self, module_suffix: str = ".module.css") -> None:
        self.module_suffix = module_suffix

    def rewrite(self, document: Document, mappings: Sequence[SemanticMapping], module_name: str) -> str:
        mapping_tokens = [(m.semantic_name, m.original_classes.split()) for m in mappings]

        def replace(match: re.Match[str]) -> str:
            return self._replace_attribute(match.group("attr"), match.group("value"), mapping_tokens)

        content = CLASS_ATTR_RE.sub(replace, document.content)
        return self.add_module_import(content, module_name)

    def generate(
        self,
        document: Document,
        mappings: Sequence[SemanticMapping],
        output_path: str | Path,
        module_name: str,
    ) -> Path:
        return write_text(output_path, self.rewrite(document, mappings, module_name))

    @staticmethod
    def _replace_attribute(
        attr: str, value: str, mapping_tokens: list[tuple[str, list[str]]]
    ) -> str:
        classes = value.split()

        best_name = ""
        best_count = 0
        for name, tokens in mapping_tokens:
            count = sum(1 for c in classes if c in tokens and is_utility_class(c))
            if count > best_count:
                best_name, best_count = name, count

        remaining = [c for c in classes if not is_utility_class(c)]

        parts: list[str] = []
        if remaining:
            parts.append('"' + " ".join(remaining) + '"')
        if best_name:
            parts.append(f"styles.{best_name}")

        if not parts:
            return ""
        if len(parts) == 1 and not best_name:
            return f"{attr}={parts[0]}"
        if len(parts) == 1:
            return f"{attr}={{{parts[0]}}}"
        return f"{attr}={{[{', '.join(parts)}].join(' ')}}"

    # ------------------------------------------------------------------
    # Import insertion
    # ------------------------------------------------------------------

    def add_module_import(self, content: str, module_name: str) -> str:
        """Insert the CSS module import unless one is already present."""
        if _MODULE_IMPORT_RE.search(content):
            return content

        statement = module_import(module_name, self.module_suffix)
        lines = content.split("\n")
        index = _import_insert_position(lines)
        if index is None:
            return statement + "\n\n" + content
        lines.insert(index, statement)
        return "\n".join(lines)


def _import_insert_position(lines: list[str]) -> int | None:
    """Line index after the last leading import or before a leading export.

    Returns None when the file opens with neither.
    """
    last_import = -1
    open_import = False
    for i, line in enumerate(lines):
        stripped = line.strip()
        if open_import:
            # continuation of a multi-line ``import { a, b } from "x"``
            last_import = i
            open_import = " from " not in f" {stripped}"
            continue
        if not stripped or stripped.startswith(("//", "/*")):
            continue
        if stripped.startswith("import "):
            last_import = i
            open_import = stripped.endswith("{") or stripped.endswith(",")
        elif last_import >= 0:
            break
        elif stripped.startswith("export "):
            return i
        else:
            return None
    if last_import >= 0:
        return last_import + 1
    return None
