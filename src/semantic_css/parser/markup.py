"""Regex scanner for class attributes in HTML/JSX/TSX/Vue markup.

Example input:
    <div className="flex items-center card-shell">
    <Accordion.Trigger class="px-4 py-2">

Only utility classes are recorded; hand-written classes stay in the source
untouched.
"""

from __future__ import annotations

import re
from pathlib import Path

from semantic_css.errors import SourceReadError
from semantic_css.model.token import ClassRef, Document
from semantic_css.parser.classes import is_utility_class

__all__ = ["CLASS_ATTR_RE", "MarkupParser"]

# Matches class="..." or className='...'
CLASS_ATTR_RE = re.compile(
    r"""
    (?P<attr>class|className)   # attribute name
    =
    ["']
    (?P<value>[^"']+)            # raw class list
    ["']
    """,
    re.VERBOSE,
)

# Opening tag name, including dotted component paths like Otp.Root
_TAG_RE = re.compile(r"<(\w+(?:\.\w+)*)")

_TAG_LOOKAHEAD = 50
UNKNOWN_ELEMENT = "element"


class MarkupParser:
    """Scan markup text for utility-class attributes."""

    def parse_file(self, path: str | Path) -> Document:
        """Read *path* and scan it.

        Raises SourceReadError if the file cannot be read or decoded.
        """
        file_path = Path(path)
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(f"Cannot read {file_path}: {exc}", str(file_path), cause=exc) from exc
        return self.parse_content(content, path=str(file_path))

    def parse_content(self, content: str, path: str = "") -> Document:
        refs: list[ClassRef] = []
        for match in CLASS_ATTR_RE.finditer(content):
            classes = tuple(c for c in match.group("value").split() if is_utility_class(c))
            if not classes:
                continue
            element = self.element_at(content, match.start())
            refs.append(
                ClassRef(
                    classes=classes,
                    start=match.start("value"),
                    end=match.end("value"),
                    element=element,
                )
            )
        return Document(content=content, class_refs=tuple(refs), path=path)

    @staticmethod
    def element_at(content: str, position: int) -> str:
        """Return the tag name of the element enclosing *position*."""
        start = content.rfind("<", 0, position + 1)
        if start == -1:
            start = 0
        match = _TAG_RE.match(content, start, start + _TAG_LOOKAHEAD)
        return match.group(1) if match else UNKNOWN_ELEMENT
