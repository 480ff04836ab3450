"""Change report: what a conversion did to one source file."""

from __future__ import annotations

import difflib
import json
from dataclasses import asdict, dataclass
from enum import Enum

from semantic_css.model.rule import ConversionResult

IMPORT_MARKER = "import styles from"


class ChangeType(str, Enum):
    CLASS_REPLACEMENT = "class-replacement"
    IMPORT_ADDED = "import-added"


@dataclass(frozen=True)
class Change:
    """One changed line; ``line`` is 1-based in the rewritten file."""

    type: ChangeType
    line: int
    original: str
    modified: str


@dataclass(frozen=True)
class ChangeSummary:
    class_attributes: int
    classes_converted: int
    imports_added: int
    css_rules_generated: int
    unresolved_classes: int


@dataclass(frozen=True)
class ChangeReport:
    original_file: str
    css_file: str
    changes: tuple[Change, ...]
    summary: ChangeSummary

    def to_dict(self) -> dict:
        data = asdict(self)
        data["changes"] = [
            {**change, "type": change["type"].value} for change in data["changes"]
        ]
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def build_report(
    original: str,
    rewritten: str,
    result: ConversionResult,
    *,
    source_path: str = "",
    css_path: str = "",
    class_attributes: int = 0,
) -> ChangeReport:
    """Diff *original* against *rewritten* line by line and summarize *result*."""
    old_lines = original.split("\n")
    new_lines = rewritten.split("\n")
    changes: list[Change] = []
    imports_added = 0

    matcher = difflib.SequenceMatcher(a=old_lines, b=new_lines, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        # blank lines only ever shift around the inserted import
        old_chunk = iter([line.strip() for line in old_lines[i1:i2] if line.strip()])
        for offset, new_line in enumerate(new_lines[j1:j2]):
            line_no = j1 + offset + 1
            if not new_line.strip():
                continue
            if IMPORT_MARKER in new_line and IMPORT_MARKER not in original:
                imports_added += 1
                changes.append(Change(ChangeType.IMPORT_ADDED, line_no, "", new_line.strip()))
                continue
            before = next(old_chunk, "")
            changes.append(Change(ChangeType.CLASS_REPLACEMENT, line_no, before, new_line.strip()))

    summary = ChangeSummary(
        class_attributes=class_attributes,
        classes_converted=sum(len(m.original_classes.split()) for m in result.mappings),
        imports_added=imports_added,
        css_rules_generated=len(result.rules),
        unresolved_classes=len(result.unresolved),
    )
    return ChangeReport(
        original_file=source_path,
        css_file=css_path,
        changes=tuple(changes),
        summary=summary,
    )


def render_text(report: ChangeReport) -> str:
    """Human-readable rendering for the console."""
    s = report.summary
    lines = [
        f"File: {report.original_file}",
        f"CSS:  {report.css_file}",
        f"Class attributes: {s.class_attributes}",
        f"Classes converted: {s.classes_converted}",
        f"CSS rules generated: {s.css_rules_generated}",
        f"Imports added: {s.imports_added}",
    ]
    if s.unresolved_classes:
        lines.append(f"Unresolved classes: {s.unresolved_classes}")
    if report.changes:
        lines.append("")
        lines.append("Changes:")
    for change in report.changes:
        lines.append(f"  [{change.type.value}] line {change.line}")
        if change.original:
            lines.append(f"    - {change.original}")
        lines.append(f"    + {change.modified}")
    return "\n".join(lines)
