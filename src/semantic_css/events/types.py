"""Event types emitted during a conversion run."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RunStarted:
    input_dir: str
    output_dir: str
    file_count: int


@dataclass(frozen=True)
class FileConverted:
    path: str
    rule_count: int
    css_path: str


@dataclass(frozen=True)
class FileSkipped:
    path: str
    reason: str


@dataclass(frozen=True)
class CompilationFallback:
    path: str
    warning: str


@dataclass(frozen=True)
class RunCompleted:
    converted: int
    skipped: int
