"""Conversion runner: walks an input tree and writes converted outputs.

For every accepted source file ``<in>/a/Card.tsx`` the runner writes:

    <out>/a/Card.module.css      semantic CSS rules
    <out>/a/Card.tsx             markup referencing ``styles.<name>``
    <out>/a/Card.report.json     (with write_report)
    <out>/a/tailwind/, vanilla/  (with compile; see DualOutputGenerator)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from semantic_css.ai.client import AIClient
from semantic_css.ai.fallback import CachedAIResolver
from semantic_css.compiler.tailwind import TailwindCompiler
from semantic_css.config import ConverterConfig
from semantic_css.converter import Converter, UnknownClassResolver
from semantic_css.errors import SourceReadError
from semantic_css.events.bus import EventBus
from semantic_css.events.types import (
    CompilationFallback,
    FileConverted,
    FileSkipped,
    RunCompleted,
    RunStarted,
)
from semantic_css.generator.css import CSSGenerator, write_text
from semantic_css.generator.dual import DualOutputGenerator
from semantic_css.generator.markup import MarkupRewriter
from semantic_css.parser.markup import MarkupParser
from semantic_css.report import ChangeReport, build_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileOutcome:
    source: str
    css_path: str
    markup_path: str
    rule_count: int
    unresolved: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    report: ChangeReport | None = None


@dataclass(frozen=True)
class RunSummary:
    converted: tuple[FileOutcome, ...]
    skipped: tuple[str, ...]


class ConversionRunner:
    """Orchestrator that wires parser, converter and writers for a whole tree.

    Each file gets a fresh Converter so semantic names do not depend on the
    files converted before it. The AI resolver, when enabled, is shared so its
    cache spans the run.
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        *,
        event_bus: EventBus | None = None,
        resolver: UnknownClassResolver | None = None,
        compiler: TailwindCompiler | None = None,
    ) -> None:
        self.config = config or ConverterConfig()
        self._event_bus = event_bus or EventBus()
        self._parser = MarkupParser()
        self._css = CSSGenerator()
        self._rewriter = MarkupRewriter(self.config.module_suffix)
        self._ai_client: AIClient | None = None

        if resolver is None and self.config.use_ai:
            self._ai_client = AIClient(
                self.config.ai_api_key,
                model=self.config.ai_model,
                base_url=self.config.ai_base_url,
            )
            resolver = CachedAIResolver(self._ai_client)
        self._resolver = resolver

        if compiler is None and self.config.compile:
            compiler = TailwindCompiler(
                self.config.compiler_command, timeout=self.config.compiler_timeout
            )
        self._dual = (
            DualOutputGenerator(compiler, rewriter=self._rewriter) if self.config.compile else None
        )

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    def discover(self, input_path: str | Path) -> list[Path]:
        """Return accepted source files under *input_path*, sorted.

        Raises SourceReadError if *input_path* does not exist.
        """
        root = Path(input_path)
        if root.is_file():
            return [root] if self.config.accepts(root.name) else []
        if not root.is_dir():
            raise SourceReadError(f"Input path does not exist: {root}", str(root))
        return sorted(p for p in root.rglob("*") if p.is_file() and self.config.accepts(p.name))

    def run(self, input_path: str | Path, output_dir: str | Path) -> RunSummary:
        """Convert every accepted file under *input_path* into *output_dir*.

        Raises SourceReadError or OutputWriteError on I/O failure; files
        already written stay in place.
        """
        root = Path(input_path)
        out = Path(output_dir)
        files = [f for f in self.discover(root) if not _is_within(f, out)]
        base = root.parent if root.is_file() else root

        self._event_bus.emit(RunStarted(str(root), str(out), len(files)))
        converted: list[FileOutcome] = []
        skipped: list[str] = []

        try:
            for source in files:
                outcome = self.convert_file(source, out / source.relative_to(base).parent)
                if outcome is None:
                    skipped.append(str(source))
                else:
                    converted.append(outcome)
        finally:
            if self._ai_client is not None:
                self._ai_client.close()

        self._event_bus.emit(RunCompleted(len(converted), len(skipped)))
        return RunSummary(converted=tuple(converted), skipped=tuple(skipped))

    def convert_file(self, source: Path, target_dir: Path) -> FileOutcome | None:
        """Convert one file into *target_dir*; returns None if it had no utility classes."""
        logger.debug("Processing %s", source)
        document = self._parser.parse_file(source)
        if not document.class_refs:
            logger.debug("No utility classes in %s", source)
            self._event_bus.emit(FileSkipped(str(source), "no utility classes"))
            return None

        result = Converter(unknown_resolver=self._resolver).convert_document(document)
        if result.is_empty:
            self._event_bus.emit(FileSkipped(str(source), "no convertible classes"))
            return None

        module_name = source.stem
        css_path = self._css.generate(result.rules, target_dir / f"{module_name}{self.config.module_suffix}")
        rewritten = self._rewriter.rewrite(document, result.mappings, module_name)
        markup_path = write_text(target_dir / source.name, rewritten)

        warnings: list[str] = []
        if self._dual is not None:
            generated = self._dual.generate(document, result, module_name)
            self._dual.save(generated, target_dir, source.name)
            for warning in generated.warnings:
                warnings.append(warning)
                self._event_bus.emit(CompilationFallback(str(source), warning))

        report = None
        if self.config.write_report:
            report = build_report(
                document.content,
                rewritten,
                result,
                source_path=str(source),
                css_path=str(css_path),
                class_attributes=len(document.class_refs),
            )
            write_text(target_dir / f"{module_name}.report.json", report.to_json())

        logger.info("Converted %s: %d rules", source, len(result.rules))
        self._event_bus.emit(FileConverted(str(source), len(result.rules), str(css_path)))
        return FileOutcome(
            source=str(source),
            css_path=str(css_path),
            markup_path=str(markup_path),
            rule_count=len(result.rules),
            unresolved=result.unresolved,
            warnings=tuple(warnings),
            report=report,
        )


def _is_within(path: Path, directory: Path) -> bool:
    try:
        path.resolve().relative_to(directory.resolve())
    except ValueError:
        return False
    return True
