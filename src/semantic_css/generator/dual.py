"""Dual output: the untouched utility-class version next to a compiled vanilla one.

Layout written by ``DualOutputGenerator.save``:

    <out>/tailwind/<file>          original markup
    <out>/tailwind/theme.css
    <out>/vanilla/<file>           rewritten markup
    <out>/vanilla/<base>.module.css
    <out>/vanilla/<base>.apply.css
    <out>/vanilla/theme.css
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from semantic_css.compiler.tailwind import TailwindCompiler, extract_vanilla_css
from semantic_css.errors import CompileError
from semantic_css.generator.apply import ApplyGenerator
from semantic_css.generator.css import CSSGenerator, write_text
from semantic_css.generator.markup import MarkupRewriter
from semantic_css.model.rule import ConversionResult
from semantic_css.model.token import Document

logger = logging.getLogger(__name__)

__all__ = ["DualOutputGenerator", "GenerationResult"]


@dataclass(frozen=True)
class GenerationResult:
    """Artifacts for one document; ``compiled`` is False when the fallback was used."""

    tailwind_version: str
    vanilla_version: str
    apply_css: str
    vanilla_css: str
    theme_css: str
    success: bool = True
    compiled: bool = False
    warnings: tuple[str, ...] = ()


class DualOutputGenerator:
    """Build both component versions, compiling ``@apply`` CSS when possible.

    Without a compiler the plain CSS module is used directly. Compiler
    failures never fail generation; they are recorded in
    ``GenerationResult.warnings``.
    """

    def __init__(
        self,
        compiler: TailwindCompiler | None = None,
        *,
        css_generator: CSSGenerator | None = None,
        apply_generator: ApplyGenerator | None = None,
        rewriter: MarkupRewriter | None = None,
    ) -> None:
        self._compiler = compiler
        self._css = css_generator or CSSGenerator()
        self._apply = apply_generator or ApplyGenerator()
        self._rewriter = rewriter or MarkupRewriter()

    def generate(
        self, document: Document, result: ConversionResult, module_name: str
    ) -> GenerationResult:
        apply_css = self._apply.render(result.rules)
        theme_css = self._apply.theme(result.rules, result.component or module_name)
        vanilla_version = self._rewriter.rewrite(document, result.mappings, module_name)

        warnings: list[str] = []
        vanilla_css = ""
        compiled = False

        if self._compiler is not None:
            try:
                raw = self._compiler.compile(apply_css)
            except CompileError as exc:
                warnings.append(f"Failed to compile CSS: {exc}")
                logger.info("Compilation failed for %s, using plain CSS: %s", module_name, exc)
            else:
                vanilla_css = extract_vanilla_css(raw, [r.selector for r in result.rules])
                compiled = bool(vanilla_css)
                if not compiled:
                    warnings.append("Compiled CSS contained no generated selectors")
                    logger.info("Compiled CSS for %s was empty, using plain CSS", module_name)

        if not compiled:
            vanilla_css = self._css.render(result.rules)

        return GenerationResult(
            tailwind_version=document.content,
            vanilla_version=vanilla_version,
            apply_css=apply_css,
            vanilla_css=vanilla_css,
            theme_css=theme_css,
            success=True,
            compiled=compiled,
            warnings=tuple(warnings),
        )

    def save(self, result: GenerationResult, output_dir: str | Path, file_name: str) -> list[Path]:
        """Write *result* under *output_dir*; returns the written paths.

        Raises OutputWriteError if any file cannot be written.
        """
        out = Path(output_dir)
        tailwind_dir = out / "tailwind"
        vanilla_dir = out / "vanilla"
        base = Path(file_name).stem

        return [
            write_text(tailwind_dir / file_name, result.tailwind_version),
            write_text(vanilla_dir / file_name, result.vanilla_version),
            write_text(vanilla_dir / f"{base}.apply.css", result.apply_css),
            write_text(vanilla_dir / f"{base}{self._rewriter.module_suffix}", result.vanilla_css),
            write_text(tailwind_dir / "theme.css", result.theme_css),
            write_text(vanilla_dir / "theme.css", result.theme_css),
        ]
