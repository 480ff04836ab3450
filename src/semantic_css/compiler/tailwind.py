"""External Tailwind compilation of ``@apply`` CSS into plain CSS.

The compiler runs ``npx tailwindcss`` in a throwaway directory:

    <tmp>/tailwind.config.js
    <tmp>/input.css     (@tailwind directives + the @apply rules)
    <tmp>/output.css    (written by the CLI)

Every failure mode surfaces as ``CompileError``; callers decide whether to
fall back.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Iterable, Sequence

import cssutils

from semantic_css.errors import CompileError

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_COMMAND", "TailwindCompiler", "extract_vanilla_css"]

DEFAULT_COMMAND: tuple[str, ...] = ("npx", "tailwindcss")
DEFAULT_TIMEOUT = 120.0

VANILLA_HEADER = "/* Generated vanilla CSS */\n/* Converted from Tailwind CSS */"

TAILWIND_CONFIG = """\
/** @type {import('tailwindcss').Config} */
module.exports = {
  content: ["./input.css"],
  theme: {
    extend: {},
  },
  plugins: [],
}
"""

INPUT_PREAMBLE = "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n\n"


class TailwindCompiler:
    """Compile ``@apply`` CSS with the Tailwind CLI.

    Args:
        command: Executable plus leading arguments, ``("npx", "tailwindcss")``
            by default.
        timeout: Seconds before the subprocess is abandoned.
    """

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_COMMAND,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not command:
            raise ValueError("command must not be empty")
        self._command = tuple(command)
        self._timeout = timeout

    @property
    def command(self) -> tuple[str, ...]:
        return self._command

    def compile(self, apply_css: str) -> str:
        """Return the raw compiled CSS for *apply_css*.

        Raises CompileError when the executable is missing, exits non-zero,
        times out, or produces no readable output.
        """
        executable = self._command[0]
        if shutil.which(executable) is None:
            raise CompileError(f"{executable} not found. Please install Node.js and npm")

        with tempfile.TemporaryDirectory(prefix="semantic-css-") as tmp:
            work_dir = Path(tmp)
            config_path = work_dir / "tailwind.config.js"
            input_path = work_dir / "input.css"
            output_path = work_dir / "output.css"

            try:
                config_path.write_text(TAILWIND_CONFIG, encoding="utf-8")
                input_path.write_text(INPUT_PREAMBLE + apply_css, encoding="utf-8")
            except OSError as exc:
                raise CompileError(f"Failed to prepare compiler input: {exc}", cause=exc) from exc

            args = [
                *self._command,
                "-i", str(input_path),
                "-o", str(output_path),
                "--config", str(config_path),
                "--minify",
            ]
            logger.debug("Running %s", " ".join(args))

            try:
                proc = subprocess.run(
                    args,
                    cwd=str(work_dir),
                    capture_output=True,
                    text=True,
                    timeout=self._timeout,
                )
            except subprocess.TimeoutExpired as exc:
                raise CompileError(
                    f"Tailwind compilation timed out after {self._timeout}s", cause=exc
                ) from exc
            except OSError as exc:
                raise CompileError(f"Failed to start {executable}: {exc}", cause=exc) from exc

            output = (proc.stdout or "") + (proc.stderr or "")
            if proc.returncode != 0:
                raise CompileError(
                    f"Tailwind compilation failed with exit code {proc.returncode}",
                    output=output,
                )

            try:
                return output_path.read_text(encoding="utf-8")
            except OSError as exc:
                raise CompileError(
                    f"Failed to read compiled CSS: {exc}", output=output, cause=exc
                ) from exc


# ---------------------------------------------------------------------------
# Post-processing
# ---------------------------------------------------------------------------


def _mentions(selector_text: str, selectors: Iterable[str]) -> bool:
    return any(re.search(re.escape(sel) + r"(?![\w-])", selector_text) for sel in selectors)


def _format_rule(rule: cssutils.css.CSSStyleRule, indent: str = "") -> str:
    lines = ""
    for prop in rule.style:
        priority = f" !{prop.priority}" if prop.priority else ""
        lines += f"{indent}  {prop.name}: {prop.value}{priority};\n"
    return f"{indent}{rule.selectorText} {{\n{lines}{indent}}}"


def extract_vanilla_css(compiled_css: str, selectors: Iterable[str]) -> str:
    """Keep only the compiled rules that style one of *selectors*.

    Tailwind's preflight and utility output is dropped. ``@media`` blocks
    keep only their inner rules for wanted selectors; other at-rules,
    comments and imports are discarded. Returns ``""`` when nothing matches.
    """
    wanted = [s for s in selectors if s]
    parser = cssutils.CSSParser(loglevel=logging.CRITICAL, raiseExceptions=False, validate=False)
    sheet = parser.parseString(compiled_css)

    kept: list[str] = []
    for rule in sheet.cssRules:
        if rule.type == rule.STYLE_RULE:
            if _mentions(rule.selectorText, wanted):
                kept.append(_format_rule(rule))
        elif rule.type == rule.MEDIA_RULE:
            inner = [
                _format_rule(sub, "  ")
                for sub in rule.cssRules
                if sub.type == sub.STYLE_RULE and _mentions(sub.selectorText, wanted)
            ]
            if inner:
                kept.append(f"@media {rule.media.mediaText} {{\n" + "\n".join(inner) + "\n}")

    if not kept:
        return ""
    return VANILLA_HEADER + "\n\n" + "\n\n".join(kept) + "\n"
