from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

from semantic_css.ai.client import DEFAULT_BASE_URL, DEFAULT_MODEL
from semantic_css.compiler.tailwind import DEFAULT_COMMAND, DEFAULT_TIMEOUT


@dataclass(frozen=True)
class ConverterConfig:
    extensions: tuple[str, ...] = (".html", ".jsx", ".tsx", ".vue")
    module_suffix: str = ".module.css"
    compile: bool = False
    compiler_command: tuple[str, ...] = DEFAULT_COMMAND
    compiler_timeout: float = DEFAULT_TIMEOUT
    use_ai: bool = False
    ai_api_key: str = ""
    ai_model: str = DEFAULT_MODEL
    ai_base_url: str = DEFAULT_BASE_URL
    write_report: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> ConverterConfig:
        """Build a config from environment variables plus explicit overrides.

        Checks SEMANTIC_CSS_AI_API_KEY, then OPENAI_API_KEY, for the AI key.
        SEMANTIC_CSS_AI_MODEL and SEMANTIC_CSS_AI_BASE_URL override the model
        and endpoint.
        """
        env = os.environ if environ is None else environ
        config = cls(
            ai_api_key=env.get("SEMANTIC_CSS_AI_API_KEY") or env.get("OPENAI_API_KEY", ""),
            ai_model=env.get("SEMANTIC_CSS_AI_MODEL", DEFAULT_MODEL),
            ai_base_url=env.get("SEMANTIC_CSS_AI_BASE_URL", DEFAULT_BASE_URL),
        )
        return replace(config, **overrides) if overrides else config

    def accepts(self, filename: str) -> bool:
        """True if *filename* has one of the configured extensions."""
        return filename.lower().endswith(self.extensions)
