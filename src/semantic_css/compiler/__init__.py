"""External CSS compilation."""

from semantic_css.compiler.tailwind import TailwindCompiler, extract_vanilla_css

__all__ = ["TailwindCompiler", "extract_vanilla_css"]
