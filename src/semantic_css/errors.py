"""Error types raised by the conversion pipeline."""

from __future__ import annotations


class ConversionError(Exception):
    """Base error for all semantic_css failures."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class SourceReadError(ConversionError):
    """Raised when a source document cannot be read."""

    def __init__(self, message: str, path: str = "", *, cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.path = path


class OutputWriteError(ConversionError):
    """Raised when a generated artifact cannot be written."""

    def __init__(self, message: str, path: str = "", *, cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.path = path


class CompileError(ConversionError):
    """Raised when the external CSS compiler fails or is unavailable."""

    def __init__(self, message: str, *, output: str = "", cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.output = output
