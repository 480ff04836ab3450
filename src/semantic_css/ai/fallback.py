"""Cached resolver for utility classes the mapping tables do not cover."""
from __future__ import annotations

import logging
from typing import Iterable, Protocol

from semantic_css.ai.errors import AIError
from semantic_css.model.rule import CSSProperty

logger = logging.getLogger(__name__)

UNKNOWN_CLASS = "/* Unknown Tailwind class */"
ADD_MANUAL = "/* Add manual conversion */"
AI_FAILED = "/* AI conversion failed */"
AI_ERROR = "/* Error */"


class ClassConverter(Protocol):
    """Anything that can turn one class name into CSS properties."""

    @property
    def has_key(self) -> bool: ...

    def convert_class(self, class_name: str) -> list[CSSProperty]: ...


class CachedAIResolver:
    """Resolve unknown classes through an AI client, memoizing every answer.

    Never raises: a missing key or a failed request yields placeholder
    annotations, which are cached like any other result. Errors marked
    ``retryable`` are retried up to *max_retries* times first.
    """

    def __init__(self, client: ClassConverter, max_retries: int = 1) -> None:
        self._client = client
        self._max_retries = max_retries
        self._cache: dict[str, list[CSSProperty]] = {}

    def convert_unknown_class(self, class_name: str) -> list[CSSProperty]:
        cached = self._cache.get(class_name)
        if cached is not None:
            return list(cached)

        if not self._client.has_key:
            props = [CSSProperty(UNKNOWN_CLASS, class_name), CSSProperty(ADD_MANUAL, "")]
        else:
            props = self._request(class_name)

        self._cache[class_name] = props
        return list(props)

    def _request(self, class_name: str) -> list[CSSProperty]:
        for attempt in range(self._max_retries + 1):
            try:
                return self._client.convert_class(class_name)
            except AIError as exc:
                if exc.retryable and attempt < self._max_retries:
                    logger.info("Retrying AI conversion for %s after: %s", class_name, exc)
                    continue
                logger.warning("AI conversion failed for %s: %s", class_name, exc)
                return [CSSProperty(AI_FAILED, class_name), CSSProperty(AI_ERROR, str(exc))]
        return []

    def batch_convert(self, class_names: Iterable[str]) -> dict[str, list[CSSProperty]]:
        return {name: self.convert_unknown_class(name) for name in class_names}

    def clear_cache(self) -> None:
        self._cache.clear()

    @property
    def cache_size(self) -> int:
        return len(self._cache)
