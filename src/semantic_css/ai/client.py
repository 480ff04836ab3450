"""Chat-completions client that asks a model to translate one utility class."""
from __future__ import annotations

import json
import logging
import time
from typing import Any

from semantic_css.ai._http import HttpClient, Timeouts
from semantic_css.ai.errors import ConfigurationError, ResponseParseError
from semantic_css.model.rule import CSSProperty

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-3.5-turbo"
MAX_TOKENS = 200

SYSTEM_PROMPT = (
    "You are a CSS expert that converts Tailwind CSS classes to vanilla CSS "
    "properties. Always respond with valid JSON only."
)

USER_PROMPT = """Convert the Tailwind CSS class "{class_name}" to vanilla CSS properties.

Return the result as a JSON object with this structure:
{{
  "properties": [
    {{"name": "css-property-name", "value": "css-value"}},
    {{"name": "another-property", "value": "another-value"}}
  ]
}}

Only return the JSON object, no other text."""


def build_request_body(class_name: str, model: str) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": USER_PROMPT.format(class_name=class_name)},
        ],
        "max_tokens": MAX_TOKENS,
    }


def _strip_fences(content: str) -> str:
    text = content.strip()
    if text.startswith("```"):
        text = text[3:]
        if text.startswith("json"):
            text = text[4:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def parse_properties(content: str) -> list[CSSProperty]:
    """Parse a ``{"properties": [{"name", "value"}]}`` reply.

    Markdown code fences around the JSON are tolerated.
    """
    try:
        data = json.loads(_strip_fences(content))
    except json.JSONDecodeError as exc:
        raise ResponseParseError(f"failed to parse AI response: {exc}", cause=exc) from exc

    items = data.get("properties") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise ResponseParseError("AI response has no 'properties' list")

    props: list[CSSProperty] = []
    for item in items:
        if not isinstance(item, dict) or "name" not in item:
            raise ResponseParseError(f"malformed property entry: {item!r}")
        props.append(CSSProperty(str(item["name"]), str(item.get("value", ""))))
    return props


class AIClient:
    """OpenAI-compatible chat-completions client.

    Args:
        api_key: Bearer token; requests fail with ConfigurationError when empty.
        model: Model name sent with each request.
        base_url: API root; ``/chat/completions`` is appended.
    """

    def __init__(
        self,
        api_key: str = "",
        *,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Timeouts | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self._http = HttpClient(
            base_url=base_url.rstrip("/"),
            headers={
                "authorization": f"Bearer {api_key}",
                "content-type": "application/json",
            },
            timeout=timeout,
        )

    @property
    def has_key(self) -> bool:
        return bool(self.api_key)

    def convert_class(self, class_name: str) -> list[CSSProperty]:
        """Ask the model for the CSS properties of *class_name*.

        Raises an AIError subclass on missing configuration, HTTP or parse
        failure.
        """
        if not self.api_key:
            raise ConfigurationError("No API key configured for AI conversion")

        logger.info("AI request: model=%s class=%s", self.model, class_name)
        start = time.monotonic()
        resp = self._http.post("/chat/completions", json=build_request_body(class_name, self.model))
        elapsed = time.monotonic() - start
        logger.info("AI response: class=%s latency=%.2fs", class_name, elapsed)

        choices = resp.body.get("choices") or []
        if not choices:
            raise ResponseParseError("no response from AI")
        content = (choices[0].get("message") or {}).get("content") or ""
        return parse_properties(content)

    def close(self) -> None:
        self._http.close()
