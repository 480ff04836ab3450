"""HTTP client wrapper around httpx."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from semantic_css.ai.errors import NetworkError, RequestTimeoutError, error_from_status_code


@dataclass(frozen=True)
class Timeouts:
    """Connect and request timeouts in seconds."""

    connect: float = 5.0
    request: float = 60.0


@dataclass(frozen=True)
class HttpResponse:
    """Parsed HTTP response."""

    status_code: int
    body: dict[str, Any]
    raw_text: str = ""


def _json_or_empty(resp: httpx.Response) -> dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into AI exceptions."""

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str],
        timeout: Timeouts | None = None,
    ) -> None:
        t = timeout or Timeouts()
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(
                connect=t.connect,
                read=t.request,
                write=t.request,
                pool=t.connect,
            ),
        )

    def post(self, path: str, json: dict[str, Any]) -> HttpResponse:
        """Send a POST request and return the parsed response.

        Raises an AI error on non-2xx status or transport failure.
        """
        try:
            resp = self._client.post(path, json=json)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc), cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc), cause=exc) from exc

        raw_text = resp.text
        body = _json_or_empty(resp)

        if resp.status_code >= 300:
            error = body.get("error")
            msg = error.get("message", raw_text) if isinstance(error, dict) else raw_text
            raise error_from_status_code(resp.status_code, msg, raw=body)

        return HttpResponse(status_code=resp.status_code, body=body, raw_text=raw_text)

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
