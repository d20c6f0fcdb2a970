"""httpx wrapper and request executor.

Why a wrapper:
- Standardizes timeout, headers and the success/failure classification so
  every endpoint behaves the same.
- Makes testing easy: any `httpx.AsyncClient` (e.g. one backed by
  `httpx.MockTransport`) can be passed in.
"""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlsplit, urlunsplit

import httpx

from core.config import REQUEST_TIMEOUT_SECONDS, ClientSettings
from core.domain.errors import MALFORMED_RESPONSE_BODY, ApiFailure, MalformedResponseError, TransportFault
from core.domain.models import RequestDescriptor
from core.logging import logger

USER_AGENT = "wow-community-api/0.1 (+https://github.com)"


def build_async_client(*, extra_headers: dict[str, str] | None = None) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the client defaults.

    Why a builder:
    - Centralizes timeout/headers so every call behaves the same.
    """

    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(REQUEST_TIMEOUT_SECONDS),
        headers=headers,
    )


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def redact(url: str) -> str:
    # Never log the query string: it carries the API key.
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def _failure_reason(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("reason"), str):
        return body["reason"]
    return None


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> Any:
    """GET `url` once and classify the outcome.

    Returns the parsed JSON body on 2xx. Raises:
    - `ApiFailure` for any other status,
    - `MalformedResponseError` when a 2xx body is not JSON,
    - `TransportFault` when no response arrived at all.
    """

    logger.debug("request_issued", url=redact(url))
    try:
        response = await client.get(url, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.debug("transport_fault", url=redact(url), error=type(exc).__name__)
        raise TransportFault(exc) from exc

    logger.debug("response_received", url=redact(url), status_code=response.status_code)
    if not is_success(response.status_code):
        raise ApiFailure(response.status_code, _failure_reason(response))

    try:
        return response.json()
    except ValueError as exc:
        raise MalformedResponseError(MALFORMED_RESPONSE_BODY) from exc


async def execute(
    client: httpx.AsyncClient,
    settings: ClientSettings,
    path: str,
    query_params: Mapping[str, Any] | None = None,
) -> Any:
    """Run one API request: merge the query, build the URL, fetch and classify."""

    descriptor = RequestDescriptor.build(path, settings.default_query(), query_params)
    return await fetch_json(
        client,
        descriptor.url(settings.api_host),
        timeout=descriptor.timeout_seconds,
    )
