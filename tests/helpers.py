"""Mock-transport helpers shared by the test modules."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx

API_KEY = "test-key"
HOST = "https://us.api.battle.net/wow"


class Recorder:
    """Collects every request that reaches the mock transport."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]


def json_response(status_code: int, body: Any) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(body).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


def mock_client(recorder: Recorder) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(recorder))
