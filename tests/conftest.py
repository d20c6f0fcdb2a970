"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from adapters.wow_api import WoWCommunityAPI
from tests.helpers import API_KEY, Recorder, mock_client


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep real WOW_API_* variables and any local .env out of the tests."""
    for name in ("WOW_API_API_KEY", "WOW_API_LOCALE", "WOW_API_REGION", "WOW_API_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_api():
    """Build a client whose HTTP traffic goes to `handler`.

    Returns `(api, recorder)`.
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any):
        recorder = Recorder(handler)
        kwargs.setdefault("api_key", API_KEY)
        return WoWCommunityAPI(client=mock_client(recorder), **kwargs), recorder

    return _make
