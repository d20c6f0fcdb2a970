"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of what we send and of the few response fields the
  client itself depends on (the auction manifest).
- The rest of each payload is returned untouched: the client maps requests,
  it does not reinterpret game data.

Note:
- These models describe *what* a request is, not *how* it is sent.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping
from urllib.parse import quote, urlencode

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.config import ConfigDict

from core.config import REQUEST_TIMEOUT_SECONDS
from core.domain.errors import MALFORMED_AUCTION_RESPONSE, MalformedResponseError


def normalize_query_value(value: Any) -> str | None:
    """Render a query parameter the way the API expects it.

    Multi-valued filters (`fields`, `realms`) are comma-joined.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple, set, frozenset)):
        parts = [normalize_query_value(v) for v in value]
        return ",".join(p for p in parts if p is not None)
    return str(value)


def merge_query(defaults: Mapping[str, Any], overrides: Mapping[str, Any] | None = None) -> dict[str, str]:
    """Overlay call-site parameters on top of the configured defaults."""

    merged: dict[str, Any] = dict(defaults)
    if overrides:
        merged.update(overrides)

    out: dict[str, str] = {}
    for key, value in merged.items():
        rendered = normalize_query_value(value)
        if rendered is not None:
            out[str(key)] = rendered
    return out


class RequestDescriptor(BaseModel):
    """A single outgoing request, built per call."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(
        ...,
        min_length=1,
        description="Endpoint path relative to the API host (already interpolated).",
    )
    query: dict[str, str] = Field(
        default_factory=dict,
        description="Merged and normalized query parameters.",
    )
    timeout_seconds: float = Field(
        default=REQUEST_TIMEOUT_SECONDS,
        gt=0,
        description="Per-request timeout (seconds).",
    )

    @classmethod
    def build(
        cls,
        path: str,
        defaults: Mapping[str, Any],
        query_params: Mapping[str, Any] | None = None,
    ) -> "RequestDescriptor":
        return cls(path=path, query=merge_query(defaults, query_params))

    def url(self, host: str) -> str:
        base = f"{host}/{self.path}"
        if not self.query:
            return base
        return f"{base}?{urlencode(self.query, quote_via=quote)}"


class AuctionManifestEntry(BaseModel):
    """Pointer returned by `auction/data/{realm}`: where the dump lives and when it was built."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    url: str = Field(
        ...,
        min_length=1,
        alias="url",
        description="Absolute URL of the auction dump.",
    )
    last_modified: Any = Field(
        ...,
        alias="lastModified",
        description="Dump timestamp as sent by the API (usually epoch milliseconds), kept verbatim.",
    )

    @field_validator("last_modified")
    @classmethod
    def _require_timestamp(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("lastModified is null")
        return value

    @classmethod
    def from_manifest(cls, body: Any) -> "AuctionManifestEntry":
        """Extract the first file of a manifest or fail with a synthetic 500."""

        files = body.get("files") if isinstance(body, dict) else None
        if not isinstance(files, list) or not files or not isinstance(files[0], dict):
            raise MalformedResponseError(MALFORMED_AUCTION_RESPONSE)
        try:
            return cls.model_validate(files[0])
        except ValidationError as exc:
            raise MalformedResponseError(MALFORMED_AUCTION_RESPONSE) from exc
