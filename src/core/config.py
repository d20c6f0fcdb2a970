"""Client configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Adapters (HTTP, endpoints) read the same frozen, validated contract.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

REQUEST_TIMEOUT_SECONDS = 5.0


class Region(str, Enum):
    """Regional API gateways."""

    US = "us"
    EU = "eu"


class Locale(str, Enum):
    """Locales accepted by the community API."""

    EN_US = "en_US"
    ES_MX = "es_MX"
    PT_BR = "pt_BR"


class ClientSettings(BaseSettings):
    """Validated configuration of a `WoWCommunityAPI` instance.

    Why pydantic-settings:
    - Typing + validation at the edge (kwargs or env vars) in a single place.
    - `frozen=True` keeps the configuration immutable once the client exists,
      so concurrent calls can share it freely.
    """

    model_config = SettingsConfigDict(
        env_prefix="WOW_API_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    api_key: str = Field(
        ...,
        min_length=1,
        description="Battle.net API key, sent as the `apikey` query parameter.",
    )
    locale: Locale = Field(
        default=Locale.EN_US,
        description="Default locale sent with every request.",
    )
    region: Region = Field(
        default=Region.US,
        description="Regional gateway (us/eu).",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Minimum level for structlog output.",
    )

    @property
    def api_host(self) -> str:
        return f"https://{self.region.value}.api.battle.net/wow"

    def default_query(self) -> dict[str, str]:
        """Base query parameters merged under every request."""

        return {"apikey": self.api_key, "locale": self.locale.value}
