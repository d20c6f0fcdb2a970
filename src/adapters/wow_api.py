"""World of Warcraft community API client.

Every endpoint method is a thin, named wrapper over `request()`, which
resolves a `Route` from the declarative table and hands the path to the
executor. The only endpoint with its own logic is `auction()`, which
follows the manifest pointer to the actual dump.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping, Sequence

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client, execute, fetch_json
from core.config import ClientSettings, Locale, Region
from core.domain.errors import MALFORMED_AUCTION_RESPONSE, ConfigurationError, MalformedResponseError
from core.domain.models import AuctionManifestEntry
from core.domain.routes import data_path, get_route
from core.logging import configure_logging, logger

QueryParams = Mapping[str, Any] | None


def _configuration_message(exc: ValidationError) -> str:
    messages: list[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "settings"
        if field == "api_key":
            messages.append("API key not provided")
        elif field == "region":
            messages.append('Region must be "eu" or "us"')
        elif field == "locale":
            messages.append('Locale must be "en_US", "es_MX", or "pt_BR"')
        else:
            messages.append(f"{field}: {error.get('msg')}")
    return "; ".join(messages)


class WoWCommunityAPI:
    """Async client for `https://{region}.api.battle.net/wow`.

    Usage:
    - one-shot: `await WoWCommunityAPI(api_key=...).achievement(2144)`
      (each call opens and closes its own HTTP client);
    - shared connection: `async with WoWCommunityAPI(...) as wow: ...`;
    - injected: pass `client=httpx.AsyncClient(...)`, owned by the caller.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        locale: Locale | str | None = None,
        region: Region | str | None = None,
        settings: ClientSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if settings is None:
            overrides: dict[str, Any] = {}
            if api_key is not None:
                overrides["api_key"] = api_key
            if locale is not None:
                overrides["locale"] = locale
            if region is not None:
                overrides["region"] = region
            try:
                settings = ClientSettings(**overrides)
            except ValidationError as exc:
                raise ConfigurationError(_configuration_message(exc)) from exc

        self._settings = settings
        configure_logging(settings.log_level)
        self._client = client
        self._owns_client = False

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def api_host(self) -> str:
        return self._settings.api_host

    async def __aenter__(self) -> "WoWCommunityAPI":
        if self._client is None:
            self._client = build_async_client()
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with build_async_client() as client:
            yield client

    async def query(self, path: str, query_params: QueryParams = None) -> Any:
        """Request an arbitrary relative path (already interpolated)."""

        async with self._session() as client:
            return await execute(client, self._settings, path, query_params)

    async def request(self, route_name: str, *path_args: Any, query_params: QueryParams = None) -> Any:
        """Generic dispatcher over the route table."""

        if route_name == "auction":
            return await self.auction(*path_args, query_params=query_params)
        path = get_route(route_name).render(*path_args)
        return await self.query(path, query_params)

    async def achievement(self, id: int, query_params: QueryParams = None) -> Any:
        return await self.request("achievement", id, query_params=query_params)

    async def auction(self, realm: str, query_params: QueryParams = None) -> dict[str, Any]:
        """Two requests are performed.

        First the manifest (`auction/data/{realm}`) pointing at the cached
        dump, then the dump itself. The manifest timestamp is returned as
        `lastModifiedTimestamp`, overriding any field of that name in the dump.
        """

        path = get_route("auction").render(realm)
        async with self._session() as client:
            manifest = await execute(client, self._settings, path, query_params)
            entry = AuctionManifestEntry.from_manifest(manifest)
            logger.debug("auction_manifest_resolved", realm=realm, last_modified=entry.last_modified)

            body = await fetch_json(client, entry.url)

        if not isinstance(body, dict):
            raise MalformedResponseError(MALFORMED_AUCTION_RESPONSE)
        return {**body, "lastModifiedTimestamp": entry.last_modified}

    async def boss(self, id: int | None = None, query_params: QueryParams = None) -> Any:
        """Pass `id=None` for the full boss list (with extra query params if needed)."""

        return await self.request("boss", id, query_params=query_params)

    async def challenge(self, realm: str, query_params: QueryParams = None) -> Any:
        """`realm` may be a realm slug or `"region"` for the overall leaderboard."""

        return await self.request("challenge", realm, query_params=query_params)

    async def character(self, realm: str, character_name: str, query_params: QueryParams = None) -> Any:
        """Character profile.

        `query_params["fields"]` may be a list of any of: achievements,
        appearance, feed, guild, hunterPets, items, mounts, pets, petSlots,
        professions, progression, pvp, quests, reputation, statistics, stats,
        talents, titles, audit.
        """

        return await self.request("character", realm, character_name, query_params=query_params)

    async def guild(self, realm: str, guild_name: str, query_params: QueryParams = None) -> Any:
        """Guild profile; `fields` may list members, achievements, news, challenge."""

        return await self.request("guild", realm, guild_name, query_params=query_params)

    async def item(self, id: int, query_params: QueryParams = None) -> Any:
        return await self.request("item", id, query_params=query_params)

    async def item_set(self, id: int, query_params: QueryParams = None) -> Any:
        return await self.request("item_set", id, query_params=query_params)

    async def mount(self, query_params: QueryParams = None) -> Any:
        """All supported mounts."""

        return await self.request("mount", query_params=query_params)

    async def pet(self, query_params: QueryParams = None) -> Any:
        """All supported battle and vanity pets."""

        return await self.request("pet", query_params=query_params)

    async def pet_abilities(self, id: int, query_params: QueryParams = None) -> Any:
        return await self.request("pet_abilities", id, query_params=query_params)

    async def pet_species(self, id: int, query_params: QueryParams = None) -> Any:
        return await self.request("pet_species", id, query_params=query_params)

    async def pet_stats(self, id: int, query_params: QueryParams = None) -> Any:
        """Stats for a species id; `level`, `breedId` and `qualityId` go in `query_params`."""

        return await self.request("pet_stats", id, query_params=query_params)

    async def leaderboard(self, bracket: str, query_params: QueryParams = None) -> Any:
        """PvP leaderboard: `2v2`, `3v3`, `5v5` or `rbg`."""

        return await self.request("leaderboard", bracket, query_params=query_params)

    async def quest(self, id: int, query_params: QueryParams = None) -> Any:
        return await self.request("quest", id, query_params=query_params)

    async def realm_status(
        self,
        realms: str | Sequence[str] | None = None,
        query_params: QueryParams = None,
    ) -> Any:
        """Realm status, optionally filtered by one realm slug or a list of them."""

        params: dict[str, Any] = dict(query_params or {})
        if isinstance(realms, str):
            if realms:
                params["realms"] = realms
        elif realms:
            params["realms"] = list(realms)
        return await self.request("realm_status", query_params=params)

    async def recipe(self, id: int, query_params: QueryParams = None) -> Any:
        return await self.request("recipe", id, query_params=query_params)

    async def spell(self, id: int, query_params: QueryParams = None) -> Any:
        return await self.request("spell", id, query_params=query_params)

    async def zone(self, id: int | None = None, query_params: QueryParams = None) -> Any:
        """Pass `id=None` for the full zone list."""

        return await self.request("zone", id, query_params=query_params)

    async def data(self, resource: str, query_params: QueryParams = None) -> Any:
        """Static data resources (battlegroups, races, classes, talents...)."""

        return await self.query(data_path(resource), query_params)
