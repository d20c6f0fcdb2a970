"""Declarative route table.

Idea:
- Instead of twenty hand-written request builders, each endpoint is a
  `Route` (path template + ordered path parameters) consumed by a single
  dispatcher in `adapters.wow_api`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote


@dataclass(frozen=True)
class Route:
    name: str
    template: str
    params: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()

    def render(self, *args: Any) -> str:
        """Interpolate positional path values into the template.

        Optional parameters left out (or passed as None) render as an empty
        segment, e.g. `boss/` for the full boss list.
        """

        if len(args) > len(self.params):
            raise TypeError(f"{self.name}() takes at most {len(self.params)} path argument(s)")

        values: dict[str, str] = {}
        for index, param in enumerate(self.params):
            value = args[index] if index < len(args) else None
            if value is None or value == "":
                if param not in self.optional:
                    raise TypeError(f"{self.name}() missing required path argument: {param!r}")
                values[param] = ""
                continue
            values[param] = quote(str(value), safe="")
        return self.template.format(**values)


ROUTES: dict[str, Route] = {
    route.name: route
    for route in (
        Route("achievement", "achievement/{id}", ("id",)),
        Route("auction", "auction/data/{realm}", ("realm",)),
        Route("boss", "boss/{id}", ("id",), optional=("id",)),
        Route("challenge", "challenge/{realm}", ("realm",)),
        Route("character", "character/{realm}/{name}", ("realm", "name")),
        Route("guild", "guild/{realm}/{name}", ("realm", "name")),
        Route("item", "item/{id}", ("id",)),
        Route("item_set", "item/set/{id}", ("id",)),
        Route("mount", "mount/"),
        Route("pet", "pet/"),
        Route("pet_abilities", "pet/ability/{id}", ("id",)),
        Route("pet_species", "pet/species/{id}", ("id",)),
        Route("pet_stats", "pet/stats/{id}", ("id",)),
        Route("leaderboard", "leaderboard/{bracket}", ("bracket",)),
        Route("quest", "quest/{id}", ("id",)),
        Route("realm_status", "realm/status"),
        Route("recipe", "recipe/{id}", ("id",)),
        Route("spell", "spell/{id}", ("id",)),
        Route("zone", "zone/{id}", ("id",), optional=("id",)),
    )
}

# `data/{resource}` tokens -> fixed sub-paths.
DATA_RESOURCES: dict[str, str] = {
    "battlegroups": "data/battlegroups/",
    "races": "data/character/races",
    "classes": "data/character/classes",
    "achievements": "data/character/achievements",
    "rewards": "data/guild/rewards",
    "perks": "data/guild/perks",
    "guildAchievements": "data/guild/achievements",
    "itemClasses": "data/item/classes",
    "petTypes": "data/pet/types",
    "talents": "data/talents",
}


def get_route(name: str) -> Route:
    try:
        return ROUTES[name]
    except KeyError:
        raise ValueError(f"Unknown route {name!r}. Known: {', '.join(sorted(ROUTES))}") from None


def data_path(resource: str) -> str:
    try:
        return DATA_RESOURCES[resource]
    except KeyError:
        raise ValueError(
            f"Unknown data resource {resource!r}. Known: {', '.join(sorted(DATA_RESOURCES))}"
        ) from None
