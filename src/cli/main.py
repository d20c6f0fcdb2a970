"""`wowapi` command line (Typer + Rich).

Thin example front-end over `WoWCommunityAPI`: every command builds a
client from the global options, awaits one call and prints the JSON body.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

import typer
from rich.console import Console

from adapters.wow_api import WoWCommunityAPI
from cli import doctor
from cli.ui_components import build_failure_panel, build_routes_table, print_payload
from core.domain.errors import ConfigurationError, RequestFailure
from core.domain.routes import data_path, get_route
from core.logging import configure_logging

app = typer.Typer(no_args_is_help=True, help="World of Warcraft community API client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def parse_params(values: list[str] | None) -> dict[str, Any]:
    """Parse repeated `key=value` options; repeated keys become lists."""

    params: dict[str, Any] = {}
    for raw in values or []:
        if "=" not in raw:
            raise typer.BadParameter(f"expected key=value, got {raw!r}", param_hint="--param")
        key, value = raw.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"empty key in {raw!r}", param_hint="--param")
        if key in params:
            previous = params[key]
            params[key] = [*previous, value] if isinstance(previous, list) else [previous, value]
        else:
            params[key] = value
    return params


def _build_api(ctx: typer.Context) -> WoWCommunityAPI:
    options = ctx.obj or {}
    try:
        return WoWCommunityAPI(
            options.get("api_key"),
            locale=options.get("locale"),
            region=options.get("region"),
        )
    except ConfigurationError as exc:
        _err_console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=2) from exc


def _run(ctx: typer.Context, call: Callable[[WoWCommunityAPI], Awaitable[Any]]) -> None:
    api = _build_api(ctx)
    try:
        payload = asyncio.run(call(api))
    except RequestFailure as exc:
        _err_console.print(build_failure_panel(exc))
        raise typer.Exit(code=1) from exc
    print_payload(_console, payload)


@app.callback()
def main(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Battle.net API key (or WOW_API_API_KEY)."),
    locale: Optional[str] = typer.Option(None, "--locale", help="en_US, es_MX or pt_BR."),
    region: Optional[str] = typer.Option(None, "--region", help="us or eu."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr."),
) -> None:
    if verbose:
        configure_logging("DEBUG", force=True)
    ctx.obj = {"api_key": api_key, "locale": locale, "region": region}


@app.command()
def call(
    ctx: typer.Context,
    route: str = typer.Argument(..., help="Route name, see `wowapi routes`."),
    args: Optional[list[str]] = typer.Argument(None, help="Path arguments in template order."),
    param: Optional[list[str]] = typer.Option(None, "--param", "-p", help="Extra query parameter key=value."),
) -> None:
    """Call any route from the route table."""

    params = parse_params(param)
    try:
        get_route(route).render(*(args or []))
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="ROUTE") from exc
    except TypeError as exc:
        raise typer.BadParameter(str(exc), param_hint="ARGS") from exc

    _run(ctx, lambda api: api.request(route, *(args or []), query_params=params))


@app.command()
def auction(
    ctx: typer.Context,
    realm: str = typer.Argument(..., help="Realm slug."),
    param: Optional[list[str]] = typer.Option(None, "--param", "-p", help="Extra query parameter key=value."),
) -> None:
    """Fetch the auction house dump of a realm (manifest + dump)."""

    params = parse_params(param)
    _run(ctx, lambda api: api.auction(realm, query_params=params))


@app.command()
def data(
    ctx: typer.Context,
    resource: str = typer.Argument(..., help="battlegroups, races, classes, talents..."),
) -> None:
    """Fetch a static data resource."""

    try:
        data_path(resource)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="RESOURCE") from exc

    _run(ctx, lambda api: api.data(resource))


@app.command()
def routes() -> None:
    """List known routes and their path templates."""

    _console.print(build_routes_table())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
