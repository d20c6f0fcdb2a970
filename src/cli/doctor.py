"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.wow_api import WoWCommunityAPI
from core.domain.errors import ConfigurationError, RequestFailure

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(api: WoWCommunityAPI) -> tuple[bool, str]:
    try:
        body = await api.realm_status()
    except RequestFailure as exc:
        return False, str(exc)
    realms = body.get("realms") if isinstance(body, dict) else None
    count = len(realms) if isinstance(realms, list) else 0
    return True, f"{count} realm(s) reported"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    options = ctx.obj or {}

    table = Table(title="wowapi Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        api = WoWCommunityAPI(
            options.get("api_key"),
            locale=options.get("locale"),
            region=options.get("region"),
        )
    except ConfigurationError as exc:
        table.add_row("Configuration", "FAIL", str(exc))
        _console.print(table)
        _console.print("\n[yellow]Note:[/yellow] set WOW_API_API_KEY (or pass --api-key).")
        raise typer.Exit(code=1) from exc

    settings = api.settings
    table.add_row("API key", "OK", f"{len(settings.api_key)} characters")
    table.add_row("Region", "OK", settings.region.value)
    table.add_row("Locale", "OK", settings.locale.value)
    table.add_row("API host", "OK", settings.api_host)

    # Connectivity (best-effort)
    ok_api, detail_api = asyncio.run(_check_api(api))
    table.add_row("realm/status", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)
    if not ok_api:
        raise typer.Exit(code=1)
