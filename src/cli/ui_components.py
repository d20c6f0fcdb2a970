"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by several commands.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import ApiFailure, RequestFailure, TransportFault
from core.domain.routes import DATA_RESOURCES, ROUTES


def print_payload(console: Console, payload: Any) -> None:
    """Print an API body as JSON."""

    console.print_json(json.dumps(payload, ensure_ascii=False))


def build_routes_table() -> Table:
    table = Table(title="Routes")
    table.add_column("Route", style="cyan", no_wrap=True)
    table.add_column("Path template", style="white")
    table.add_column("Path arguments", style="magenta")
    for name in sorted(ROUTES):
        route = ROUTES[name]
        args = [f"[{p}]" if p in route.optional else p for p in route.params]
        table.add_row(name, route.template, " ".join(args))
    for resource in sorted(DATA_RESOURCES):
        table.add_row(f"data {resource}", DATA_RESOURCES[resource], "")
    return table


def build_failure_panel(error: RequestFailure) -> Panel:
    """Panel for a failed call (remote status or transport fault)."""

    body = Text()
    if isinstance(error, ApiFailure):
        body.append(f"HTTP {error.status_code}\n", style="bold")
        body.append(error.reason or "(no reason given)")
        title = Text("API failure", style="bold red")
    elif isinstance(error, TransportFault):
        body.append(f"{type(error.error).__name__}\n", style="bold")
        body.append(str(error.error) or "(no details)")
        title = Text("Transport fault", style="bold red")
    else:
        body.append(str(error))
        title = Text("Request failure", style="bold red")
    return Panel(body, title=title, border_style="red")
