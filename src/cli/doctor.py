"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.eurostar.stations import fetch_stations_map
from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars
from core.errors import EurostarCheckerError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_stations(settings: AppSettings, api_key: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            stations = await fetch_stations_map(client, api_key)
        return True, f"{len(stations)} stations"
    except EurostarCheckerError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="eurostar-checker doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.api_key:
        table.add_row("API key", "OK", "EUROSTAR_CHECKER_API_KEY is set")
    else:
        table.add_row("API key", "MISSING", "Pass --api-key or run `doctor setup-api-key`")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s per request")
    table.add_row(
        "Retries",
        "OK" if settings.max_retries else "OFF",
        f"{settings.max_retries} on 5xx / connection errors",
    )

    # Connectivity
    ok_stations = False
    if settings.api_key:
        ok_stations, detail = asyncio.run(_check_stations(settings, settings.api_key))
        table.add_row("Station directory", "OK" if ok_stations else "FAIL", detail)
    else:
        table.add_row("Station directory", "SKIPPED", "No API key")

    _console.print(table)

    if settings.api_key and not ok_stations:
        raise typer.Exit(code=1)


@app.command(name="setup-api-key")
def setup_api_key() -> None:
    """Store the API key in the user config .env."""

    api_key = typer.prompt("Eurostar API key", hide_input=True, confirmation_prompt=False).strip()
    if not api_key:
        raise typer.BadParameter("API key must not be empty")

    env_path = write_user_env_vars({"EUROSTAR_CHECKER_API_KEY": api_key})
    _console.print(f"[green]Saved API key to:[/green] {env_path}")
