"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.remote_api import get_health
from cli.runtime import get_state
from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            payload = await get_health(client)
    except httpx.HTTPStatusError as exc:
        return False, f"HTTP {exc.response.status_code}"
    except (httpx.HTTPError, ValueError) as exc:
        return False, f"{exc.__class__.__name__}: {exc}"

    data = payload.get("data") if isinstance(payload, dict) else None
    status = data.get("status") if isinstance(data, dict) else None
    return True, f"status={status or 'unknown'}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = get_state(ctx).settings
    print_banner(_console)

    table = Table(title="Catalog Sync Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base URL", "OK", settings.api_base_url)
    if settings.api_token:
        table.add_row("API token", "OK", "Bearer token configured")
    else:
        table.add_row("API token", "OPTIONAL", "No token set -> requests are anonymous")
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "MISSING", str(get_user_env_file()))

    # Connectivity (best-effort)
    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("GET /health", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] run `catalog-sync doctor setup-api` to store the base URL and token."
        )
        raise typer.Exit(code=1)


@app.command(name="setup-api")
def setup_api(ctx: typer.Context) -> None:
    """Interactive API setup (stores config in the user config .env)."""

    settings = get_state(ctx).settings

    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()
    api_token = typer.prompt(
        "API token (empty for none)",
        default="",
        show_default=False,
        hide_input=True,
    ).strip()

    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base URL must start with http:// or https://")

    env_path = write_user_env_vars(
        {
            "CATALOG_SYNC_API_BASE_URL": base_url,
            "CATALOG_SYNC_API_TOKEN": api_token or None,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
