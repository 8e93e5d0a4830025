"""CLI principal (Typer).

Comandos:
- `health`: estado del servicio y sus sub-servicios.
- `products`: listado paginado de productos.
- `sync ...`: jobs de sincronización (ver `cli.sync_commands`).
- `doctor ...`: diagnóstico de configuración/conectividad.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from adapters.remote_api import get_health, get_products
from cli import doctor
from cli.runtime import CliState, emit, err_console, execute, get_state
from cli.sync_commands import app as sync_app
from cli.ui_components import build_health_panel, build_products_table
from core.config import AppSettings
from core.domain.models import Envelope, HealthData, PaginatedResponse, Product
from core.domain.params import PRODUCT_SORT_FIELDS, ProductListParams, SortDirection
from core.log import configure_logging

app = typer.Typer(
    no_args_is_help=True,
    help="Client for the catalog sync API: health, products and sync jobs.",
)
app.add_typer(sync_app, name="sync")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main_callback(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the raw JSON response to this file.",
        dir_okay=False,
    ),
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        help="Override CATALOG_SYNC_API_BASE_URL for this run.",
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING..."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        err_console.print("[red]Invalid configuration:[/red]")
        err_console.print(str(exc), markup=False)
        raise typer.Exit(code=1) from exc
    if base_url:
        settings = settings.model_copy(update={"api_base_url": base_url})
    configure_logging(log_level or settings.log_level)
    ctx.obj = CliState(settings=settings, as_json=as_json, output=output)


def _render_health(payload: dict[str, Any]):
    envelope = Envelope[HealthData].model_validate(payload)
    return build_health_panel(envelope.data)


@app.command()
def health(ctx: typer.Context) -> None:
    """Check the service health."""

    state = get_state(ctx)
    payload = execute(state, get_health)
    emit(state, payload, _render_health)


def _render_products(payload: dict[str, Any]):
    page = PaginatedResponse[Product].model_validate(payload)
    return build_products_table(page.data, page.meta)


@app.command()
def products(
    ctx: typer.Context,
    page: Optional[int] = typer.Option(None, help="Page number (default 1)."),
    per_page: Optional[int] = typer.Option(None, "--per-page", help="Items per page, 1-100 (default 15)."),
    sort_by: Optional[str] = typer.Option(
        None,
        "--sort-by",
        help=f"Sort field: {', '.join(PRODUCT_SORT_FIELDS)}.",
    ),
    sort_direction: Optional[SortDirection] = typer.Option(None, "--sort-direction"),
    provider_id: Optional[int] = typer.Option(None, "--provider-id", help="Filter by provider ID."),
    search: Optional[str] = typer.Option(None, help="Search in name and description."),
) -> None:
    """List products (paginated)."""

    state = get_state(ctx)
    params = ProductListParams(
        page=page,
        per_page=per_page,
        sort_by=sort_by,
        sort_direction=sort_direction,
        provider_id=provider_id,
        search=search,
    )
    payload = execute(state, lambda client: get_products(client, params))
    emit(state, payload, _render_products)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
