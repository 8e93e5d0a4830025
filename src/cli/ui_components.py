"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import (
    HealthData,
    PaginationMeta,
    Product,
    SyncLog,
    SyncLogDetail,
)

_STATUS_STYLES = {
    "ok": "green",
    "healthy": "green",
    "up": "green",
    "completed": "green",
    "running": "cyan",
    "pending": "yellow",
    "degraded": "yellow",
    "failed": "red",
    "down": "red",
    "error": "red",
}


def status_text(value: str | None) -> Text:
    if not value:
        return Text("-", style="dim")
    return Text(value, style=_STATUS_STYLES.get(value.lower(), "white"))


def _provider_label(provider: Any) -> str:
    if provider is None:
        return "-"
    name = getattr(provider, "name", None)
    pid = getattr(provider, "id", None)
    if name and pid is not None:
        return f"{name} (#{pid})"
    return str(name or pid or "-")


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("CATALOG SYNC", style="bold cyan")
    subtitle = Text("Productos • Proveedores • Jobs de sincronización", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_health_panel(health: HealthData) -> Panel:
    table = Table(show_header=True, box=None)
    table.add_column("Service", style="cyan", no_wrap=True)
    table.add_column("Status")
    for name, state in sorted(health.services.items()):
        table.add_row(name, status_text(state))

    header = Text.assemble("Status: ", status_text(health.status))
    if health.timestamp:
        header.append(f"\nTimestamp: {health.timestamp}", style="dim")
    return Panel(Group(header, Text(""), table), title="Health", border_style="cyan")


def build_products_table(products: list[Product], meta: PaginationMeta | None = None) -> Table:
    table = Table(title="Products", caption=pagination_caption(meta))
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Name", style="white")
    table.add_column("Provider", style="magenta")
    table.add_column("Description", style="dim", overflow="fold")
    for product in products:
        table.add_row(
            str(product.id),
            product.name,
            _provider_label(product.provider),
            product.description or "",
        )
    return table


def build_sync_logs_table(logs: list[SyncLog], *, title: str, meta: PaginationMeta | None = None) -> Table:
    table = Table(title=title, caption=pagination_caption(meta))
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Sync key", style="white")
    table.add_column("Status")
    table.add_column("Provider", style="magenta")
    table.add_column("Started", style="dim")
    table.add_column("Completed", style="dim")
    for log in logs:
        table.add_row(
            str(log.id),
            log.sync_key,
            status_text(log.job_status),
            _provider_label(log.provider),
            log.started_at or "",
            log.completed_at or "",
        )
    return table


def build_records_table(records: list[dict[str, Any]], *, title: str, meta: PaginationMeta | None = None) -> Table:
    """Tabla genérica para listas sin modelo fijo (p.ej. failed jobs)."""

    columns: list[str] = []
    for record in records:
        for key in record:
            if key not in columns:
                columns.append(key)

    table = Table(title=title, caption=pagination_caption(meta))
    for column in columns:
        table.add_column(column, overflow="fold")
    for record in records:
        table.add_row(*(_cell(record.get(column)) for column in columns))
    return table


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, dict) and ("name" in value or "id" in value):
        return str(value.get("name") or value.get("id"))
    return str(value)


def build_sync_log_panel(detail: SyncLogDetail) -> Panel:
    log = detail.sync_log
    body = Text()
    body.append(f"Sync key: {log.sync_key}\n")
    body.append("Status: ")
    body.append_text(status_text(log.job_status))
    body.append(f"\nProvider: {_provider_label(log.provider)}\n")
    if log.job_type:
        body.append(f"Job type: {log.job_type}\n")
    if log.started_at:
        body.append(f"Started: {log.started_at}\n", style="dim")
    if log.completed_at:
        body.append(f"Completed: {log.completed_at}\n", style="dim")
    body.append(f"\nMatched products: {detail.products_count}\n", style="bold")
    body.append(f"Missing external ids: {detail.missing_count}\n", style="bold")
    if detail.missing_external_ids:
        for external_id in detail.missing_external_ids:
            body.append(f"- {external_id}\n", style="red")

    return Panel(body, title=f"Sync log #{log.id}", border_style="yellow")


def pagination_caption(meta: PaginationMeta | None) -> str | None:
    if meta is None:
        return None
    caption = f"Page {meta.page}/{meta.last_page} • {meta.total} total • {meta.per_page} per page"
    if meta.sort_by:
        caption += f" • sorted by {meta.sort_by} {meta.sort_direction or ''}".rstrip()
    return caption
