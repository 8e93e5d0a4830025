"""Sync job commands (`catalog-sync sync ...`)."""

from __future__ import annotations

from typing import Any, Optional

import typer
from rich.text import Text

from adapters.remote_api import (
    get_failed_jobs,
    get_sync_history,
    get_sync_log,
    get_sync_status,
    retry_job,
    trigger_sync,
)
from cli.runtime import emit, execute, get_state
from cli.ui_components import build_records_table, build_sync_log_panel, build_sync_logs_table
from core.domain.models import (
    Envelope,
    PaginatedResponse,
    RetryJobData,
    SyncLog,
    SyncLogDetail,
    SyncStatusData,
)
from core.domain.params import (
    SYNC_HISTORY_SORT_FIELDS,
    FailedJobsParams,
    SortDirection,
    SyncHistoryParams,
    TriggerSyncParams,
)

app = typer.Typer(no_args_is_help=True, help="Trigger and inspect synchronization jobs.")


def _render_trigger(payload: dict[str, Any]):
    envelope = Envelope[Any].model_validate(payload)
    text = Text(
        "Sync triggered" if envelope.success else "Sync not triggered",
        style="green" if envelope.success else "red",
    )
    if envelope.data is not None:
        text.append(f"\n{envelope.data}", style="dim")
    return text


@app.command()
def trigger(
    ctx: typer.Context,
    provider_id: Optional[int] = typer.Option(
        None,
        "--provider-id",
        help="Sync a single provider; omit to sync all providers.",
    ),
) -> None:
    """Trigger a sync job."""

    state = get_state(ctx)
    params = TriggerSyncParams() if provider_id is None else TriggerSyncParams(provider_id=provider_id)
    payload = execute(state, lambda client: trigger_sync(client, params))
    emit(state, payload, _render_trigger)


def _render_status(payload: dict[str, Any]):
    envelope = Envelope[SyncStatusData].model_validate(payload)
    return build_sync_logs_table(
        envelope.data.active_syncs,
        title=f"Active syncs ({envelope.data.count})",
    )


@app.command()
def status(ctx: typer.Context) -> None:
    """Show active sync jobs."""

    state = get_state(ctx)
    payload = execute(state, get_sync_status)
    emit(state, payload, _render_status)


def _render_history(payload: dict[str, Any]):
    page = PaginatedResponse[SyncLog].model_validate(payload)
    return build_sync_logs_table(page.data, title="Sync history", meta=page.meta)


@app.command()
def history(
    ctx: typer.Context,
    page: Optional[int] = typer.Option(None, help="Page number (default 1)."),
    per_page: Optional[int] = typer.Option(None, "--per-page", help="Items per page, 1-100 (default 15)."),
    sort_by: Optional[str] = typer.Option(
        None,
        "--sort-by",
        help=f"Sort field: {', '.join(SYNC_HISTORY_SORT_FIELDS)}.",
    ),
    sort_direction: Optional[SortDirection] = typer.Option(None, "--sort-direction"),
    provider_id: Optional[int] = typer.Option(None, "--provider-id"),
    provider_type: Optional[str] = typer.Option(None, "--provider-type"),
    external_id: Optional[str] = typer.Option(None, "--external-id"),
    product_id: Optional[int] = typer.Option(None, "--product-id"),
) -> None:
    """Show sync history (paginated, filterable)."""

    state = get_state(ctx)
    params = SyncHistoryParams(
        page=page,
        per_page=per_page,
        sort_by=sort_by,
        sort_direction=sort_direction,
        provider_id=provider_id,
        provider_type=provider_type,
        external_id=external_id,
        product_id=product_id,
    )
    payload = execute(state, lambda client: get_sync_history(client, params))
    emit(state, payload, _render_history)


def _render_failed(payload: dict[str, Any]):
    page = PaginatedResponse[dict[str, Any]].model_validate(payload)
    return build_records_table(page.data, title="Failed jobs", meta=page.meta)


@app.command("failed-jobs")
def failed_jobs(
    ctx: typer.Context,
    page: Optional[int] = typer.Option(None, help="Page number (default 1)."),
    per_page: Optional[int] = typer.Option(None, "--per-page", help="Items per page, 1-100 (default 15)."),
    sort_by: Optional[str] = typer.Option(None, "--sort-by"),
    sort_direction: Optional[SortDirection] = typer.Option(None, "--sort-direction"),
) -> None:
    """List failed jobs."""

    state = get_state(ctx)
    params = FailedJobsParams(
        page=page,
        per_page=per_page,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )
    payload = execute(state, lambda client: get_failed_jobs(client, params))
    emit(state, payload, _render_failed)


def _render_retry(payload: dict[str, Any]):
    envelope = Envelope[RetryJobData].model_validate(payload)
    return Text(f"Retry queued for job {envelope.data.job_id}", style="green")


@app.command()
def retry(
    ctx: typer.Context,
    job_id: str = typer.Argument(..., help="Failed job UUID."),
) -> None:
    """Retry a failed job."""

    state = get_state(ctx)
    payload = execute(state, lambda client: retry_job(client, job_id))
    emit(state, payload, _render_retry)


def _render_log(payload: dict[str, Any]):
    envelope = Envelope[SyncLogDetail].model_validate(payload)
    return build_sync_log_panel(envelope.data)


@app.command()
def log(
    ctx: typer.Context,
    identifier: str = typer.Argument(..., help="Sync log ID or sync key."),
) -> None:
    """Show one sync log with matched products and missing external ids."""

    state = get_state(ctx)
    payload = execute(state, lambda client: get_sync_log(client, identifier))
    emit(state, payload, _render_log)
