"""Sync job endpoints: trigger, status, history, failed jobs, retry, log detail.

No validation happens here: ids are interpolated into the path verbatim and
whatever the transport raises reaches the caller unchanged.
"""

from __future__ import annotations

from typing import Any

from core.domain.params import ParamsInput, to_request_params
from core.interfaces.transport import AsyncTransport


async def trigger_sync(client: AsyncTransport, params: ParamsInput = None) -> dict[str, Any]:
    """POST /sync/trigger.

    El body es `{"provider_id": N}` o `{}`; sin `provider_id` el servicio
    sincroniza todos los proveedores.
    """

    response = await client.post("/sync/trigger", json=to_request_params(params))
    return response.json()


async def get_sync_status(client: AsyncTransport) -> dict[str, Any]:
    """GET /sync/status -> `data: {active_syncs: [...], count}`."""

    response = await client.get("/sync/status")
    return response.json()


async def get_sync_history(client: AsyncTransport, params: ParamsInput = None) -> dict[str, Any]:
    """GET /sync/history (paginated).

    Filters: provider_id, provider_type, external_id, product_id, plus the
    usual page/per_page/sort_by/sort_direction.
    """

    response = await client.get("/sync/history", params=to_request_params(params))
    return response.json()


async def get_failed_jobs(client: AsyncTransport, params: ParamsInput = None) -> dict[str, Any]:
    response = await client.get("/sync/failed-jobs", params=to_request_params(params))
    return response.json()


async def retry_job(client: AsyncTransport, job_id: str) -> dict[str, Any]:
    """POST /sync/retry/{job_id} sin body; `data.job_id` confirma el job."""

    response = await client.post(f"/sync/retry/{job_id}")
    return response.json()


async def get_sync_log(client: AsyncTransport, identifier: str | int) -> dict[str, Any]:
    """GET /sync/{identifier}, by numeric id or sync key.

    `data` holds the sync log, the matched products, the external ids that
    had no match, and the count of each.
    """

    response = await client.get(f"/sync/{identifier}")
    return response.json()
