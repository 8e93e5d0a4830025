"""Health check endpoint."""

from __future__ import annotations

from typing import Any

from core.interfaces.transport import AsyncTransport


async def get_health(client: AsyncTransport) -> dict[str, Any]:
    """GET /health.

    Devuelve `{success, data: {status, timestamp, services}, message}`,
    donde `services` mapea cada sub-servicio a su estado.
    """

    response = await client.get("/health")
    return response.json()
