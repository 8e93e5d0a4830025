"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts, headers y auth para todas las operaciones.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Los hooks hacen que un status no-2xx falle como `httpx.HTTPStatusError`;
las operaciones del cliente no traducen ni reintentan errores.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings

logger = logging.getLogger(__name__)


async def _log_request(request: httpx.Request) -> None:
    logger.debug("-> %s %s", request.method, request.url)


async def _raise_for_status(response: httpx.Response) -> None:
    logger.debug(
        "<- %s %s %s",
        response.status_code,
        response.request.method,
        response.request.url,
    )
    if response.is_error:
        # El body del error (envelope con `message`) debe quedar legible para el caller.
        await response.aread()
    response.raise_for_status()


def build_headers(settings: AppSettings, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    if extra_headers:
        headers.update(extra_headers)
    return headers


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea el `httpx.AsyncClient` compartido por todas las operaciones.

    Por qué un builder:
    - Centraliza base URL/headers/timeouts para que todos los endpoints se
      comporten igual.
    - El caller es dueño del ciclo de vida (`async with build_async_client()`).
    """

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=build_headers(settings, extra_headers),
        event_hooks={"request": [_log_request], "response": [_raise_for_status]},
        transport=transport,
    )
