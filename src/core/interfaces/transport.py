"""Contrato del transporte HTTP compartido.

Por qué Protocol:
- `httpx.AsyncClient` lo cumple estructuralmente, sin herencia.
- En tests se puede pasar cualquier objeto con `get`/`post` asíncronos.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class AsyncTransport(Protocol):
    """Minimal surface the remote API operations need.

    Base URL, headers, auth and timeouts belong to the transport; callers
    pass paths relative to the base URL.
    """

    async def get(self, url: str, *, params: Any = None, **kwargs: Any) -> httpx.Response:
        ...

    async def post(self, url: str, *, json: Any = None, **kwargs: Any) -> httpx.Response:
        ...
