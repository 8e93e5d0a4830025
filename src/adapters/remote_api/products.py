"""Product listing endpoint."""

from __future__ import annotations

from typing import Any

from core.domain.params import ParamsInput, to_request_params
from core.interfaces.transport import AsyncTransport


async def get_products(client: AsyncTransport, params: ParamsInput = None) -> dict[str, Any]:
    """GET /products con paginación, orden y filtros como query string.

    Acepta un `ProductListParams` o un mapping con las mismas claves
    (page, per_page, sort_by, sort_direction, provider_id, search). Las claves
    no informadas no se envían.
    """

    response = await client.get("/products", params=to_request_params(params))
    return response.json()
