"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Documenta la forma de las respuestas del servicio (envelope, meta, entidades)
  en un único lugar.
- La CLI los usa para leer payloads con tipos; las operaciones del cliente
  devuelven el JSON tal cual y nunca lo reescriben.

Nota:
- `extra="allow"`: los campos que el servicio añada en el futuro se conservan.
- Los valores de `job_status` los define el servicio remoto, aquí son `str`.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

T = TypeVar("T")


class Provider(BaseModel):
    """Referencia opaca a una fuente de datos externa."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    name: str | None = None
    type: str | None = None


class Product(BaseModel):
    """Producto tal como lo expone el servicio (solo lectura)."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Identificador del producto.")
    name: str = Field(default="", description="Nombre del producto.")
    description: str | None = Field(default=None, description="Descripción libre.")
    provider: Provider | None = Field(default=None, description="Proveedor asociado.")

    provider_id: int | None = None
    external_id: str | None = None
    price: float | str | None = None
    stock: int | None = None
    data_hash: str | None = None
    last_synced_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class SyncLog(BaseModel):
    """Registro de un job de sincronización."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Identificador numérico del log.")
    sync_key: str = Field(..., description="Clave de correlación opaca.")
    job_status: str = Field(..., description="Estado del job (pending/running/completed/failed...).")
    provider: Provider | None = Field(default=None, description="Proveedor asociado.")

    provider_id: int | None = None
    job_type: str | None = None
    log_level: str | None = None
    started_at: str | None = None
    completed_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class PaginationMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    page: int
    per_page: int
    total: int
    last_page: int
    sort_by: str | None = None
    sort_direction: str | None = None


class Envelope(BaseModel, Generic[T]):
    """Wrapper común `{success, data, message}` de todos los endpoints."""

    model_config = ConfigDict(extra="allow")

    success: bool
    data: T
    message: str = ""


class PaginatedResponse(Envelope[list[T]], Generic[T]):
    """Envelope de listas paginadas (añade `meta`)."""

    meta: PaginationMeta


class HealthData(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: str
    timestamp: str | None = None
    services: dict[str, str] = Field(default_factory=dict)


class SyncStatusData(BaseModel):
    model_config = ConfigDict(extra="allow")

    active_syncs: list[SyncLog] = Field(default_factory=list)
    count: int = 0


class RetryJobData(BaseModel):
    model_config = ConfigDict(extra="allow")

    job_id: str


class SyncLogDetail(BaseModel):
    """Detalle de un log: productos emparejados y external ids sin match."""

    model_config = ConfigDict(extra="allow")

    sync_log: SyncLog
    products: list[dict[str, Any]] = Field(default_factory=list)
    missing_external_ids: list[str | int] = Field(default_factory=list)
    products_count: int = 0
    missing_count: int = 0
