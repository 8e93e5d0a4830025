"""Parameter bags for the list/trigger endpoints.

Every field is optional. Unset fields are left out of the request entirely,
they are never sent as null; ranges and sort fields are checked by the
service, not here.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Sort fields documented by the service. Used for help text only.
PRODUCT_SORT_FIELDS: tuple[str, ...] = (
    "id",
    "provider_id",
    "external_id",
    "name",
    "price",
    "stock",
    "data_hash",
    "last_synced_at",
    "created_at",
    "updated_at",
)

SYNC_HISTORY_SORT_FIELDS: tuple[str, ...] = (
    "id",
    "sync_key",
    "provider_id",
    "job_type",
    "job_status",
    "log_level",
    "started_at",
    "completed_at",
    "created_at",
    "updated_at",
)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15


class SortDirection(str, Enum):
    """Sort direction accepted by the paginated endpoints."""

    ASC = "asc"
    DESC = "desc"


class _Params(BaseModel):
    model_config = ConfigDict(extra="allow", use_enum_values=True)

    def to_request(self) -> dict[str, Any]:
        """Only the fields the caller actually supplied."""

        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class PaginationParams(_Params):
    page: int | None = Field(default=None, description=f"Page number (service default {DEFAULT_PAGE}).")
    per_page: int | None = Field(
        default=None,
        description=f"Items per page, 1-100 (service default {DEFAULT_PER_PAGE}).",
    )
    sort_by: str | None = None
    sort_direction: SortDirection | None = None


class FailedJobsParams(PaginationParams):
    pass


class ProductListParams(PaginationParams):
    provider_id: int | None = None
    search: str | None = Field(default=None, description="Search in name and description.")


class SyncHistoryParams(PaginationParams):
    provider_id: int | None = None
    provider_type: str | None = None
    external_id: str | None = None
    product_id: int | None = None


class TriggerSyncParams(_Params):
    provider_id: int | None = Field(
        default=None,
        description="Provider to sync; omitted means all providers.",
    )


ParamsInput = _Params | Mapping[str, Any] | None


def to_request_params(params: ParamsInput) -> dict[str, Any]:
    """Normaliza un params bag (modelo o mapping) a un dict para httpx.

    Mappings are forwarded key for key; only `None` values are dropped,
    matching how unset optional fields are omitted. Enum members are sent
    as their value (`SortDirection.DESC` -> "desc").
    """

    if params is None:
        return {}
    if isinstance(params, _Params):
        return params.to_request()
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in params.items()
        if value is not None
    }
