"""Tests for the parameter bags and the response models."""

from core.domain.models import (
    Envelope,
    HealthData,
    PaginatedResponse,
    Product,
    SyncLog,
    SyncLogDetail,
    SyncStatusData,
)
from core.domain.params import (
    PRODUCT_SORT_FIELDS,
    SYNC_HISTORY_SORT_FIELDS,
    FailedJobsParams,
    ProductListParams,
    SortDirection,
    SyncHistoryParams,
    TriggerSyncParams,
    to_request_params,
)


class TestParams:
    def test_none_becomes_empty_dict(self):
        assert to_request_params(None) == {}

    def test_unset_fields_are_omitted(self):
        assert to_request_params(ProductListParams(page=3)) == {"page": 3}

    def test_explicit_none_is_omitted(self):
        params = SyncHistoryParams(provider_id=None, provider_type="odoo")

        assert to_request_params(params) == {"provider_type": "odoo"}

    def test_sort_direction_is_sent_as_string(self):
        params = FailedJobsParams(sort_by="created_at", sort_direction=SortDirection.ASC)

        assert to_request_params(params) == {"sort_by": "created_at", "sort_direction": "asc"}

    def test_trigger_params_without_provider_is_empty(self):
        assert to_request_params(TriggerSyncParams()) == {}
        assert to_request_params(TriggerSyncParams(provider_id=9)) == {"provider_id": 9}

    def test_mapping_keeps_falsy_values_but_drops_none(self):
        params = {"page": 0, "search": "", "provider_id": None}

        assert to_request_params(params) == {"page": 0, "search": ""}

    def test_sort_field_lists_are_not_enforced(self):
        assert "price" in PRODUCT_SORT_FIELDS
        assert "job_status" in SYNC_HISTORY_SORT_FIELDS
        assert to_request_params(ProductListParams(sort_by="whatever")) == {"sort_by": "whatever"}


    def test_mapping_enum_members_are_unwrapped(self):
        params = {"sort_direction": SortDirection.DESC, "sort_by": "name"}

        assert to_request_params(params) == {"sort_direction": "desc", "sort_by": "name"}

class TestModels:
    def test_paginated_products(self):
        payload = {
            "success": True,
            "data": [{"id": 1, "name": "Widget", "description": None, "provider": {"id": 2, "name": "Acme"}, "sku": "W-1"}],
            "meta": {"page": 1, "per_page": 15, "total": 1, "last_page": 1},
            "message": "ok",
        }

        page = PaginatedResponse[Product].model_validate(payload)

        assert page.success is True
        assert page.data[0].provider.name == "Acme"
        assert page.data[0].model_extra == {"sku": "W-1"}
        assert page.meta.sort_by is None

    def test_health_envelope(self):
        payload = {
            "success": True,
            "data": {"status": "healthy", "timestamp": "t", "services": {"db": "up"}},
            "message": "",
        }

        envelope = Envelope[HealthData].model_validate(payload)

        assert envelope.data.services == {"db": "up"}

    def test_sync_status_and_log_detail(self):
        log = {"id": 5, "sync_key": "k", "job_status": "queued_by_operator", "provider": None}

        status = SyncStatusData.model_validate({"active_syncs": [log], "count": 1})
        detail = SyncLogDetail.model_validate(
            {
                "sync_log": log,
                "products": [],
                "missing_external_ids": ["A", 17],
                "products_count": 0,
                "missing_count": 2,
            }
        )

        assert isinstance(status.active_syncs[0], SyncLog)
        # Status values are owned by the service.
        assert status.active_syncs[0].job_status == "queued_by_operator"
        assert detail.missing_external_ids == ["A", 17]

