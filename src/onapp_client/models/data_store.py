"""Data store resources."""

from __future__ import annotations

from typing import Any

from onapp_client.models.common import IoLimits, RequestBody, Resource


class DataStore(Resource):
    id: int = 0
    label: str = ""
    identifier: str = ""
    created_at: str = ""
    updated_at: str = ""
    local_hypervisor_id: int = 0
    data_store_size: int = 0
    zombie_disks_size: int = 0
    ip: str = ""
    data_store_group_id: int = 0
    enabled: bool = False
    data_store_type: str = ""
    iscsi_ip: str = ""
    hypervisor_group_id: int = 0
    vdc_id: int = 0
    integrated_storage_cache_enabled: bool = False
    integrated_storage_cache_settings: Any = None
    auto_healing: bool = False
    io_limits: IoLimits | None = None
    epoch: bool = False
    default: bool = False
    usage: int = 0
    trim: bool = False


class DataStoreCreateRequest(RequestBody):
    label: str | None = None
    data_store_group_id: int | None = None
    local_hypervisor_id: int | None = None
    ip: str | None = None
    enabled: bool | None = None
    data_store_size: int | None = None
    data_store_type: str | None = None
    iscsi_ip: str | None = None


class DataStoreEditRequest(DataStoreCreateRequest):
    trim: bool | None = None
