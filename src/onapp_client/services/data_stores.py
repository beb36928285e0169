"""Data store settings service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from onapp_client.models.common import IoLimits, ListOptions
from onapp_client.models.data_store import DataStore, DataStoreCreateRequest, DataStoreEditRequest
from onapp_client.services.base import (
    Service,
    list_params,
    require_body,
    require_id,
    unwrap_list,
    unwrap_one,
)
from onapp_client.utils.http import resource_path

logger = logging.getLogger(__name__)

DATA_STORES_BASE_PATH = "settings/data_stores"


class DataStoresService(Service):
    def list(self, options: ListOptions | None = None) -> list[DataStore]:
        payload = self._client.request(
            "GET", resource_path(DATA_STORES_BASE_PATH), params=list_params(options)
        )
        return unwrap_list(payload, "data_store", DataStore)

    def get(self, data_store_id: int) -> DataStore:
        require_id("id", data_store_id)
        payload = self._client.request("GET", resource_path(DATA_STORES_BASE_PATH, data_store_id))
        return unwrap_one(payload, "data_store", DataStore)

    def create(self, create_request: DataStoreCreateRequest) -> DataStore:
        require_body("create_request", create_request)
        logger.info("Creating data store %s", create_request)
        payload = self._client.request(
            "POST", resource_path(DATA_STORES_BASE_PATH), body={"data_store": create_request}
        )
        return unwrap_one(payload, "data_store", DataStore)

    def delete(self, data_store_id: int, params: Mapping[str, Any] | None = None) -> None:
        require_id("id", data_store_id)
        logger.info("Deleting data store %d", data_store_id)
        self._client.request(
            "DELETE", resource_path(DATA_STORES_BASE_PATH, data_store_id), params=params
        )

    def edit(self, data_store_id: int, edit_request: DataStoreEditRequest) -> None:
        require_id("id", data_store_id)
        require_body("edit_request", edit_request)
        logger.info("Editing data store %d: %s", data_store_id, edit_request)
        self._client.request(
            "PUT",
            resource_path(DATA_STORES_BASE_PATH, data_store_id),
            body={"data_store": edit_request},
        )

    def io_limits(self, data_store_id: int, limits: IoLimits) -> None:
        """Replace the IO limits of a data store."""
        require_id("id", data_store_id)
        require_body("limits", limits)
        self._client.request(
            "PUT",
            resource_path(DATA_STORES_BASE_PATH, data_store_id, "io_limits"),
            body={"io_limits": limits},
        )
