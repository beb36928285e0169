"""Billing bucket access controls service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from onapp_client.domain.filters import find_one
from onapp_client.errors import UpstreamError
from onapp_client.limits.models import AccessControlLimits, LimitValue
from onapp_client.models.access_control import (
    AccessControl,
    AccessControlCreateRequest,
    AccessControlDeleteRequest,
    AccessControlEditRequest,
)
from onapp_client.models.common import ListOptions
from onapp_client.services.base import (
    Service,
    list_params,
    require_body,
    require_id,
    unwrap_list,
    unwrap_one,
)
from onapp_client.utils.http import resource_path

if TYPE_CHECKING:
    from onapp_client.client import Client

logger = logging.getLogger(__name__)


def _base_path(bucket_id: int) -> str:
    return f"billing/buckets/{bucket_id}/access_controls"


class AccessControlsService(Service):
    def __init__(self, client: Client, limits: AccessControlLimits) -> None:
        super().__init__(client)
        self._limits = limits

    def list(self, bucket_id: int, options: ListOptions | None = None) -> list[AccessControl]:
        require_id("bucket_id", bucket_id)
        payload = self._client.request(
            "GET", resource_path(_base_path(bucket_id)), params=list_params(options)
        )
        return unwrap_list(payload, "access_control", AccessControl)

    def get_by_filter(
        self, bucket_id: int, criteria: Any, options: ListOptions | None = None
    ) -> AccessControl:
        try:
            access_controls = self.list(bucket_id, options)
        except UpstreamError as exc:
            raise UpstreamError(f"get_by_filter: failed to list access controls: {exc}") from exc
        return find_one(access_controls, criteria)

    def create(self, create_request: AccessControlCreateRequest) -> AccessControl:
        require_body("create_request", create_request)
        require_id("bucket_id", create_request.bucket_id)
        logger.info("Creating access control %s", create_request)
        payload = self._client.request(
            "POST", resource_path(_base_path(create_request.bucket_id)), body=create_request
        )
        return unwrap_one(payload, "access_control", AccessControl)

    def edit(self, edit_request: AccessControlEditRequest) -> None:
        require_body("edit_request", edit_request)
        require_id("bucket_id", edit_request.bucket_id)
        logger.info("Editing access control %s", edit_request)
        self._client.request(
            "POST", resource_path(_base_path(edit_request.bucket_id)), body=edit_request
        )

    def delete(
        self,
        delete_request: AccessControlDeleteRequest,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        require_body("delete_request", delete_request)
        require_id("bucket_id", delete_request.bucket_id)
        logger.info("Deleting access control %s", delete_request)
        self._client.request(
            "DELETE",
            resource_path(_base_path(delete_request.bucket_id)),
            body=delete_request,
            params=params,
        )

    def limits_ref(self, server_type: str, resource_type: str) -> dict[str, LimitValue] | None:
        """Default limits accepted by ``resource_type`` for ``server_type``."""
        limits = self._limits.ref(server_type, resource_type)
        if limits is None:
            logger.debug("No limits known for %s/%s", server_type, resource_type)
        return limits
