"""Billing bucket access control resources."""

from __future__ import annotations

from typing import Any

from onapp_client.models.common import RequestBody, Resource

Limits = dict[str, Any]


class AccessControl(Resource):
    bucket_id: int = 0
    server_type: str = ""
    target_id: int = 0
    type: str = ""
    timing_strategy: str = ""
    target_name: str = ""
    preferences: Any = None
    limits: Limits | None = None


class AccessControlCreateRequest(RequestBody):
    bucket_id: int = 0
    server_type: str | None = None
    target_id: int | None = None
    type: str | None = None
    limits: Limits | None = None


# Edit and delete send the same shape as create.
AccessControlEditRequest = AccessControlCreateRequest
AccessControlDeleteRequest = AccessControlCreateRequest
