"""HTTP client for the OnApp control panel API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from onapp_client import __version__, logging_utils
from onapp_client.config import Settings, load_settings
from onapp_client.errors import ApiError, UpstreamError
from onapp_client.limits.loader import limits_from_settings
from onapp_client.limits.models import AccessControlLimits
from onapp_client.services.access_controls import AccessControlsService
from onapp_client.services.data_stores import DataStoresService
from onapp_client.services.transactions import TransactionsService
from onapp_client.services.virtual_machine_actions import VirtualMachineActionsService
from onapp_client.utils.masking import redact_sensitive_fields
from onapp_client.utils.serialization import dumps

logger = logging.getLogger(__name__)

_USER_AGENT = f"onapp-client/{__version__}"


class Client:
    """Entry point holding the HTTP session and one service per resource."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        limits: AccessControlLimits | None = None,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
        configure_logging: bool = False,
    ) -> None:
        """Create a client.

        ``transport`` is used to build the default ``httpx.Client`` and cannot be
        combined with a caller-supplied ``http_client``. With
        ``configure_logging`` the package logger gets handlers from the
        ``logging`` settings.
        """
        if transport is not None and http_client is not None:
            raise ValueError("Pass either transport or http_client, not both")
        self.settings = settings or load_settings()
        if configure_logging:
            logging_utils.configure_logging(self.settings)
        if http_client is None:
            api = self.settings.api
            auth = (api.username, api.password or "") if api.username else None
            http_client = httpx.Client(
                base_url=api.url,
                auth=auth,
                timeout=api.timeout_seconds,
                verify=api.verify_tls,
                transport=transport,
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                    "User-Agent": _USER_AGENT,
                },
            )
        self._http = http_client
        self.limits = limits if limits is not None else limits_from_settings(self.settings)

        self.transactions = TransactionsService(self)
        self.virtual_machine_actions = VirtualMachineActionsService(self)
        self.data_stores = DataStoresService(self)
        self.access_controls = AccessControlsService(self, self.limits)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (None when empty)."""
        content = dumps(body) if body is not None else None
        if content is not None and logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s %s params=%s body=%s",
                method,
                path,
                dict(params or {}),
                redact_sensitive_fields(json.loads(content)),
            )
        else:
            logger.debug("%s %s params=%s", method, path, dict(params or {}))

        try:
            response = self._http.request(method, path, content=content, params=params)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"{method} {path}: {exc}") from exc

        if response.is_error:
            raise _api_error(method, response)

        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(f"{method} {path}: response is not valid JSON") from exc


def _api_error(method: str, response: httpx.Response) -> ApiError:
    errors: Any = None
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, Mapping):
        errors = data.get("errors", data.get("error"))
    detail = _format_errors(errors) if errors else response.reason_phrase
    url = str(response.request.url)
    return ApiError(
        f"{method} {url}: {response.status_code} {detail}",
        status_code=response.status_code,
        method=method,
        url=url,
        errors=errors,
    )


def _format_errors(errors: Any) -> str:
    if isinstance(errors, Mapping):
        parts = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                messages = ", ".join(str(m) for m in messages)
            parts.append(f"{field} {messages}")
        return "; ".join(parts)
    if isinstance(errors, list):
        return "; ".join(str(e) for e in errors)
    return str(errors)
