"""Shared plumbing for resource services."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from onapp_client.errors import ArgError, UpstreamError
from onapp_client.models.common import ListOptions

if TYPE_CHECKING:
    from onapp_client.client import Client

ModelT = TypeVar("ModelT", bound=BaseModel)


class Service:
    def __init__(self, client: Client) -> None:
        self._client = client


def require_id(name: str, value: int) -> None:
    if value < 1:
        raise ArgError(name, "cannot be less than 1")


def require_body(name: str, value: object) -> None:
    if value is None:
        raise ArgError(name, "cannot be None")


def list_params(options: ListOptions | None) -> dict[str, int] | None:
    if options is None:
        return None
    return options.to_params() or None


def unwrap_one(payload: Any, root: str, model: type[ModelT]) -> ModelT:
    """Decode a ``{"<root>": {...}}`` envelope."""
    if not isinstance(payload, Mapping) or root not in payload:
        raise UpstreamError(f"Expected '{root}' object in response")
    try:
        return model.model_validate(payload[root])
    except ValidationError as exc:
        raise UpstreamError(f"Invalid {root} in response: {exc}") from exc


def unwrap_list(payload: Any, root: str, model: type[ModelT]) -> list[ModelT]:
    """Decode a ``[{"<root>": {...}}, ...]`` list response."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise UpstreamError(f"Expected a list of '{root}' objects in response")
    return [unwrap_one(item, root, model) for item in payload]
