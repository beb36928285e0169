"""Shared resource base class and small structures used by several resources."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from onapp_client.domain.filters import matches
from onapp_client.utils.serialization import dumps


class Resource(BaseModel):
    """Base for every JSON object returned by the API."""

    model_config = ConfigDict(extra="ignore")

    def equal_filter(self, criteria: Any) -> bool:
        """True when every field declared on ``criteria`` equals this record's field."""
        return matches(self, criteria)

    def __str__(self) -> str:
        return dumps(self.model_dump())


class RequestBody(BaseModel):
    """Base for request payloads; unset fields are left out of the JSON body."""

    model_config = ConfigDict(extra="forbid")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def __str__(self) -> str:
        return dumps(self.to_payload())


class ListOptions(BaseModel):
    """Paging parameters for list endpoints. Zero means "server default"."""

    page: int = Field(default=0, ge=0)
    per_page: int = Field(default=0, ge=0)

    def to_params(self) -> dict[str, int]:
        params: dict[str, int] = {}
        if self.page > 0:
            params["page"] = self.page
        if self.per_page > 0:
            params["per_page"] = self.per_page
        return params


class IoLimits(RequestBody):
    model_config = ConfigDict(extra="ignore")

    read_iops: int | None = None
    write_iops: int | None = None
    read_throughput: int | None = None
    write_throughput: int | None = None


class IPAddress(Resource):
    id: int = 0
    address: str = ""
    broadcast: str = ""
    network_address: str = ""
    gateway: str = ""
    created_at: str = ""
    updated_at: str = ""
    user_id: int = 0
    pxe: bool = False
    hypervisor_id: int = 0
    ip_range_id: int = 0
    external_address: str = ""
    free: bool = False
    netmask: str = ""


class AssignIPAddress(RequestBody):
    """Parameters for assigning an IP address to a virtual machine."""

    address: str | None = None
    network_interface_id: int | None = None
    ip_net_id: int | None = None
    ip_range_id: int | None = None
    used_ip: int | None = None
    own_ip: int | None = None
    ip_version: int | None = None


class IPAddressJoin(Resource):
    """Link between an IP address and a network interface."""

    id: int = 0
    ip_address_id: int = 0
    network_interface_id: int = 0
    created_at: str = ""
    updated_at: str = ""
    ip_address: IPAddress = Field(default_factory=IPAddress)
