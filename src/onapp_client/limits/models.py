"""Access control limits configuration models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_validator

LimitValue = bool | float

# Server types
VIRTUAL = "virtual"
SMART = "smart"
BARE_METAL = "baremetal"
VPC = "vpc"
OTHER = "other"


class LimitsConfig(BaseModel):
    server_types: dict[str, dict[str, dict[str, LimitValue]]] = Field(default_factory=dict)

    @field_validator("server_types", mode="before")
    @classmethod
    def _validate_server_types(cls, v: Any) -> Any:
        if v is None:
            return {}
        # An empty resource entry in YAML ("resource:") loads as None.
        if isinstance(v, dict):
            return {
                server_type: {name: (limits or {}) for name, limits in (resources or {}).items()}
                for server_type, resources in v.items()
            }
        return v

    @classmethod
    def from_yaml(cls, data: dict[str, object]) -> LimitsConfig:
        return cls.model_validate(data)


@dataclass(frozen=True)
class AccessControlLimits:
    """Read-only table: server type -> resource type -> limit name -> default."""

    table: Mapping[str, Mapping[str, Mapping[str, LimitValue]]]

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Mapping[str, Mapping[str, LimitValue]]]
    ) -> AccessControlLimits:
        frozen = {
            server_type: MappingProxyType(
                {name: MappingProxyType(dict(limits)) for name, limits in resources.items()}
            )
            for server_type, resources in data.items()
        }
        return cls(table=MappingProxyType(frozen))

    @classmethod
    def from_config(cls, config: LimitsConfig) -> AccessControlLimits:
        return cls.from_mapping(config.server_types)

    def server_types(self) -> list[str]:
        return sorted(self.table)

    def resource_types(self, server_type: str) -> list[str]:
        return sorted(self.table.get(server_type, {}))

    def ref(self, server_type: str, resource_type: str) -> dict[str, LimitValue] | None:
        """Return a mutable copy of the limits for a resource, or None if unknown."""
        resources = self.table.get(server_type)
        if resources is None:
            return None
        limits = resources.get(resource_type)
        if limits is None:
            return None
        return dict(limits)
