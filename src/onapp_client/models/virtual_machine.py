"""Virtual machine payloads used by the action endpoints."""

from __future__ import annotations

from onapp_client.models.common import RequestBody

VIRTUAL_MACHINE_TYPE = "VirtualMachine"


class VirtualMachineFQDN(RequestBody):
    hostname: str | None = None
    domain: str | None = None


class ResetPassword(RequestBody):
    initial_root_password: str | None = None
    initial_root_password_encryption_key: str | None = None


class RebuildNetworkOptions(RequestBody):
    force: int | None = None
    # "hard", "graceful" or "soft"
    shutdown_type: str | None = None
    required_startup: int | None = None
