"""Virtual machine power, network and access actions.

Every action is asynchronous on the API side: the request only queues a
transaction. After submitting, the service looks up the chain of
transactions for the machine and returns the one representing the action,
or None if it is not in the log yet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from onapp_client.domain.filters import ActionFilter
from onapp_client.models.common import AssignIPAddress, IPAddressJoin
from onapp_client.models.transaction import Transaction
from onapp_client.models.virtual_machine import (
    VIRTUAL_MACHINE_TYPE,
    RebuildNetworkOptions,
    ResetPassword,
    VirtualMachineFQDN,
)
from onapp_client.services.base import Service, require_body, require_id, unwrap_list
from onapp_client.utils.http import resource_path

logger = logging.getLogger(__name__)

VIRTUAL_MACHINES_BASE_PATH = "virtual_machines"


@dataclass(frozen=True)
class ActionRequest:
    method: str
    path: str
    # Action name of the transaction the API queues for this request.
    action: str


SHUTDOWN = ActionRequest("POST", "shutdown", "stop_virtual_machine")
STOP = ActionRequest("POST", "stop", "stop_virtual_machine")
STARTUP = ActionRequest("POST", "startup", "startup_virtual_machine")
UNLOCK = ActionRequest("POST", "unlock", "startup_virtual_machine")
REBOOT = ActionRequest("POST", "reboot", "reboot_virtual_machine")
SUSPEND = ActionRequest("POST", "suspend", "stop_virtual_machine")
UNSUSPEND = ActionRequest("POST", "suspend", "stop_virtual_machine")
RESET_PASSWORD = ActionRequest("POST", "reset_password", "reset_root_password")
FQDN = ActionRequest("PATCH", "fqdn", "update_fqdn")
REBUILD_NETWORK = ActionRequest("POST", "rebuild_network", "rebuild_network")
ASSIGN_IP_ADDRESS = ActionRequest("POST", "ip_addresses", "ip_addresses")
UNASSIGN_IP_ADDRESS = ActionRequest("DELETE", "ip_addresses", "ip_addresses")


class VirtualMachineActionsService(Service):
    def shutdown(self, vm_id: int) -> Transaction | None:
        """Shut the machine down gracefully."""
        return self._do_action(vm_id, SHUTDOWN)

    def stop(self, vm_id: int) -> Transaction | None:
        """Power the machine off."""
        return self._do_action(vm_id, STOP)

    def startup(self, vm_id: int) -> Transaction | None:
        return self._do_action(vm_id, STARTUP)

    def unlock(self, vm_id: int) -> Transaction | None:
        return self._do_action(vm_id, UNLOCK)

    def reboot(self, vm_id: int) -> Transaction | None:
        return self._do_action(vm_id, REBOOT)

    def suspend(self, vm_id: int) -> Transaction | None:
        return self._do_action(vm_id, SUSPEND)

    def unsuspend(self, vm_id: int) -> Transaction | None:
        # The API toggles suspension on the same endpoint.
        return self._do_action(vm_id, UNSUSPEND)

    def reset_password(self, vm_id: int, password: str, encryption_key: str = "") -> Transaction | None:
        body = ResetPassword(
            initial_root_password=password,
            initial_root_password_encryption_key=encryption_key or None,
        )
        return self._do_action(vm_id, RESET_PASSWORD, body={"virtual_machine": body})

    def fqdn(self, vm_id: int, hostname: str, domain: str) -> Transaction | None:
        body = VirtualMachineFQDN(hostname=hostname, domain=domain)
        return self._do_action(vm_id, FQDN, body={"virtual_machine": body})

    def rebuild_network(
        self, vm_id: int, options: RebuildNetworkOptions | None = None
    ) -> Transaction | None:
        params = options.to_payload() if options is not None else None
        return self._do_action(vm_id, REBUILD_NETWORK, params=params)

    def assign_ip_address(self, vm_id: int, ip_address: AssignIPAddress) -> Transaction | None:
        require_body("ip_address", ip_address)
        return self._do_action(vm_id, ASSIGN_IP_ADDRESS, body={"ip_address": ip_address})

    def unassign_ip_address(
        self, vm_id: int, ip_address_id: int, rebuild_network: bool = False
    ) -> Transaction | None:
        require_id("ip_address_id", ip_address_id)
        params = {"rebuild_network": 1} if rebuild_network else None
        return self._do_action(
            vm_id, UNASSIGN_IP_ADDRESS, params=params, sub_id=ip_address_id
        )

    def list_ip_addresses(self, vm_id: int) -> list[IPAddressJoin]:
        require_id("id", vm_id)
        payload = self._client.request(
            "GET", resource_path(VIRTUAL_MACHINES_BASE_PATH, vm_id, "ip_addresses")
        )
        return unwrap_list(payload, "ip_address_join", IPAddressJoin)

    def _do_action(
        self,
        vm_id: int,
        request: ActionRequest,
        *,
        body: Any = None,
        params: dict[str, Any] | None = None,
        sub_id: int | None = None,
    ) -> Transaction | None:
        require_id("id", vm_id)

        if sub_id is None:
            path = resource_path(VIRTUAL_MACHINES_BASE_PATH, vm_id, request.path)
        else:
            path = resource_path(VIRTUAL_MACHINES_BASE_PATH, vm_id, request.path, sub_id)

        logger.info("Submitting %s %s for virtual machine %d", request.method, request.path, vm_id)
        self._client.request(request.method, path, body=body, params=params)

        criteria = ActionFilter(
            action=request.action,
            associated_object_id=vm_id,
            associated_object_type=VIRTUAL_MACHINE_TYPE,
        )
        return self._client.transactions.last_in_chain(criteria)
