"""Resource services bound to a Client."""

from onapp_client.services.access_controls import AccessControlsService
from onapp_client.services.data_stores import DataStoresService
from onapp_client.services.transactions import TransactionsService
from onapp_client.services.virtual_machine_actions import VirtualMachineActionsService

__all__ = [
    "AccessControlsService",
    "DataStoresService",
    "TransactionsService",
    "VirtualMachineActionsService",
]
