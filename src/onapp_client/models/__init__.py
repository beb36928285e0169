"""Resource models."""

from onapp_client.models.access_control import (
    AccessControl,
    AccessControlCreateRequest,
    AccessControlDeleteRequest,
    AccessControlEditRequest,
)
from onapp_client.models.common import (
    AssignIPAddress,
    IoLimits,
    IPAddress,
    IPAddressJoin,
    ListOptions,
)
from onapp_client.models.data_store import DataStore, DataStoreCreateRequest, DataStoreEditRequest
from onapp_client.models.transaction import Transaction
from onapp_client.models.virtual_machine import (
    VIRTUAL_MACHINE_TYPE,
    RebuildNetworkOptions,
    ResetPassword,
    VirtualMachineFQDN,
)

__all__ = [
    "AccessControl",
    "AccessControlCreateRequest",
    "AccessControlDeleteRequest",
    "AccessControlEditRequest",
    "AssignIPAddress",
    "DataStore",
    "DataStoreCreateRequest",
    "DataStoreEditRequest",
    "IPAddress",
    "IPAddressJoin",
    "IoLimits",
    "ListOptions",
    "RebuildNetworkOptions",
    "ResetPassword",
    "Transaction",
    "VIRTUAL_MACHINE_TYPE",
    "VirtualMachineFQDN",
]
