"""Built-in access control limits table.

Lists, per server type, which billing resources can be attached to a bucket
and the limits each of them accepts, with their default values.
"""

from __future__ import annotations

from onapp_client.limits.models import (
    BARE_METAL,
    OTHER,
    SMART,
    VIRTUAL,
    VPC,
    AccessControlLimits,
)

COMPUTE_ZONE_RESOURCE = "compute_zone_resource"
DATA_STORE_ZONE_RESOURCE = "data_store_zone_resource"
NETWORK_ZONE_RESOURCE = "network_zone_resource"
BACKUP_SERVER_ZONE_RESOURCE = "backup_server_zone_resource"
BACKUP_RESOURCE_ZONE_RESOURCE = "backup_resource_zone_resource"
VIRTUAL_SERVERS_RESOURCE = "virtual_servers"
SMART_SERVERS_RESOURCE = "smart_servers"
BARE_METAL_SERVERS_RESOURCE = "baremetal_servers"
AUTOSCALED_SERVERS_RESOURCE = "autoscaled_servers"
APPLICATION_SERVERS_RESOURCE = "application_servers"
CONTAINER_SERVERS_RESOURCE = "container_servers"
PRECONFIGURED_SERVERS_RESOURCE = "preconfigured_servers"
COMPUTE_RESOURCE_STORING_RESOURCE = "compute_resource_storing"
BACKUPS_RESOURCE = "backups"
TEMPLATES_RESOURCE = "templates"
ISO_TEMPLATES_RESOURCE = "iso_templates"
SOLIDFIRE_DATA_STORE_ZONE_RESOURCE = "solidfire_data_store_zone"
EDGE_GROUPS_RESOURCE = "edge_groups"
ORCHESTRATION_MODEL_RESOURCE = "orchestration_model"
RECIPE_GROUPS_RESOURCE = "recipe_groups"
TEMPLATE_GROUPS_RESOURCE = "template_groups"
SERVICE_ADDON_GROUPS_RESOURCE = "service_addon_groups"
BLUEPRINT_GROUPS_RESOURCE = "blueprint_groups"
CDN_BANDWIDTH_RESOURCE = "cdn_bandwidth"


def _single_limit() -> dict[str, float]:
    return {"limit": 0.0}


def _network_limits() -> dict[str, float]:
    return {"limit_ip": 0.0, "limit_rate": 0.0}


def _default_table() -> dict[str, dict[str, dict[str, bool | float]]]:
    return {
        VIRTUAL: {
            COMPUTE_ZONE_RESOURCE: {
                "limit_cpu": 0.0,
                "limit_cpu_share": 0.0,
                "limit_cpu_units": 0.0,
                "limit_memory": 0.0,
                "limit_default_cpu": 0.0,
                "limit_min_cpu": 0.0,
                "limit_min_memory": 0.0,
                "limit_default_cpu_share": 0.0,
                "limit_min_cpu_priority": 0.0,
                "use_cpu_units": False,
                "use_default_cpu": False,
                "use_default_cpu_share": False,
            },
            DATA_STORE_ZONE_RESOURCE: _single_limit(),
            NETWORK_ZONE_RESOURCE: _network_limits(),
            BACKUP_SERVER_ZONE_RESOURCE: {
                "limit_backup": 0.0,
                "limit_backup_disk_size": 0.0,
                "limit_template": 0.0,
                "limit_template_disk_size": 0.0,
                "limit_ova": 0.0,
                "limit_ova_disk_size": 0.0,
            },
            VIRTUAL_SERVERS_RESOURCE: _single_limit(),
            AUTOSCALED_SERVERS_RESOURCE: _single_limit(),
            COMPUTE_RESOURCE_STORING_RESOURCE: _single_limit(),
            BACKUPS_RESOURCE: _single_limit(),
            TEMPLATES_RESOURCE: _single_limit(),
            ISO_TEMPLATES_RESOURCE: _single_limit(),
            APPLICATION_SERVERS_RESOURCE: _single_limit(),
            CONTAINER_SERVERS_RESOURCE: _single_limit(),
            SOLIDFIRE_DATA_STORE_ZONE_RESOURCE: _single_limit(),
            PRECONFIGURED_SERVERS_RESOURCE: {},
        },
        SMART: {
            COMPUTE_ZONE_RESOURCE: {
                "limit_cpu": 0.0,
                "limit_cpu_share": 0.0,
                "limit_cpu_units": 0.0,
                "limit_memory": 0.0,
                "use_cpu_units": False,
            },
            DATA_STORE_ZONE_RESOURCE: _single_limit(),
            NETWORK_ZONE_RESOURCE: _network_limits(),
            BACKUP_SERVER_ZONE_RESOURCE: {
                "limit_backup": 0.0,
                "limit_backup_disk_size": 0.0,
                "limit_template": 0.0,
                "limit_template_disk_size": 0.0,
            },
            SMART_SERVERS_RESOURCE: _single_limit(),
            COMPUTE_RESOURCE_STORING_RESOURCE: _single_limit(),
            BACKUPS_RESOURCE: _single_limit(),
        },
        BARE_METAL: {
            BARE_METAL_SERVERS_RESOURCE: _single_limit(),
            COMPUTE_ZONE_RESOURCE: {},
            NETWORK_ZONE_RESOURCE: _network_limits(),
        },
        VPC: {
            VIRTUAL_SERVERS_RESOURCE: _single_limit(),
            APPLICATION_SERVERS_RESOURCE: _single_limit(),
            COMPUTE_ZONE_RESOURCE: {
                "limit_min_allocation_cpu_allocation": 0.0,
                "limit_min_allocation_memory_allocation": 0.0,
                "limit_min_allocation_cpu_resources_guaranteed": 0.0,
                "limit_min_allocation_memory_resources_guaranteed": 0.0,
                "limit_min_allocation_vcpu_speed": 0.0,
                "limit_allocation_cpu_allocation": 0.0,
                "limit_allocation_memory_allocation": 0.0,
                "limit_allocation_cpu_resources_guaranteed": 0.0,
                "limit_allocation_memory_resources_guaranteed": 0.0,
                "limit_allocation_vcpu_speed": 0.0,
                "limit_min_reservation_cpu_allocation": 0.0,
                "limit_min_reservation_memory_allocation": 0.0,
                "limit_reservation_cpu_allocation": 0.0,
                "limit_reservation_memory_allocation": 0.0,
                "limit_min_pay_as_you_go_cpu_limit": 0.0,
                "limit_min_pay_as_you_go_memory_limit": 0.0,
                "limit_pay_as_you_go_cpu_limit": 0.0,
                "limit_pay_as_you_go_memory_limit": 0.0,
                "limit_min_pay_as_you_go_vcpu_speed": 0.0,
                "limit_vs_cpu": 0.0,
                "limit_vs_memory": 0.0,
            },
            DATA_STORE_ZONE_RESOURCE: {
                "limit_min_disk_size": 0.0,
                "limit_disk_size": 0.0,
                "limit_vs_disk_size": 0.0,
            },
            NETWORK_ZONE_RESOURCE: {
                "limit_ip": 0.0,
                "limit_vs_ip": 0.0,
            },
        },
        OTHER: {
            EDGE_GROUPS_RESOURCE: {},
            ORCHESTRATION_MODEL_RESOURCE: {},
            RECIPE_GROUPS_RESOURCE: {},
            TEMPLATE_GROUPS_RESOURCE: {},
            SERVICE_ADDON_GROUPS_RESOURCE: {},
            BLUEPRINT_GROUPS_RESOURCE: {},
            BACKUP_RESOURCE_ZONE_RESOURCE: {},
            CDN_BANDWIDTH_RESOURCE: _single_limit(),
        },
    }


def build_default_limits() -> AccessControlLimits:
    return AccessControlLimits.from_mapping(_default_table())
