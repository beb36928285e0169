from __future__ import annotations

import json

import pytest

from onapp_client.errors import ArgError, UpstreamError
from onapp_client.models.common import IoLimits
from onapp_client.models.data_store import DataStoreCreateRequest, DataStoreEditRequest

DATA_STORE = {
    "id": 4,
    "label": "ssd-01",
    "data_store_type": "lvm",
    "data_store_size": 500,
    "enabled": True,
    "io_limits": {"read_iops": 500, "write_iops": 300},
    "unknown_field": "ignored",
}


def test_list(client, api) -> None:
    api.route("GET", "/settings/data_stores.json", json=[{"data_store": DATA_STORE}])

    stores = client.data_stores.list()

    assert len(stores) == 1
    assert stores[0].label == "ssd-01"
    assert stores[0].io_limits is not None
    assert stores[0].io_limits.read_iops == 500


def test_get(client, api) -> None:
    api.route("GET", "/settings/data_stores/4.json", json={"data_store": DATA_STORE})

    store = client.data_stores.get(4)

    assert store.id == 4
    assert store.enabled


def test_get_missing_envelope(client, api) -> None:
    api.route("GET", "/settings/data_stores/4.json", json={"disk": {}})

    with pytest.raises(UpstreamError, match="Expected 'data_store' object"):
        client.data_stores.get(4)


def test_create(client, api) -> None:
    api.route("POST", "/settings/data_stores.json", json={"data_store": DATA_STORE}, status=201)

    store = client.data_stores.create(
        DataStoreCreateRequest(label="ssd-01", data_store_type="lvm", data_store_size=500)
    )

    assert store.id == 4
    assert json.loads(api.requests[0].content) == {
        "data_store": {"label": "ssd-01", "data_store_size": 500, "data_store_type": "lvm"}
    }


def test_create_requires_request(client) -> None:
    with pytest.raises(ArgError, match="create_request"):
        client.data_stores.create(None)


def test_edit(client, api) -> None:
    api.route("PUT", "/settings/data_stores/4.json", status=204)

    client.data_stores.edit(4, DataStoreEditRequest(label="renamed", trim=True))

    assert json.loads(api.requests[0].content) == {"data_store": {"label": "renamed", "trim": True}}


def test_delete_with_params(client, api) -> None:
    api.route("DELETE", "/settings/data_stores/4.json", status=204)

    client.data_stores.delete(4, {"force": 1})

    assert api.requests[0].url.params["force"] == "1"


def test_delete_rejects_invalid_id(client, api) -> None:
    with pytest.raises(ArgError):
        client.data_stores.delete(-3)
    assert api.requests == []


def test_io_limits(client, api) -> None:
    api.route("PUT", "/settings/data_stores/4/io_limits.json", status=204)

    client.data_stores.io_limits(4, IoLimits(read_iops=100, write_throughput=20))

    assert json.loads(api.requests[0].content) == {
        "io_limits": {"read_iops": 100, "write_throughput": 20}
    }
