from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

import pytest
from conftest import make_trx

from onapp_client.domain.filters import (
    ActionFilter,
    AssociatedObjectFilter,
    ParentFilter,
    describe,
    find_one,
    matches,
)
from onapp_client.errors import FieldContractError, NotFoundError
from onapp_client.models.access_control import AccessControl


def test_matches_all_declared_fields_equal() -> None:
    trx = make_trx(1, action="startup_virtual_machine")
    criteria = ActionFilter(
        action="startup_virtual_machine",
        associated_object_id=5,
        associated_object_type="VirtualMachine",
    )
    assert matches(trx, criteria)


def test_matches_fails_on_single_difference() -> None:
    trx = make_trx(1, action="startup_virtual_machine")
    assert not matches(trx, AssociatedObjectFilter(5, "Disk"))
    assert not matches(trx, AssociatedObjectFilter(6, "VirtualMachine"))


def test_zero_values_are_compared() -> None:
    root = make_trx(1)
    linked = make_trx(2, parent=(3, "Disk"))

    assert matches(root, {"parent_id": 0})
    assert not matches(linked, {"parent_id": 0})
    assert not matches(root, ParentFilter(0, "Disk"))


def test_booleans_never_equal_numbers() -> None:
    trx = make_trx(1, allowed_cancel=True)

    assert not matches(make_trx(1), {"allowed_cancel": 0})
    assert not matches(trx, {"allowed_cancel": 1})
    assert not matches(make_trx(1), {"parent_id": False})
    assert matches(make_trx(1), {"allowed_cancel": False, "parent_id": 0})
    assert matches(trx, {"allowed_cancel": True})


def test_matches_is_reflexive() -> None:
    trx = make_trx(4, dep=3, parent=(2, "Disk"), status="running", params={"x": 1})

    assert matches(trx, trx.model_dump())
    assert matches(trx, trx.model_copy())


def test_missing_candidate_field_raises() -> None:
    trx = make_trx(1)

    with pytest.raises(FieldContractError, match="has no field named 'hostname'") as exc_info:
        matches(trx, {"hostname": "web"})

    assert isinstance(exc_info.value, AttributeError)
    assert exc_info.value.field == "hostname"


def test_short_circuits_before_unknown_field() -> None:
    trx = make_trx(1)
    # First field already differs, so the bogus second one is never looked up.
    assert not matches(trx, {"id": 2, "hostname": "web"})


def test_unsupported_criteria_type() -> None:
    with pytest.raises(TypeError, match="Unsupported filter type"):
        matches(make_trx(1), 42)


def test_plain_object_and_mapping_candidates() -> None:
    @dataclass
    class LabelFilter:
        label: str

    assert matches(SimpleNamespace(label="ssd", id=1), LabelFilter("ssd"))
    assert matches({"label": "ssd"}, LabelFilter("ssd"))
    with pytest.raises(FieldContractError):
        matches({"id": 1}, LabelFilter("ssd"))


def test_equal_filter_on_resources() -> None:
    access_control = AccessControl(bucket_id=3, server_type="virtual", type="compute_zone_resource")

    assert access_control.equal_filter({"server_type": "virtual", "type": "compute_zone_resource"})
    assert not access_control.equal_filter({"server_type": "smart"})


def test_find_one_returns_first_match() -> None:
    first = make_trx(1, action="reboot_virtual_machine")
    second = make_trx(2, action="reboot_virtual_machine")
    other = make_trx(3, action="stop_virtual_machine")

    found = find_one([other, first, second], {"action": "reboot_virtual_machine"})

    assert found is first


def test_find_one_not_found_describes_filter() -> None:
    criteria = AssociatedObjectFilter(99, "VirtualMachine")

    with pytest.raises(NotFoundError) as exc_info:
        find_one([make_trx(1)], criteria)

    message = str(exc_info.value)
    assert "AssociatedObjectFilter" in message
    assert "associated_object_id=99" in message


def test_describe_mapping() -> None:
    assert describe({"id": 1}) == "dict(id=1)"
