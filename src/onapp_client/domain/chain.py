"""Reconstruction of transaction chains from the flat transaction log.

The API returns transactions as one flat list. The transactions emitted by a
single action share a ``chain_id`` and an associated object (or parent), and
are linked upward through ``dependent_transaction_id`` until a root with
``dependent_transaction_id == 0``. ``build_chain`` regroups them using
adjacency in the list: a transaction belongs to the chain when the next
entry shares its grouping identity and chain id.

Two behaviours are kept deliberately and covered by tests:

* the scan stops at the first matching root, even if later entries would
  still belong to the group;
* when both the associated-object and the parent dimensions are active, a
  transaction linked on both is added twice.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from onapp_client.domain.filters import declares, field_value
from onapp_client.errors import ArgError

if TYPE_CHECKING:
    from onapp_client.models.transaction import Transaction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupKey:
    """Identity a chain is grouped by. At least one dimension must be set."""

    associated_object_id: int | None = None
    associated_object_type: str | None = None
    parent_id: int | None = None
    parent_type: str | None = None

    def __post_init__(self) -> None:
        has_associated = (
            self.associated_object_id is not None or self.associated_object_type is not None
        )
        has_parent = self.parent_id is not None or self.parent_type is not None
        if not has_associated and not has_parent:
            raise ArgError("filter", "must supply an associated object or a parent identity")
        if has_associated:
            _validate_identity(
                "associated_object_id",
                self.associated_object_id,
                "associated_object_type",
                self.associated_object_type,
            )
        if has_parent:
            _validate_identity("parent_id", self.parent_id, "parent_type", self.parent_type)

    @property
    def by_associated_object(self) -> bool:
        return self.associated_object_type is not None

    @property
    def by_parent(self) -> bool:
        return self.parent_type is not None

    @classmethod
    def from_criteria(cls, criteria: Any) -> GroupKey:
        """Build a key from the identity fields declared on a filter object."""
        values: dict[str, Any] = {}
        for name in ("associated_object_id", "associated_object_type", "parent_id", "parent_type"):
            if declares(criteria, name):
                values[name] = field_value(criteria, name)
        return cls(**values)


def _validate_identity(id_name: str, id_value: int | None, type_name: str, type_value: str | None) -> None:
    if id_value is None or id_value < 1:
        raise ArgError(id_name, "cannot be less than 1")
    if not type_value:
        raise ArgError(type_name, "must be specified")


def _in_associated_group(trx: Transaction, key: GroupKey) -> bool:
    return (
        trx.associated_object_id == key.associated_object_id
        and trx.associated_object_type == key.associated_object_type
    )


def _in_parent_group(trx: Transaction, key: GroupKey) -> bool:
    return trx.parent_id == key.parent_id and trx.parent_type == key.parent_type


def _linked_by_associated_object(cur: Transaction, nxt: Transaction) -> bool:
    return (
        cur.associated_object_id == nxt.associated_object_id
        and cur.associated_object_type == nxt.associated_object_type
        and cur.chain_id == nxt.chain_id
    )


def _linked_by_parent(cur: Transaction, nxt: Transaction) -> bool:
    return (
        cur.parent_id == nxt.parent_id
        and cur.parent_type == nxt.parent_type
        and cur.chain_id == nxt.chain_id
    )


def build_chain(
    transactions: Sequence[Transaction],
    key: GroupKey,
    reverse: bool = False,
) -> list[Transaction]:
    """Collect the chain of transactions sharing ``key``.

    ``transactions`` must be in server order. The result keeps that order,
    or its mirror image when ``reverse`` is set.
    """
    chain: list[Transaction] = []
    count = len(transactions)

    for index, cur in enumerate(transactions):
        if key.by_associated_object and not _in_associated_group(cur, key):
            continue
        if key.by_parent and not _in_parent_group(cur, key):
            continue

        if cur.is_root:
            chain.append(cur)
            logger.debug("Chain root %d found at position %d, stopping scan", cur.id, index)
            break

        if index + 1 >= count:
            continue
        nxt = transactions[index + 1]

        if key.by_associated_object and _linked_by_associated_object(cur, nxt):
            chain.append(cur)
        if key.by_parent and _linked_by_parent(cur, nxt):
            chain.append(cur)

    if reverse:
        chain.reverse()
    return chain
