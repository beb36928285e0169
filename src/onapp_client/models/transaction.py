"""Transaction log records."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from onapp_client.models.common import Resource

TRANSACTION_RUNNING = "running"
TRANSACTION_PENDING = "pending"
TRANSACTION_COMPLETE = "complete"
TRANSACTION_CANCELLED = "cancelled"
TRANSACTION_FAILED = "failed"

TransactionStatus = Literal["running", "pending", "complete", "cancelled", "failed"]


class Transaction(Resource):
    """One entry of the transaction log.

    ``dependent_transaction_id == 0`` marks the root of a chain; ``chain_id``
    groups every transaction emitted by the same logical operation.
    """

    id: int = 0
    identifier: str = ""
    action: str = ""
    actor: str = ""
    status: TransactionStatus = TRANSACTION_PENDING
    allowed_cancel: bool = False
    associated_object_id: int = 0
    associated_object_type: str = ""
    parent_id: int = 0
    parent_type: str = ""
    chain_id: int = 0
    dependent_transaction_id: int = 0
    lock_version: int = 0
    pid: int = 0
    priority: int = 0
    scheduled: bool = False
    user_id: int = 0
    created_at: str = ""
    updated_at: str = ""
    started_at: str = ""
    start_after: str = ""
    params: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_root(self) -> bool:
        return self.dependent_transaction_id == 0

    @property
    def running(self) -> bool:
        return self.status == TRANSACTION_RUNNING

    @property
    def pending(self) -> bool:
        return self.status == TRANSACTION_PENDING

    @property
    def incomplete(self) -> bool:
        return self.running or self.pending

    @property
    def complete(self) -> bool:
        return self.status == TRANSACTION_COMPLETE

    @property
    def failed(self) -> bool:
        return self.status == TRANSACTION_FAILED

    @property
    def cancelled(self) -> bool:
        return self.status == TRANSACTION_CANCELLED

    @property
    def unlucky(self) -> bool:
        return self.failed or self.cancelled

    @property
    def finished(self) -> bool:
        return self.complete or self.unlucky
