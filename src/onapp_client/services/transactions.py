"""Transaction log service."""

from __future__ import annotations

import logging
from typing import Any

from onapp_client.domain.chain import GroupKey, build_chain
from onapp_client.domain.filters import find_one
from onapp_client.errors import UpstreamError
from onapp_client.models.common import ListOptions
from onapp_client.models.transaction import Transaction
from onapp_client.services.base import Service, list_params, require_id, unwrap_list, unwrap_one
from onapp_client.utils.http import resource_path

logger = logging.getLogger(__name__)

TRANSACTIONS_BASE_PATH = "transactions"


class TransactionsService(Service):
    def list(self, options: ListOptions | None = None) -> list[Transaction]:
        payload = self._client.request(
            "GET", resource_path(TRANSACTIONS_BASE_PATH), params=list_params(options)
        )
        return unwrap_list(payload, "transaction", Transaction)

    def get(self, transaction_id: int) -> Transaction:
        require_id("id", transaction_id)
        payload = self._client.request("GET", resource_path(TRANSACTIONS_BASE_PATH, transaction_id))
        return unwrap_one(payload, "transaction", Transaction)

    def get_by_filter(self, criteria: Any, options: ListOptions | None = None) -> Transaction:
        """First transaction of the fetched page whose fields equal ``criteria``'s.

        Raises NotFoundError when nothing matches.
        """
        try:
            transactions = self.list(options)
        except UpstreamError as exc:
            raise UpstreamError(f"get_by_filter: failed to list transactions: {exc}") from exc
        return find_one(transactions, criteria)

    def list_by_group(
        self,
        criteria: Any,
        reverse: bool = False,
        options: ListOptions | None = None,
    ) -> list[Transaction]:
        """Chain of transactions sharing the identity declared on ``criteria``.

        ``criteria`` must declare an associated object
        (``associated_object_id``/``associated_object_type``), a parent
        (``parent_id``/``parent_type``) or both. An empty list means no chain
        was found.
        """
        key = GroupKey.from_criteria(criteria)
        try:
            transactions = self.list(options)
        except UpstreamError as exc:
            raise UpstreamError(f"list_by_group: failed to list transactions: {exc}") from exc

        chain = build_chain(transactions, key, reverse)
        logger.debug("Found %d of %d transactions in chain for %s", len(chain), len(transactions), key)
        return chain

    def last_in_chain(self, criteria: Any) -> Transaction | None:
        """Transaction standing for the outcome of a just-submitted action."""
        options = ListOptions(per_page=self._client.settings.transactions.chain_search_page_size)
        chain = self.list_by_group(criteria, reverse=False, options=options)
        if not chain:
            return None
        return chain[0]
