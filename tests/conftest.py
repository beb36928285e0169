from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from onapp_client import config
from onapp_client.client import Client
from onapp_client.config import ApiSettings, Settings, TransactionSettings
from onapp_client.models.transaction import Transaction

API_URL = "https://cp.example.com"


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in config.ENV_KEYS.values():
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda **_: None)
    config._load_settings_cached.cache_clear()
    yield
    config._load_settings_cached.cache_clear()


class FakeApi:
    """Routes requests by (method, path) and records everything it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def route(self, method: str, path: str, *, json: Any = None, status: int = 200) -> None:
        def respond(_: httpx.Request) -> httpx.Response:
            if json is None:
                return httpx.Response(status)
            return httpx.Response(status, json=json)

        self._routes[(method, path)] = respond

    def route_handler(
        self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]
    ) -> None:
        self._routes[(method, path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"errors": ["not routed"]})
        return handler(request)

    def paths(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api=ApiSettings(url=API_URL, username="admin", password="changeme"),
        transactions=TransactionSettings(chain_search_page_size=25),
    )


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(settings: Settings, api: FakeApi) -> Client:
    with Client(settings, transport=httpx.MockTransport(api.handle)) as c:
        yield c


def make_trx(
    trx_id: int,
    *,
    dep: int = 0,
    chain: int = 9,
    assoc: tuple[int, str] = (5, "VirtualMachine"),
    parent: tuple[int, str] = (0, ""),
    **fields: Any,
) -> Transaction:
    return Transaction(
        id=trx_id,
        dependent_transaction_id=dep,
        chain_id=chain,
        associated_object_id=assoc[0],
        associated_object_type=assoc[1],
        parent_id=parent[0],
        parent_type=parent[1],
        **fields,
    )


def wrap(root: str, records: list[Any]) -> list[dict[str, Any]]:
    return [{root: r.model_dump() if hasattr(r, "model_dump") else r} for r in records]
