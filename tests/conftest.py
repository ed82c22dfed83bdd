from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from app.clients.market_data_client import MarketDataClient
from app.config import Settings

BASE_URL = "https://api.example.test/api/v3"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        provider_base_url=BASE_URL,
        quote_currency="USDT",
        top_n=50,
        kline_interval="1m",
        kline_limit=None,
        http_timeout_seconds=1.0,
        max_workers=16,
        log_sample_size=5,
        cors_origins=["http://dashboard.example.test"],
    )


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], MarketDataClient]:
    clients: list[MarketDataClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> MarketDataClient:
        http_client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        client = MarketDataClient(base_url=BASE_URL, client=http_client)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
