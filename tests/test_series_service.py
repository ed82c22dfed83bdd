from __future__ import annotations

import httpx

from app.repositories.in_memory_candle_store import InMemoryCandleStore
from app.services.series_service import SeriesFetcher
from factories import kline_row


def test_fetch_series_sends_symbol_and_interval(make_client) -> None:
    seen: list[dict[str, str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v3/klines"
        seen.append(dict(request.url.params))
        return httpx.Response(200, json=[kline_row(1_000), kline_row(2_000)])

    store = InMemoryCandleStore()
    records = SeriesFetcher(make_client(handler)).fetch_series("BTCUSDT", "1m", store)

    assert seen == [{"symbol": "BTCUSDT", "interval": "1m"}]
    assert [record.open_time for record in records] == [1_000, 2_000]
    assert store.list_all() == records


def test_fetch_series_passes_configured_limit(make_client) -> None:
    seen: list[dict[str, str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(dict(request.url.params))
        return httpx.Response(200, json=[])

    SeriesFetcher(make_client(handler), limit=30).fetch_series("ETHUSDT", "1m", InMemoryCandleStore())

    assert seen == [{"symbol": "ETHUSDT", "interval": "1m", "limit": "30"}]


def test_short_row_is_skipped_and_rest_stored(make_client) -> None:
    payload = [kline_row(1_000), [1, "2"], kline_row(3_000)]
    client = make_client(lambda request: httpx.Response(200, json=payload))
    store = InMemoryCandleStore()

    records = SeriesFetcher(client).fetch_series("BTCUSDT", "1m", store)

    assert [record.open_time for record in records] == [1_000, 3_000]
    assert len(store) == 2


def test_network_failure_returns_empty_and_leaves_store(make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    store = InMemoryCandleStore()

    assert SeriesFetcher(make_client(handler)).fetch_series("BTCUSDT", "1m", store) == []
    assert len(store) == 0


def test_error_status_returns_empty(make_client) -> None:
    client = make_client(lambda request: httpx.Response(400, json={"code": -1121, "msg": "Invalid symbol."}))

    assert SeriesFetcher(client).fetch_series("NOPEUSDT", "1m", InMemoryCandleStore()) == []


def test_top_level_malformed_returns_empty(make_client) -> None:
    client = make_client(lambda request: httpx.Response(200, json={"unexpected": "object"}))

    assert SeriesFetcher(client).fetch_series("BTCUSDT", "1m", InMemoryCandleStore()) == []


def test_invalid_json_returns_empty(make_client) -> None:
    client = make_client(lambda request: httpx.Response(200, text="not json"))

    assert SeriesFetcher(client).fetch_series("BTCUSDT", "1m", InMemoryCandleStore()) == []
