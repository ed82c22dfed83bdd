import logging
from typing import Any, List

from ..clients.market_data_client import MarketDataClient
from ..domain.errors import MalformedResponse
from ..models.market import TickerSummary

logger = logging.getLogger(__name__)


def _parse_ticker(position: int, item: Any) -> TickerSummary:
    if not isinstance(item, dict):
        raise MalformedResponse(f"ticker[{position}] has type {type(item).__name__}, expected object")
    symbol = item.get("symbol")
    quote_volume = item.get("quoteVolume")
    if not isinstance(symbol, str) or not isinstance(quote_volume, str):
        raise MalformedResponse(
            f"ticker[{position}] needs string symbol and quoteVolume, got "
            f"symbol={symbol!r} quoteVolume={quote_volume!r}"
        )
    return TickerSummary(symbol=symbol, quote_volume=quote_volume)


class TickerSnapshotFetcher:
    def __init__(self, client: MarketDataClient) -> None:
        self._client = client

    def fetch(self, quote_currency: str) -> List[TickerSummary]:
        try:
            payload = self._client.get_ticker_24hr()
            if not isinstance(payload, list):
                raise MalformedResponse(
                    f"ticker snapshot: expected array, got {type(payload).__name__}"
                )
            tickers = [_parse_ticker(position, item) for position, item in enumerate(payload)]
        except Exception as exc:
            logger.error("TICKER_FETCH_FAILED: quote=%s error=%s", quote_currency, exc)
            raise

        filtered = [ticker for ticker in tickers if ticker.symbol.endswith(quote_currency)]
        logger.info(
            "TICKER_FETCH: quote=%s total=%d matching=%d",
            quote_currency,
            len(tickers),
            len(filtered),
        )
        return filtered
