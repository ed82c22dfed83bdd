import logging
from typing import List, Optional

from ..clients.market_data_client import MarketDataClient
from ..domain.errors import MarketDataError
from ..domain.klines import parse_klines
from ..models.market import CandleRecord
from ..repositories.candle_store import CandleStore

logger = logging.getLogger(__name__)


class SeriesFetcher:
    def __init__(self, client: MarketDataClient, limit: Optional[int] = None) -> None:
        self._client = client
        self._limit = limit

    def fetch_series(self, symbol: str, interval: str, store: CandleStore) -> List[CandleRecord]:
        """Fetch one symbol's candlesticks and append them to ``store``.

        Provider failures are logged and yield an empty list so sibling
        symbols are unaffected.
        """
        try:
            payload = self._client.get_klines(symbol, interval, limit=self._limit)
            records = parse_klines(symbol, payload)
        except MarketDataError as exc:
            logger.warning(
                "SERIES_FETCH_FAILED: symbol=%s interval=%s error_type=%s error=%s",
                symbol,
                interval,
                type(exc).__name__,
                exc,
            )
            return []

        store.add_many(records)
        logger.info("SERIES_FETCH: symbol=%s interval=%s records=%d", symbol, interval, len(records))
        return records
