from concurrent.futures import Future, ThreadPoolExecutor, wait
from enum import Enum
from typing import Callable, Dict, List, Optional
import logging

from ..clients.market_data_client import MarketDataClient
from ..config import Settings, get_settings
from ..domain.ranking import VolumeRanker
from ..models.market import CandleRecord
from ..repositories.candle_store import CandleStore
from ..repositories.in_memory_candle_store import InMemoryCandleStore
from .series_service import SeriesFetcher
from .ticker_service import TickerSnapshotFetcher

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    IDLE = "IDLE"
    FETCHING_TICKER = "FETCHING_TICKER"
    RANKING = "RANKING"
    FETCHING_SERIES = "FETCHING_SERIES"
    AGGREGATING = "AGGREGATING"
    RESPONDING = "RESPONDING"
    DONE = "DONE"
    FAILED = "FAILED"


class OhlcvService:
    def __init__(
        self,
        settings: Settings,
        ticker_fetcher: TickerSnapshotFetcher,
        ranker: VolumeRanker,
        series_fetcher: SeriesFetcher,
        store_factory: Callable[[], CandleStore] = InMemoryCandleStore,
        client: Optional[MarketDataClient] = None,
    ) -> None:
        self._settings = settings
        self._ticker_fetcher = ticker_fetcher
        self._ranker = ranker
        self._series_fetcher = series_fetcher
        self._store_factory = store_factory
        self._client = client

    def collect(self) -> List[CandleRecord]:
        """Run one request's pipeline and return the aggregated candlesticks.

        Raises ``MarketDataError`` when the ticker snapshot cannot be fetched.
        Per-symbol failures are absorbed by the series fetcher.
        """
        store = self._store_factory()
        state = self._transition(PipelineState.IDLE, PipelineState.FETCHING_TICKER)

        try:
            tickers = self._ticker_fetcher.fetch(self._settings.quote_currency)
        except Exception:
            self._transition(state, PipelineState.FAILED)
            raise

        state = self._transition(state, PipelineState.RANKING)
        symbols = self._ranker.rank(tickers, self._settings.top_n)

        state = self._transition(state, PipelineState.FETCHING_SERIES)
        self._fetch_all(symbols, store)

        state = self._transition(state, PipelineState.AGGREGATING)
        self._log_sample(store)

        state = self._transition(state, PipelineState.RESPONDING)
        store.seal()
        records = store.list_all()

        self._transition(state, PipelineState.DONE)
        return records

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    def _fetch_all(self, symbols: List[str], store: CandleStore) -> None:
        if not symbols:
            return

        interval = self._settings.kline_interval
        workers = max(1, min(len(symbols), self._settings.max_workers))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="series") as executor:
            futures: Dict[Future, str] = {
                executor.submit(self._series_fetcher.fetch_series, symbol, interval, store): symbol
                for symbol in symbols
            }
            wait(futures)

        for future, symbol in futures.items():
            exc = future.exception()
            if exc is not None:
                logger.error(
                    "SERIES_TASK_CRASHED: symbol=%s error_type=%s error=%s",
                    symbol,
                    type(exc).__name__,
                    exc,
                    exc_info=exc,
                )

    def _log_sample(self, store: CandleStore) -> None:
        records = store.list_all()
        logger.info("AGGREGATE: records=%d", len(records))
        for record in records[: self._settings.log_sample_size]:
            logger.info(
                "AGGREGATE_SAMPLE: symbol=%s open=%s close=%s",
                record.symbol,
                record.open,
                record.close,
            )

    @staticmethod
    def _transition(current: PipelineState, target: PipelineState) -> PipelineState:
        logger.debug("OHLCV_STATE: %s -> %s", current.value, target.value)
        return target


def create_ohlcv_service(settings: Optional[Settings] = None) -> OhlcvService:
    settings = settings or get_settings()
    logger.info(
        "OHLCV_CONFIG: provider=%s quote=%s top_n=%s interval=%s limit=%s "
        "timeout=%s max_workers=%s",
        settings.provider_base_url,
        settings.quote_currency,
        settings.top_n,
        settings.kline_interval,
        settings.kline_limit,
        settings.http_timeout_seconds,
        settings.max_workers,
    )
    client = MarketDataClient(
        base_url=settings.provider_base_url,
        timeout_seconds=settings.http_timeout_seconds,
    )
    return OhlcvService(
        settings=settings,
        ticker_fetcher=TickerSnapshotFetcher(client),
        ranker=VolumeRanker(),
        series_fetcher=SeriesFetcher(client, limit=settings.kline_limit),
        client=client,
    )
