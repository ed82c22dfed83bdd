import logging
import math
from typing import Iterable, List

from ..models.market import TickerSummary

logger = logging.getLogger(__name__)


def parse_quote_volume(raw: str) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


class VolumeRanker:
    def rank(self, tickers: Iterable[TickerSummary], limit: int) -> List[str]:
        if limit <= 0:
            return []

        # sorted() is stable with reverse=True, ties keep input order
        ordered = sorted(
            tickers,
            key=lambda ticker: parse_quote_volume(ticker.quote_volume),
            reverse=True,
        )

        symbols: List[str] = []
        seen = set()
        for ticker in ordered:
            if ticker.symbol in seen:
                continue
            seen.add(ticker.symbol)
            symbols.append(ticker.symbol)
            if len(symbols) >= limit:
                break

        logger.info("RANK: candidates=%d limit=%d selected=%d", len(ordered), limit, len(symbols))
        return symbols
