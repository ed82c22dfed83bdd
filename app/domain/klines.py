"""Boundary validation for positional candlestick rows.

The provider encodes each candlestick as a JSON array::

    [openTime, open, high, low, close, volume, closeTime,
     quoteAssetVolume, numberOfTrades, takerBuyBaseAssetVolume,
     takerBuyQuoteAssetVolume, ...]

Rows are turned into :class:`CandleRecord` here, or rejected with
:class:`RowSkipped` so the caller can drop them and keep going.
"""

import logging
from typing import Any, List

from ..models.market import CandleRecord
from .errors import MalformedResponse, RowSkipped

logger = logging.getLogger(__name__)

KLINE_ROW_MIN_LENGTH = 11


def _as_int(row: List[Any], index: int, name: str) -> int:
    value = row[index]
    if isinstance(value, bool):
        raise RowSkipped(f"{name} is a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise RowSkipped(f"{name} is not integral: {value!r}")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise RowSkipped(f"{name} is not an integer string: {value!r}") from None
    raise RowSkipped(f"{name} has type {type(value).__name__}")


def _as_str(row: List[Any], index: int, name: str) -> str:
    value = row[index]
    if not isinstance(value, str):
        raise RowSkipped(f"{name} has type {type(value).__name__}, expected str")
    return value


def parse_kline_row(symbol: str, row: Any) -> CandleRecord:
    if not isinstance(row, list):
        raise RowSkipped(f"row has type {type(row).__name__}, expected list")
    if len(row) < KLINE_ROW_MIN_LENGTH:
        raise RowSkipped(f"row has {len(row)} elements, expected at least {KLINE_ROW_MIN_LENGTH}")

    return CandleRecord(
        symbol=symbol,
        open_time=_as_int(row, 0, "openTime"),
        open=_as_str(row, 1, "open"),
        high=_as_str(row, 2, "high"),
        low=_as_str(row, 3, "low"),
        close=_as_str(row, 4, "close"),
        volume=_as_str(row, 5, "volume"),
        close_time=_as_int(row, 6, "closeTime"),
        quote_asset_volume=_as_str(row, 7, "quoteAssetVolume"),
        number_of_trades=_as_int(row, 8, "numberOfTrades"),
        taker_buy_base_asset_volume=_as_str(row, 9, "takerBuyBaseAssetVolume"),
        taker_buy_quote_asset_volume=_as_str(row, 10, "takerBuyQuoteAssetVolume"),
    )


def parse_klines(symbol: str, payload: Any) -> List[CandleRecord]:
    if not isinstance(payload, list):
        raise MalformedResponse(
            f"klines for {symbol}: expected array, got {type(payload).__name__}"
        )

    records: List[CandleRecord] = []
    for position, row in enumerate(payload):
        try:
            records.append(parse_kline_row(symbol, row))
        except RowSkipped as exc:
            logger.warning(
                "SERIES_SKIP_ROW: symbol=%s position=%d reason=%s row=%r",
                symbol,
                position,
                exc.reason,
                row,
            )
    return records
