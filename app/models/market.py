from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TickerSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    symbol: str
    quote_volume: str


class CandleRecord(BaseModel):
    """One candlestick interval of one symbol.

    Price and volume fields keep the provider's decimal strings verbatim.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    symbol: str
    open_time: int
    open: str
    high: str
    low: str
    close: str
    volume: str
    close_time: int
    quote_asset_volume: str
    number_of_trades: int
    taker_buy_base_asset_volume: str
    taker_buy_quote_asset_volume: str
