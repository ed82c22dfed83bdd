class MarketDataError(Exception):
    """Base class for failures talking to the market-data provider."""


class UpstreamUnavailable(MarketDataError):
    """Transport failure or non-success status from the provider."""


class UpstreamTimeout(UpstreamUnavailable):
    """The provider did not answer within the configured timeout."""


class MalformedResponse(MarketDataError):
    """The provider answered with a body of the wrong top-level shape."""


class RowSkipped(Exception):
    """A single candlestick row failed validation and is dropped."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
