import logging
from typing import Any, Dict, Optional

import httpx

from ..domain.errors import MalformedResponse, UpstreamTimeout, UpstreamUnavailable

logger = logging.getLogger(__name__)

TICKER_24HR_PATH = "/ticker/24hr"
KLINES_PATH = "/klines"
_BODY_SNIPPET_LIMIT = 240


class MarketDataClient:
    """Blocking client for the provider's public REST endpoints.

    One instance is shared by all requests and worker threads; ``httpx.Client``
    is safe to use concurrently.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout_seconds)

    def get_ticker_24hr(self) -> Any:
        return self._get(TICKER_24HR_PATH)

    def get_klines(self, symbol: str, interval: str, limit: Optional[int] = None) -> Any:
        params: Dict[str, str | int] = {"symbol": symbol, "interval": interval}
        if limit is not None:
            params["limit"] = limit
        return self._get(KLINES_PATH, params=params)

    def close(self) -> None:
        self._client.close()

    def _get(self, path: str, params: Optional[Dict[str, str | int]] = None) -> Any:
        try:
            response = self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise UpstreamTimeout(f"GET {path} timed out: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise UpstreamUnavailable(
                f"GET {path} returned {exc.response.status_code}: "
                f"{exc.response.text[:_BODY_SNIPPET_LIMIT]}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamUnavailable(f"GET {path} failed: {exc}") from exc

        logger.debug(
            "UPSTREAM_BODY: path=%s params=%s body=%s",
            path,
            params,
            response.text[:_BODY_SNIPPET_LIMIT],
        )

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponse(f"GET {path} returned invalid JSON: {exc}") from exc
