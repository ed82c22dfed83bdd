import os
from typing import List, Optional

from pydantic import BaseModel


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


def _csv(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Settings(BaseModel):
    provider_base_url: str = os.getenv(
        "OHLCV_PROVIDER_BASE_URL", "https://api.binance.com/api/v3"
    )
    quote_currency: str = os.getenv("OHLCV_QUOTE_CURRENCY", "USDT")
    top_n: int = int(os.getenv("OHLCV_TOP_N", "50"))
    kline_interval: str = os.getenv("OHLCV_KLINE_INTERVAL", "1m")
    kline_limit: Optional[int] = _optional_int("OHLCV_KLINE_LIMIT")
    http_timeout_seconds: float = float(os.getenv("OHLCV_HTTP_TIMEOUT_SECONDS", "10"))
    max_workers: int = int(os.getenv("OHLCV_MAX_WORKERS", "50"))
    log_sample_size: int = int(os.getenv("OHLCV_LOG_SAMPLE_SIZE", "5"))
    cors_origins: List[str] = _csv("OHLCV_CORS_ORIGINS", "http://localhost:3000")
    host: str = os.getenv("OHLCV_HOST", "0.0.0.0")
    port: int = int(os.getenv("OHLCV_PORT", "8080"))


def get_settings() -> Settings:
    return Settings()
