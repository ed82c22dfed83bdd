from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.routes import router as ohlcv_router
from .config import Settings, get_settings
from .domain.errors import MarketDataError
from .services.ohlcv_service import create_ohlcv_service

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)

TICKER_FAILURE_MESSAGE = "Failed to fetch 24-hour ticker data"


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.ohlcv_service = create_ohlcv_service(app.state.settings)
    logger.info("Server started, serving GET /ohlcv")
    yield
    app.state.ohlcv_service.close()
    logger.info("Server stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Top Volume OHLCV", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        allow_credentials=True,
    )

    @app.exception_handler(MarketDataError)
    async def market_data_error_handler(request: Request, exc: MarketDataError) -> PlainTextResponse:
        logger.error("OHLCV_REQUEST_FAILED: path=%s error=%s", request.url.path, exc)
        return PlainTextResponse(TICKER_FAILURE_MESSAGE, status_code=500)

    app.include_router(ohlcv_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
