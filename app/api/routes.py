from typing import List

from fastapi import APIRouter, Depends, Request

from ..models.market import CandleRecord
from ..services.ohlcv_service import OhlcvService

router = APIRouter()


def get_ohlcv_service(request: Request) -> OhlcvService:
    return request.app.state.ohlcv_service


@router.get("/ohlcv", response_model=List[CandleRecord])
def get_ohlcv(service: OhlcvService = Depends(get_ohlcv_service)) -> List[CandleRecord]:
    return service.collect()
