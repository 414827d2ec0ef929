from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status

from matka.api import deps
from matka.core.config import Settings, get_default_rates, get_local_now, get_round_date
from matka.core.errors import InvalidResultError, MissingOpenResultError
from matka.schemas import (
    ClosePayoutRequest,
    OpenPayoutRequest,
    PannaTable,
    PayoutResponse,
    RateConfigResponse,
    market_id_of,
)

router = APIRouter()

def _resolve_round_date(target_date: Optional[date], cfg: Settings) -> date:
    if target_date:
        return target_date
    return get_round_date(get_local_now(cfg.TIMEZONE), cfg.DAY_CUTOFF_TIME)

@router.get("/rates", response_model=RateConfigResponse)
def get_rates(
    pannas: PannaTable = Depends(deps.get_panna_table),
    cfg: Settings = Depends(deps.get_settings),
):
    return {"rates": get_default_rates(cfg), "pannas": pannas}

@router.post("/open", response_model=PayoutResponse)
def preview_open_payout(
    data: OpenPayoutRequest,
    build_calculator=Depends(deps.calculator_factory),
    cfg: Settings = Depends(deps.get_settings),
):
    calculator = build_calculator(data.rates)
    try:
        breakdown = calculator.compute_for_open(data.result_number, data.totals)
    except InvalidResultError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return {
        "market_id": market_id_of(data.market),
        "round_date": _resolve_round_date(data.target_date, cfg),
        "breakdown": breakdown,
    }

@router.post("/close", response_model=PayoutResponse)
def preview_close_payout(
    data: ClosePayoutRequest,
    build_calculator=Depends(deps.calculator_factory),
    cfg: Settings = Depends(deps.get_settings),
):
    strict = cfg.STRICT_CLOSE_DECLARATION if data.strict is None else data.strict
    calculator = build_calculator(data.rates)
    try:
        breakdown = calculator.compute_for_close(
            data.result_number,
            data.open_result,
            data.totals,
            strict=strict,
        )
    except InvalidResultError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except MissingOpenResultError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return {
        "market_id": market_id_of(data.market),
        "round_date": _resolve_round_date(data.target_date, cfg),
        "breakdown": breakdown,
    }
