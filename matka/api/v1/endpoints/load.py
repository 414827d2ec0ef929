from fastapi import APIRouter, Depends

from matka.api import deps
from matka.core.bet_aggregator import aggregate_bets, summarise_totals
from matka.schemas import AggregateRequest, AggregateResponse, PannaTable

router = APIRouter()

@router.post("/aggregate", response_model=AggregateResponse)
def aggregate_load(
    data: AggregateRequest,
    pannas: PannaTable = Depends(deps.get_panna_table),
):
    totals = aggregate_bets(data.bets, pannas, data.session, data.cutting_amount)
    return {"totals": totals, "summary": summarise_totals(totals)}
