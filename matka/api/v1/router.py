from fastapi import APIRouter
from matka.api.v1.endpoints import payout, load

api_router = APIRouter()

api_router.include_router(payout.router, prefix="/payout", tags=["payout"])
api_router.include_router(load.router, prefix="/load", tags=["load"])
