from typing import Optional, List, Dict, Union, Literal, Annotated
from pydantic import BaseModel, Field, field_validator
from datetime import date
from decimal import Decimal
from matka.models.game import GameType, ResultType, BetSession, SessionFilter
from matka.core.panna_numbers import SINGLE_PANNA_NUMBERS, DOUBLE_PANNA_NUMBERS, TRIPLE_PANNA_NUMBERS

# --- Configuration Schemas ---
class WinningRateTable(BaseModel):
    single: Decimal = Decimal("9")
    double: Decimal = Decimal("90")
    single_panna: Decimal = Decimal("150")
    double_panna: Decimal = Decimal("300")
    triple_panna: Decimal = Decimal("1000")
    half_sangam: Decimal = Decimal("1000")
    full_sangam: Decimal = Decimal("10000")

    @field_validator('*')
    @classmethod
    def validate_rate(cls, v):
        if v < 0: raise ValueError("Rate must not be negative")
        return v

# Per-request override; fields left out keep the configured rate
class RateOverride(BaseModel):
    single: Optional[Decimal] = None
    double: Optional[Decimal] = None
    single_panna: Optional[Decimal] = None
    double_panna: Optional[Decimal] = None
    triple_panna: Optional[Decimal] = None
    half_sangam: Optional[Decimal] = None
    full_sangam: Optional[Decimal] = None

    @field_validator('*')
    @classmethod
    def validate_rate(cls, v):
        if v is not None and v < 0: raise ValueError("Rate must not be negative")
        return v

class PannaTable(BaseModel):
    single: List[str] = Field(default_factory=lambda: list(SINGLE_PANNA_NUMBERS))
    double: List[str] = Field(default_factory=lambda: list(DOUBLE_PANNA_NUMBERS))
    triple: List[str] = Field(default_factory=lambda: list(TRIPLE_PANNA_NUMBERS))

# --- Market Reference ---
class MarketSummary(BaseModel):
    id: str
    name: str

class MarketIdRef(BaseModel):
    kind: Literal["id"] = "id"
    id: str

class PopulatedMarketRef(BaseModel):
    kind: Literal["populated"] = "populated"
    market: MarketSummary

MarketRef = Annotated[Union[MarketIdRef, PopulatedMarketRef], Field(discriminator="kind")]

def market_id_of(ref: Optional[Union[MarketIdRef, PopulatedMarketRef]]) -> Optional[str]:
    if ref is None:
        return None
    if isinstance(ref, PopulatedMarketRef):
        return ref.market.id
    return ref.id

# --- Bet Totals ---
class AggregatedBetTotals(BaseModel):
    single_numbers: Dict[str, Decimal] = {}
    double_numbers: Dict[str, Decimal] = {}
    single_panna: Dict[str, Decimal] = {}
    double_panna: Dict[str, Decimal] = {}
    triple_panna: Dict[str, Decimal] = {}
    half_sangam_open: Dict[str, Decimal] = {}
    half_sangam_close: Dict[str, Decimal] = {}
    full_sangam: Dict[str, Decimal] = {}

    @field_validator('*')
    @classmethod
    def validate_amounts(cls, v):
        for key, amount in v.items():
            if amount < 0: raise ValueError(f"Amount for {key!r} must not be negative")
        return v

    def amount_for(self, bucket: str, pattern: str) -> Decimal:
        """Staked total for a pattern; patterns nobody bet on read as zero."""
        return getattr(self, bucket).get(pattern, Decimal(0))

class CategorySummary(BaseModel):
    total: Decimal = Decimal(0)
    count: int = 0

# --- Results ---
class DeclaredResult(BaseModel):
    type: ResultType
    number: str

class OpenResult(BaseModel):
    number: str
    main: Optional[int] = None

    @field_validator('main')
    @classmethod
    def validate_main(cls, v):
        if v is not None and v < 0: raise ValueError("Main must not be negative")
        return v

# --- Payout Breakdown ---
class PayoutItem(BaseModel):
    game_type: GameType
    pattern: str
    bet_amount: Decimal
    rate: Decimal
    win_amount: Decimal

class PayoutBreakdown(BaseModel):
    result_type: ResultType
    result_number: str
    game_type: GameType
    total: Decimal = Decimal(0)
    items: List[PayoutItem] = []
    open_main: Optional[int] = None
    close_main: Optional[int] = None
    combined_main: Optional[int] = None
    missing_open: bool = False

# --- Requests / Responses ---
class OpenPayoutRequest(BaseModel):
    market: Optional[MarketRef] = None
    result_number: str
    totals: AggregatedBetTotals = Field(default_factory=AggregatedBetTotals)
    rates: Optional[RateOverride] = None
    target_date: Optional[date] = None

class ClosePayoutRequest(OpenPayoutRequest):
    open_result: Optional[OpenResult] = None
    strict: Optional[bool] = None

class PayoutResponse(BaseModel):
    market_id: Optional[str] = None
    round_date: date
    breakdown: PayoutBreakdown

class RateConfigResponse(BaseModel):
    rates: WinningRateTable
    pannas: PannaTable

class PlacedBet(BaseModel):
    session: BetSession
    selected_numbers: Dict[str, Decimal]

    @field_validator('selected_numbers')
    @classmethod
    def validate_selection(cls, v):
        for key, amount in v.items():
            if amount < 0: raise ValueError(f"Amount for {key!r} must not be negative")
        return v

class AggregateRequest(BaseModel):
    bets: List[PlacedBet]
    session: SessionFilter = SessionFilter.all
    cutting_amount: Optional[Decimal] = None

class AggregateResponse(BaseModel):
    totals: AggregatedBetTotals
    summary: Dict[str, CategorySummary]
