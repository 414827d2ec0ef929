# matka/api/deps.py
from typing import Optional
from fastapi import Depends
from matka.core.config import Settings, settings, get_default_rates
from matka.core.reward_calculator import PayoutCalculator
from matka.schemas import PannaTable, RateOverride

# 1. Settings (overridable in tests)
def get_settings() -> Settings:
    return settings

# 2. Panna enumerations
def get_panna_table() -> PannaTable:
    return PannaTable()

# 3. Calculator factory: request rates are merged onto the configured table
def calculator_factory(
    pannas: PannaTable = Depends(get_panna_table),
    cfg: Settings = Depends(get_settings),
):
    def build(override: Optional[RateOverride] = None) -> PayoutCalculator:
        rates = get_default_rates(cfg)
        if override is not None:
            rates = rates.model_copy(update=override.model_dump(exclude_unset=True, exclude_none=True))
        return PayoutCalculator(rates, pannas)
    return build
