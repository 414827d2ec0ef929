from decimal import Decimal
from typing import List
from pydantic_settings import BaseSettings
from datetime import datetime, time, timedelta, date
import pytz

from matka.schemas import WinningRateTable

class Settings(BaseSettings):
    PROJECT_NAME: str = "Matka Payout API"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # Markets run on Indian time; a new round starts at the cutoff
    TIMEZONE: str = "Asia/Kolkata"
    DAY_CUTOFF_TIME: str = "00:00:00"

    # Close declared without an open result: False = base payout only, True = reject
    STRICT_CLOSE_DECLARATION: bool = False

    # Winning rates (multiplier per staked unit)
    RATE_SINGLE: Decimal = Decimal("9")
    RATE_DOUBLE: Decimal = Decimal("90")
    RATE_SINGLE_PANNA: Decimal = Decimal("150")
    RATE_DOUBLE_PANNA: Decimal = Decimal("300")
    RATE_TRIPLE_PANNA: Decimal = Decimal("1000")
    RATE_HALF_SANGAM: Decimal = Decimal("1000")
    RATE_FULL_SANGAM: Decimal = Decimal("10000")

    class Config:
        env_file = ".env"

settings = Settings()

def get_default_rates(cfg: Settings = None) -> WinningRateTable:
    """Rate table built from the RATE_* settings."""
    cfg = cfg or settings
    return WinningRateTable(
        single=cfg.RATE_SINGLE,
        double=cfg.RATE_DOUBLE,
        single_panna=cfg.RATE_SINGLE_PANNA,
        double_panna=cfg.RATE_DOUBLE_PANNA,
        triple_panna=cfg.RATE_TRIPLE_PANNA,
        half_sangam=cfg.RATE_HALF_SANGAM,
        full_sangam=cfg.RATE_FULL_SANGAM,
    )

def get_local_now(tz_name: str = None) -> datetime:
    """Current time in the market timezone, regardless of where the server runs."""
    tz = pytz.timezone(tz_name or settings.TIMEZONE)
    return datetime.now(tz)

def get_round_date(now_local: datetime, cutoff_time_str: str = None) -> date:
    """
    Work out which round (market day) a moment belongs to.

    Before the cutoff time the moment still counts towards yesterday's round,
    at or after it towards today's.

    Args:
        now_local: current time in the market timezone
        cutoff_time_str: cutoff as "HH:MM:SS"; defaults to settings.DAY_CUTOFF_TIME

    Examples (cutoff 05:20):
        - 04:00 -> yesterday
        - 05:30 -> today
    """
    if cutoff_time_str is None:
        cutoff_time_str = settings.DAY_CUTOFF_TIME

    try:
        cutoff_time = datetime.strptime(cutoff_time_str, "%H:%M:%S").time()
    except ValueError:
        cutoff_time = time(0, 0, 0)

    if now_local.time() < cutoff_time:
        return now_local.date() - timedelta(days=1)
    return now_local.date()
