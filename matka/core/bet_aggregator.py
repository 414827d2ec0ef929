# matka/core/bet_aggregator.py
from typing import Dict, Iterable, Optional
from decimal import Decimal

from matka.core.game_logic import classify_pattern
from matka.core.logging import get_logger
from matka.models.game import BUCKET_BY_GAME_TYPE, BetSession, SessionFilter
from matka.schemas import AggregatedBetTotals, CategorySummary, PannaTable, PlacedBet

logger = get_logger(__name__)

# Sessions kept by each filter; "both" bets count towards either half
_SESSIONS_BY_FILTER = {
    SessionFilter.all: {BetSession.open, BetSession.close, BetSession.both},
    SessionFilter.open: {BetSession.open, BetSession.both},
    SessionFilter.close: {BetSession.close, BetSession.both},
}

def aggregate_bets(
    bets: Iterable[PlacedBet],
    pannas: PannaTable,
    session: SessionFilter = SessionFilter.all,
    cutting_amount: Optional[Decimal] = None,
) -> AggregatedBetTotals:
    """
    Sum every bettor's selections per pattern into the calculator's buckets.

    Args:
        bets: placed bets, each with its session and {pattern: amount} selections
        pannas: panna enumerations used to sort 3-digit patterns
        session: keep only bets relevant to the open or close declaration
        cutting_amount: drop aggregated entries below this amount

    Returns:
        AggregatedBetTotals keyed by the exact pattern strings bettors chose
    """
    allowed = _SESSIONS_BY_FILTER[SessionFilter(session)]
    buckets: Dict[str, Dict[str, Decimal]] = {name: {} for name in BUCKET_BY_GAME_TYPE.values()}
    skipped = 0

    for bet in bets:
        if bet.session not in allowed:
            continue
        for key, amount in bet.selected_numbers.items():
            pattern = key.strip()
            game_type = classify_pattern(pattern, pannas)
            if game_type is None:
                skipped += 1
                logger.debug("Skipping unrecognised bet pattern %r", key)
                continue
            bucket = buckets[BUCKET_BY_GAME_TYPE[game_type]]
            bucket[pattern] = bucket.get(pattern, Decimal(0)) + Decimal(amount)

    if cutting_amount is not None:
        for name, data in buckets.items():
            buckets[name] = {k: v for k, v in data.items() if v >= cutting_amount}

    if skipped:
        logger.info("Aggregation skipped %d unrecognised selections", skipped)
    return AggregatedBetTotals(**buckets)

def summarise_totals(totals: AggregatedBetTotals) -> Dict[str, CategorySummary]:
    """Per-bucket total staked and number of distinct patterns, plus an overall line."""
    summary: Dict[str, CategorySummary] = {}
    overall = CategorySummary()
    for name in BUCKET_BY_GAME_TYPE.values():
        data = getattr(totals, name)
        entry = CategorySummary(total=sum(data.values(), Decimal(0)), count=len(data))
        summary[name] = entry
        overall.total += entry.total
        overall.count += entry.count
    summary["overall"] = overall
    return summary
