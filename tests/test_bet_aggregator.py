from decimal import Decimal

from matka.core.bet_aggregator import aggregate_bets, summarise_totals
from matka.models.game import BetSession, SessionFilter
from matka.schemas import PannaTable, PlacedBet


def _bets():
    return [
        PlacedBet(session=BetSession.open, selected_numbers={"7": Decimal("100"), "138": Decimal("50")}),
        PlacedBet(session=BetSession.open, selected_numbers={"7": Decimal("20"), "9X138": Decimal("5")}),
        PlacedBet(session=BetSession.close, selected_numbers={"92": Decimal("10"), "234X2": Decimal("4")}),
        PlacedBet(session=BetSession.both, selected_numbers={"234X912X138": Decimal("1"), "112": Decimal("30")}),
    ]


def test_aggregate_sums_per_pattern():
    totals = aggregate_bets(_bets(), PannaTable())
    assert totals.single_numbers == {"7": Decimal("120")}
    assert totals.single_panna == {"138": Decimal("50")}
    assert totals.double_panna == {"112": Decimal("30")}
    assert totals.double_numbers == {"92": Decimal("10")}
    assert totals.half_sangam_open == {"9X138": Decimal("5")}
    assert totals.half_sangam_close == {"234X2": Decimal("4")}
    assert totals.full_sangam == {"234X912X138": Decimal("1")}


def test_session_filter_keeps_both_bets():
    open_totals = aggregate_bets(_bets(), PannaTable(), SessionFilter.open)
    assert open_totals.double_numbers == {}
    assert open_totals.double_panna == {"112": Decimal("30")}

    close_totals = aggregate_bets(_bets(), PannaTable(), SessionFilter.close)
    assert close_totals.single_numbers == {}
    assert close_totals.double_numbers == {"92": Decimal("10")}
    assert close_totals.full_sangam == {"234X912X138": Decimal("1")}


def test_cutting_amount_drops_small_entries():
    totals = aggregate_bets(_bets(), PannaTable(), cutting_amount=Decimal("10"))
    assert totals.single_numbers == {"7": Decimal("120")}
    assert totals.double_numbers == {"92": Decimal("10")}
    assert totals.half_sangam_open == {}
    assert totals.full_sangam == {}


def test_unrecognised_patterns_are_skipped():
    bets = [PlacedBet(session=BetSession.open, selected_numbers={"321": Decimal("5"), "abc": Decimal("1")})]
    totals = aggregate_bets(bets, PannaTable())
    assert summarise_totals(totals)["overall"].count == 0


def test_summarise_totals():
    summary = summarise_totals(aggregate_bets(_bets(), PannaTable()))
    assert summary["single_numbers"].total == Decimal("120")
    assert summary["single_numbers"].count == 1
    assert summary["overall"].total == Decimal("220")
    assert summary["overall"].count == 7


def test_patterns_are_trimmed_before_bucketing():
    bets = [PlacedBet(session=BetSession.open, selected_numbers={" 7 ": Decimal("5"), "7": Decimal("2")})]
    totals = aggregate_bets(bets, PannaTable())
    assert totals.single_numbers == {"7": Decimal("7")}
