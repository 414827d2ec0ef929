# matka/core/reward_calculator.py
"""
Payout calculation for a declared Matka result.

Given the declared open or close number and the bet totals aggregated per
pattern, works out how much is owed to bettors and itemises every term:

Open (or close without sangam terms):
- 1 digit:  single_numbers[r] * single
- 2 digits: double_numbers[r] * double
- panna:    panna bucket[r] * panna rate  +  single_numbers[main(r)] * single

Close panna, once the open result is known, additionally settles:
- jodi:              double_numbers[open_main . close_main] * double
- half sangam open:  "{open_main}X{close_panna}" * half_sangam
- half sangam close: "{open_panna}X{close_main}" * half_sangam
- full sangam:       "{open_panna}X{sum(open)}{sum(close)}X{close_panna}" * full_sangam
"""
from typing import List, Optional
from decimal import Decimal

from matka.core.errors import InvalidResultError, MissingOpenResultError
from matka.core.game_logic import (
    classify_panna,
    combine_mains,
    digit_sum,
    encode_sangam_key,
    get_winning_rate,
    is_valid_result_number,
    main_value,
)
from matka.core.logging import get_logger
from matka.models.game import BUCKET_BY_GAME_TYPE, PANNA_GAME_TYPES, GameType, ResultType
from matka.schemas import (
    AggregatedBetTotals,
    DeclaredResult,
    OpenResult,
    PannaTable,
    PayoutBreakdown,
    PayoutItem,
    WinningRateTable,
)

logger = get_logger(__name__)


class PayoutCalculator:
    def __init__(self, rates: WinningRateTable, pannas: Optional[PannaTable] = None):
        self.rates = rates
        self.pannas = pannas or PannaTable()

    def _item(self, totals: AggregatedBetTotals, game_type: GameType, pattern: str) -> PayoutItem:
        bet_amount = totals.amount_for(BUCKET_BY_GAME_TYPE[game_type], pattern)
        rate = get_winning_rate(game_type, self.rates)
        return PayoutItem(
            game_type=game_type,
            pattern=pattern,
            bet_amount=bet_amount,
            rate=rate,
            win_amount=bet_amount * rate,
        )

    def _classify(self, number: str) -> GameType:
        if not is_valid_result_number(number):
            raise InvalidResultError(number, "must be 1 to 3 digits")
        if len(number) == 1:
            return GameType.single
        if len(number) == 2:
            return GameType.double
        game_type = classify_panna(number, self.pannas)
        if game_type is None:
            raise InvalidResultError(number, "not a valid panna number")
        return game_type

    def _base_items(self, number: str, game_type: GameType, totals: AggregatedBetTotals) -> List[PayoutItem]:
        items = [self._item(totals, game_type, number)]
        if game_type not in PANNA_GAME_TYPES:
            return items
        # A panna also settles single-number bets on its main
        items.append(self._item(totals, GameType.single, str(main_value(number))))
        return items

    def compute_for_open(self, result_number: str, totals: AggregatedBetTotals) -> PayoutBreakdown:
        game_type = self._classify(result_number)
        items = self._base_items(result_number, game_type, totals)
        breakdown = PayoutBreakdown(
            result_type=ResultType.open,
            result_number=result_number,
            game_type=game_type,
            total=sum((i.win_amount for i in items), Decimal(0)),
            items=items,
            open_main=main_value(result_number) if len(result_number) == 3 else None,
        )
        logger.info("Open payout for %s (%s): %s", result_number, game_type.value, breakdown.total)
        return breakdown

    def compute_for_close(
        self,
        result_number: str,
        open_result: Optional[OpenResult],
        totals: AggregatedBetTotals,
        strict: bool = False,
    ) -> PayoutBreakdown:
        """
        Payout for a close declaration.

        Without an open result only the base terms can be settled. In strict
        mode that raises MissingOpenResultError; otherwise the base payout is
        returned with ``missing_open`` set so the caller can decide.
        """
        game_type = self._classify(result_number)
        items = self._base_items(result_number, game_type, totals)
        is_panna = len(result_number) == 3
        close_main = main_value(result_number) if is_panna else None

        breakdown = PayoutBreakdown(
            result_type=ResultType.close,
            result_number=result_number,
            game_type=game_type,
            close_main=close_main,
        )

        if open_result is None:
            if strict:
                raise MissingOpenResultError(result_number)
            logger.warning("Close %s declared without open result; settling base payout only", result_number)
            breakdown.missing_open = True
        elif is_panna:
            if not is_valid_result_number(open_result.number):
                raise InvalidResultError(open_result.number, "open result must be 1 to 3 digits")
            open_main = open_result.main if open_result.main is not None else main_value(open_result.number)
            combined = combine_mains(open_main, close_main)
            sums = f"{digit_sum(open_result.number)}{digit_sum(result_number)}"

            items.extend([
                self._item(totals, GameType.double, str(combined)),
                self._item(totals, GameType.half_sangam_open, encode_sangam_key(open_main, result_number)),
                self._item(totals, GameType.half_sangam_close, encode_sangam_key(open_result.number, close_main)),
                self._item(totals, GameType.full_sangam, encode_sangam_key(open_result.number, sums, result_number)),
            ])
            breakdown.open_main = open_main
            breakdown.combined_main = combined

        breakdown.items = items
        breakdown.total = sum((i.win_amount for i in items), Decimal(0))
        logger.info("Close payout for %s (%s): %s", result_number, game_type.value, breakdown.total)
        return breakdown

    def compute(
        self,
        declared: DeclaredResult,
        totals: AggregatedBetTotals,
        open_result: Optional[OpenResult] = None,
        strict: bool = False,
    ) -> PayoutBreakdown:
        if declared.type == ResultType.open:
            return self.compute_for_open(declared.number, totals)
        return self.compute_for_close(declared.number, open_result, totals, strict=strict)
