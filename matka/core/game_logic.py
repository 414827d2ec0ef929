import re
from typing import Optional, Tuple, Union
from decimal import Decimal
from matka.models.game import GameType
from matka.schemas import PannaTable, WinningRateTable

SANGAM_SEPARATOR = "X"

_SINGLE_RE = re.compile(r"^[0-9]$")
_DOUBLE_RE = re.compile(r"^[0-9]{2}$")
_PANNA_RE = re.compile(r"^[0-9]{3}$")
_RESULT_RE = re.compile(r"^[0-9]{1,3}$")
_NUMBER_RE = re.compile(r"^[0-9]+$")

# Rate tag each game type pays at (both half sangams share one rate)
_RATE_FIELD = {
    GameType.single: "single",
    GameType.double: "double",
    GameType.single_panna: "single_panna",
    GameType.double_panna: "double_panna",
    GameType.triple_panna: "triple_panna",
    GameType.half_sangam_open: "half_sangam",
    GameType.half_sangam_close: "half_sangam",
    GameType.full_sangam: "full_sangam",
}

def _digits(n: Union[int, str]) -> str:
    s = str(n)
    if not _NUMBER_RE.fullmatch(s):
        raise ValueError(f"Expected a non-negative integer, got {n!r}")
    return s

def digit_sum(n: Union[int, str]) -> int:
    """Sum of the decimal digits (138 -> 12). No reduction."""
    return sum(int(d) for d in _digits(n))

def last_digit(n: Union[int, str]) -> int:
    return int(_digits(n)) % 10

def main_value(n: Union[int, str]) -> int:
    """
    Main (ank) of a number: its digit sum, reduced to the last digit when the
    sum has two digits. 138 -> 12 -> 2, 99 -> 18 -> 8, 7 -> 7.
    """
    total = digit_sum(n)
    return total % 10 if total > 9 else total

def combine_mains(open_main: int, close_main: int) -> int:
    """Jodi formed by open main followed by close main, kept to two digits."""
    combined = int(f"{open_main}{close_main}")
    return combined % 100 if combined > 99 else combined

def is_valid_result_number(number: str) -> bool:
    return bool(number) and bool(_RESULT_RE.fullmatch(number))

def encode_sangam_key(*parts) -> str:
    return SANGAM_SEPARATOR.join(str(p) for p in parts)

def decode_sangam_key(key: str) -> Tuple[str, ...]:
    """Split "9X138" / "234X912X138" back into their parts."""
    parts = tuple(key.split(SANGAM_SEPARATOR))
    if len(parts) not in (2, 3) or not all(_NUMBER_RE.fullmatch(p) for p in parts):
        raise ValueError(f"Not a sangam pattern: {key!r}")
    return parts

def classify_panna(number: str, pannas: PannaTable) -> Optional[GameType]:
    if not _PANNA_RE.fullmatch(number or ""):
        return None
    if number in pannas.triple:
        return GameType.triple_panna
    if number in pannas.double:
        return GameType.double_panna
    if number in pannas.single:
        return GameType.single_panna
    return None

def classify_pattern(key: str, pannas: PannaTable) -> Optional[GameType]:
    """Game type a bettor's selection string belongs to, or None if it fits none."""
    key = key or ""
    if _SINGLE_RE.fullmatch(key):
        return GameType.single
    if _DOUBLE_RE.fullmatch(key):
        return GameType.double
    if _PANNA_RE.fullmatch(key):
        return classify_panna(key, pannas)

    try:
        parts = decode_sangam_key(key)
    except ValueError:
        return None

    if len(parts) == 2:
        left, right = parts
        if len(left) == 1 and len(right) == 3:
            return GameType.half_sangam_open
        if len(left) == 3 and len(right) == 1:
            return GameType.half_sangam_close
        return None

    open_panna, sums, close_panna = parts
    if len(open_panna) == 3 and len(close_panna) == 3 and 2 <= len(sums) <= 4:
        return GameType.full_sangam
    return None

def get_winning_rate(game_type: GameType, rates: WinningRateTable) -> Decimal:
    return getattr(rates, _RATE_FIELD[game_type])
