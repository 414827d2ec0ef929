from datetime import date, datetime
from decimal import Decimal

import pytz

from matka.core.config import get_default_rates, get_local_now, get_round_date

IST = pytz.timezone("Asia/Kolkata")


def test_round_date_before_cutoff_is_previous_day():
    now = IST.localize(datetime(2026, 10, 18, 4, 0, 0))
    assert get_round_date(now, "05:20:00") == date(2026, 10, 17)


def test_round_date_after_cutoff_is_today():
    now = IST.localize(datetime(2026, 10, 18, 5, 30, 0))
    assert get_round_date(now, "05:20:00") == date(2026, 10, 18)


def test_round_date_bad_cutoff_uses_midnight():
    now = IST.localize(datetime(2026, 10, 18, 0, 5, 0))
    assert get_round_date(now, "not-a-time") == date(2026, 10, 18)


def test_local_now_is_timezone_aware():
    assert get_local_now().tzinfo is not None


def test_default_rates_from_settings():
    rates = get_default_rates()
    assert rates.single == Decimal("9")
    assert rates.half_sangam == Decimal("1000")
