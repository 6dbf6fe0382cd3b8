from datetime import datetime, timedelta, timezone
from decimal import Decimal

from src.domain.base import to_money, to_naive_utc


def test_to_naive_utc_converts_offset_before_dropping_it():
    value = datetime(2026, 10, 18, 20, 0, tzinfo=timezone(timedelta(hours=-8)))

    assert to_naive_utc(value) == datetime(2026, 10, 19, 4, 0)


def test_to_naive_utc_keeps_naive_values():
    value = datetime(2026, 10, 19, 4, 0)

    assert to_naive_utc(value) is value


def test_to_money_rounds_half_up():
    assert to_money("2.005") == Decimal("2.01")
    assert to_money(Decimal("2.004")) == Decimal("2.00")
