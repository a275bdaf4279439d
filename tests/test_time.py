# tests/test_time.py

import pytest
import random
from datetime import date

from luach.core import time as t
from luach.core.errors import (
    DateBeforeEpochError,
    OutOfRangeDayError,
    OutOfRangeMonthError,
    OutOfRangeYearError,
)
from luach.core.types import GregorianDate


def test_absolute_matches_proleptic_ordinal():
    random.seed(42)
    for _ in range(5000):
        d = date.fromordinal(random.randint(1, 3652059))
        assert t.gregorian_to_absolute(d.year, d.month, d.day) == d.toordinal()


def test_absolute_gregorian_roundtrip():
    random.seed(7)
    for _ in range(5000):
        a = random.randint(1, 3652059)
        g = t.absolute_to_gregorian(a)
        assert t.gregorian_to_absolute(g.year, g.month, g.day) == a
        assert g.to_date() == date.fromordinal(a)


def test_known_days():
    assert t.gregorian_to_absolute(1, 1, 1) == 1
    assert t.gregorian_to_absolute(2011, 1, 1) == 734138
    assert t.absolute_to_gregorian(734138) == GregorianDate(2011, 1, 1)
    # J2000.0 civil date
    assert t.absolute_to_jdn(t.date_to_absolute(date(2000, 1, 1))) == 2451545
    assert t.jdn_to_absolute(2451545) == date(2000, 1, 1).toordinal()


def test_day_of_week():
    # absolute day 1 was a Monday
    assert t.day_of_week(1) == 2
    # 2011-01-01 was a Saturday
    assert t.day_of_week(734138) == 7
    random.seed(3)
    for _ in range(1000):
        d = date.fromordinal(random.randint(1, 3652059))
        assert t.day_of_week(d.toordinal()) == d.isoweekday() % 7 + 1


def test_leap_years():
    assert t.is_gregorian_leap_year(2000)
    assert t.is_gregorian_leap_year(2024)
    assert not t.is_gregorian_leap_year(1900)
    assert not t.is_gregorian_leap_year(2023)
    assert t.days_in_gregorian_month(2, 2024) == 29
    assert t.days_in_gregorian_month(2, 2100) == 28
    assert t.days_in_gregorian_month(4, 2024) == 30


def test_validate_gregorian_clamps_day():
    assert t.validate_gregorian(2023, 2, 30) == GregorianDate(2023, 2, 28)
    assert t.validate_gregorian(2024, 2, 31) == GregorianDate(2024, 2, 29)
    assert t.validate_gregorian(2024, 4, 31) == GregorianDate(2024, 4, 30)
    assert t.validate_gregorian(2024, 12, 31) == GregorianDate(2024, 12, 31)


@pytest.mark.parametrize(
    "ymd, exc",
    [
        ((0, 1, 1), OutOfRangeYearError),
        ((2024, 0, 1), OutOfRangeMonthError),
        ((2024, 13, 1), OutOfRangeMonthError),
        ((2024, 1, 0), OutOfRangeDayError),
        ((2024, 1, 32), OutOfRangeDayError),
    ],
)
def test_validate_gregorian_rejects(ymd, exc):
    with pytest.raises(exc):
        t.validate_gregorian(*ymd)


def test_before_epoch():
    with pytest.raises(DateBeforeEpochError):
        t.absolute_to_gregorian(0)
    # also a plain ValueError for callers that don't know the hierarchy
    with pytest.raises(ValueError):
        t.absolute_to_gregorian(-5)
