# tests/test_calendar.py

import pytest
import random
from datetime import date

from luach.core.errors import (
    DateBeforeEpochError,
    OutOfRangeDayError,
    OutOfRangeHourError,
    OutOfRangeMinuteError,
    OutOfRangeMonthError,
    OutOfRangePartError,
    OutOfRangeYearError,
)
from luach.core.types import ADAR_II, IYAR, NISSAN, TEVES, TISHREI, JewishDate, MoladTime
from luach.engines.dechiyos import LO_ADU_ROSH
from luach.engines.factory import get_engine, list_engines, make_engine
from luach.engines.specs import STANDARD_SPEC
from luach.engines.year import YEAR_LENGTHS


@pytest.fixture
def eng():
    return get_engine("standard")


# (jewish year, month, day) -> Gregorian
REFERENCE = [
    ((3761, 10, 18), date(1, 1, 1)),
    ((3762, 7, 1), date(1, 9, 6)),
    ((5771, 7, 1), date(2010, 9, 9)),
    ((5771, 10, 25), date(2011, 1, 1)),
    ((5771, 1, 1), date(2011, 4, 5)),
    ((5771, 6, 29), date(2011, 9, 28)),
    ((5772, 7, 1), date(2011, 9, 29)),
    ((5784, 13, 14), date(2024, 3, 24)),
    ((5784, 1, 15), date(2024, 4, 23)),
    ((5785, 7, 10), date(2024, 10, 12)),
    ((5785, 12, 14), date(2025, 3, 14)),
]


@pytest.mark.parametrize("ymd, d", REFERENCE)
def test_reference_dates(eng, ymd, d):
    assert eng.to_absolute(*ymd) == d.toordinal()
    assert eng.from_absolute(d.toordinal()) == JewishDate(*ymd)


ROSH_HASHANA = [
    (5780, date(2019, 9, 30)),
    (5781, date(2020, 9, 19)),
    (5782, date(2021, 9, 7)),
    (5783, date(2022, 9, 26)),
    (5784, date(2023, 9, 16)),
    (5785, date(2024, 10, 3)),
    (5786, date(2025, 9, 23)),
    (5787, date(2026, 9, 12)),
    (5788, date(2027, 10, 2)),
    (5789, date(2028, 9, 21)),
    (5790, date(2029, 9, 10)),
]


@pytest.mark.parametrize("year, d", ROSH_HASHANA)
def test_rosh_hashana(eng, year, d):
    assert eng.rosh_hashana(year) == d.toordinal()
    assert eng.to_absolute(year, TISHREI, 1) == d.toordinal()


def test_rosh_hashana_3761_precedes_floor(eng):
    assert eng.rosh_hashana(3761) == -106
    assert eng.year.elapsed_days(3761) == 1373322


def test_roundtrip_random(eng):
    random.seed(123)
    for _ in range(3000):
        a = random.randint(1, 3652059)
        j = eng.from_absolute(a)
        assert 1 <= j.day <= eng.year.days_in_month(j.month, j.year)
        assert eng.to_absolute(j.year, j.month, j.day) == a


def test_consecutive_days(eng):
    # every day of a leap year and its neighbours maps to the next label
    a0 = eng.rosh_hashana(5783)
    prev = eng.from_absolute(a0 - 1)
    assert prev == JewishDate(5782, 6, 29)
    for a in range(a0, eng.rosh_hashana(5786)):
        j = eng.from_absolute(a)
        if j.day == 1:
            assert prev.day == eng.year.days_in_month(prev.month, prev.year)
        else:
            assert (j.year, j.month, j.day - 1) == (prev.year, prev.month, prev.day)
        prev = j


def test_validate_clamps_day(eng):
    assert eng.validate_jewish(5771, IYAR, 30) == JewishDate(5771, IYAR, 29)
    assert eng.validate_jewish(5784, ADAR_II, 30) == JewishDate(5784, ADAR_II, 29)
    assert eng.validate_jewish(5771, NISSAN, 30) == JewishDate(5771, NISSAN, 30)


def test_validate_time(eng):
    j = eng.validate_jewish(5784, TISHREI, 1, 5, 49, 0)
    assert j.molad == MoladTime(5, 49, 0)
    assert eng.validate_jewish(5784, TISHREI, 1).molad is None


@pytest.mark.parametrize(
    "args, exc",
    [
        ((0, 7, 1), OutOfRangeYearError),
        ((5784, 0, 1), OutOfRangeMonthError),
        ((5784, 14, 1), OutOfRangeMonthError),
        ((5783, 13, 1), OutOfRangeMonthError),
        ((5784, 7, 0), OutOfRangeDayError),
        ((5784, 7, 31), OutOfRangeDayError),
        ((3761, 10, 17), DateBeforeEpochError),
        ((3761, 7, 1), DateBeforeEpochError),
        ((3000, 1, 1), DateBeforeEpochError),
        ((5784, 7, 1, 24, 0, 0), OutOfRangeHourError),
        ((5784, 7, 1, 0, 60, 0), OutOfRangeMinuteError),
        ((5784, 7, 1, 0, 0, 18), OutOfRangePartError),
        ((5784, 7, 1, -1, 0, 0), OutOfRangeHourError),
    ],
)
def test_validate_rejects(eng, args, exc):
    with pytest.raises(exc):
        eng.validate_jewish(*args)


def test_floor(eng):
    assert not eng.is_before_floor(3761, TEVES, 18)
    assert eng.is_before_floor(3761, TEVES, 17)
    # Nisan 3761 comes after Teves 3761
    assert not eng.is_before_floor(3761, NISSAN, 1)
    assert eng.to_absolute(3761, NISSAN, 1) > 1


def test_explain_year(eng):
    info = eng.explain_year(5771)
    assert info["molad_time"] == MoladTime(1, 36, 1)
    assert info["molad_weekday"] == 5  # Wednesday evening, so Thursday
    assert info["dechiyos"] == ()
    assert info["rosh_hashana"] == date(2010, 9, 9)

    info = eng.explain_year(5784)
    assert info["molad_time"] == MoladTime(11, 49, 0)
    assert info["dechiyos"] == (LO_ADU_ROSH,)
    assert info["rosh_hashana"] == date(2023, 9, 16)
    assert info["days_in_year"] == 383
    assert info["cycle_position"] == 8

    assert "rosh_hashana" not in eng.explain_year(3761)


def test_molad_date(eng):
    c = eng.molad.chalakim_since_molad_tohu(5771, TISHREI)
    assert eng.molad_to_absolute(c) == 734023
    j = eng.molad_date(c)
    assert (j.year, j.month, j.day) == (5770, 6, 29)
    assert j.molad == MoladTime(1, 36, 1)


def test_registered_engines_round_trip():
    # every registered calendar must keep months summing to one of the six year lengths
    for name in list_engines():
        e = get_engine(name)
        for y in range(5000, 5100):
            assert e.year.days_in_year(y) in YEAR_LENGTHS
            months = e.year.months_of_year(y)
            assert sum(e.year.days_in_month(m, y) for m in months) == e.year.days_in_year(y)
        for a in range(e.rosh_hashana(5000), e.rosh_hashana(5050)):
            j = e.from_absolute(a)
            assert e.to_absolute(j.year, j.month, j.day) == a


def test_engines():
    assert list_engines() == ["standard"]
    assert get_engine("standard") is get_engine("standard")
    with pytest.raises(KeyError):
        get_engine("julian")
    e = make_engine(STANDARD_SPEC.tweak(id="copy"))
    assert e.id == "copy"
    assert e.rosh_hashana(5784) == get_engine("standard").rosh_hashana(5784)


def test_validate_explicit_midnight(eng):
    assert eng.validate_jewish(5784, TISHREI, 1, 0, 0, 0).molad == MoladTime(0, 0, 0)
    assert eng.validate_jewish(5784, TISHREI, 1, minutes=30).molad == MoladTime(0, 30, 0)
