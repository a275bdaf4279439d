# tests/test_year.py

import pytest
import random

from luach.core.time import day_of_week
from luach.core.types import (
    ADAR,
    ADAR_II,
    CHESHVAN,
    ELUL,
    IYAR,
    KISLEV,
    NISSAN,
    TEVES,
    TISHREI,
)
from luach.engines.factory import get_engine
from luach.engines.year import YEAR_LENGTHS


@pytest.fixture
def eng():
    return get_engine("standard")


@pytest.mark.parametrize(
    "year, days, kviah",
    [
        (5770, 355, "complete"),
        (5771, 385, "complete"),
        (5772, 354, "regular"),
        (5773, 353, "deficient"),
        (5774, 385, "complete"),
        (5779, 385, "complete"),
        (5781, 353, "deficient"),
        (5782, 384, "regular"),
        (5784, 383, "deficient"),
        (5785, 355, "complete"),
    ],
)
def test_year_lengths(eng, year, days, kviah):
    assert eng.year.days_in_year(year) == days
    assert eng.year.kviah(year) == kviah


def test_only_six_lengths(eng):
    seen = {eng.year.days_in_year(y) for y in range(5000, 6000)}
    assert seen == set(YEAR_LENGTHS)
    for y in range(5000, 6000):
        assert (eng.year.days_in_year(y) > 380) == eng.year.is_leap_year(y)


def test_rosh_hashana_weekday(eng):
    # never Sunday, Wednesday or Friday
    for y in range(4000, 6500):
        assert day_of_week(eng.rosh_hashana(y)) not in (1, 4, 6)


def test_cheshvan_kislev(eng):
    assert (eng.year.days_in_month(CHESHVAN, 5771), eng.year.days_in_month(KISLEV, 5771)) == (30, 30)
    assert (eng.year.days_in_month(CHESHVAN, 5772), eng.year.days_in_month(KISLEV, 5772)) == (29, 30)
    assert (eng.year.days_in_month(CHESHVAN, 5773), eng.year.days_in_month(KISLEV, 5773)) == (29, 29)
    assert eng.year.is_cheshvan_long(5771) and not eng.year.is_kislev_short(5771)
    assert eng.year.is_kislev_short(5773) and not eng.year.is_cheshvan_long(5773)


def test_fixed_month_lengths(eng):
    assert eng.year.days_in_month(IYAR, 5771) == 29
    assert eng.year.days_in_month(TEVES, 5771) == 29
    assert eng.year.days_in_month(ELUL, 5771) == 29
    assert eng.year.days_in_month(NISSAN, 5771) == 30
    assert eng.year.days_in_month(TISHREI, 5771) == 30
    # Adar has 29 days in a common year; Adar I 30 and Adar II 29 in a leap year
    assert eng.year.days_in_month(ADAR, 5783) == 29
    assert eng.year.days_in_month(ADAR, 5784) == 30
    assert eng.year.days_in_month(ADAR_II, 5784) == 29


def test_months_sum_to_year(eng):
    random.seed(11)
    for _ in range(300):
        y = random.randint(3762, 9000)
        months = eng.year.months_of_year(y)
        assert len(months) == eng.year.months_in_year(y)
        assert sum(eng.year.days_in_month(m, y) for m in months) == eng.year.days_in_year(y)


def test_months_of_year(eng):
    assert eng.year.months_of_year(5784) == [7, 8, 9, 10, 11, 12, 13, 1, 2, 3, 4, 5, 6]
    assert eng.year.months_of_year(5783) == [7, 8, 9, 10, 11, 12, 1, 2, 3, 4, 5, 6]
    assert eng.year.last_month_of_year(5784) == ADAR_II
    assert eng.year.last_month_of_year(5783) == ADAR


def test_days_since_start_of_year(eng):
    assert eng.year.days_since_start_of_year(5772, TISHREI, 1) == 1
    assert eng.year.days_since_start_of_year(5771, TEVES, 25) == 115
    assert eng.year.days_since_start_of_year(5771, ELUL, 29) == 385
