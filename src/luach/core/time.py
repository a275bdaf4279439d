from __future__ import annotations
from datetime import date

from .errors import DateBeforeEpochError, OutOfRangeDayError, OutOfRangeMonthError, OutOfRangeYearError
from .types import GregorianDate

# JDN of absolute day 0 (absolute day 1 is 0001-01-01 proleptic Gregorian)
JDN_OFFSET = 1721425

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or (year % 400 == 0)


def days_in_gregorian_month(month: int, year: int) -> int:
    if month == 2:
        return 29 if is_gregorian_leap_year(year) else 28
    return _MONTH_LENGTHS[month - 1]


def gregorian_to_absolute(year: int, month: int, day: int) -> int:
    """Days since 0000-12-31, so that 0001-01-01 is day 1."""
    absolute = day
    for m in range(month - 1, 0, -1):
        absolute += days_in_gregorian_month(m, year)
    y = year - 1
    return absolute + 365 * y + y // 4 - y // 100 + y // 400


def absolute_to_gregorian(absolute: int) -> GregorianDate:
    """
    Inverse of gregorian_to_absolute.
    Starts from the underestimate absolute // 366 and scans forward by year, then by month.
    """
    if absolute < 1:
        raise DateBeforeEpochError(f"Absolute date {absolute} is before 0001-01-01")
    year = absolute // 366
    while absolute >= gregorian_to_absolute(year + 1, 1, 1):
        year += 1
    month = 1
    while absolute > gregorian_to_absolute(year, month, days_in_gregorian_month(month, year)):
        month += 1
    day = absolute - gregorian_to_absolute(year, month, 1) + 1
    return GregorianDate(year, month, day)


def validate_gregorian(year: int, month: int, day: int) -> GregorianDate:
    """
    Range-check a Gregorian date. A day past the end of its month is clamped to the
    month's last day rather than rejected.
    """
    if year < 1:
        raise OutOfRangeYearError(f"Years < 1 can't be calculated. {year} is invalid.")
    if not (1 <= month <= 12):
        raise OutOfRangeMonthError(f"The Gregorian month has to be between 1 and 12. {month} is invalid.")
    if not (1 <= day <= 31):
        raise OutOfRangeDayError(f"The Gregorian day of month can't be < 1 or > 31. {day} is invalid.")
    return GregorianDate(year, month, min(day, days_in_gregorian_month(month, year)))


def day_of_week(absolute: int) -> int:
    """1=Sunday .. 7=Saturday. Absolute day 1 was a Monday."""
    return absolute % 7 + 1


def date_to_absolute(d: date) -> int:
    return gregorian_to_absolute(d.year, d.month, d.day)


def absolute_to_date(absolute: int) -> date:
    return absolute_to_gregorian(absolute).to_date()


def absolute_to_jdn(absolute: int) -> int:
    return absolute + JDN_OFFSET


def jdn_to_absolute(jdn: int) -> int:
    return jdn - JDN_OFFSET
