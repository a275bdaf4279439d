class LuachError(Exception):
    """Base error."""

class OutOfRangeError(LuachError, ValueError):
    """A date or time component is outside its valid range."""

class OutOfRangeYearError(OutOfRangeError):
    pass

class OutOfRangeMonthError(OutOfRangeError):
    pass

class OutOfRangeDayError(OutOfRangeError):
    pass

class OutOfRangeHourError(OutOfRangeError):
    pass

class OutOfRangeMinuteError(OutOfRangeError):
    pass

class OutOfRangePartError(OutOfRangeError):
    """Raised for molad chalakim outside 0..17."""

class DateBeforeEpochError(LuachError, ValueError):
    """Raised for dates before Gregorian 0001-01-01 (18 Tevet 3761)."""

class UnsupportedUnitError(LuachError, ValueError):
    """Raised when forward() gets an unknown unit or a non-positive amount."""
