"""Proleptic Gregorian calendar rules.

Ordinals count days from 01/01/0001 (ordinal 1), the same numbering as
datetime.date.toordinal().
"""

from date_operations.domain.exceptions import InvalidDate, OutOfRange

MIN_YEAR = 1
MAX_YEAR = 9999

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Check if year has a 29 February."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Get the number of days in a month of a given year.

    Raises:
        InvalidDate: If month is not between 1 and 12
    """
    if not 1 <= month <= 12:
        raise InvalidDate(f"month must be between 1 and 12, got {month}", 1, month, year)
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Check if the triple names a date within MIN_YEAR..MAX_YEAR."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        return False
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(month, year)


def _days_before_year(year: int) -> int:
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _days_before_month(month: int, year: int) -> int:
    days = sum(_DAYS_IN_MONTH[: month - 1])
    if month > 2 and is_leap_year(year):
        days += 1
    return days


def to_ordinal(day: int, month: int, year: int) -> int:
    """Convert a valid date to its day number."""
    return _days_before_year(year) + _days_before_month(month, year) + day


MAX_ORDINAL = to_ordinal(31, 12, MAX_YEAR)


def from_ordinal(ordinal: int) -> tuple[int, int, int]:
    """Convert a day number back to a (day, month, year) triple.

    Args:
        ordinal: Day number, 1 for 01/01/0001

    Returns:
        Tuple of (day, month, year)

    Raises:
        OutOfRange: If the ordinal falls outside MIN_YEAR..MAX_YEAR
    """
    if not 1 <= ordinal <= MAX_ORDINAL:
        raise OutOfRange(
            f"day number {ordinal} is outside the supported range 1..{MAX_ORDINAL}",
            ordinal,
        )

    # 146097 days per 400-year cycle; the estimate is off by at most one year
    year = ordinal * 400 // 146097 + 1
    while _days_before_year(year) >= ordinal:
        year -= 1
    while _days_before_year(year + 1) < ordinal:
        year += 1

    day = ordinal - _days_before_year(year)
    month = 1
    while day > days_in_month(month, year):
        day -= days_in_month(month, year)
        month += 1
    return day, month, year


def month_name(month: int) -> str:
    """Get the full English name of a month (1-12)."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    return MONTH_NAMES[month - 1]
