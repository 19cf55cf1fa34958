"""Custom date value object."""

from dataclasses import dataclass
from datetime import date
from typing import Self

from date_operations.domain.exceptions import InvalidDate
from date_operations.domain.services import gregorian


@dataclass(frozen=True)
class CustomDate:
    """Immutable calendar date made of a day, a month and a year.

    Instances always hold a valid proleptic Gregorian date between
    years 1 and 9999. Arithmetic never mutates a date, it returns a
    new one.
    """

    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        """Validate the date against the Gregorian calendar."""
        for name in ("day", "month", "year"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

        if not gregorian.MIN_YEAR <= self.year <= gregorian.MAX_YEAR:
            raise InvalidDate(
                f"year must be between {gregorian.MIN_YEAR} and {gregorian.MAX_YEAR}, "
                f"got {self.year}",
                self.day, self.month, self.year,
            )
        if not 1 <= self.month <= 12:
            raise InvalidDate(
                f"month must be between 1 and 12, got {self.month}",
                self.day, self.month, self.year,
            )
        last_day = gregorian.days_in_month(self.month, self.year)
        if not 1 <= self.day <= last_day:
            raise InvalidDate(
                f"day must be between 1 and {last_day} for "
                f"{gregorian.month_name(self.month)} {self.year}, got {self.day}",
                self.day, self.month, self.year,
            )

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Self:
        """Create a date from its day number (1 is 01/01/0001).

        Raises:
            OutOfRange: If the day number is outside the supported years
        """
        day, month, year = gregorian.from_ordinal(ordinal)
        return cls(day, month, year)

    @classmethod
    def from_date(cls, value: date) -> Self:
        """Create a date from a datetime.date (or datetime) instance."""
        return cls(value.day, value.month, value.year)

    def to_ordinal(self) -> int:
        """Get the day number of this date."""
        return gregorian.to_ordinal(self.day, self.month, self.year)

    def to_date(self) -> date:
        """Convert to a datetime.date instance."""
        return date(self.year, self.month, self.day)

    def add_days(self, days: int) -> Self:
        """Create a new date shifted by a signed number of days.

        Args:
            days: Days to add, negative to go back in time

        Returns:
            New CustomDate instance

        Raises:
            OutOfRange: If the result falls outside years 1..9999
        """
        if days == 0:
            return self
        return self.from_ordinal(self.to_ordinal() + days)

    def __add__(self, days: int) -> Self:
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return self.add_days(days)

    __radd__ = __add__

    def __sub__(self, days: int) -> Self:
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return self.add_days(-days)

    @property
    def is_leap_year(self) -> bool:
        """Check if the date falls in a leap year."""
        return gregorian.is_leap_year(self.year)

    @property
    def month_name(self) -> str:
        """Get the full month name."""
        return gregorian.month_name(self.month)

    def to_short_string(self) -> str:
        """Render as DD/MM/YYYY."""
        return f"{self.day:02d}/{self.month:02d}/{self.year:04d}"

    def to_long_string(self) -> str:
        """Render as 'DD MonthName YYYY', e.g. '07 December 2022'."""
        return f"{self.day:02d} {self.month_name} {self.year:04d}"

    def __str__(self) -> str:
        """String representation of the date."""
        return self.to_short_string()
