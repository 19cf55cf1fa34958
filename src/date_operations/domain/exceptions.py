"""Domain-level exceptions.

Every calendar rule violation is a subclass of DateError so the CLI layer
can catch them uniformly and display a readable message.
"""


class DateError(Exception):
    """Base class for all date errors."""


class InvalidDate(DateError, ValueError):
    """A day/month/year triple does not name a real calendar date."""

    def __init__(self, message: str, day: int, month: int, year: int) -> None:
        super().__init__(message)
        self.day = day
        self.month = month
        self.year = year


class OutOfRange(DateError, OverflowError):
    """Day arithmetic produced a date outside the supported years."""

    def __init__(self, message: str, ordinal: int) -> None:
        super().__init__(message)
        self.ordinal = ordinal
