"""
DateOperations - Calendar Date Value Objects

A small library built around CustomDate, an immutable day/month/year value
with day arithmetic, equality and short/long rendering.

This package provides:
- Validation against the proleptic Gregorian calendar
- Leap-year aware day arithmetic across month and year boundaries
- DD/MM/YYYY and 'DD Month YYYY' rendering
- A command-line front end
"""

__version__ = "1.0.0"
__license__ = "MIT"

from date_operations.domain.exceptions import DateError, InvalidDate, OutOfRange
from date_operations.domain.value_objects.custom_date import CustomDate

__all__ = [
    "CustomDate",
    "DateError",
    "InvalidDate",
    "OutOfRange",
]
