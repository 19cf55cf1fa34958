"""
Domain Layer - Calendar Dates

This layer contains the date value object, the Gregorian calendar rules it
relies on, and the domain exceptions. It has no dependency on configuration,
logging or presentation concerns.
"""
