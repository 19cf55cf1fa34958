"""Domain value objects."""

from date_operations.domain.value_objects.custom_date import CustomDate

__all__ = ["CustomDate"]
