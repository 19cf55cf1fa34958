"""Simple date operations demo - run directly."""

import sys

sys.path.insert(0, "src")

from date_operations.domain.exceptions import InvalidDate
from date_operations.domain.value_objects.custom_date import CustomDate


def main():
    print("=" * 50)
    print("DateOperations - simple demo")
    print("=" * 50)

    current_date = CustomDate(7, 12, 2022)
    print(f"Current Date: {current_date}")

    new_date = current_date + 5
    print(f"New Date (currentDate + 5 days): {new_date}")

    print(f"Are current date and new date equal? {current_date == new_date}")

    print(f"Long date format: {current_date.to_long_string()}")

    # Leap-year boundaries
    print("\nLeap years:")
    for year in (2020, 2021):
        print(f"    28/02/{year} + 1 day = {CustomDate(28, 2, year) + 1}")

    print("\nInvalid dates:")
    for day, month, year in ((31, 4, 2023), (29, 2, 2023)):
        try:
            CustomDate(day, month, year)
        except InvalidDate as e:
            print(f"    {day}/{month}/{year}: {e}")


if __name__ == "__main__":
    main()
