"""
Small validation predicates shared by records and handlers.
"""

from typing import Any, Iterable, Optional

MIN_TEMPERATURE_C = -50
MAX_TEMPERATURE_C = 60


def is_valid_temperature(temperature_c: int) -> bool:
    """Check a Celsius temperature is within -50..60 inclusive."""
    return MIN_TEMPERATURE_C <= temperature_c <= MAX_TEMPERATURE_C


def has_value(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def has_items(collection: Optional[Iterable[Any]]) -> bool:
    if collection is None:
        return False
    return any(True for _ in collection)
