"""Numeric Sort: ascending order by value, never in place."""

from collections.abc import Iterable

from sort_service.core.validate_number_array import Number


def sort_ascending(values: Iterable[Number]) -> list[Number]:
    """Return a new list sorted smallest to largest. The input is left untouched."""
    return sorted(values)
