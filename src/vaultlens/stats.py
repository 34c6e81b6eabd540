"""Small numeric and sequence helpers used by the dashboard views."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import statistics
from typing import Any

from vaultlens.errors import InputError


def get_median(numbers: Sequence[float]) -> float:
    """Return the median; even-length input averages the two middle values."""
    if not numbers:
        raise InputError("get_median() requires at least one number")
    return statistics.median(numbers)


def get_average(numbers: Sequence[float]) -> float:
    """Return the arithmetic mean of a non-empty sequence."""
    if not numbers:
        raise InputError(
            "get_average() requires at least one number",
            hint="Check for an empty list before averaging.",
        )
    return sum(numbers) / len(numbers)


def sum_all(numbers: Iterable[float]) -> float:
    return sum(numbers, 0)


def _leaf_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).lower()


def flatten_arrays(nested: Iterable[Any]) -> list[str]:
    """Flatten arbitrarily nested lists/tuples into lower-cased leaf strings.

    Example:
        flatten_arrays([1, [2, [3, 4]], "A"])  # ["1", "2", "3", "4", "a"]
    """
    flat: list[str] = []
    for item in nested:
        if isinstance(item, list | tuple):
            flat.extend(flatten_arrays(item))
        else:
            flat.append(_leaf_text(item))
    return flat
