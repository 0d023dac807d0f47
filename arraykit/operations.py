"""Basic positional operations on arrays using 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _check_position(position: int, upper: int) -> None:
    if not 1 <= position <= upper:
        raise IndexError(f"position {position} is outside 1..{upper}")


def delete_at(values: Sequence[int], position: int) -> list[int]:
    """Return a copy of ``values`` without the element at ``position``."""
    _check_position(position, len(values))
    return [*values[:position - 1], *values[position:]]


def insert_at(values: Sequence[int], position: int, value: int) -> list[int]:
    """Return a copy of ``values`` with ``value`` placed at ``position``.

    Positions run from 1 to ``len(values) + 1``, the latter appending.
    """
    _check_position(position, len(values) + 1)
    return [*values[:position - 1], value, *values[position - 1:]]


def update_at(values: Sequence[int], position: int, value: int) -> list[int]:
    """Return a copy of ``values`` with the element at ``position`` replaced."""
    _check_position(position, len(values))
    result = list(values)
    result[position - 1] = value
    return result


def find_position(values: Iterable[int], target: int) -> int:
    """Return the 1-based position of the first ``target`` in ``values``."""
    for position, value in enumerate(values, start=1):
        if value == target:
            return position
    raise ValueError(f"{target} is not in the array")


def format_elements(values: Iterable[int]) -> str:
    """Render the elements separated by single spaces."""
    return " ".join(str(value) for value in values)