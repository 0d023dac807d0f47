"""Search algorithms returning the 0-based index of a target, or ``None``."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Locate ``target`` in a sorted sequence by repeated halving."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        current = values[mid]
        if current == target:
            return mid
        if current < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def interpolation_search(values: Sequence[int], target: int) -> int | None:
    """Locate ``target`` in a sorted sequence by estimating its position.

    After each missed probe the search range shrinks by one element on the
    side the probe fell short of.
    """
    low, high = 0, len(values) - 1
    while low <= high and values[low] <= target <= values[high]:
        if low == high:
            return low if values[low] == target else None
        span = values[high] - values[low]
        if span == 0:
            # Every value in range equals the target.
            return low
        probe = low + (high - low) * (target - values[low]) // span
        if not low <= probe <= high:
            return None
        current = values[probe]
        if current == target:
            return probe
        if current < target:
            low += 1
        else:
            high -= 1
    return None


def jump_search(values: Sequence[int], target: int) -> int | None:
    """Locate ``target`` in a sorted sequence by jumping sqrt(n) steps.

    Once a block whose last element is not smaller than ``target`` is found,
    that block is scanned linearly.
    """
    size = len(values)
    if size == 0:
        return None
    step = math.isqrt(size)
    previous, jump = 0, step
    while values[min(jump, size) - 1] < target:
        previous = jump
        jump += step
        if previous >= size:
            return None
    block = values[previous:min(jump, size)]
    for index, value in enumerate(block, start=previous):
        if value == target:
            return index
    return None


def linear_search(values: Iterable[int], target: int) -> int | None:
    """Return the index of the first ``target`` in ``values``."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None