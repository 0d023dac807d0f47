"""Classic algorithms over integer arrays, most of them expecting sorted input."""

from __future__ import annotations

from collections.abc import Sequence


def common_elements(
    first: Sequence[int], second: Sequence[int], third: Sequence[int]
) -> list[int]:
    """Return the elements present in all three sorted sequences, in order."""
    i = j = k = 0
    result: list[int] = []
    while i < len(first) and j < len(second) and k < len(third):
        a, b, c = first[i], second[j], third[k]
        if a == b == c:
            result.append(a)
            i += 1
            j += 1
            k += 1
        elif a < b:
            i += 1
        elif b < c:
            j += 1
        else:
            k += 1
    return result


def count_occurrences(values: Sequence[int], target: int) -> int:
    """Return how many times ``target`` occurs in ``values``."""
    return sum(1 for value in values if value == target)


def remove_duplicates(values: Sequence[int]) -> list[int]:
    """Return a sorted sequence with adjacent duplicates collapsed."""
    result: list[int] = []
    for value in values:
        if not result or value != result[-1]:
            result.append(value)
    return result


def _check_window(values: Sequence[int], size: int) -> None:
    if not 1 <= size <= len(values):
        raise ValueError(
            f"window size {size} must be between 1 and {len(values)}"
        )


def max_window_sum_naive(values: Sequence[int], size: int) -> tuple[int, list[int]]:
    """Find the contiguous window of ``size`` elements with the largest sum.

    Every window is summed from scratch. Returns ``(total, window)``; on ties
    the earliest window wins.
    """
    _check_window(values, size)
    best_total: int | None = None
    best_start = 0
    for start in range(len(values) - size + 1):
        total = sum(values[start:start + size])
        if best_total is None or total > best_total:
            best_total, best_start = total, start
    assert best_total is not None
    return best_total, list(values[best_start:best_start + size])


def max_window_sum(values: Sequence[int], size: int) -> tuple[int, list[int]]:
    """Find the window of ``size`` elements with the largest sum by sliding.

    Returns ``(total, window)``; on ties the earliest window wins.
    """
    _check_window(values, size)
    total = sum(values[:size])
    best_total, best_start = total, 0
    pairs = zip(values, values[size:])
    for start, (leaving, entering) in enumerate(pairs, start=1):
        total += entering - leaving
        if total > best_total:
            best_total, best_start = total, start
    return best_total, list(values[best_start:best_start + size])


def missing_number(values: Sequence[int]) -> int:
    """Return the one number of 1..len(values)+1 absent from ``values``."""
    n = len(values) + 1
    return n * (n + 1) // 2 - sum(values)


def peak_elements(values: Sequence[int]) -> list[int]:
    """Return peak elements: ones not smaller than their neighbours.

    A first element larger than the second is the sole answer; failing
    that, a last element larger than the one before it. Otherwise every
    interior element not smaller than both neighbours is returned.
    """
    if len(values) < 2:
        raise ValueError("at least two elements are needed to find a peak")
    if values[0] > values[1]:
        return [values[0]]
    if values[-1] > values[-2]:
        return [values[-1]]
    return [
        current
        for before, current, after in zip(values, values[1:], values[2:])
        if current >= before and current >= after
    ]


def two_largest(values: Sequence[int]) -> tuple[int, int]:
    """Return ``(largest, second_largest)`` in a single pass."""
    if len(values) < 2:
        raise ValueError("at least two elements are needed")
    first, second = values[0], values[1]
    largest, runner_up = (first, second) if first > second else (second, first)
    for value in values[2:]:
        if value > largest:
            largest, runner_up = value, largest
        elif value > runner_up:
            runner_up = value
    return largest, runner_up


def pair_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two elements of a sorted sequence adding up to ``target``.

    Returns the pair as ``(smaller, larger)`` or ``None`` if there is none.
    """
    left, right = 0, len(values) - 1
    while left < right:
        current = values[left] + values[right]
        if current == target:
            return values[left], values[right]
        if current < target:
            left += 1
        else:
            right -= 1
    return None


def sorted_union(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences, emitting a shared value once per match."""
    i = j = 0
    result: list[int] = []
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a < b:
            result.append(a)
            i += 1
        elif b < a:
            result.append(b)
            j += 1
        else:
            result.append(a)
            i += 1
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def sorted_intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the values common to two sorted sequences, in order."""
    i = j = 0
    result: list[int] = []
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a < b:
            i += 1
        elif b < a:
            j += 1
        else:
            result.append(a)
            i += 1
            j += 1
    return result