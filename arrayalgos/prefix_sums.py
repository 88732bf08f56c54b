"""Subarray problems solved with running sums, running XORs and products."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from math import prod


def count_subarrays_with_sum(arr: Iterable[int], k: int) -> int:
    """Count the contiguous subarrays whose elements add up to ``k``."""
    seen: Counter[int] = Counter({0: 1})
    running = 0
    count = 0
    for value in arr:
        running += value
        count += seen[running - k]
        seen[running] += 1
    return count


def count_subarrays_with_xor(arr: Iterable[int], k: int) -> int:
    """Count the contiguous subarrays whose elements XOR to ``k``."""
    seen: Counter[int] = Counter({0: 1})
    running = 0
    count = 0
    for value in arr:
        running ^= value
        count += seen[running ^ k]
        seen[running] += 1
    return count


def subarray_with_sum_brute(
    arr: Sequence[int], target: int
) -> tuple[int, int] | None:
    """Find the first subarray of non-negative values summing to ``target``.

    Returns 1-based inclusive ``(start, end)`` positions, or ``None``.
    """
    for start in range(len(arr)):
        running = 0
        for end, value in enumerate(arr[start:], start):
            running += value
            if running == target:
                return start + 1, end + 1
            if running > target:
                break
    return None


def subarray_with_sum_prefix(
    arr: Iterable[int], target: int
) -> tuple[int, int] | None:
    """Find the subarray summing to ``target`` that ends earliest.

    Returns 1-based inclusive ``(start, end)`` positions, or ``None``.
    """
    last_index: dict[int, int] = {}
    running = 0
    for end, value in enumerate(arr):
        running += value
        if running == target:
            return 1, end + 1
        start = last_index.get(running - target)
        if start is not None:
            return start + 2, end + 1
        last_index[running] = end
    return None


def subarray_with_sum_window(
    arr: Sequence[int], target: int
) -> tuple[int, int] | None:
    """Find a subarray of non-negative values summing to ``target`` in linear time.

    Returns 1-based inclusive ``(start, end)`` positions, or ``None``.
    A single-element array is never searched.
    """
    if not arr:
        return None
    size = len(arr)
    low, high = 0, 1
    running = arr[0]
    while low <= high and high < size:
        while running < target and high < size:
            running += arr[high]
            high += 1
        while running > target and low < size:
            running -= arr[low]
            low += 1
        if running == target:
            return low + 1, high
    return None


def subarray_with_sum(arr: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find the first subarray of non-negative values summing to ``target``."""
    return subarray_with_sum_brute(arr, target)


def find_equilibrium(arr: Iterable[int]) -> int | None:
    """Return the first index whose left and right sums are equal, or ``None``."""
    values = list(arr)
    right = sum(values)
    left = 0
    for index, value in enumerate(values):
        right -= value
        if left == right:
            return index
        left += value
    return None


def longest_subarray_with_sum(arr: Iterable[int], k: int) -> int:
    """Return the length of the longest subarray summing to ``k`` (0 if none)."""
    first_index: dict[int, int] = {}
    running = 0
    best = 0
    for index, value in enumerate(arr):
        running += value
        if running == k:
            best = max(best, index + 1)
        start = first_index.get(running - k)
        if start is not None:
            best = max(best, index - start)
        first_index.setdefault(running, index)
    return best


def longest_balanced_binary_subarray(arr: Iterable[int]) -> int:
    """Return the length of the longest subarray with as many 0s as 1s."""
    first_index: dict[int, int] = {}
    running = 0
    best = 0
    for index, value in enumerate(arr):
        running += -1 if value == 0 else value
        if running == 0:
            best = max(best, index + 1)
        if running in first_index:
            best = max(best, index - first_index[running])
        else:
            first_index[running] = index
    return best


def product_except_self(arr: Iterable[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    values = list(arr)
    zeros = values.count(0)
    if zeros > 1:
        return [0] * len(values)
    product = prod(value for value in values if value != 0)
    if zeros == 1:
        return [product if value == 0 else 0 for value in values]
    return [product // value for value in values]