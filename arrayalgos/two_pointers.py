"""Pair, triplet and container problems solved with two moving indices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def count_triplets(arr: Sequence[int], target: int) -> int:
    """Count index triplets of a sorted sequence whose values sum to ``target``."""
    size = len(arr)
    count = 0
    for first in range(size - 2):
        low, high = first + 1, size - 1
        while low < high:
            total = arr[first] + arr[low] + arr[high]
            if total == target:
                count += 1
                probe = low + 1
                while probe < high and arr[probe] == arr[low]:
                    count += 1
                    probe += 1
                probe = high - 1
                while probe > low and arr[probe] == arr[high]:
                    count += 1
                    probe -= 1
                low += 1
                high -= 1
            elif total < target:
                low += 1
            else:
                high -= 1
    return count


def count_pairs_below(arr: Iterable[int], target: int) -> int:
    """Count pairs whose sum is strictly less than ``target``."""
    values = sorted(arr)
    low, high = 0, len(values) - 1
    count = 0
    while low < high:
        if values[low] + values[high] >= target:
            high -= 1
        else:
            count += high - low
            low += 1
    return count


def closest_pair_sum(arr: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return the pair, in ascending order, whose sum is closest to ``target``.

    Returns ``None`` when fewer than two values are given.
    """
    values = sorted(arr)
    best: tuple[int, int] | None = None
    best_gap = float("inf")
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        gap = abs(target - total)
        if gap < best_gap:
            best_gap = gap
            best = (values[low], values[high])
        if total < target:
            low += 1
        elif total > target:
            high -= 1
        else:
            break
    return best


def count_pairs_with_sum(arr: Sequence[int], target: int) -> int:
    """Count index pairs of a sorted sequence whose values sum to ``target``."""
    low, high = 0, len(arr) - 1
    count = 0
    while low < high:
        total = arr[low] + arr[high]
        if total == target:
            if arr[low] == arr[high]:
                span = high - low + 1
                count += span * (span - 1) // 2
                break
            left = right = 1
            while low + 1 < high and arr[low] == arr[low + 1]:
                left += 1
                low += 1
            while high - 1 > low and arr[high] == arr[high - 1]:
                right += 1
                high -= 1
            count += left * right
            low += 1
            high -= 1
        elif total < target:
            low += 1
        else:
            high -= 1
    return count


def count_triangles(arr: Iterable[int]) -> int:
    """Count the triplets of lengths that form a non-degenerate triangle."""
    sides = sorted(arr)
    count = 0
    for longest in range(2, len(sides)):
        low, high = 0, longest - 1
        while low < high:
            if sides[low] + sides[high] > sides[longest]:
                count += high - low
                high -= 1
            else:
                low += 1
    return count


def trapped_water(heights: Sequence[int]) -> int:
    """Return the units of rain water held between the bars."""
    if len(heights) < 3:
        return 0
    left, right = 1, len(heights) - 2
    left_max, right_max = heights[0], heights[-1]
    water = 0
    while left <= right:
        if right_max <= left_max:
            water += max(0, right_max - heights[right])
            right_max = max(right_max, heights[right])
            right -= 1
        else:
            water += max(0, left_max - heights[left])
            left_max = max(left_max, heights[left])
            left += 1
    return water


def max_container_water(heights: Sequence[int]) -> int:
    """Return the largest area held between two of the lines."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, min(heights[left], heights[right]) * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best