import math
from itertools import combinations

import pytest

from arrayalgos.two_pointers import (
    closest_pair_sum,
    count_pairs_below,
    count_pairs_with_sum,
    count_triangles,
    count_triplets,
    max_container_water,
    trapped_water,
)


def test_count_triplets_known_case():
    assert count_triplets([-3, -1, -1, 0, 1, 2], -2) == 4


@pytest.mark.parametrize("n", [3, 4, 5, 6])
def test_count_triplets_all_equal(n):
    assert count_triplets([1] * n, 3) == math.comb(n, 3)


def test_count_triplets_unreachable():
    arr = [1, 2, 3, 4]
    assert count_triplets(arr, sum(arr) + 1) == 0


@pytest.mark.parametrize("arr", [[7, 2, 5, 3, 5, 8, -1], [1, 1, 1], [10, 20, 30]])
def test_count_pairs_below_all_pairs(arr):
    assert count_pairs_below(arr, 2 * max(arr) + 1) == math.comb(len(arr), 2)


@pytest.mark.parametrize("arr", [[7, 2, 5, 3, 5, 8, -1], [1, 1, 1]])
def test_count_pairs_below_none(arr):
    assert count_pairs_below(arr, 2 * min(arr)) == 0


def test_count_pairs_below_monotonic_and_leaves_input():
    arr = [7, 2, 5, 3, 5, 8, -1]
    counts = [count_pairs_below(arr, target) for target in range(-5, 20)]
    assert counts == sorted(counts)
    assert arr == [7, 2, 5, 3, 5, 8, -1]


@pytest.mark.parametrize("arr, target", [([1, 60, -10, 70, -80, 85], 0), ([3, 8, 14], 100), ([4, 9], -3)])
def test_closest_pair_sum_is_optimal(arr, target):
    first, second = closest_pair_sum(arr, target)
    remaining = list(arr)
    remaining.remove(first)
    remaining.remove(second)
    best_gap = abs(target - (first + second))
    assert all(abs(target - (a + b)) >= best_gap for a, b in combinations(arr, 2))


@pytest.mark.parametrize("arr", [[], [5]])
def test_closest_pair_sum_too_short(arr):
    assert closest_pair_sum(arr, 3) is None


def test_count_pairs_with_sum_known_case():
    assert count_pairs_with_sum([-1, 1, 5, 5, 7], 6) == 3


@pytest.mark.parametrize("n", [2, 3, 5])
def test_count_pairs_with_sum_all_equal(n):
    assert count_pairs_with_sum([2] * n, 4) == math.comb(n, 2)


def test_count_pairs_with_sum_none():
    assert count_pairs_with_sum([1, 2, 3], 100) == 0


@pytest.mark.parametrize("n", [3, 4, 6])
def test_count_triangles_equilateral(n):
    assert count_triangles([3] * n) == math.comb(n, 3)


def test_count_triangles_degenerate():
    assert count_triangles([1, 2, 3]) == 0


def test_count_triangles_order_and_input():
    arr = [4, 6, 3, 7, 10, 5]
    result = count_triangles(arr)
    assert result == count_triangles(list(reversed(arr)))
    assert arr == [4, 6, 3, 7, 10, 5]


def test_trapped_water_known_case():
    assert trapped_water([3, 0, 1, 0, 4, 0, 2]) == 10


@pytest.mark.parametrize("heights", [[1, 2, 3, 4], [5, 4, 3, 3, 1], [], [7], [2, 9]])
def test_trapped_water_nothing_held(heights):
    assert trapped_water(heights) == 0


@pytest.mark.parametrize("heights", [[3, 0, 2, 0, 4], [1, 2, 3, 2, 1, 4], [6, 1, 1, 9, 2, 5]])
def test_trapped_water_mirror(heights):
    assert trapped_water(heights) == trapped_water(heights[::-1])


@pytest.mark.parametrize("heights", [[1, 5, 4, 3], [3, 1, 2, 4, 5], [2, 1, 8, 6, 4, 6, 5, 5]])
def test_max_container_water_mirror_and_bound(heights):
    best = max_container_water(heights)
    assert best == max_container_water(heights[::-1])
    assert best >= min(heights[0], heights[-1]) * (len(heights) - 1)


def test_max_container_water_two_lines():
    heights = [3, 7]
    assert max_container_water(heights) == min(heights)