"""Problems solved with a window that slides along a sequence."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def count_distinct_in_windows(arr: Iterable[int], k: int) -> list[int]:
    """Return the number of distinct values in every window of length ``k``."""
    values = list(arr)
    if not 1 <= k <= len(values):
        raise ValueError(f"window size {k} is outside 1..{len(values)}")
    window = Counter(values[:k])
    counts = [len(window)]
    for outgoing, incoming in zip(values, values[k:]):
        window[incoming] += 1
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        counts.append(len(window))
    return counts


def longest_unique_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    seen: set[str] = set()
    start = 0
    best = 0
    for end, char in enumerate(s):
        while char in seen:
            seen.discard(s[start])
            start += 1
        seen.add(char)
        best = max(best, end - start + 1)
    return best