"""Array and string problems solved with hash tables."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def extract_unique(text: str) -> str:
    """The characters of ``text`` with repeats dropped, in first-seen order."""
    return "".join(dict.fromkeys(text))


def remove_duplicates(values: Iterable[T]) -> list[T]:
    """The values with repeats dropped, in first-seen order."""
    return list(dict.fromkeys(values))


def longest_consecutive_sequence(values: Iterable[int]) -> list[int]:
    """Start and end of the longest run of consecutive integers in ``values``.

    A run of length one is returned as a single-element list. When runs tie,
    the one holding the earliest element of ``values`` wins. Raises
    ValueError when ``values`` is empty.
    """
    items = list(values)
    if not items:
        raise ValueError("cannot find a sequence in an empty collection")
    present = set(items)
    runs: dict[int, tuple[int, int]] = {}
    best = (items[0], items[0])
    best_length = 0
    for value in items:
        run = runs.get(value)
        if run is None:
            start = value
            while start - 1 in present:
                start -= 1
            end = value
            while end + 1 in present:
                end += 1
            run = (start, end)
            for member in range(start, end + 1):
                runs[member] = run
        length = run[1] - run[0] + 1
        if length > best_length:
            best, best_length = run, length
    start, end = best
    return [start] if start == end else [start, end]


def longest_zero_sum_subarray(values: Iterable[int]) -> int:
    """Length of the longest contiguous stretch of ``values`` that sums to zero."""
    first_seen = {0: -1}
    total = 0
    best = 0
    for index, value in enumerate(values):
        total += value
        if total in first_seen:
            best = max(best, index - first_seen[total])
        else:
            first_seen[total] = index
    return best


def most_frequent(values: Iterable[T]) -> T:
    """The value that occurs most often; ties go to the one seen first.

    Raises ValueError when ``values`` is empty.
    """
    counts = Counter(values)
    if not counts:
        raise ValueError("cannot find the most frequent value of an empty collection")
    return max(counts, key=counts.__getitem__)


def count_zero_sum_pairs(values: Iterable[int]) -> int:
    """Number of pairs of positions whose values add up to zero."""
    counts = Counter(values)
    zeros = counts[0]
    return zeros * (zeros - 1) // 2 + sum(
        count * counts[-value] for value, count in counts.items() if value > 0
    )


def count_pairs_with_difference(values: Iterable[int], k: int) -> int:
    """Number of pairs of positions whose values differ by ``|k|``."""
    counts = Counter(values)
    gap = abs(k)
    if gap == 0:
        return sum(count * (count - 1) // 2 for count in counts.values())
    return sum(count * counts[value + gap] for value, count in counts.items())