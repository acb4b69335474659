"""Knapsack-style optimisation problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def mixed_knapsack(capacity: int, items: Iterable[tuple[bool, int, int]]) -> int:
    """Largest total value that fits in ``capacity``.

    Items are ``(unlimited, value, volume)``: an unlimited item may be taken
    any number of times, any other item at most once.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for unlimited, value, volume in items:
        if volume < 0:
            raise ValueError("volume must not be negative")
        if unlimited:
            for size in range(volume, capacity + 1):
                best[size] = max(best[size], best[size - volume] + value)
        else:
            for size in range(capacity, volume - 1, -1):
                best[size] = max(best[size], best[size - volume] + value)
    return best[capacity]


def _knapsack_layers(items: Iterable[tuple[int, int]], limit: int) -> list[list[int]]:
    """Row ``i`` holds the best values for each capacity using the first ``i`` items."""
    layers = [[0] * (limit + 1)]
    for volume, value in items:
        previous = layers[-1]
        row = previous[:]
        for size in range(volume, limit + 1):
            candidate = previous[size - volume] + value
            if candidate > row[size]:
                row[size] = candidate
        layers.append(row)
    return layers


def knapsack_without_item(
    items: Sequence[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer 0/1 knapsack queries that each leave one item out.

    Items are ``(volume, value)``; each query is ``(capacity, index)`` where
    ``index`` is the 0-based position of the item that may not be used.
    """
    queries = list(queries)
    for volume, _ in items:
        if volume < 0:
            raise ValueError("volume must not be negative")
    for capacity, index in queries:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if not 0 <= index < len(items):
            raise IndexError(f"item {index} is out of range")

    limit = max((capacity for capacity, _ in queries), default=0)
    prefix = _knapsack_layers(items, limit)
    suffix = _knapsack_layers(reversed(items), limit)

    answers = []
    for capacity, index in queries:
        left = prefix[index]
        right = suffix[len(items) - index - 1]
        answers.append(max(left[c] + right[capacity - c] for c in range(capacity + 1)))
    return answers


def min_ecoins(target: int, coins: Iterable[tuple[int, int]]) -> int | None:
    """Fewest e-coins whose summed (conventional, infotechnological) values have modulus ``target``.

    Coins may be reused; returns None when no combination reaches the target.
    """
    if target < 0:
        raise ValueError("target must not be negative")
    limit = target * target
    fewest = [[math.inf] * (target + 1) for _ in range(target + 1)]
    fewest[0][0] = 0
    for conventional, info in coins:
        if conventional < 0 or info < 0:
            raise ValueError("coin values must not be negative")
        x = conventional
        while x * x + info * info <= limit:
            y = info
            while x * x + y * y <= limit:
                fewest[x][y] = min(fewest[x][y], fewest[x - conventional][y - info] + 1)
                y += 1
            x += 1

    best = math.inf
    for x in range(target + 1):
        y = math.isqrt(limit - x * x)
        if x * x + y * y == limit:
            best = min(best, fewest[x][y])
    return None if best == math.inf else int(best)