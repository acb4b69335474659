"""Assorted puzzles: sieves, card games, queens, coin systems, Huffman cost, mazes."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def sieve_primes(n: int) -> list[int]:
    """All primes not greater than ``n``, ascending."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * (n + 1)
    is_prime[0] = is_prime[1] = 0
    for p in range(2, int(n**0.5) + 1):
        if is_prime[p]:
            is_prime[p * p :: p] = bytearray(len(range(p * p, n + 1, p)))
    return [i for i, flag in enumerate(is_prime) if flag]


def deng_numbers(n: int) -> list[int]:
    """Numbers up to ``n`` that are the product of exactly two primes, ascending."""
    factor_count = [0] * (n + 1)
    for p in range(2, n + 1):
        if factor_count[p]:
            continue
        power = p
        while power <= n:
            for multiple in range(power, n + 1, power):
                factor_count[multiple] += 1
            power *= p
    return [m for m in range(2, n + 1) if factor_count[m] == 2]


def max_wins(mine: Iterable[int]) -> int:
    """Most rounds won when the lower card wins.

    ``mine`` holds n distinct cards out of ``1 .. 2n``; the opponent has the rest.
    """
    cards = list(mine)
    n = len(cards)
    owned = set(cards)
    if len(owned) != n or any(not 1 <= c <= 2 * n for c in owned):
        raise ValueError("cards must be n distinct values between 1 and 2n")
    ours = sorted(owned, reverse=True)
    theirs = sorted(set(range(1, 2 * n + 1)) - owned, reverse=True)
    wins = 0
    opponent = iter(theirs)
    target = next(opponent, None)
    for card in ours:
        if target is None:
            break
        if card < target:
            wins += 1
            target = next(opponent, None)
    return wins


def n_queens(n: int) -> int:
    """Number of ways to place n non-attacking queens on an n-by-n board."""
    if n < 0:
        raise ValueError("n must not be negative")
    full = (1 << n) - 1

    def place(columns: int, left: int, right: int) -> int:
        if columns == full:
            return 1
        total = 0
        free = full & ~(columns | left | right)
        while free:
            bit = free & -free
            total += place(columns | bit, (left | bit) << 1, (right | bit) >> 1)
            free ^= bit
        return total

    return place(0, 0, 0)


def minimal_generators(values: Iterable[int]) -> int:
    """Size of the smallest set of amounts that can pay every sum the given amounts can.

    Each amount may be used any number of times; zeros are ignored.
    """
    amounts = list(values)
    if any(v < 0 for v in amounts):
        raise ValueError("amounts must not be negative")
    distinct = sorted({v for v in amounts if v})
    if not distinct:
        raise ValueError("at least one positive amount is required")
    top = distinct[-1]
    reachable = bytearray(top + 1)
    reachable[0] = 1
    count = 0
    for amount in distinct:
        if not reachable[amount]:
            count += 1
        for total in range(amount, top + 1):
            if reachable[total - amount]:
                reachable[total] = 1
    return count


def huffman_cost(weights: Iterable[int]) -> int:
    """Total cost of repeatedly merging the two lightest weights into one."""
    heap = list(weights)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        cost += merged
        heapq.heappush(heap, merged)
    return cost


_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))  # east, south, west, north


def wall_follower_counts(grid: Sequence[str]) -> tuple[int, int, int, int, int]:
    """Count open cells visited 0..4 times by a right-hand wall follower.

    ``grid`` rows hold '0' for open cells and '1' for walls; the walk starts in
    the bottom-left cell facing east and stops on returning there.
    """
    rows = len(grid)
    if rows == 0 or not grid[0]:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    if any(len(line) != cols or set(line) - {"0", "1"} for line in grid):
        raise ValueError("grid must be rectangular and hold only '0' and '1'")
    open_cells = [[ch == "0" for ch in line] for line in grid]

    def passable(r: int, c: int, direction: int) -> bool:
        dr, dc = _STEPS[direction]
        nr, nc = r + dr, c + dc
        return 0 <= nr < rows and 0 <= nc < cols and open_cells[nr][nc]

    start = (rows - 1, 0)
    if not any(passable(*start, direction) for direction in range(4)):
        raise ValueError("the starting cell has no open neighbour")

    visits = [[0] * cols for _ in range(rows)]
    r, c = start
    direction = 0
    while True:
        if passable(r, c, (direction + 1) % 4):
            direction = (direction + 1) % 4
        while not passable(r, c, direction):
            direction = (direction + 3) % 4
        dr, dc = _STEPS[direction]
        r, c = r + dr, c + dc
        visits[r][c] += 1
        if (r, c) == start:
            break

    occurrences = [0] * 5
    for open_row, visit_row in zip(open_cells, visits):
        for is_open, times in zip(open_row, visit_row):
            if is_open and times <= 4:
                occurrences[times] += 1
    return tuple(occurrences)