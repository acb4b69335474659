"""Graph problems: matching, topological order, de Bruijn cycles, union-find tasks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from algosolve.disjoint_set import DisjointSet


def max_rook_placement(board: Sequence[Sequence[int]]) -> int:
    """Most rooks that fit on the cells marked 1 with no two attacking each other."""
    rows = [[col for col, cell in enumerate(row) if cell == 1] for row in board]
    owner: dict[int, int] = {}

    def augment(row: int, seen: set[int]) -> bool:
        for col in rows[row]:
            if col in seen:
                continue
            seen.add(col)
            if col not in owner or augment(owner[col], seen):
                owner[col] = row
                return True
        return False

    return sum(1 for row in range(len(rows)) if augment(row, set()))


def has_unique_topological_order(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the DAG on nodes ``1 .. n`` has exactly one topological order."""
    indegree = [0] * (n + 1)
    successors: list[list[int]] = [[] for _ in range(n + 1)]
    for x, y in edges:
        successors[x].append(y)
        indegree[y] += 1

    ready = [v for v in range(1, n + 1) if indegree[v] == 0]
    visited = 0
    while ready:
        if len(ready) > 1:
            return False
        node = ready.pop()
        visited += 1
        for nxt in successors[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                ready.append(nxt)
    if visited != n:
        raise ValueError("graph contains a cycle")
    return True


def de_bruijn_sequence(n: int) -> str:
    """A cyclic binary string of length 2**n holding every n-bit word once."""
    if n < 1:
        raise ValueError("n must be at least 1")
    mask = (1 << (n - 1)) - 1
    node_count = 1 << (n - 1)
    used = ([False] * node_count, [False] * node_count)
    out: list[str] = []
    # Each frame: [node, next bit to try, label of the edge that led here].
    stack: list[list] = [[0, 0, None]]
    while stack:
        frame = stack[-1]
        node, bit = frame[0], frame[1]
        while bit < 2 and used[bit][node]:
            bit += 1
        if bit < 2:
            used[bit][node] = True
            frame[1] = bit + 1
            stack.append([((node << 1) | bit) & mask, 0, str(bit)])
        else:
            stack.pop()
            if frame[2] is not None:
                out.append(frame[2])
    return "".join(out)


def edges_to_upgrade(n: int, edges: Sequence[tuple[int, int]]) -> list[int]:
    """Edge numbers (1-based, edge i weighs i) of the maximum spanning forest, ascending."""
    ds = DisjointSet(n + 1)
    chosen = []
    for number, (u, v) in reversed(list(enumerate(edges, start=1))):
        if ds.union(u, v):
            chosen.append(number)
    return sorted(chosen)


def constraints_satisfiable(
    n: int,
    equal: Iterable[tuple[int, int]],
    not_equal: Iterable[tuple[int, int]],
) -> bool:
    """Whether variables ``1 .. n`` admit values meeting all equalities and inequalities."""
    ds = DisjointSet(n + 1)
    for a, b in equal:
        ds.union(a, b)
    return all(not ds.is_same_set(a, b) for a, b in not_equal)


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the undirected graph on nodes ``1 .. n`` is two-colourable."""
    neighbours: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        neighbours[u].append(v)
        neighbours[v].append(u)

    colour = [0] * (n + 1)
    for start in range(1, n + 1):
        if colour[start]:
            continue
        colour[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for other in neighbours[node]:
                if colour[other] == colour[node]:
                    return False
                if not colour[other]:
                    colour[other] = -colour[node]
                    queue.append(other)
    return True


def min_conflict_threshold(n: int, edges: Sequence[tuple[int, int, int]]) -> int:
    """Smallest possible largest weight of an edge kept inside one side of a two-way split.

    Edges are ``(u, v, weight)``; returns 0 when the whole graph is bipartite.
    """
    ordered = sorted(edges, key=lambda edge: edge[2], reverse=True)
    pairs = [(u, v) for u, v, _ in ordered]
    lo, hi = 1, len(ordered) + 1
    while lo < hi:
        mid = (lo + hi) // 2
        if is_bipartite(n, pairs[:mid]):
            lo = mid + 1
        else:
            hi = mid
    if lo > len(ordered):
        return 0
    return ordered[lo - 1][2]