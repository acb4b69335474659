"""Shortest and bottleneck path searches on undirected graphs."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence


def _adjacency(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[tuple[int, int]]]:
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        graph[u].append((v, w))
        graph[v].append((u, w))
    return graph


def shortest_path(
    n: int, edges: Iterable[tuple[int, int, int]], source: int, target: int
) -> int | None:
    """Length of the shortest path between two of the nodes ``1 .. n``, or None."""
    graph = _adjacency(n, edges)
    dist = {source: 0}
    heap = [(0, source)]
    settled: set[int] = set()
    while heap:
        d, u = heapq.heappop(heap)
        if u == target:
            return d
        if u in settled:
            continue
        settled.add(u)
        for v, w in graph[u]:
            nd = d + w
            if nd < dist.get(v, math.inf):
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return None


def min_bottleneck_path(
    weights: Sequence[int],
    edges: Iterable[tuple[int, int]],
    source: int,
    target: int,
) -> int | None:
    """Least possible largest node weight on a path from source to target.

    Nodes are indexed from 0 like ``weights``; returns None when unreachable.
    """
    neighbours: list[list[int]] = [[] for _ in weights]
    for u, v in edges:
        neighbours[u].append(v)
        neighbours[v].append(u)
    if source == target:
        return weights[source]

    seen = {source}
    heap = [(weights[source], source)]
    while heap:
        best, u = heapq.heappop(heap)
        for v in neighbours[u]:
            if v in seen:
                continue
            cost = max(best, weights[v])
            if v == target:
                return cost
            seen.add(v)
            heapq.heappush(heap, (cost, v))
    return None


def min_kth_edge_path(
    n: int, edges: Sequence[tuple[int, int, int]], k: int
) -> int | None:
    """Least ``w`` such that some path from 1 to n has at most k edges heavier than ``w``.

    Returns None when node n cannot be reached from node 1.
    """
    graph = _adjacency(n, edges)

    def heavy_edges_needed(limit: int) -> float:
        dist = [math.inf] * (n + 1)
        dist[1] = 0
        queue = deque([1])
        while queue:
            u = queue.popleft()
            for v, w in graph[u]:
                cost = 1 if w > limit else 0
                nd = dist[u] + cost
                if nd < dist[v]:
                    dist[v] = nd
                    if cost:
                        queue.append(v)
                    else:
                        queue.appendleft(v)
        return dist[n]

    candidates = sorted({0, *(w for _, _, w in edges)})
    if heavy_edges_needed(candidates[-1]) > k:
        return None
    lo, hi = 0, len(candidates) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if heavy_edges_needed(candidates[mid]) <= k:
            hi = mid
        else:
            lo = mid + 1
    return candidates[lo]