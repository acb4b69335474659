"""Classic algorithm solutions: disjoint sets, graphs, paths, strings, geometry, dynamic programming, sorting, searching, puzzles and big integers."""

__version__ = "0.1.0"

__all__ = [
    "bigint",
    "disjoint_set",
    "dp",
    "geometry",
    "graphs",
    "knapsack",
    "paths",
    "point_sets",
    "puzzles",
    "searching",
    "sorting",
    "strings",
]