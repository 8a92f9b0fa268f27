"""Room connectivity: the rounded distance graph and Prim's minimum spanning tree."""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .coordinate import Coordinate

Graph = List[List[int]]
INFINITY = math.inf


def euclidean_distance(x1: float, z1: float, x2: float, z2: float) -> float:
    return math.sqrt((x1 - x2) * (x1 - x2) + (z1 - z2) * (z1 - z2))


def rounded_distance(a: Coordinate, b: Coordinate) -> int:
    # round() is half-to-even; exact .5 distances are rare with integer inputs
    return round(euclidean_distance(a.x, a.z, b.x, b.z))


def build_distance_graph(anchors: Sequence[Coordinate]) -> Graph:
    n = len(anchors)
    return [[rounded_distance(anchors[r], anchors[c]) for c in range(n)] for r in range(n)]


def min_key(key: Sequence[float], in_tree: Sequence[bool], vertices: int) -> int:
    """Index of the cheapest vertex not yet in the tree; the lowest index wins ties."""
    best = INFINITY
    best_index = -1
    for v in range(vertices):
        if not in_tree[v] and key[v] < best:
            best = key[v]
            best_index = v
    return best_index


def prim_mst(graph: Graph, vertices: int) -> List[int]:
    """Return the parent array of a minimum spanning tree rooted at vertex 0.

    A zero weight means "no edge" so the diagonal is skipped.
    """
    if vertices <= 0:
        return []
    parent = [-1] * vertices
    key = [INFINITY] * vertices
    in_tree = [False] * vertices
    key[0] = 0
    for _ in range(vertices - 1):
        u = min_key(key, in_tree, vertices)
        in_tree[u] = True
        row = graph[u]
        for v in range(vertices):
            weight = row[v]
            if weight != 0 and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    return parent


def mst_edges(parent: Sequence[int]) -> List[Tuple[int, int]]:
    return [(parent[i], i) for i in range(1, len(parent))]


def tree_weight(graph: Graph, parent: Sequence[int]) -> int:
    return sum(graph[p][c] for p, c in mst_edges(parent))


__all__ = [
    "Graph",
    "euclidean_distance",
    "rounded_distance",
    "build_distance_graph",
    "min_key",
    "prim_mst",
    "mst_edges",
    "tree_weight",
]
