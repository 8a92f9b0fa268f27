import random

import pytest

from catacomb.dungeon import DungeonConfig
from catacomb.dungeon.connectivity import build_distance_graph, min_key, mst_edges, prim_mst, tree_weight
from catacomb.dungeon.rooms import place_rooms
from tests.dungeon_test_utils import brute_force_min_tree_weight, is_spanning_tree, reaches_root


def test_known_graph():
    graph = [
        [0, 2, 0, 6, 0],
        [2, 0, 3, 8, 5],
        [0, 3, 0, 0, 7],
        [6, 8, 0, 0, 9],
        [0, 5, 7, 9, 0],
    ]
    parent = prim_mst(graph, 5)
    assert parent == [-1, 0, 1, 0, 1]
    assert tree_weight(graph, parent) == 16
    assert mst_edges(parent) == [(0, 1), (1, 2), (0, 3), (1, 4)]


def test_zero_weight_is_no_edge():
    # 0-2 has weight 0 and must not be used; 2 attaches through 1
    graph = [
        [0, 4, 0],
        [4, 0, 5],
        [0, 5, 0],
    ]
    assert prim_mst(graph, 3) == [-1, 0, 1]


def test_ties_pick_lowest_index():
    graph = [
        [0, 3, 3],
        [3, 0, 3],
        [3, 3, 0],
    ]
    assert prim_mst(graph, 3) == [-1, 0, 0]
    assert min_key([5, 1, 1], [False, False, False], 3) == 1
    assert min_key([0, 1, 1], [True, True, True], 3) == -1


def test_single_and_empty():
    assert prim_mst([[0]], 1) == [-1]
    assert mst_edges([-1]) == []
    assert prim_mst([], 0) == []


@pytest.mark.parametrize("seed", range(10))
def test_parent_array_is_spanning_tree(seed):
    rooms, _ = place_rooms(DungeonConfig(room_num=10, radius=25), random.Random(seed))
    graph = build_distance_graph([r.anchor for r in rooms])
    parent = prim_mst(graph, 10)
    assert parent[0] == -1
    edges = mst_edges(parent)
    assert len(edges) == 9
    assert is_spanning_tree(edges, 10)
    assert all(reaches_root(parent, v) for v in range(10))


@pytest.mark.parametrize("seed,rooms_n", [(s, n) for s in range(8) for n in (4, 5)])
def test_weight_matches_brute_force(seed, rooms_n):
    rooms, _ = place_rooms(DungeonConfig(room_num=rooms_n, radius=20), random.Random(seed))
    graph = build_distance_graph([r.anchor for r in rooms])
    parent = prim_mst(graph, rooms_n)
    assert tree_weight(graph, parent) == brute_force_min_tree_weight(graph)
