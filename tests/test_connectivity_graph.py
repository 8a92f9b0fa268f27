import random

from catacomb.dungeon import Coordinate, DungeonConfig
from catacomb.dungeon.connectivity import build_distance_graph, euclidean_distance, rounded_distance
from catacomb.dungeon.rooms import place_rooms


def test_rounded_distances():
    assert euclidean_distance(0, 0, 3, 4) == 5.0
    assert rounded_distance(Coordinate(0, 0), Coordinate(3, 4)) == 5
    assert rounded_distance(Coordinate(0, 0), Coordinate(1, 1)) == 1
    assert rounded_distance(Coordinate(0, 0), Coordinate(1, 2)) == 2
    assert rounded_distance(Coordinate(0, 0), Coordinate(2, 2)) == 3


def test_graph_is_symmetric_with_zero_diagonal():
    rooms, _ = place_rooms(DungeonConfig(room_num=9, radius=24), random.Random(11))
    anchors = [r.anchor for r in rooms]
    graph = build_distance_graph(anchors)
    assert len(graph) == 9 and all(len(row) == 9 for row in graph)
    for i in range(9):
        assert graph[i][i] == 0
        for j in range(9):
            assert graph[i][j] == graph[j][i]
            assert isinstance(graph[i][j], int)
            if i != j:
                # separated rooms are never closer than 3 cells
                assert graph[i][j] >= 3


def test_graph_of_known_anchors():
    anchors = [Coordinate(0, 0), Coordinate(6, 0), Coordinate(0, 8)]
    assert build_distance_graph(anchors) == [
        [0, 6, 8],
        [6, 0, 10],
        [8, 10, 0],
    ]


def test_empty_and_single_graphs():
    assert build_distance_graph([]) == []
    assert build_distance_graph([Coordinate(4, 4)]) == [[0]]
