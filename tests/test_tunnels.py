import pytest

from catacomb.dungeon import Coordinate
from catacomb.dungeon.tunnels import carve_tunnel, segment_points, tunnel_points


def test_segment_has_twenty_points_excluding_far_end():
    pts = segment_points(Coordinate(2, 2), Coordinate(3, 1))
    assert len(pts) == 20
    assert pts[0] == (2.0, 2.0)
    assert pts[1] == pytest.approx((2.05, 1.95))
    assert pts[-1] == pytest.approx((2.95, 1.05))


def test_tunnel_points_walk_back_from_end():
    path = [Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0), Coordinate(3, 0)]
    pts = tunnel_points(path)
    assert len(pts) == 60
    # emission starts at the destination and moves toward the start
    assert pts[0] == (3.0, 0.0)
    assert pts[20] == (2.0, 0.0)
    assert pts[-1] == pytest.approx((0.05, 0.0))


def test_single_cell_path_emits_nothing():
    assert tunnel_points([Coordinate(4, 4)]) == []


def test_custom_sample_count():
    assert len(segment_points(Coordinate(0, 0), Coordinate(1, 1), samples=4)) == 4


def test_carve_tunnel_between_anchors():
    anchors = [Coordinate(0, 0), Coordinate(3, 0)]
    t = carve_tunnel(0, 1, anchors, 5)
    assert (t.parent, t.child) == (0, 1)
    assert t.path[0] == anchors[0] and t.path[-1] == anchors[1]
    assert len(t.points) == 20 * (len(t.path) - 1)
    d = t.to_dict()
    assert d["from"] == 0 and d["to"] == 1
    assert d["path"][0] == [0, 0]
    assert d["cost"] == 3
