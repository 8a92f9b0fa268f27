import random

import pytest

from catacomb.dungeon import Coordinate, DungeonConfig, PlacementExhaustion
from catacomb.dungeon.rooms import HEIGHT_RANGE, WIDTH_RANGE, overlaps, place_rooms, random_position
from tests.dungeon_test_utils import ReplayRng, chebyshev_xy


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 7, 42, 99, 12345])
def test_rooms_are_separated_and_in_bounds(seed):
    cfg = DungeonConfig(room_num=12, radius=25)
    rooms, stats = place_rooms(cfg, random.Random(seed))
    assert len(rooms) == 12
    anchors = [r.anchor for r in rooms]
    assert len(set(anchors)) == 12
    for a in anchors:
        assert 0 <= a.x < 25 and 0 <= a.z < 25
    for i in range(len(anchors)):
        for j in range(i + 1, len(anchors)):
            assert chebyshev_xy(anchors[i], anchors[j]) > 2, f"rooms {i} and {j} overlap (seed={seed})"
    assert stats.draws == sum(stats.per_room)
    assert stats.draws - stats.rejections == 12


def test_footprints_within_presentation_ranges():
    rooms, _ = place_rooms(DungeonConfig(room_num=8, radius=20), random.Random(5))
    for r in rooms:
        assert WIDTH_RANGE[0] <= r.width <= WIDTH_RANGE[1]
        assert HEIGHT_RANGE[0] <= r.height <= HEIGHT_RANGE[1]


def test_overlap_window_is_two_cells():
    anchors = [Coordinate(10, 10)]
    assert overlaps(12, 12, anchors)
    assert overlaps(8, 11, anchors)
    assert overlaps(10, 10, anchors)
    assert not overlaps(13, 10, anchors)
    assert not overlaps(10, 7, anchors)


def test_random_position_reflection():
    # t=0 (cos 1, sin 0), u=0.25+0.25 -> r=0.5; third draw 0.9 reflects
    x, z = random_position(10, ReplayRng([0.0, 0.25, 0.25, 0.9]))
    assert (x, z) == (10 - 1 - 5, 10 - 1 - 0)
    x, z = random_position(10, ReplayRng([0.0, 0.25, 0.25, 0.1]))
    assert (x, z) == (5, 0)


def test_random_position_folds_radius_fraction():
    # u = 0.75 + 0.75 = 1.5 > 1 -> r = 0.5
    x, z = random_position(20, ReplayRng([0.0, 0.75, 0.75, 0.0]))
    assert (x, z) == (10, 0)


def test_out_of_bounds_sample_is_rejected():
    # first draw lands exactly on the rim (r=1, t=0 -> x=radius), second is valid
    draws = [0.0, 0.5, 0.5, 0.0] + [0.0, 0.25, 0.25, 0.0] + [0.5, 0.5]
    rooms, stats = place_rooms(DungeonConfig(room_num=1, radius=10), ReplayRng(draws))
    assert rooms[0].anchor == Coordinate(5, 0)
    assert stats.rejections == 1


def test_dense_configuration_signals_exhaustion():
    cfg = DungeonConfig(room_num=10, radius=5, max_placement_attempts=50)
    with pytest.raises(PlacementExhaustion) as exc:
        place_rooms(cfg, random.Random(3))
    assert exc.value.attempts == 50
    assert exc.value.code == "placement_exhausted"
    assert exc.value.room_index < 10
