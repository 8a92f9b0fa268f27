import math
import random
from dataclasses import dataclass, field
from typing import List, Tuple

from .config import DungeonConfig
from .coordinate import Coordinate
from .errors import PlacementExhaustion

# Presentation footprint scale factors, drawn per room after its anchor.
WIDTH_RANGE = (1.5, 2.5)
HEIGHT_RANGE = (1.0, 2.5)
OVERLAP_PAD = 2


@dataclass
class Room:
    anchor: Coordinate
    width: float = 1.0
    height: float = 1.0

    @property
    def x(self) -> int:
        return self.anchor.x

    @property
    def z(self) -> int:
        return self.anchor.z

    def to_dict(self):
        return {"x": self.x, "z": self.z, "width": self.width, "height": self.height}


@dataclass
class PlacementStats:
    draws: int = 0
    rejections: int = 0
    per_room: List[int] = field(default_factory=list)


def random_position(radius: int, rng=None) -> Tuple[int, int]:
    """Sample an integer position from a quarter disk of ``radius``.

    Half of the samples are reflected through the far corner so the placement
    is not biased towards the origin.
    """
    if rng is None:
        rng = random
    t = 2 * math.pi * rng.random()
    u = rng.random() + rng.random()
    r = 2 - u if u > 1 else u
    x = int(abs(radius * r * math.cos(t)))
    z = int(abs(radius * r * math.sin(t)))
    if rng.random() > 0.5:
        x = radius - 1 - x
        z = radius - 1 - z
    return x, z


def overlaps(x: int, z: int, anchors: List[Coordinate]) -> bool:
    for a in anchors:
        if abs(a.x - x) <= OVERLAP_PAD and abs(a.z - z) <= OVERLAP_PAD:
            return True
    return False


def in_bounds(x: int, z: int, radius: int) -> bool:
    return 0 <= x < radius and 0 <= z < radius


def place_rooms(config: DungeonConfig, rng=None):
    """Place ``config.room_num`` non-overlapping rooms.

    Returns (rooms, stats). Raises PlacementExhaustion when a single room
    needs more than ``config.max_placement_attempts`` draws.
    """
    if rng is None:
        rng = random
    radius = config.resolved_radius
    rooms: List[Room] = []
    anchors: List[Coordinate] = []
    stats = PlacementStats()
    for index in range(config.room_num):
        attempts = 0
        while True:
            if attempts >= config.max_placement_attempts:
                raise PlacementExhaustion(index, attempts, radius)
            attempts += 1
            x, z = random_position(radius, rng)
            candidate = Coordinate(x, z)
            if not in_bounds(x, z, radius) or overlaps(x, z, anchors) or candidate in anchors:
                stats.rejections += 1
                continue
            break
        stats.draws += attempts
        stats.per_room.append(attempts)
        width = rng.uniform(*WIDTH_RANGE)
        height = rng.uniform(*HEIGHT_RANGE)
        anchors.append(candidate)
        rooms.append(Room(candidate, width, height))
    return rooms, stats


__all__ = ["Room", "PlacementStats", "random_position", "overlaps", "in_bounds", "place_rooms"]
