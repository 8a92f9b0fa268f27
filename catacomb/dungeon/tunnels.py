from typing import List, NamedTuple, Sequence, Tuple

from .coordinate import Coordinate
from .pathfinding import find_path

Point = Tuple[float, float]


class Tunnel(NamedTuple):
    parent: int
    child: int
    path: List[Coordinate]
    points: List[Point]
    cost: int
    expanded: int

    def to_dict(self):
        return {
            "from": self.parent,
            "to": self.child,
            "cost": self.cost,
            "path": [c.to_list() for c in self.path],
            "points": [list(p) for p in self.points],
        }


def segment_points(previous: Coordinate, current: Coordinate, samples: int = 20) -> List[Point]:
    """Interpolated placement points from ``previous`` towards ``current``.

    ``samples`` points at t = 0, 1/samples, ... excluding t = 1 itself.
    """
    dx = current.x - previous.x
    dz = current.z - previous.z
    points = []
    for k in range(samples):
        t = k / samples
        points.append((previous.x + t * dx, previous.z + t * dz))
    return points


def tunnel_points(path: Sequence[Coordinate], samples: int = 20) -> List[Point]:
    """Walk the path from its end back to its start emitting each step's points."""
    points: List[Point] = []
    for i in range(len(path) - 1, 0, -1):
        points.extend(segment_points(path[i], path[i - 1], samples))
    return points


def carve_tunnel(parent: int, child: int, anchors: Sequence[Coordinate], radius: int, samples: int = 20) -> Tunnel:
    result = find_path(anchors[parent], anchors[child], radius)
    return Tunnel(parent, child, result.path, tunnel_points(result.path, samples), result.cost, result.expanded)


__all__ = ["Point", "Tunnel", "segment_points", "tunnel_points", "carve_tunnel"]
