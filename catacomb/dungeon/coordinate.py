from typing import List, Optional, Tuple

Index2D = Tuple[int, int]


class Coordinate:
    """Grid cell value used for room anchors and A* search nodes.

    Identity is the (x, z) pair. The cost fields and ``parent`` are search
    state only and never take part in equality or hashing. ``parent`` is an
    (x, z) index into the grid that owns this cell, not a reference.
    """

    __slots__ = ("x", "z", "g_cost", "h_cost", "f_cost", "parent")

    def __init__(self, x: int, z: int):
        self.x = x
        self.z = z
        self.g_cost = 0
        self.h_cost = 0
        self.f_cost = 0
        self.parent: Optional[Index2D] = None

    @property
    def index(self) -> Index2D:
        return (self.x, self.z)

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.x == other.x and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.z))

    def __repr__(self):
        return f"Coordinate({self.x}, {self.z})"

    def to_list(self) -> List[int]:
        return [self.x, self.z]


def chebyshev(a: Coordinate, b: Coordinate) -> int:
    return max(abs(a.x - b.x), abs(a.z - b.z))


__all__ = ["Coordinate", "Index2D", "chebyshev"]
