"""A* search over an unobstructed square grid.

Movement is 8-directional with unit cost per step. Every run allocates a fresh
``PathGrid`` whose cells carry precomputed costs:

* ``g_cost``: rounded Euclidean distance from the start
* ``h_cost``: rounded Euclidean distance to the end
* ``f_cost``: ``g_cost + h_cost``

Cells discovered for the first time get ``g_cost = current.g_cost + 1``.
Cells already in OPEN or CLOSED are only relaxed in place when the new cost
is strictly lower. A CLOSED cell that gets relaxed is not re-opened, so this
is not textbook A*: costs reported for such cells may be lower than the cost
the path was actually expanded with. The rounded heuristic is not strictly
admissible either; on an open grid the paths found are shortest in practice
but that is not guaranteed.
"""
from __future__ import annotations

from operator import attrgetter
from typing import List, NamedTuple, Optional, Set

from .connectivity import euclidean_distance
from .coordinate import Coordinate, Index2D
from .errors import InvalidParameter, UnreachableTarget

_by_f_cost = attrgetter("f_cost")


class PathResult(NamedTuple):
    path: List[Coordinate]
    cost: int
    expanded: int


class PathGrid:
    """``radius x radius`` arena of cells addressed by (x, z)."""

    def __init__(self, radius: int, start: Coordinate, end: Coordinate):
        self.radius = radius
        self.cells: List[List[Coordinate]] = [[Coordinate(x, z) for z in range(radius)] for x in range(radius)]
        for column in self.cells:
            for cell in column:
                cell.g_cost = round(euclidean_distance(start.x, start.z, cell.x, cell.z))
                cell.h_cost = round(euclidean_distance(cell.x, cell.z, end.x, end.z))
                cell.f_cost = cell.g_cost + cell.h_cost

    def contains(self, x: int, z: int) -> bool:
        return 0 <= x < self.radius and 0 <= z < self.radius

    def at(self, index: Index2D) -> Coordinate:
        x, z = index
        return self.cells[x][z]

    def neighbours(self, current: Coordinate) -> List[Coordinate]:
        found = []
        for dx in (-1, 0, 1):
            for dz in (-1, 0, 1):
                if dx == 0 and dz == 0:
                    continue
                nx, nz = current.x + dx, current.z + dz
                if self.contains(nx, nz):
                    found.append(self.cells[nx][nz])
        return found


def _check_in_bounds(name: str, c: Coordinate, radius: int):
    if not (0 <= c.x < radius and 0 <= c.z < radius):
        raise InvalidParameter(name, f"{name} {c!r} lies outside the {radius}x{radius} grid")


def find_path(start: Coordinate, end: Coordinate, radius: int) -> PathResult:
    """Shortest 8-directional path from ``start`` to ``end`` (both inclusive)."""
    if radius <= 0:
        raise InvalidParameter("radius", f"radius must be positive, got {radius!r}")
    _check_in_bounds("start", start, radius)
    _check_in_bounds("end", end, radius)

    grid = PathGrid(radius, start, end)
    # The search starts from a detached copy of the start, not from its grid cell.
    origin = Coordinate(start.x, start.z)
    open_set: List[Coordinate] = [origin]
    closed_set: List[Coordinate] = []
    open_index: Set[Index2D] = {origin.index}
    closed_index: Set[Index2D] = set()
    found: Optional[Coordinate] = None

    while open_set:
        open_set.sort(key=_by_f_cost)
        current = open_set.pop(0)
        open_index.discard(current.index)
        closed_set.append(current)
        closed_index.add(current.index)

        if current == end:
            open_set.clear()
            open_index.clear()
            found = current
            break

        for neighbour in grid.neighbours(current):
            key = neighbour.index
            if key not in open_index and key not in closed_index:
                neighbour.g_cost = current.g_cost + 1
                neighbour.f_cost = neighbour.g_cost + neighbour.h_cost
                neighbour.parent = current.index
                open_set.append(neighbour)
                open_index.add(key)
            else:
                tentative = current.g_cost + 1
                if tentative < neighbour.g_cost:
                    neighbour.g_cost = tentative
                    neighbour.f_cost = neighbour.g_cost + neighbour.h_cost
                    neighbour.parent = current.index

    if found is None:
        raise UnreachableTarget(start, end)

    path = [found]
    cursor = found
    while cursor.index != origin.index:
        cursor = origin if cursor.parent == origin.index else grid.at(cursor.parent)
        path.append(cursor)
    path.reverse()
    return PathResult(path, found.g_cost, len(closed_set))


__all__ = ["PathGrid", "PathResult", "find_path"]
