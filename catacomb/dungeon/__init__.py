"""Public dungeon package interface."""

from .config import DungeonConfig, default_radius
from .coordinate import Coordinate
from .errors import DungeonError, InvalidParameter, PlacementExhaustion, UnreachableTarget
from .pipeline import EMPTY, ROOM, TUNNEL, DungeonGenerator, DungeonLayout, generate_dungeon  # noqa: F401

__all__ = [
    "Coordinate",
    "DungeonConfig",
    "DungeonError",
    "DungeonGenerator",
    "DungeonLayout",
    "InvalidParameter",
    "PlacementExhaustion",
    "UnreachableTarget",
    "default_radius",
    "generate_dungeon",
    "EMPTY",
    "ROOM",
    "TUNNEL",
]
