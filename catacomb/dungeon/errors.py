"""Dungeon generation failures.

Every error carries the offending ``field``, a human readable ``message`` and
a short machine ``code`` so the HTTP layer can echo them back unchanged.
"""
from __future__ import annotations

from typing import Any, Dict


class DungeonError(Exception):
    status_code = 400

    def __init__(self, field: str, message: str, code: str):
        super().__init__(message)
        self.field = field
        self.message = message
        self.code = code

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "field": self.field, "code": self.code}


class InvalidParameter(DungeonError):
    def __init__(self, field: str, message: str):
        super().__init__(field, message, "invalid_parameter")


class PlacementExhaustion(DungeonError):
    """Raised when a room cannot be placed within the configured attempt budget."""

    status_code = 422

    def __init__(self, room_index: int, attempts: int, radius: int):
        super().__init__(
            "room_num",
            f"could not place room {room_index} after {attempts} attempts (radius={radius})",
            "placement_exhausted",
        )
        self.room_index = room_index
        self.attempts = attempts
        self.radius = radius


class UnreachableTarget(DungeonError):
    def __init__(self, start, end):
        super().__init__("end", f"no path from {start!r} to {end!r}", "unreachable")
        self.start = start
        self.end = end


__all__ = ["DungeonError", "InvalidParameter", "PlacementExhaustion", "UnreachableTarget"]
