import os
from dataclasses import dataclass, replace
from typing import Optional

from .errors import InvalidParameter

# Environment overrides read by DungeonConfig.from_env
ENV_FIELDS = {
    "CATACOMB_ROOM_NUM": "room_num",
    "CATACOMB_RADIUS": "radius",
    "CATACOMB_SEED": "seed",
    "CATACOMB_MAX_PLACEMENT_ATTEMPTS": "max_placement_attempts",
    "CATACOMB_TUNNEL_SAMPLES": "tunnel_samples",
}


def default_radius(room_num: int, min_radius: int = 20) -> int:
    """Radius used when none is given: grows with the room count past ``min_radius``."""
    if room_num >= min_radius:
        return room_num
    return min_radius


@dataclass
class DungeonConfig:
    room_num: int = 10
    radius: Optional[int] = None
    seed: Optional[int] = None
    max_placement_attempts: int = 1000
    tunnel_samples: int = 20
    min_radius: int = 20

    @property
    def resolved_radius(self) -> int:
        if self.radius is None:
            return default_radius(self.room_num, self.min_radius)
        return self.radius

    def validate(self) -> None:
        if not isinstance(self.room_num, int) or self.room_num <= 0:
            raise InvalidParameter("room_num", f"room_num must be a positive integer, got {self.room_num!r}")
        if self.radius is not None and (not isinstance(self.radius, int) or self.radius <= 0):
            raise InvalidParameter("radius", f"radius must be a positive integer, got {self.radius!r}")
        if self.max_placement_attempts <= 0:
            raise InvalidParameter("max_placement_attempts", "max_placement_attempts must be positive")
        if self.tunnel_samples <= 0:
            raise InvalidParameter("tunnel_samples", "tunnel_samples must be positive")

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "DungeonConfig":
        """Build a config from CATACOMB_* environment variables.

        Explicit keyword overrides win over the environment; ``None`` overrides
        are ignored so callers can pass optional CLI flags straight through.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for env_key, attr in ENV_FIELDS.items():
            raw = environ.get(env_key)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[attr] = int(raw)
            except ValueError:
                raise InvalidParameter(attr, f"{env_key} must be an integer, got {raw!r}") from None
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def with_overrides(self, **overrides) -> "DungeonConfig":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


__all__ = ["DungeonConfig", "default_radius", "ENV_FIELDS"]
