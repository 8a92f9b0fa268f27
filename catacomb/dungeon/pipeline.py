"""Pipeline orchestration for dungeon generation.

``DungeonGenerator`` runs the stages strictly in order, each feeding the next:

1. room placement (``rooms.place_rooms``)
2. rounded distance graph (``connectivity.build_distance_graph``)
3. Prim's minimum spanning tree (``connectivity.prim_mst``)
4. one A* tunnel per tree edge, in increasing child index (``tunnels.carve_tunnel``)

Parameters are validated before any room is placed, and any failure aborts
the whole run so a returned layout is always complete and connected.
"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from catacomb.logging_utils import get_logger

from .config import DungeonConfig
from .connectivity import Graph, build_distance_graph, mst_edges, prim_mst, tree_weight
from .coordinate import Coordinate
from .errors import PlacementExhaustion
from .metrics import init_metrics
from .rooms import Room, place_rooms
from .tunnels import Tunnel, carve_tunnel

log = get_logger("catacomb.dungeon")

EMPTY = "."
TUNNEL = "#"
ROOM = "R"


@dataclass
class DungeonLayout:
    seed: Optional[int]
    config: DungeonConfig
    rooms: List[Room]
    graph: Graph
    parents: List[int]
    tunnels: List[Tunnel]
    metrics: Dict[str, Any] = field(default_factory=init_metrics)

    @property
    def radius(self) -> int:
        return self.config.resolved_radius

    @property
    def anchors(self) -> List[Coordinate]:
        return [r.anchor for r in self.rooms]

    @property
    def edges(self) -> List[Tuple[int, int]]:
        return mst_edges(self.parents)

    @property
    def total_weight(self) -> int:
        return tree_weight(self.graph, self.parents)

    def to_json(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "room_num": len(self.rooms),
            "radius": self.radius,
            "rooms": [r.to_dict() for r in self.rooms],
            "edges": [list(e) for e in self.edges],
            "total_weight": self.total_weight,
            "tunnels": [t.to_dict() for t in self.tunnels],
            "metrics": self.metrics,
        }

    def to_ascii(self) -> str:
        size = self.radius
        cells = [[EMPTY for _ in range(size)] for _ in range(size)]
        for t in self.tunnels:
            for c in t.path:
                cells[c.z][c.x] = TUNNEL
        for a in self.anchors:
            cells[a.z][a.x] = ROOM
        return "\n".join("".join(row) for row in cells)


class DungeonGenerator:
    def __init__(self, config: DungeonConfig | None = None, rng=None, *, seed: int | None = None, **overrides):
        """Dungeon layout generator.

        Preferred usage:
            DungeonGenerator(DungeonConfig(room_num=12, radius=30, seed=7)).run()

        Keyword shortcuts (``seed``, ``room_num``, ``radius`` ...) override the
        matching config fields. An injected ``rng`` (anything with ``random()``
        and ``uniform()``) replaces the seeded ``random.Random``.
        """
        config = replace(config) if config is not None else DungeonConfig()
        if seed is not None:
            overrides["seed"] = seed
        self.config = config.with_overrides(**overrides)
        self._rng = rng

    def _resolve_rng(self):
        if self._rng is not None:
            return self._rng
        # 0 is a valid deterministic seed; None means pick one
        if self.config.seed is None:
            self.config.seed = random.randint(1, 1_000_000)
        return random.Random(self.config.seed)

    def run(self) -> DungeonLayout:
        self.config.validate()
        rng = self._resolve_rng()
        radius = self.config.resolved_radius
        metrics = init_metrics()
        started = time.perf_counter()
        log.debug(event="generation_start", seed=self.config.seed, room_num=self.config.room_num, radius=radius)

        try:
            rooms, stats = place_rooms(self.config, rng)
        except PlacementExhaustion as exc:
            log.warn(
                event="placement_exhausted",
                seed=self.config.seed,
                room_index=exc.room_index,
                attempts=exc.attempts,
                radius=radius,
            )
            raise
        metrics["rooms"] = len(rooms)
        metrics["placement_draws"] = stats.draws
        metrics["placement_rejections"] = stats.rejections
        log.debug(event="rooms_placed", rooms=len(rooms), rejections=stats.rejections)

        anchors = [r.anchor for r in rooms]
        graph = build_distance_graph(anchors)
        parents = prim_mst(graph, len(anchors))
        edges = mst_edges(parents)
        metrics["edges"] = len(edges)
        metrics["total_weight"] = tree_weight(graph, parents)
        log.debug(event="mst_built", edges=len(edges), total_weight=metrics["total_weight"])

        tunnels: List[Tunnel] = []
        for parent, child in edges:
            tunnel = carve_tunnel(parent, child, anchors, radius, self.config.tunnel_samples)
            metrics["cells_expanded"] += tunnel.expanded
            metrics["path_cells"] += len(tunnel.path)
            metrics["tunnel_points"] += len(tunnel.points)
            tunnels.append(tunnel)

        metrics["runtime_ms"] = round((time.perf_counter() - started) * 1000.0, 3)
        log.info(
            event="generation_complete",
            seed=self.config.seed,
            rooms=metrics["rooms"],
            tunnels=len(tunnels),
            runtime_ms=metrics["runtime_ms"],
        )
        return DungeonLayout(self.config.seed, self.config, rooms, graph, parents, tunnels, metrics)


def generate_dungeon(room_num: int, radius: int | None = None, seed: int | None = None, rng=None, **overrides) -> DungeonLayout:
    return DungeonGenerator(DungeonConfig(room_num=room_num, radius=radius, seed=seed, **overrides), rng=rng).run()


__all__ = ["DungeonGenerator", "DungeonLayout", "generate_dungeon", "EMPTY", "TUNNEL", "ROOM"]
