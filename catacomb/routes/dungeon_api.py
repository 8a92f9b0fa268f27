"""
project: Catacomb
module: dungeon_api.py
License: MIT

Dungeon layout API routes.

Exposes generated layouts (room anchors, spanning tree edges and tunnel
placement points) as JSON for a rendering client, plus an ASCII preview.
"""

import hashlib
import os
import random
import threading

from flask import Blueprint, Response, current_app, jsonify, request

from catacomb.dungeon import DungeonConfig, DungeonGenerator
from catacomb.logging_utils import get_logger
from catacomb.routes.validation import GENERATE_REQUEST, validate

bp_dungeon = Blueprint("dungeon_api", __name__)
log = get_logger("catacomb.api")

SEED_MAX = 9223372036854775807

# Simple in-process cache (room_num, radius, seed)->DungeonLayout. Layouts are read-only once built.
_layout_cache = {}
_layout_cache_lock = threading.Lock()
_LAYOUT_CACHE_MAX = 8  # small LRU-ish manual cap


def _coerce_seed(payload_seed):
    """Convert provided seed (int or str) into bounded 64-bit signed int."""
    if payload_seed is None:
        return random.randint(1, 1_000_000)
    if isinstance(payload_seed, int):
        return payload_seed % SEED_MAX
    s = str(payload_seed).strip()
    if not s:
        return random.randint(1, 1_000_000)
    if s.isdigit():
        return int(s) % SEED_MAX
    h = hashlib.sha256(s.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big") % SEED_MAX


def _base_config() -> DungeonConfig:
    return current_app.config["DUNGEON_DEFAULTS"]


def get_cached_layout(room_num: int, radius: int | None, seed: int):
    config = _base_config().with_overrides(room_num=room_num, radius=radius, seed=seed)
    if os.environ.get("CATACOMB_DISABLE_CACHE") == "1" or current_app.config.get("DISABLE_LAYOUT_CACHE"):
        return DungeonGenerator(config).run()
    key = (config.room_num, config.resolved_radius, seed)
    with _layout_cache_lock:
        layout = _layout_cache.get(key)
        if layout is not None:
            return layout
    layout = DungeonGenerator(config).run()
    with _layout_cache_lock:
        _layout_cache[key] = layout
        if len(_layout_cache) > _LAYOUT_CACHE_MAX:
            # drop oldest insertion
            _layout_cache.pop(next(iter(_layout_cache)))
    return layout


def clear_layout_cache():
    with _layout_cache_lock:
        _layout_cache.clear()


def _layout_from_payload(payload):
    ok, data = validate(payload, GENERATE_REQUEST)
    if not ok:
        return None, data
    seed = _coerce_seed(data.get("seed"))
    layout = get_cached_layout(data.get("room_num"), data.get("radius"), seed)
    return layout, None


@bp_dungeon.route("/api/dungeon/generate", methods=["POST"])
def generate():
    """Generate (or fetch a cached) layout.

    Body JSON (all optional):
      { "room_num": <int>, "radius": <int>, "seed": <int|str|null> }
    Missing fields fall back to the app defaults; a missing seed picks a
    random one which is echoed back in the response.
    """
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    layout, error = _layout_from_payload(payload)
    if error is not None:
        return jsonify(error), 400
    log.info(event="layout_served", seed=layout.seed, rooms=len(layout.rooms), radius=layout.radius)
    return jsonify(layout.to_json())


@bp_dungeon.route("/api/dungeon/map", methods=["GET"])
def ascii_map():
    payload = {}
    for key in ("room_num", "radius"):
        raw = request.args.get(key)
        if raw is None or raw == "":
            continue
        try:
            payload[key] = int(raw)
        except ValueError:
            return jsonify({"field": key, "error": "expected int", "code": "type"}), 400
    if request.args.get("seed"):
        payload["seed"] = request.args["seed"]
    layout, error = _layout_from_payload(payload)
    if error is not None:
        return jsonify(error), 400
    return Response(layout.to_ascii() + "\n", mimetype="text/plain", headers={"X-Dungeon-Seed": str(layout.seed)})


@bp_dungeon.route("/api/dungeon/defaults", methods=["GET"])
def defaults():
    cfg = _base_config()
    return jsonify(
        {
            "room_num": cfg.room_num,
            "radius": cfg.resolved_radius,
            "max_placement_attempts": cfg.max_placement_attempts,
            "tunnel_samples": cfg.tunnel_samples,
        }
    )
