"""
project: Catacomb
module: __init__.py
License: MIT

Flask application factory.

Dungeon defaults are sourced from CATACOMB_* environment variables (a local
.env is loaded first when present) and can be overridden per app instance. A
local `instance/` directory holds runtime data such as the log file.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

from catacomb.dungeon import DungeonConfig, DungeonError


def create_app(overrides: dict | None = None) -> Flask:
    """Return a configured Flask app serving the dungeon API.

    ``overrides`` is applied to ``app.config`` last; pass a ``DungeonConfig``
    under ``DUNGEON_DEFAULTS`` to pin the generation defaults in tests.
    """
    # Load .env if present so CATACOMB_* defaults can be supplied without exporting shell variables.
    load_dotenv()

    app = Flask(__name__, instance_relative_config=True)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        # Read-only deployments still serve requests; only file logging needs the folder
        pass

    app.config.update(
        DUNGEON_DEFAULTS=DungeonConfig.from_env(),
        DISABLE_LAYOUT_CACHE=os.getenv("CATACOMB_DISABLE_CACHE", "0") == "1",
    )
    if overrides:
        app.config.update(overrides)

    from catacomb.routes.dungeon_api import bp_dungeon

    app.register_blueprint(bp_dungeon)

    @app.errorhandler(DungeonError)
    def dungeon_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal server error", "error_id": error_id}), 500

    return app
