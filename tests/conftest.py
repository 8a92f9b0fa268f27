import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from catacomb import create_app  # noqa: E402
from catacomb.dungeon import DungeonConfig  # noqa: E402
from catacomb.routes.dungeon_api import clear_layout_cache  # noqa: E402


@pytest.fixture()
def test_app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "DUNGEON_DEFAULTS": DungeonConfig(room_num=6, radius=20),
        }
    )
    app.instance_path = str(tmp_path)
    clear_layout_cache()
    yield app
    clear_layout_cache()


@pytest.fixture()
def client(test_app):
    return test_app.test_client()
