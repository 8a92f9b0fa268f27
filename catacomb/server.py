"""
project: Catacomb
module: server.py
License: MIT

Server bootstrap helpers: logging configuration and the development server.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from flask import Flask

from catacomb import create_app


def configure_logging(app: Flask):
    """Configure logging to both console and a rotating file in instance/.

    The file path will be instance/catacomb.log. Retains a few backups to avoid growth.
    """
    log_dir = app.instance_path
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "catacomb.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Start the Flask development server with logging configured."""
    app = create_app()
    configure_logging(app)
    logging.getLogger(__name__).info("Starting dungeon API on %s:%s", host, port)
    app.run(host=host, port=port, debug=debug)
