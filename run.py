"""Catacomb CLI entry point.

Provides subcommands for running the dungeon API server and for generating a
single layout straight to the terminal. Accepts configuration via flags and
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import sys
import time
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

just_fix_windows_console()

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except (AttributeError, ValueError):  # pragma: no cover - environment dependent
    _COLOR_ENABLED = False


def _load_version() -> str:
    try:
        with open("VERSION", "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Catacomb dungeon layout generator

    Place rooms, connect them with a minimum spanning tree and carve A*
    tunnels between them. Serve layouts over HTTP or print one directly.
    CLI flags take precedence over environment variables.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                             Bind address for the web server (default: 0.0.0.0)
          PORT                             Port for the web server (default: 5000)
          CATACOMB_ROOM_NUM                Default number of rooms (default: 10)
          CATACOMB_RADIUS                  Default placement radius (default: derived from rooms)
          CATACOMB_SEED                    Default seed (default: random)
          CATACOMB_MAX_PLACEMENT_ATTEMPTS  Draws allowed per room before giving up (default: 1000)
          CATACOMB_LOG_LEVEL               debug, info, warn or error (default: info)

        Examples:
          # Run the API server on the default host and port
          python run.py server

          # Print a 12 room layout as ASCII
          python run.py generate --rooms 12 --seed 42

          # Emit the full layout as JSON
          python run.py generate --rooms 25 --radius 30 --json
        """
    )

    parser = argparse.ArgumentParser(
        prog="Catacomb",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Catacomb Dungeon Generator {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the dungeon API web server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask dungeon layout API",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate one layout and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a single dungeon layout and print it as ASCII or JSON",
    )
    gen_parser.add_argument("--rooms", dest="room_num", type=int, default=None, help="Number of rooms")
    gen_parser.add_argument("--radius", type=int, default=None, help="Placement radius and grid size")
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible layout")
    gen_parser.add_argument("--json", dest="as_json", action="store_true", help="Print the layout as JSON")
    gen_parser.set_defaults(command="generate")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    args = parser.parse_args(argv)
    return args


def _banner(mode: str, host: str, port: int) -> str:
    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Catacomb Dungeon API{Style.RESET_ALL}" if _COLOR_ENABLED else "Catacomb Dungeon API"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Mode:'):12} {value(mode.upper())}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        divider,
        "",
    ]
    return "\n".join(lines)


def run_generate(args: argparse.Namespace) -> int:
    from catacomb.dungeon import DungeonConfig, DungeonError, DungeonGenerator
    from catacomb.logging_utils import log

    started = time.perf_counter()
    try:
        config = DungeonConfig.from_env(room_num=args.room_num, radius=args.radius, seed=args.seed)
        layout = DungeonGenerator(config).run()
    except DungeonError as e:
        log.error(event="generate_failed", field=e.field, code=e.code, error=e.message)
        print(f"[ERROR] {e.message}", file=sys.stderr)
        return 1
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 3)

    if args.as_json:
        print(json.dumps(layout.to_json()))
    else:
        print(layout.to_ascii())
        print(f"seed={layout.seed} rooms={len(layout.rooms)} tunnels={len(layout.tunnels)} weight={layout.total_weight}")
    log.info(event="execution_time", execution_time_ms=elapsed_ms, seed=layout.seed)
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()
    if mode == "generate":
        return run_generate(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))

    # Import server entrypoints only after environment is ready
    from catacomb.logging_utils import log
    from catacomb.server import start_server

    print(_banner(mode, host, port))
    log.info(event="startup", mode=mode, host=host, port=port)
    start_server(host=host, port=port, debug=bool(getattr(args, "debug", False)))
    return 0


def cli():  # pragma: no cover - console script shim
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
