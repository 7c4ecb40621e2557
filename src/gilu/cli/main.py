# src/gilu/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console conversation
until `bye` or end of input.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gilu", description="Gilu, a conversational task tracker.")
    parser.add_argument(
        "storage_path",
        nargs="?",
        default=None,
        help="Task file to use (default: GILU_STORAGE_PATH or ./data/gilu.txt).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings().with_storage_path(args.storage_path)

    console_level = getattr(logging, str(settings.log_level).upper(), logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s with %s", settings.app_name, settings.storage_path)

    state = create_initial_state(settings=settings)
    run_console_loop(state)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
