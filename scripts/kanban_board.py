#!/usr/bin/env python3
"""
Kanban Board

Keyboard-driven task board with To Do / In progress / Done columns.

Usage:
    kanban_board.py                          Launch the board
    kanban_board.py --log-file kanban.log    Also write a debug log

Keys:
    left/h, right/l   switch column
    up/k, down/j      select task
    enter             advance the selected task
    n                 new task (enter moves title -> description -> save)
    q, ctrl+c         quit

Requirements:
    pip install textual loguru
"""

import argparse
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from loguru import logger  # noqa: E402

from kanban.config import LOG_LEVELS, ConfigError, load_config  # noqa: E402
from kanban.logging import setup_logger  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Kanban Board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Minimum log level (default: $KANBAN_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to this file (default: $KANBAN_LOG_FILE; no logging if unset)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(log_level=args.log_level, log_file=args.log_file)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logger(level=config.log_level, log_file=config.log_file)

    try:
        from kanban.app import run

        return run(config)
    except Exception as e:
        logger.exception("Event loop failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
