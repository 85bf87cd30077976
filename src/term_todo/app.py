"""Interactive terminal todo list.

Usage:
    term-todo              # edits ./.todo.json
    term-todo work.json    # edits ./work.json
"""

from __future__ import annotations

import argparse
import curses
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from .config import get_settings
from .errors import TodoError
from .keys import decode
from .log import close_logging, configure_logging
from .render import draw
from .state import ScreenState, handle_key
from .store import TodoStore

logger = structlog.get_logger(__name__)

PROG = "term-todo"


def run(screen, store: TodoStore, state: Optional[ScreenState] = None) -> ScreenState:
    """Redraw, read one key and dispatch it until the user quits."""
    screen.keypad(True)
    state = state or ScreenState()
    while not state.quitting:
        draw(screen, state, store.items)
        event = decode(screen.get_wch())
        state = handle_key(state, event, store)
    return state


def parse_args(
    argv: Optional[List[str]] = None,
    prog_name: Optional[str] = None,
    default_file: str = ".todo.json",
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=prog_name, description="Interactive terminal todo list."
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=default_file,
        help=f"todo file, relative to the current directory (default: {default_file})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, prog_name: Optional[str] = None) -> int:
    prog = prog_name or PROG
    try:
        settings = get_settings()
        configure_logging(settings.log_level, settings.log_file)
    except (ValidationError, OSError) as exc:
        print(f"{prog}: error: {exc}", file=sys.stderr)
        return 1

    try:
        args = parse_args(argv, prog, settings.todo_file)
        store = TodoStore.open(args.file, settings)
        logger.info("session_started", path=str(store.path), count=len(store))
        curses.wrapper(run, store)
    except TodoError as exc:
        logger.error("fatal_error", error=str(exc))
        print(f"{prog}: error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    finally:
        close_logging()
    return 0


if __name__ == "__main__":
    sys.exit(main())
