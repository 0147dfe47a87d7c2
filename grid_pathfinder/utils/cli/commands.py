"""Implementations of development CLI commands."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from ...core.grid import Coord
from ...systems.edit_session import EditSession
from ..observer import print_stats
from .terminal_view import get_view

logger = logging.getLogger(__name__)


HELP_TEXT = """Commands:
  /wall ROW COL    toggle an obstacle
  /start ROW COL   move the start marker
  /end ROW COL     move the end marker
  /clear           remove all obstacles
  /show            print the grid
  /stats           print search timings
  /quit            exit"""


def _parse_cell(args: Sequence[str], session: EditSession) -> Coord | None:
    if len(args) != 2:
        logger.warning("Expected ROW COL, got %s", list(args))
        return None
    try:
        cell = (int(args[0]), int(args[1]))
    except ValueError:
        logger.warning("Invalid coordinates: %s", list(args))
        return None
    if not session.model.in_bounds(cell):
        logger.warning("Cell %s is outside the %dx%d grid", cell, session.model.rows, session.model.cols)
        return None
    return cell


def wall(args: Sequence[str], session: EditSession) -> None:
    cell = _parse_cell(args, session)
    if cell is None:
        return
    if not session.toggle_obstacle(cell):
        logger.info("Cannot place an obstacle on start or end %s", cell)


def start(args: Sequence[str], session: EditSession) -> None:
    cell = _parse_cell(args, session)
    if cell is not None and not session.set_start(cell):
        logger.info("Start not moved to %s", cell)


def end(args: Sequence[str], session: EditSession) -> None:
    cell = _parse_cell(args, session)
    if cell is not None and not session.set_end(cell):
        logger.info("End not moved to %s", cell)


def show(session: EditSession, state: Dict[str, Any]) -> None:
    get_view().render(session.model, session.result, stream=state.get("out"))


def execute(command: str, args: List[str], session: EditSession, state: Dict[str, Any]) -> None:
    """Dispatch ``command`` with ``args`` against ``session``."""

    if command == "wall":
        wall(args, session)
    elif command == "start":
        start(args, session)
    elif command == "end":
        end(args, session)
    elif command == "clear":
        session.clear_obstacles()
    elif command == "show":
        show(session, state)
    elif command == "stats":
        print_stats()
    elif command == "help":
        print(HELP_TEXT)
    elif command in ("quit", "exit"):
        state["running"] = False
    else:
        logger.warning("Unknown command: /%s (try /help)", command)
        return

    if state.get("auto_show") and command in ("wall", "start", "end", "clear"):
        show(session, state)


__all__ = ["HELP_TEXT", "execute", "wall", "start", "end", "show"]
