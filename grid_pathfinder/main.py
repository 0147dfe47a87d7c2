# grid_pathfinder/main.py
"""Grid bootstrap and interactive command loop."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, TextIO

from .config import CONFIG, CONFIG_PATH, load_config
from .core.grid import GridModel
from .systems.edit_session import EditSession
from .utils.cli.command_parser import parse_command
from .utils.cli.commands import HELP_TEXT, execute


log_level_str = CONFIG.logging.global_level
numeric_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=numeric_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)
logger = logging.getLogger(__name__)

# Apply per-module levels if defined
if CONFIG.logging.module_levels:
    for module_name, level_str in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path = CONFIG_PATH) -> EditSession:
    """Build the grid described by ``config_path`` and run the first search."""

    cfg = load_config(Path(config_path))
    grid = cfg.grid
    model = GridModel(grid.rows, grid.cols, grid.start, grid.end)
    logger.info(
        "[Bootstrap] %dx%d grid, start %s, end %s", model.rows, model.cols, model.start, model.end
    )
    return EditSession(model)


def run(session: EditSession, stream: TextIO | None = None, out: TextIO | None = None) -> None:
    """Read commands from ``stream`` until ``/quit`` or end of input."""

    source = stream if stream is not None else sys.stdin
    state: Dict[str, Any] = {"running": True, "auto_show": True, "out": out}
    execute("show", [], session, state)
    while state["running"]:
        line = source.readline()
        if not line:
            break
        command = parse_command(line)
        if command is None:
            if line.strip():
                logger.warning("Commands start with '/'. Type /help for a list.")
            continue
        execute(command.name, command.args, session, state)


def main() -> None:
    session = bootstrap()
    print(HELP_TEXT)
    try:
        run(session)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")


if __name__ == "__main__":
    main()
