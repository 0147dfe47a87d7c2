"""Simple configuration loader for grid_pathfinder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Configuration values for the grid section."""

    rows: int = 20
    cols: int = 20
    start: tuple[int, int] = (5, 5)
    end: tuple[int, int] = (15, 15)


@dataclass
class LoggingConfig:
    """Log levels applied at startup."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    logging: LoggingConfig


def _cell(value: Any, name: str) -> tuple[int, int]:
    try:
        row, col = value
        return int(row), int(col)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"grid.{name} must be a [row, col] pair, got {value!r}") from exc


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    if not isinstance(data, dict):
        raise ValueError("configuration root must be a mapping")

    grid_data = data.get("grid") or {}
    grid = GridConfig(
        rows=int(grid_data.get("rows", 20)),
        cols=int(grid_data.get("cols", 20)),
        start=_cell(grid_data.get("start", [5, 5]), "start"),
        end=_cell(grid_data.get("end", [15, 15]), "end"),
    )
    if grid.rows <= 0 or grid.cols <= 0:
        raise ValueError(f"grid dimensions must be positive, got {grid.rows}x{grid.cols}")

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    return Config(grid=grid, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "LoggingConfig",
    "load_config",
]
