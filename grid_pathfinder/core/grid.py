"""Grid state: dimensions, obstacle cells and the start/end markers."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set, Tuple


logger = logging.getLogger(__name__)

Coord = Tuple[int, int]  # (row, col)

# Neighbour offsets in the order up, down, left, right. Search tie-breaks
# depend on this order.
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class GridModel:
    """Mutable grid of ``rows`` x ``cols`` cells with blocked cells.

    ``start`` and ``end`` are never equal and never blocked. Edits that
    would break that are ignored and reported by returning ``False``.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        start: Coord,
        end: Coord,
        obstacles: Iterable[Coord] = (),
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        self.rows = int(rows)
        self.cols = int(cols)

        start = (int(start[0]), int(start[1]))
        end = (int(end[0]), int(end[1]))
        for name, cell in (("start", start), ("end", end)):
            if not self.in_bounds(cell):
                raise ValueError(f"{name} {cell} outside {self.rows}x{self.cols} grid")
        if start == end:
            raise ValueError(f"start and end must differ, both are {start}")

        self.start: Coord = start
        self.end: Coord = end
        self.obstacles: Set[Coord] = set()
        self.add_obstacles(obstacles)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, cell: Coord) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_obstacle(self, cell: Coord) -> bool:
        return tuple(cell) in self.obstacles

    def is_start(self, cell: Coord) -> bool:
        return tuple(cell) == self.start

    def is_end(self, cell: Coord) -> bool:
        return tuple(cell) == self.end

    def neighbors(self, cell: Coord) -> List[Coord]:
        """Return in-bounds, unblocked cells next to ``cell`` (up, down, left, right)."""

        row, col = cell
        result: List[Coord] = []
        for dr, dc in DIRECTIONS:
            nb = (row + dr, col + dc)
            if self.in_bounds(nb) and nb not in self.obstacles:
                result.append(nb)
        return result

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------
    def toggle_obstacle(self, cell: Coord) -> bool:
        """Flip ``cell`` between blocked and free. Endpoints are left alone."""

        cell = (int(cell[0]), int(cell[1]))
        if cell == self.start or cell == self.end:
            logger.debug("Ignoring obstacle toggle on endpoint %s", cell)
            return False
        if cell in self.obstacles:
            self.obstacles.discard(cell)
        else:
            self.obstacles.add(cell)
        return True

    def add_obstacles(self, cells: Iterable[Coord]) -> int:
        """Block every cell in ``cells`` that is not an endpoint. Returns count added."""

        added = 0
        for cell in cells:
            cell = (int(cell[0]), int(cell[1]))
            if cell in self.obstacles or cell == self.start or cell == self.end:
                continue
            self.obstacles.add(cell)
            added += 1
        return added

    def clear_obstacles(self) -> int:
        removed = len(self.obstacles)
        self.obstacles.clear()
        return removed

    def set_start(self, cell: Coord) -> bool:
        cell = (int(cell[0]), int(cell[1]))
        if cell == self.end:
            logger.debug("Ignoring start move onto end %s", cell)
            return False
        # A marker dropped on a wall clears that wall.
        self.obstacles.discard(cell)
        self.start = cell
        return True

    def set_end(self, cell: Coord) -> bool:
        cell = (int(cell[0]), int(cell[1]))
        if cell == self.start:
            logger.debug("Ignoring end move onto start %s", cell)
            return False
        self.obstacles.discard(cell)
        self.end = cell
        return True

    def snapshot(self) -> "GridModel":
        """Return an independent copy of this grid."""

        return GridModel(self.rows, self.cols, self.start, self.end, self.obstacles)

    def __repr__(self) -> str:
        # Attributes may be missing if __init__ raised part way.
        obstacles = getattr(self, "obstacles", None)
        return (
            f"GridModel(rows={getattr(self, 'rows', None)}, cols={getattr(self, 'cols', None)}, "
            f"start={getattr(self, 'start', None)}, end={getattr(self, 'end', None)}, "
            f"obstacles={len(obstacles) if obstacles is not None else None})"
        )


def new(
    rows: int,
    cols: int,
    start: Optional[Coord] = None,
    end: Optional[Coord] = None,
) -> GridModel:
    """Create a :class:`GridModel`, falling back to configured endpoints.

    Default endpoints are clamped into the grid so small grids still work.
    If a default lands on the other endpoint, a free corner is used instead.
    """

    if start is None or end is None:
        from ..config import CONFIG

        default_start = _clamp(CONFIG.grid.start, rows, cols)
        default_end = _clamp(CONFIG.grid.end, rows, cols)
        if start is None and end is None:
            if default_start == default_end:
                default_start, default_end = (0, 0), (rows - 1, cols - 1)
            start, end = default_start, default_end
        elif start is None:
            start = _other_than(default_start, end, rows, cols)
        else:
            end = _other_than(default_end, start, rows, cols)
    return GridModel(rows, cols, start, end)


def _other_than(default: Coord, taken: Coord, rows: int, cols: int) -> Coord:
    taken = (int(taken[0]), int(taken[1]))
    if default != taken:
        return default
    for corner in ((0, 0), (rows - 1, cols - 1), (0, cols - 1), (rows - 1, 0)):
        if corner != taken:
            return corner
    return default


def _clamp(cell: Coord, rows: int, cols: int) -> Coord:
    return (min(max(cell[0], 0), max(rows - 1, 0)), min(max(cell[1], 0), max(cols - 1, 0)))


__all__ = ["Coord", "DIRECTIONS", "GridModel", "new"]
