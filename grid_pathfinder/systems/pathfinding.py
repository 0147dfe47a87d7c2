"""A* shortest path search over a 4-connected grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Callable, Dict, FrozenSet, List, Optional, Set, Tuple

from ..core.grid import Coord, GridModel


logger = logging.getLogger(__name__)

NeighborFn = Callable[[Coord], List[Coord]]


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search run.

    ``path`` runs from start to end inclusive and is empty when no path
    exists. ``visited`` holds every expanded cell and ``expanded`` lists
    the same cells in expansion order.
    """

    path: List[Coord]
    visited: FrozenSet[Coord]
    found: bool
    expanded: List[Coord] = field(default_factory=list)

    @property
    def cost(self) -> Optional[int]:
        """Number of steps along ``path`` or ``None`` if nothing was found."""

        return len(self.path) - 1 if self.found else None


def heuristic(a: Coord, b: Coord) -> int:
    """Return the Manhattan distance between ``a`` and ``b``.

    Every move costs 1 and only cardinal moves exist, so this never
    overestimates and stays consistent across edges.
    """

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _reconstruct(came_from: Dict[Coord, Coord], current: Coord) -> List[Coord]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def a_star(start: Coord, goal: Coord, neighbors: NeighborFn) -> SearchResult:
    """Return the shortest path from ``start`` to ``goal`` using A*.

    Among open cells with equal f-score the one that entered the open set
    first is expanded first. The heap entries carry that insertion
    sequence; stale entries left behind by a score improvement are skipped
    on pop.
    """

    came_from: Dict[Coord, Coord] = {}
    g_score: Dict[Coord, int] = {start: 0}
    f_score: Dict[Coord, int] = {start: heuristic(start, goal)}

    # cell -> insertion sequence while the cell is in the open set
    open_seq: Dict[Coord, int] = {start: 0}
    open_heap: List[Tuple[int, int, Coord]] = [(f_score[start], 0, start)]
    counter = 1

    closed: Set[Coord] = set()
    expanded: List[Coord] = []

    while open_heap:
        f, seq, current = heappop(open_heap)
        if open_seq.get(current) != seq or f != f_score[current]:
            continue

        if current == goal:
            return SearchResult(
                path=_reconstruct(came_from, current),
                visited=frozenset(closed),
                found=True,
                expanded=expanded,
            )

        del open_seq[current]
        closed.add(current)
        expanded.append(current)

        tentative_g = g_score[current] + 1
        for nb in neighbors(current):
            if nb in g_score and tentative_g >= g_score[nb]:
                continue
            came_from[nb] = current
            g_score[nb] = tentative_g
            f_score[nb] = tentative_g + heuristic(nb, goal)
            if nb not in open_seq:
                open_seq[nb] = counter
                counter += 1
            heappush(open_heap, (f_score[nb], open_seq[nb], nb))

    return SearchResult(path=[], visited=frozenset(closed), found=False, expanded=expanded)


def search(model: GridModel) -> SearchResult:
    """Run a full, independent search on the current state of ``model``."""

    result = a_star(model.start, model.end, model.neighbors)
    logger.debug(
        "Search %s -> %s: found=%s cost=%s visited=%d",
        model.start,
        model.end,
        result.found,
        result.cost,
        len(result.visited),
    )
    return result


__all__ = ["NeighborFn", "SearchResult", "a_star", "heuristic", "search"]
