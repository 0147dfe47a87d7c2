"""Shortest paths on an editable grid with A*."""

from .core.grid import Coord, GridModel, new
from .systems.edit_session import EditSession
from .systems.pathfinding import SearchResult, a_star, heuristic, search

__all__ = [
    "Coord",
    "EditSession",
    "GridModel",
    "SearchResult",
    "a_star",
    "heuristic",
    "new",
    "search",
]
