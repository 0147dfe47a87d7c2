"""ASCII terminal renderer for a grid and its latest search result."""

from __future__ import annotations

import sys
from typing import Dict, List, Optional, TextIO

from ...core.grid import GridModel
from ...systems.pathfinding import SearchResult


GLYPHS: Dict[str, str] = {
    "start": "S",
    "end": "E",
    "wall": "#",
    "path": "*",
    "visited": "+",
    "free": ".",
}

# Basic ANSI colour codes used when colour output is enabled
_COLOURS = {
    "start": "\x1b[32m",
    "end": "\x1b[31m",
    "wall": "\x1b[37m",
    "path": "\x1b[33m",
    "visited": "\x1b[36m",
    "free": "",
    "reset": "\x1b[0m",
}


class TerminalView:
    """Minimal grid viewer writing one text line per row."""

    def __init__(self, colour: bool = False) -> None:
        self.colour = colour

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render_lines(self, model: GridModel, result: Optional[SearchResult] = None) -> List[str]:
        """Return the rows of ``model`` with ``result`` painted on top."""

        path = set(result.path) if result is not None else set()
        visited = result.visited if result is not None else frozenset()

        lines: List[str] = []
        for row in range(model.rows):
            chars: List[str] = []
            for col in range(model.cols):
                kind = _cell_kind(model, (row, col), path, visited)
                glyph = GLYPHS[kind]
                if self.colour and _COLOURS[kind]:
                    glyph = f"{_COLOURS[kind]}{glyph}{_COLOURS['reset']}"
                chars.append(glyph)
            lines.append("".join(chars))
        return lines

    def render(
        self,
        model: GridModel,
        result: Optional[SearchResult] = None,
        stream: TextIO | None = None,
    ) -> None:
        """Write the rendered grid and a status line to ``stream``."""

        out = stream if stream is not None else sys.stdout
        out.write("\n".join(self.render_lines(model, result)) + "\n")
        if result is not None:
            if result.found:
                out.write(f"path: {result.cost} steps, visited {len(result.visited)} cells\n")
            else:
                out.write(f"no path, visited {len(result.visited)} cells\n")
        out.flush()


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _cell_kind(model: GridModel, cell, path, visited) -> str:
    # Same precedence as the painter: markers, walls, path, then visited.
    if model.is_start(cell):
        return "start"
    if model.is_end(cell):
        return "end"
    if model.is_obstacle(cell):
        return "wall"
    if cell in path:
        return "path"
    if cell in visited:
        return "visited"
    return "free"


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["GLYPHS", "TerminalView", "get_view"]
