"""Apply grid edits and re-run the search after each effective change."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List, Optional

from ..core.grid import Coord, GridModel
from ..utils import observer
from .pathfinding import SearchResult, search


logger = logging.getLogger(__name__)

Listener = Callable[[SearchResult], None]


class EditSession:
    """Own a :class:`GridModel` and keep :attr:`result` in sync with it.

    Every edit that changes the grid triggers exactly one fresh search
    before returning. Listeners receive each new result synchronously.
    Edits that are ignored by the grid leave :attr:`result` untouched.
    """

    def __init__(
        self,
        model: GridModel,
        event_log: List[Dict[str, Any]] | None = None,
    ) -> None:
        self.model = model
        self.event_log = event_log
        self._listeners: List[Listener] = []
        self._drag: Optional[str] = None
        self.result: SearchResult = self.refresh()

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_listener(self, callback: Listener) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def refresh(self) -> SearchResult:
        """Run a new search and notify listeners."""

        began = time.perf_counter()
        result = search(self.model)
        observer.record_search(time.perf_counter() - began)
        self.result = result
        for callback in list(self._listeners):
            callback(result)
        return result

    def _changed(self, event_type: str, cell: Coord | None = None) -> SearchResult:
        data: Dict[str, Any] = {} if cell is None else {"cell": tuple(cell)}
        observer.log_event(event_type, data, self.event_log)
        return self.refresh()

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------
    def toggle_obstacle(self, cell: Coord) -> bool:
        if not self.model.toggle_obstacle(cell):
            return False
        self._changed("obstacle_toggled", cell)
        return True

    def clear_obstacles(self) -> int:
        removed = self.model.clear_obstacles()
        self._changed("obstacles_cleared")
        logger.info("Cleared %d obstacles", removed)
        return removed

    def set_start(self, cell: Coord) -> bool:
        if tuple(cell) == self.model.start:
            return False
        if not self.model.set_start(cell):
            return False
        self._changed("start_moved", cell)
        return True

    def set_end(self, cell: Coord) -> bool:
        if tuple(cell) == self.model.end:
            return False
        if not self.model.set_end(cell):
            return False
        self._changed("end_moved", cell)
        return True

    # ------------------------------------------------------------------
    # Drag editing
    # ------------------------------------------------------------------
    @property
    def dragging(self) -> Optional[str]:
        """``"start"`` or ``"end"`` while a marker is being dragged."""

        return self._drag

    def press(self, cell: Coord) -> None:
        """Begin dragging a marker at ``cell`` or toggle an obstacle there."""

        if self.model.is_start(cell):
            self._drag = "start"
        elif self.model.is_end(cell):
            self._drag = "end"
        else:
            self.toggle_obstacle(cell)

    def drag_to(self, cell: Coord) -> bool:
        """Move the dragged marker to ``cell``. Returns ``True`` if it moved."""

        if self._drag == "start":
            return self.set_start(cell)
        if self._drag == "end":
            return self.set_end(cell)
        return False

    def release(self) -> None:
        self._drag = None


__all__ = ["EditSession", "Listener"]
