"""Runtime observability helpers."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List

# Rolling history of the last 1000 search durations in seconds
_SEARCH_HISTORY_LEN = 1000
_search_durations: Deque[float] = deque(maxlen=_SEARCH_HISTORY_LEN)

# Global in-memory list for logged events when no destination is supplied
_events: List[Dict[str, Any]] = []


def record_search(duration: float) -> None:
    """Append a search ``duration`` in seconds to the rolling history."""

    _search_durations.append(duration)


def average_search_ms() -> float | None:
    """Return the mean recorded search time in milliseconds."""

    if not _search_durations:
        return None
    return sum(_search_durations) / len(_search_durations) * 1000.0


def print_stats() -> None:
    """Print search count and average time based on recorded durations."""

    avg = average_search_ms()
    if avg is None:
        print("Searches: --")
        return
    print(f"Searches: {len(_search_durations)} (avg {avg:.2f} ms, last {_search_durations[-1]*1000:.2f} ms)")


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
    else:
        log.append(event)


__all__ = [
    "record_search",
    "average_search_ms",
    "print_stats",
    "log_event",
    "_search_durations",
    "_events",
]
