"""In-memory run trace collection."""

from __future__ import annotations

import json
import threading
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any


class RunTraceCollector:
    """Thread-safe collector for structured run events."""

    def __init__(self) -> None:
        self._events: list[dict[str, Any]] = []
        self._next_seq = 1
        self._lock = threading.Lock()
        self._live_sink: Callable[[dict[str, Any]], None] | None = None

    def set_live_sink(self, sink: Callable[[dict[str, Any]], None] | None) -> None:
        """Set optional callback to stream events as they are recorded."""
        with self._lock:
            self._live_sink = sink

    def log(
        self,
        *,
        event_type: str,
        component: str,
        action: str,
        status: str = "ok",
        relationship: str | None = None,
        details: dict[str, Any] | str | None = None,
    ) -> None:
        """Record a structured event."""
        with self._lock:
            event = {
                "seq": self._next_seq,
                "timestamp": datetime.now(UTC).isoformat(),
                "event_type": event_type,
                "component": component,
                "action": action,
                "status": status,
                "relationship": relationship or "",
                "details": _serialize_details(details),
            }
            self._events.append(event)
            self._next_seq += 1
            sink = self._live_sink
        if sink is not None:
            try:
                sink(dict(event))
            except Exception:
                # Trace streaming must never interfere with the main run flow.
                pass

    def events(self) -> list[dict[str, Any]]:
        """Return a shallow copy of collected events."""
        with self._lock:
            return list(self._events)

    def by_status(self, status: str) -> list[dict[str, Any]]:
        return [event for event in self.events() if event["status"] == status]


def _serialize_details(details: dict[str, Any] | str | None) -> str:
    if details is None:
        return ""
    if isinstance(details, str):
        return details
    return json.dumps(details, sort_keys=True, default=str)
