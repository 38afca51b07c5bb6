"""In-memory recording observer.

Keeps every event it receives so callers (and tests) can inspect or
explain a computation after the fact.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Type, TypeVar

from ...domain.events import RouteEvent

E = TypeVar("E")


@dataclass
class RecordingRouteObserver:
    """Observer that stores events in emission order.

    Example:
        recorder = RecordingRouteObserver()
        graph.subscribe(recorder)
        graph.shortest_path("A", "C")
        finalized = recorder.of_type(NodeFinalized)
    """

    events: List[RouteEvent] = field(default_factory=list)

    def notify(self, event: RouteEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: Type[E]) -> List[E]:
        """Return recorded events that are instances of ``event_type``."""
        return [event for event in self.events if isinstance(event, event_type)]

    def clear(self) -> int:
        """Forget all recorded events.

        Returns:
            Number of events that were dropped.
        """
        count = len(self.events)
        self.events.clear()
        return count
