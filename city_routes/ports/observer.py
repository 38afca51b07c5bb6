"""Observer port - The graph's observation channel.

The graph and the path finder report what they do (routes added,
nodes finalized, edges relaxed...) to observers implementing this
protocol. The core never formats or prints anything itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.events import RouteEvent


class RouteObserverPort(Protocol):
    """Port for receiving structured route events.

    Implementations:
    - adapters/observers/logging_observer.py (LoggingRouteObserver)
    - adapters/observers/recording_observer.py (RecordingRouteObserver)
    - adapters/observers/console_observer.py (ConsoleRouteObserver)

    Observers are called synchronously, in emission order, from inside
    the mutating or querying call.
    """

    def notify(self, event: RouteEvent) -> None:
        """Receive one event.

        Args:
            event: The event that just happened.
        """
        ...
