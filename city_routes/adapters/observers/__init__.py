"""Observer adapters - Implementations of RouteObserverPort.

Available implementations:
- LoggingRouteObserver: Logs every event at DEBUG level
- RecordingRouteObserver: Keeps events in memory, in order
- ConsoleRouteObserver: Writes a rendered explanation line per event
"""

from .console_observer import ConsoleRouteObserver
from .logging_observer import LoggingRouteObserver
from .recording_observer import RecordingRouteObserver

__all__ = ["ConsoleRouteObserver", "LoggingRouteObserver", "RecordingRouteObserver"]
