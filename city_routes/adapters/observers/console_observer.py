"""Console observer adapter.

Renders each event into a human-readable explanation and hands the
line to a writer. This is how the interactive menu explains why nodes
are selected and distances updated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from ...domain.events import RouteEvent
from ...ports.rendering import RouteRendererPort


@dataclass
class ConsoleRouteObserver:
    """Observer writing one rendered line per event.

    Attributes:
        renderer: Formats events into text
        write: Sink for the rendered lines (``print`` by default)
        include: Event types to write; None writes every event
    """

    renderer: RouteRendererPort
    write: Callable[[str], None] = field(default=print, repr=False)
    include: Optional[Tuple[type, ...]] = None

    def notify(self, event: RouteEvent) -> None:
        if self.include is not None and not isinstance(event, self.include):
            return
        self.write(self.renderer.render_event(event))
