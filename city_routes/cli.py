"""Interactive console menu for the city route manager.

Reads operator input, calls the route management service and prints
what happened. All text comes from the renderer; the graph itself only
emits events.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from .adapters.observers import ConsoleRouteObserver
from .config import AppConfig, get_config
from .container import Container
from .domain.errors import RouteManagementError
from .domain.events import EdgeRelaxed, NodeFinalized, RouteAdded, RouteRemoved, RouteUpdated
from .log_setup import configure_logging
from .ports.rendering import RouteRendererPort
from .services import RouteManagementService

logger = logging.getLogger(__name__)

MENU = "\n".join(
    [
        "",
        "MENU:",
        "1. Add a route",
        "2. Remove a route",
        "3. Update a route",
        "4. View all routes",
        "5. Find shortest path",
        "6. Sort routes by distance",
        "7. Exit",
    ]
)

MUTATION_EVENTS = (RouteAdded, RouteRemoved, RouteUpdated)
ALGORITHM_EVENTS = (NodeFinalized, EdgeRelaxed)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _read_distance(read: Reader, prompt: str) -> Optional[int]:
    raw = read(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        return None


def run_menu(
    service: RouteManagementService,
    renderer: RouteRendererPort,
    read: Reader = input,
    write: Writer = print,
) -> None:
    """Run the menu loop until the operator exits or input runs out."""
    while True:
        write(MENU)
        try:
            choice = read("Enter choice: ").strip()
            if choice == "7":
                write("Exiting program.")
                return
            _dispatch(choice, service, renderer, read, write)
        except EOFError:
            write("Exiting program.")
            return
        except RouteManagementError as e:
            logger.debug("Operation rejected", extra={"error": e.message})
            write(str(e))


def _dispatch(
    choice: str,
    service: RouteManagementService,
    renderer: RouteRendererPort,
    read: Reader,
    write: Writer,
) -> None:
    if choice in {"1", "2", "3", "5"}:
        start = read("Enter start node: ").strip()
        end = read("Enter end node: ").strip()
        if not start or not end:
            write("Invalid node.")
            return
    else:
        start = end = ""

    if choice == "1":
        distance = _read_distance(read, "Enter distance: ")
        if distance is None:
            write("Invalid distance.")
            return
        service.add_route(start, end, distance)
    elif choice == "2":
        service.remove_route(start, end)
    elif choice == "3":
        distance = _read_distance(read, "Enter new distance: ")
        if distance is None:
            write("Invalid distance.")
            return
        service.update_route(start, end, distance)
    elif choice == "4":
        write(renderer.render_routes(service.list_routes(), "All routes in the city:"))
    elif choice == "5":
        write(renderer.render_path(service.find_shortest_path_safe(start, end)))
    elif choice == "6":
        write(
            renderer.render_routes(
                service.sorted_routes(persist=True), "Routes sorted by distance:"
            )
        )
    else:
        write("Invalid choice.")


def build_session(
    config: AppConfig, write: Writer = print
) -> tuple[RouteManagementService, RouteRendererPort]:
    """Wire a service and renderer, with console explanations subscribed."""
    container = Container.create_default(config)
    service: RouteManagementService = container.resolve(RouteManagementService)
    renderer: RouteRendererPort = container.resolve(RouteRendererPort)

    include = MUTATION_EVENTS
    if config.routing.explain:
        include = MUTATION_EVENTS + ALGORITHM_EVENTS
    service.graph.subscribe(
        ConsoleRouteObserver(renderer=renderer, write=write, include=include)
    )
    return service, renderer


def main() -> int:
    try:
        config = get_config()
        configure_logging(config.observability)
    except RouteManagementError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    print("Smart City Route Management System")
    service, renderer = build_session(config)
    run_menu(service, renderer, read=input, write=print)
    return 0


if __name__ == "__main__":
    sys.exit(main())
