"""Dependency injection container.

A small explicit registry: factories are registered per port type and
resolved on demand. There is no process-wide instance; whoever needs
the graph builds a container (or the graph itself) and passes it on.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(RouteManagementService)

        # Testing
        container = Container()
        container.register(WeightedDigraph, lambda: WeightedDigraph())
        graph = container.resolve(WeightedDigraph)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Drop cached singletons so the next resolve builds fresh ones."""
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the default bindings.

        The graph is a singleton with a LoggingRouteObserver subscribed;
        the service resolves the same graph instance.
        """
        from .adapters.observers import LoggingRouteObserver
        from .adapters.rendering import ConsoleRouteRenderer
        from .graph import WeightedDigraph
        from .ports.observer import RouteObserverPort
        from .ports.rendering import RouteRendererPort
        from .services import RouteManagementService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            RouteRendererPort,
            lambda: ConsoleRouteRenderer(unit=config.routing.distance_unit),
        )
        container.register(RouteObserverPort, lambda: LoggingRouteObserver())

        def create_graph() -> WeightedDigraph:
            graph = WeightedDigraph(
                allow_parallel_routes=config.routing.allow_parallel_routes
            )
            graph.subscribe(container.resolve(RouteObserverPort))
            return graph

        container.register(WeightedDigraph, create_graph)
        container.register(
            RouteManagementService,
            lambda: RouteManagementService(graph=container.resolve(WeightedDigraph)),
        )

        return container
