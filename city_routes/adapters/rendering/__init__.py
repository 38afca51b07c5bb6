"""Rendering adapters - Implementations of RouteRendererPort.

Available implementations:
- ConsoleRouteRenderer: Plain-text lines for the interactive menu
"""

from .console_renderer import ConsoleRouteRenderer

__all__ = ["ConsoleRouteRenderer"]
