"""Services layer - Application orchestration.

Available services:
- RouteManagementService: Route management and shortest-path queries
"""

from .route_manager import RouteManagementService

__all__ = ["RouteManagementService"]
