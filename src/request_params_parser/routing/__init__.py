"""
Routing package for the request params parser.

This package contains modules for:
- Route pattern compilation and endpoint resolution
- API version negotiation
"""

from request_params_parser.routing.endpoint_registry import (
    EndpointRegistry,
    RegisteredRoute,
    RouteMatch,
    RoutePattern,
)
from request_params_parser.routing.version_negotiator import (
    VersionNegotiator,
    sort_versions,
)

__all__ = [
    "EndpointRegistry",
    "RegisteredRoute",
    "RouteMatch",
    "RoutePattern",
    "VersionNegotiator",
    "sort_versions",
]
