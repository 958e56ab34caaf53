"""
Middleware package for the request params parser.

This package contains modules for:
- The ASGI params parser middleware
- Hook dispatch for invalid params and unavailable versions
- The per-request guard
- Middleware ordering checks and the parse_params switch
- Request-scope accessors for handler code
"""

from request_params_parser.middleware.access import (
    get_request_context,
    params,
    unparsed_params,
)
from request_params_parser.middleware.composition import (
    check_middleware_order,
    disable_parse_params,
    enable_parse_params,
    is_parse_params_enabled,
)
from request_params_parser.middleware.guard import RequestGuard
from request_params_parser.middleware.hooks import HookDispatcher
from request_params_parser.middleware.params_parser import RequestParamsParser, route_path

__all__ = [
    "HookDispatcher",
    "RequestGuard",
    "RequestParamsParser",
    "check_middleware_order",
    "disable_parse_params",
    "enable_parse_params",
    "get_request_context",
    "is_parse_params_enabled",
    "params",
    "route_path",
    "unparsed_params",
]
