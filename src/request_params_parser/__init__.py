"""
Request Params Parser

ASGI middleware that resolves which declared API endpoint a request
targets, validates its path and query params against the endpoint's
schema, and exposes both the raw and validated views to handler code.
"""

from importlib.metadata import version, PackageNotFoundError

from request_params_parser.config import ParserConfig, load_config
from request_params_parser.exceptions import (
    ConfigurationError,
    RequestParamsParserError,
    ValidationError,
    VersionUnavailableError,
)
from request_params_parser.middleware import (
    RequestParamsParser,
    check_middleware_order,
    disable_parse_params,
    enable_parse_params,
    get_request_context,
    params,
    unparsed_params,
)
from request_params_parser.models import EndpointDefinition, EndpointMethod

try:
    __version__ = version("request-params-parser")
except PackageNotFoundError:
    __version__ = "0.1.0"

# Public API exports
__all__ = [
    "__version__",
    # Configuration
    "ParserConfig",
    "load_config",
    # Models
    "EndpointDefinition",
    "EndpointMethod",
    # Middleware
    "RequestParamsParser",
    "check_middleware_order",
    "disable_parse_params",
    "enable_parse_params",
    "get_request_context",
    "params",
    "unparsed_params",
    # Errors
    "ConfigurationError",
    "RequestParamsParserError",
    "ValidationError",
    "VersionUnavailableError",
]
