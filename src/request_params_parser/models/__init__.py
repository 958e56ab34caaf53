"""
Data models for the request params parser.

This package contains the Pydantic models for endpoint definitions and
validated params, and the per-request context.
"""

from request_params_parser.models.endpoint import (
    EndpointDefinition,
    EndpointMethod,
)
from request_params_parser.models.params import (
    ValidatedParams,
    build_params_model,
)
from request_params_parser.models.context import RequestContext

__all__ = [
    # Endpoint models
    "EndpointDefinition",
    "EndpointMethod",
    # Params views
    "ValidatedParams",
    "build_params_model",
    # Request state
    "RequestContext",
]
