"""
Request-scope accessors for handler code.

All of them take the request, so they work as FastAPI dependencies too.
"""

from typing import Any, Optional, Union

from starlette.requests import Request

from request_params_parser.middleware.guard import context_from_scope
from request_params_parser.models.context import RequestContext
from request_params_parser.models.params import ValidatedParams


def get_request_context(request: Request) -> Optional[RequestContext]:
    """The parser's context for this request, if the pipeline ran."""
    return context_from_scope(request.scope)


def _host_params(request: Request) -> dict[str, Any]:
    merged: dict[str, Any] = dict(request.path_params)
    merged.update(request.query_params.items())
    return merged


def unparsed_params(request: Request) -> dict[str, str]:
    """
    The raw, string-valued params as received.

    Requests without a declared route get the host's own path and query
    params, like ``params``.
    """
    context = get_request_context(request)
    if context is None or not context.routed:
        return _host_params(request)
    return dict(context.raw_params)


def params(request: Request) -> Union[ValidatedParams, dict[str, Any]]:
    """
    The validated params view.

    Falls back to the host's own path and query params when the request
    was not validated (parsing disabled, no matching endpoint, or
    validation skipped).
    """
    context = get_request_context(request)
    if context is None or context.validated is None:
        return _host_params(request)
    return context.validated
