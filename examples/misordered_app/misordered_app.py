"""
Sample application with a middleware composed after the params parser.

``request-params-parser check --app misordered_app.py`` reports it.
"""

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.gzip import GZipMiddleware

from request_params_parser import EndpointDefinition, ParserConfig, RequestParamsParser

config = ParserConfig(
    endpoints=[EndpointDefinition(route="/ping", version="1.0")],
    api_version="1.0",
)

app = Starlette(
    middleware=[
        Middleware(RequestParamsParser, config=config),
        Middleware(GZipMiddleware),
    ],
)
