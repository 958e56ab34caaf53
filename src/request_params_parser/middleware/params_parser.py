"""
The request params parser middleware.

For every HTTP request it resolves the declared endpoint the request
targets, validates the request's path and query params against that
endpoint's schema, and stores the outcome on the request's scope. Failed
validation and unavailable versions are routed to the configured hooks.

Example:
    >>> app = FastAPI()
    >>> app.add_middleware(
    ...     RequestParamsParser,
    ...     config=ParserConfig(endpoints=[...], api_version="1.0"),
    ... )
"""

import inspect
import logging
from typing import Any, Optional

from starlette.requests import Request, empty_receive
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from request_params_parser.config import ParserConfig
from request_params_parser.exceptions import (
    ConfigurationError,
    ValidationError,
    VersionUnavailableError,
)
from request_params_parser.middleware.composition import (
    check_middleware_order,
    is_parse_params_enabled,
)
from request_params_parser.middleware.guard import RequestGuard
from request_params_parser.middleware.hooks import HookDispatcher
from request_params_parser.models.context import RequestContext
from request_params_parser.parser.params_extractor import ParamsExtractor
from request_params_parser.parser.schema_validator import JSONSchemaValidator
from request_params_parser.routing.endpoint_registry import EndpointRegistry
from request_params_parser.routing.version_negotiator import VersionNegotiator

logger = logging.getLogger(__name__)


def route_path(scope: Scope) -> str:
    """
    The request path relative to the application's mount point.

    Mounted applications see the mount prefix in ``root_path``; route
    patterns are declared relative to the mount point.
    """
    path = scope["path"]
    root_path = scope.get("root_path", "")
    if root_path and path.startswith(root_path):
        return path[len(root_path):] or "/"
    return path


class RequestParamsParser:
    """
    ASGI middleware validating request params against declared endpoints.

    The registry, hooks and validator are built once per middleware
    instance and only read while serving requests. Per-request state lives
    in the request's scope, never on the instance.
    """

    def __init__(
        self,
        app: ASGIApp,
        config: Optional[ParserConfig] = None,
        **options: Any,
    ) -> None:
        """
        Initialize the middleware.

        Args:
            app: The next ASGI application in the chain.
            config: Parser configuration. A copy is taken.
            **options: ParserConfig fields, applied on top of ``config``.

        Raises:
            ConfigurationError: If the endpoints or schemas are invalid, or
                endpoints are declared without an API version.
        """
        self.app = app
        if config is None:
            config = ParserConfig(**options)
        elif options:
            config = config.model_copy(update=options)
        self.config = config.model_copy()
        self.config.endpoints = list(config.endpoints)

        if self.config.endpoints and self.config.api_version is None:
            raise ConfigurationError("An api_version must be configured for the declared endpoints")

        self.registry = EndpointRegistry(self.config.endpoints)
        self.validator = self.config.validator or JSONSchemaValidator()
        check_schema = getattr(self.validator, "check_schema", None)
        if check_schema is not None:
            for endpoint in self.registry:
                check_schema(endpoint.params_schema)

        self.hooks = HookDispatcher.from_config(self.config)
        self.extractor = ParamsExtractor()
        self.negotiator = VersionNegotiator()
        self._order_checked = False

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if not self._order_checked:
            check_middleware_order(scope.get("app"))
            self._order_checked = True

        response = await self.process_route(scope, receive)
        if response is not None:
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)

    async def process_route(
        self,
        scope: Scope,
        receive: Receive = empty_receive,
    ) -> Optional[Response]:
        """
        Run the params pipeline for a request, at most once.

        Safe to call any number of times for the same physical request;
        only the first call extracts, validates and dispatches hooks, and
        later calls return the same outcome.

        Args:
            scope: The request's ASGI scope.
            receive: The request's receive channel, handed to hooks.

        Returns:
            The response the request must be halted with, or None when the
            request should continue down the chain.
        """
        if not is_parse_params_enabled(scope.get("app"), self.config.parse_params):
            logger.debug("Params parsing disabled, passing %s through", scope["path"])
            return None

        guard = RequestGuard(scope, owner=self)
        context, first_pass = guard.claim()
        if not first_pass:
            await guard.wait(context)
            logger.debug("Params of %s already processed, reusing outcome", scope["path"])
            return context.response

        try:
            context.response = await self._run_pipeline(Request(scope, receive), context)
        finally:
            guard.release(context)
        return context.response

    async def _run_pipeline(self, request: Request, context: RequestContext) -> Optional[Response]:
        scope = request.scope
        path = route_path(scope)
        match = self.registry.resolve(request.method, path)
        if match is None:
            logger.debug("No endpoint definition for %s %s", request.method, path)
            return None

        context.routed = True
        context.raw_params = self.extractor.extract(match.captures, scope.get("query_string", b""))

        requested_version = self.config.resolve_version(request)
        try:
            endpoint = self.negotiator.negotiate(str(requested_version), match)
        except VersionUnavailableError as e:
            return await self.hooks.unavailable_version(
                request, e.requested_version, e.available_versions
            )
        context.endpoint = endpoint
        logger.debug("Matched %s for %s", endpoint.identifier, path)

        if self.config.validate_request_if is not None and not self.config.validate_request_if(request):
            return None

        try:
            values = self.validator.validate(context.raw_params, endpoint.params_schema)
            if inspect.isawaitable(values):
                values = await values
        except ValidationError as e:
            context.error = e
            return await self.hooks.invalid_params(request, e)

        context.validated = self.registry.params_model_for(endpoint).from_values(values)
        return None
