"""
Hook dispatch for failed validation and unavailable versions.

Hooks replace hardcoded responses. A hook returns a Response to halt the
request with it, or None to let the request carry on. Once a hook has
run, the parser does nothing more for that outcome.
"""

import inspect
import logging
from typing import Any, Callable, Optional, Sequence

from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from request_params_parser.config import ParserConfig
from request_params_parser.exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

Hook = Callable[..., Any]


def default_invalid_params_response(error: ValidationError) -> Response:
    """400 with the validation messages in the body."""
    return JSONResponse({"errors": error.errors}, status_code=400)


def default_unavailable_version_response(
    requested_version: str,
    available_versions: Sequence[str],
) -> Response:
    """406 with an empty body."""
    return Response(status_code=406)


def _wants_request(hook: Hook) -> bool:
    try:
        parameters = inspect.signature(hook).parameters
    except (TypeError, ValueError):
        return False
    return "request" in parameters


class HookDispatcher:
    """
    Invoke the configured hooks, or the defaults when none is configured.

    Hooks receive the error details positionally; a hook that declares a
    ``request`` parameter also gets the current request as a keyword.
    Sync and async hooks are both supported.
    """

    def __init__(
        self,
        invalid_params_hook: Optional[Hook] = None,
        unavailable_version_hook: Optional[Hook] = None,
    ) -> None:
        self._invalid_params_hook = invalid_params_hook
        self._unavailable_version_hook = unavailable_version_hook

    @classmethod
    def from_config(cls, config: ParserConfig) -> "HookDispatcher":
        return cls(
            invalid_params_hook=config.invalid_params_hook,
            unavailable_version_hook=config.unavailable_version_hook,
        )

    async def _call(self, hook: Hook, request: Request, *args: Any) -> Optional[Response]:
        if _wants_request(hook):
            result = hook(*args, request=request)
        else:
            result = hook(*args)
        if inspect.isawaitable(result):
            result = await result

        if result is not None and not isinstance(result, Response):
            raise ConfigurationError(
                f"Hook {getattr(hook, '__name__', hook)!r} must return a Response or None, "
                f"got {type(result).__name__}"
            )
        return result

    async def invalid_params(self, request: Request, error: ValidationError) -> Optional[Response]:
        """Dispatch a validation failure."""
        if self._invalid_params_hook is None:
            logger.info(
                "Invalid params for %s %s: %s",
                request.method, request.url.path, "; ".join(error.errors),
            )
            return default_invalid_params_response(error)

        logger.info("Dispatching invalid params hook for %s %s", request.method, request.url.path)
        return await self._call(self._invalid_params_hook, request, error)

    async def unavailable_version(
        self,
        request: Request,
        requested_version: str,
        available_versions: Sequence[str],
    ) -> Optional[Response]:
        """Dispatch a version miss for a matched route."""
        available = list(available_versions)
        if self._unavailable_version_hook is None:
            logger.info(
                "Version %r unavailable for %s %s (available: %s)",
                requested_version, request.method, request.url.path, available,
            )
            return default_unavailable_version_response(requested_version, available)

        logger.info(
            "Dispatching unavailable version hook for %s %s",
            request.method, request.url.path,
        )
        return await self._call(
            self._unavailable_version_hook, request, requested_version, available
        )
