"""
Application-level composition checks and switches.

The parser must be the last middleware in the application's stack, and
each application instance can switch parsing off independently.
"""

import logging
from typing import Any

from request_params_parser.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PARSE_PARAMS = "parse_params"


def _middleware_class(entry: Any) -> Any:
    return getattr(entry, "cls", entry)


def _name(cls: Any) -> str:
    return getattr(cls, "__name__", repr(cls))


def check_middleware_order(app: Any) -> None:
    """
    Verify that nothing is composed after the params parser.

    Inspects the application's ordered middleware list (outermost first).

    Args:
        app: A Starlette or FastAPI application. Objects without a
            middleware list are accepted as-is.

    Raises:
        ConfigurationError: If any middleware follows the params parser.
    """
    from request_params_parser.middleware.params_parser import RequestParamsParser

    entries = getattr(app, "user_middleware", None)
    if not entries:
        return

    classes = [_middleware_class(entry) for entry in entries]
    positions = [
        index for index, cls in enumerate(classes)
        if isinstance(cls, type) and issubclass(cls, RequestParamsParser)
    ]
    if not positions:
        return

    after = classes[positions[0] + 1:]
    if after:
        names = ", ".join(_name(cls) for cls in after)
        raise ConfigurationError(
            f"RequestParamsParser must come last in the middleware stack, "
            f"but {names} is composed after it"
        )
    logger.debug("Middleware order of %s verified", _name(type(app)))


def disable_parse_params(app: Any) -> None:
    """Skip the whole params pipeline for this application instance."""
    setattr(app.state, PARSE_PARAMS, False)


def enable_parse_params(app: Any) -> None:
    """Run the params pipeline for this application instance."""
    setattr(app.state, PARSE_PARAMS, True)


def is_parse_params_enabled(app: Any, default: bool = True) -> bool:
    """Read the application's switch, falling back to the configured default."""
    state = getattr(app, "state", None)
    if state is None:
        return default
    return getattr(state, PARSE_PARAMS, default)
