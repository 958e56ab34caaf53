"""
Error taxonomy for the request params parser.

Configuration errors are fatal and surface at setup time (or on the first
request). Validation and version errors are recoverable and are routed to
the configured hooks. Exceptions raised by downstream handlers are never
wrapped by anything in this package.
"""

from typing import Sequence


class RequestParamsParserError(Exception):
    """Base class for all errors raised by the request params parser."""
    pass


class ConfigurationError(RequestParamsParserError):
    """The parser was configured or composed incorrectly."""
    pass


class ValidationError(RequestParamsParserError):
    """
    One or more request params failed schema validation.

    Every message names the offending field so hooks and handlers can
    report it back to the client.
    """

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors: list[str] = list(errors)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """All error messages joined into one human-readable string."""
        return "\n".join(self.errors)


class VersionUnavailableError(RequestParamsParserError):
    """The matched route has no definition for the requested API version."""

    def __init__(self, requested_version: str, available_versions: Sequence[str]) -> None:
        self.requested_version = requested_version
        self.available_versions: list[str] = list(available_versions)
        available = ", ".join(self.available_versions) or "none"
        super().__init__(
            f"API version {requested_version!r} is not available "
            f"(available: {available})"
        )
