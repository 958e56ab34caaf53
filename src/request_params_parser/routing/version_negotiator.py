"""
API version negotiation for matched routes.
"""

from typing import TYPE_CHECKING, Iterable

from request_params_parser.exceptions import VersionUnavailableError
from request_params_parser.models.endpoint import EndpointDefinition

if TYPE_CHECKING:
    from request_params_parser.routing.endpoint_registry import RouteMatch


def _version_key(version: str) -> tuple:
    # Numeric components compare numerically and sort before textual ones
    return tuple(
        (0, int(part), "") if part.isdigit() else (1, 0, part)
        for part in version.split(".")
    )


def sort_versions(versions: Iterable[str]) -> list[str]:
    """
    Sort version strings ascending.

    Dotted numeric components compare as numbers, so ``1.10`` sorts after
    ``1.9``.
    """
    return sorted(versions, key=_version_key)


class VersionNegotiator:
    """Pick the definition of a matched route for the requested version."""

    def negotiate(self, requested_version: str, match: "RouteMatch") -> EndpointDefinition:
        """
        Resolve the requested version against the route's versions.

        Only exact string matches are accepted.

        Args:
            requested_version: The version the request negotiates for.
            match: The matched route.

        Returns:
            The endpoint definition registered for that version.

        Raises:
            VersionUnavailableError: With the requested version and the
                route's own versions, sorted ascending.
        """
        definition = match.route.definitions.get(requested_version)
        if definition is None:
            raise VersionUnavailableError(requested_version, match.versions)
        return definition
