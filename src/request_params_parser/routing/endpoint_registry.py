"""
Endpoint registry for resolving requests to declared endpoints.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from request_params_parser.exceptions import ConfigurationError
from request_params_parser.models.endpoint import EndpointDefinition, EndpointMethod
from request_params_parser.models.params import ValidatedParams, build_params_model
from request_params_parser.routing.version_negotiator import sort_versions

logger = logging.getLogger(__name__)

_SEGMENT_PARAM = re.compile(r"^:([A-Za-z_][A-Za-z0-9_]*)$")


class RoutePattern:
    """
    A compiled route pattern with named segments.

    ``/users/:user_id/projects/:project_language`` matches
    ``/users/12/projects/ruby`` and captures
    ``{"user_id": "12", "project_language": "ruby"}``.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.segments = _split(pattern)
        self.param_names: list[str] = []

        parts: list[str] = []
        for segment in self.segments:
            param = _SEGMENT_PARAM.match(segment)
            if param:
                name = param.group(1)
                if name in self.param_names:
                    raise ConfigurationError(
                        f"Route {pattern!r} declares the segment {name!r} twice"
                    )
                self.param_names.append(name)
                parts.append(f"(?P<{name}>[^/?#]+)")
            else:
                parts.append(re.escape(segment))
        self._regex = re.compile("^/" + "/".join(parts) + "/?$" if parts else "^/$")

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    @property
    def static_segments(self) -> int:
        return self.segment_count - len(self.param_names)

    def match(self, path: str) -> Optional[dict[str, str]]:
        """Return the captured segments, or None when the path doesn't match."""
        found = self._regex.match(path)
        if found is None:
            return None
        return found.groupdict()

    def __repr__(self) -> str:
        return f"RoutePattern({self.pattern!r})"


@dataclass
class RegisteredRoute:
    """All versions declared for one (method, route pattern) pair."""

    method: EndpointMethod
    pattern: RoutePattern
    definitions: dict[str, EndpointDefinition] = field(default_factory=dict)
    params_models: dict[str, type[ValidatedParams]] = field(default_factory=dict)

    @property
    def versions(self) -> list[str]:
        """Versions registered for this route, sorted ascending."""
        return sort_versions(self.definitions)


@dataclass(frozen=True)
class RouteMatch:
    """Result of resolving a request against the registry."""

    route: RegisteredRoute
    captures: dict[str, str]

    @property
    def versions(self) -> list[str]:
        return self.route.versions


class EndpointRegistry:
    """
    Registry of declared endpoints.

    Built once from the configured definitions and only read afterwards,
    so a single instance can serve concurrent requests. Routes are
    indexed by method and segment count; among routes of the same shape,
    the one with more static segments is tried first.
    """

    def __init__(self, endpoints: Iterable[EndpointDefinition] = ()) -> None:
        """
        Build the registry.

        Args:
            endpoints: Endpoint definitions to register.

        Raises:
            ConfigurationError: If two definitions share method, route and version.
        """
        self._endpoints: list[EndpointDefinition] = []
        self._routes: dict[tuple[EndpointMethod, str], RegisteredRoute] = {}
        self._by_shape: dict[tuple[EndpointMethod, int], list[RegisteredRoute]] = {}

        for endpoint in endpoints:
            self._register(endpoint)

        for candidates in self._by_shape.values():
            candidates.sort(key=lambda r: r.pattern.static_segments, reverse=True)

    def _register(self, endpoint: EndpointDefinition) -> None:
        key = (endpoint.method, endpoint.route)
        route = self._routes.get(key)
        if route is None:
            route = RegisteredRoute(method=endpoint.method, pattern=RoutePattern(endpoint.route))
            self._routes[key] = route
            shape = (endpoint.method, route.pattern.segment_count)
            self._by_shape.setdefault(shape, []).append(route)

        if endpoint.version in route.definitions:
            raise ConfigurationError(
                f"Multiple definitions found for {endpoint.identifier}"
            )

        route.definitions[endpoint.version] = endpoint
        route.params_models[endpoint.version] = build_params_model(endpoint)
        self._endpoints.append(endpoint)
        logger.debug("Registered endpoint %s", endpoint.identifier)

    def resolve(self, method: str, path: str) -> Optional[RouteMatch]:
        """
        Find the route a request targets.

        Args:
            method: The request's HTTP method.
            path: The request path relative to the application's mount point.

        Returns:
            The matched route with its captured segments, or None when no
            registered route matches the method and path. HEAD requests
            without a HEAD definition resolve against the GET routes, the
            way the host serves them.
        """
        try:
            endpoint_method = EndpointMethod(method.upper())
        except ValueError:
            return None

        match = self._match(endpoint_method, path)
        if match is None and endpoint_method is EndpointMethod.HEAD:
            match = self._match(EndpointMethod.GET, path)
        return match

    def _match(self, method: EndpointMethod, path: str) -> Optional[RouteMatch]:
        for route in self._by_shape.get((method, len(_split(path))), []):
            captures = route.pattern.match(path)
            if captures is not None:
                return RouteMatch(route=route, captures=captures)
        return None

    def params_model_for(self, endpoint: EndpointDefinition) -> type[ValidatedParams]:
        """Get the validated params view model built for a definition."""
        route = self._routes[(endpoint.method, endpoint.route)]
        return route.params_models[endpoint.version]

    def get_all(self) -> list[EndpointDefinition]:
        """Get all registered endpoint definitions."""
        return list(self._endpoints)

    def __len__(self) -> int:
        return len(self._endpoints)

    def __iter__(self) -> Iterator[EndpointDefinition]:
        return iter(self._endpoints)

    def __contains__(self, endpoint: EndpointDefinition) -> bool:
        return endpoint in self._endpoints

    @property
    def routes(self) -> list[RegisteredRoute]:
        """All registered (method, route) pairs."""
        return list(self._routes.values())

    @property
    def paths(self) -> set[str]:
        """All unique route patterns."""
        return {route for _, route in self._routes}

    @property
    def versions(self) -> list[str]:
        """Every version declared anywhere in the registry, sorted ascending."""
        return sort_versions({e.version for e in self._endpoints})


def _split(path: str) -> list[str]:
    return [segment for segment in path.split("/") if segment]
