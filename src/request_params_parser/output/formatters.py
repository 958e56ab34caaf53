"""
Base formatter and formatter registry.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from request_params_parser.models.endpoint import EndpointDefinition


class BaseFormatter(ABC):
    """
    Abstract base class for output formatters.

    Subclasses must implement format_endpoints().
    """

    @abstractmethod
    def format_endpoints(self, endpoints: list["EndpointDefinition"]) -> str:
        """
        Format a list of endpoint definitions.

        Args:
            endpoints: Endpoint definitions to format.

        Returns:
            Formatted string representation.
        """
        pass

    @staticmethod
    def endpoint_to_dict(endpoint: "EndpointDefinition") -> dict[str, Any]:
        """Convert an endpoint definition to a dictionary."""
        return {
            "route": endpoint.route,
            "method": endpoint.method.value,
            "version": endpoint.version,
            "name": endpoint.name,
            "params": endpoint.param_names,
            "required": list(endpoint.params_schema.get("required", [])),
        }


# Formatter registry
_FORMATTERS: dict[str, type[BaseFormatter]] = {}


def register_formatter(name: str) -> Callable[[type[BaseFormatter]], type[BaseFormatter]]:
    """
    Decorator to register a formatter.

    Args:
        name: The name to register the formatter under.

    Returns:
        Decorator function.
    """
    def decorator(cls: type[BaseFormatter]) -> type[BaseFormatter]:
        _FORMATTERS[name] = cls
        return cls
    return decorator


def get_formatter(name: str) -> BaseFormatter:
    """
    Get a formatter instance by name.

    Args:
        name: The formatter name ("text", "json" or "yaml").

    Returns:
        An instance of the requested formatter.

    Raises:
        ValueError: If the formatter name is not recognized.
    """
    # Import formatters to ensure they're registered
    from request_params_parser.output import (  # noqa: F401
        json_output,
        text_output,
        yaml_output,
    )

    if name not in _FORMATTERS:
        available = ", ".join(_FORMATTERS.keys())
        raise ValueError(f"Unknown formatter: {name}. Available: {available}")

    return _FORMATTERS[name]()
