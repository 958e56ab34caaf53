"""
Configuration loading and validation for the request params parser.

This module defines the configuration handed to the middleware at setup
time and handles loading its scalar settings from a YAML file.
"""

from pathlib import Path
from typing import Any, Callable, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from request_params_parser.models.endpoint import EndpointDefinition

VersionSource = Union[str, Callable[[Any], str]]


class ParserSettings(BaseModel):
    """Scalar settings that may live in a configuration file."""

    model_config = ConfigDict(extra="forbid")

    api_version: Optional[str] = Field(
        default=None,
        description="API version the parser negotiates against.",
    )
    parse_params: bool = Field(
        default=True,
        description="Whether params are extracted and validated at all.",
    )

    @field_validator("api_version", mode="before")
    @classmethod
    def _string_version(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value


class ParserConfig(BaseModel):
    """
    Root configuration model for the request params parser.

    Hooks can be passed as fields or registered with the decorator-style
    helpers. The middleware takes its own copy on construction, so one
    config object can seed any number of application instances.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    endpoints: list[EndpointDefinition] = Field(
        default_factory=list,
        description="Endpoint definitions to register.",
    )
    api_version: Optional[VersionSource] = Field(
        default=None,
        description="Version string, or a callable taking the request and returning one.",
    )
    parse_params: bool = Field(
        default=True,
        description="Default for the per-application parse_params switch.",
    )
    validate_request_if: Optional[Callable[[Any], bool]] = Field(
        default=None,
        description="Predicate taking the request; validation is skipped when it returns False.",
    )
    invalid_params_hook: Optional[Callable[..., Any]] = Field(
        default=None,
        description="Called with the ValidationError when params fail validation.",
    )
    unavailable_version_hook: Optional[Callable[..., Any]] = Field(
        default=None,
        description="Called with the requested version and the available versions.",
    )
    validator: Optional[Any] = Field(
        default=None,
        description="Schema validator; defaults to the JSON schema validator.",
    )

    @field_validator("api_version", mode="before")
    @classmethod
    def _string_version(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def set_api_version(self, version: VersionSource) -> "ParserConfig":
        """Select the API version to negotiate against."""
        if isinstance(version, (int, float)):
            version = str(version)
        self.api_version = version
        return self

    def on_invalid_params(self, hook: Callable[..., Any]) -> Callable[..., Any]:
        """Register the invalid params hook. Usable as a decorator."""
        self.invalid_params_hook = hook
        return hook

    on_invalid_request_params = on_invalid_params

    def on_unavailable_request_version(self, hook: Callable[..., Any]) -> Callable[..., Any]:
        """Register the unavailable version hook. Usable as a decorator."""
        self.unavailable_version_hook = hook
        return hook

    def resolve_version(self, request: Any) -> Optional[str]:
        """The version a given request negotiates for."""
        if callable(self.api_version):
            return self.api_version(request)
        return self.api_version


def load_config(config_path: Optional[Path] = None, **overrides: Any) -> ParserConfig:
    """
    Load parser configuration from a YAML file.

    Only scalar settings are read from the file. Endpoints, hooks and the
    validator are passed as keyword overrides.

    Args:
        config_path: Path to the configuration file. If None, returns defaults.
        **overrides: ParserConfig fields that take precedence over the file.

    Returns:
        ParserConfig object with loaded or default values.

    Raises:
        FileNotFoundError: If the specified config file doesn't exist.
        ValueError: If the config file is invalid.
    """
    if config_path is None:
        return ParserConfig(**overrides)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        settings = ParserSettings(**data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in configuration file: {e}") from e
    except Exception as e:
        raise ValueError(f"Failed to load configuration: {e}") from e

    values = settings.model_dump(exclude_none=True)
    values.update(overrides)
    return ParserConfig(**values)


def find_config_file(start_path: Path) -> Optional[Path]:
    """
    Search for a configuration file starting from the given path.

    Searches for `.params-parser.yaml` or `.params-parser.yml` in the
    start path and parent directories.

    Args:
        start_path: Directory to start searching from.

    Returns:
        Path to the config file if found, None otherwise.
    """
    config_names = [".params-parser.yaml", ".params-parser.yml"]

    current = start_path.resolve()
    while current != current.parent:
        for name in config_names:
            config_path = current / name
            if config_path.exists():
                return config_path
        current = current.parent

    return None
