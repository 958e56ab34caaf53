"""
Endpoint data models.

Models representing declared API endpoints: a route pattern, an HTTP
method, an API version and the JSON schema of the request params.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EndpointMethod(str, Enum):
    """HTTP methods an endpoint can be declared for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    TRACE = "TRACE"


class EndpointDefinition(BaseModel):
    """A declared endpoint, immutable once registered."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    route: str = Field(description="Route pattern, e.g. /users/:user_id")
    method: EndpointMethod = Field(
        default=EndpointMethod.GET,
        description="HTTP method of the endpoint",
    )
    version: str = Field(description="API version this definition belongs to")
    params_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}},
        alias="request_params",
        description="JSON schema describing the path and query params",
    )
    name: Optional[str] = Field(default=None, description="Optional endpoint name")

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("route")
    @classmethod
    def _absolute_route(cls, value: str) -> str:
        if not value.startswith("/"):
            value = f"/{value}"
        return value

    @field_validator("version", mode="before")
    @classmethod
    def _string_version(cls, value: Any) -> Any:
        # YAML happily turns `version: 1.0` into a float
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @property
    def identifier(self) -> str:
        """Unique identifier for this definition."""
        return f"{self.method.value} {self.route} v{self.version}"

    @property
    def param_names(self) -> list[str]:
        """Declared param names, in schema order."""
        return list(self.params_schema.get("properties", {}).keys())
