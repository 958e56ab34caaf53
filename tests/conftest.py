"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path
from typing import Any, Optional

import pytest
from starlette.requests import Request

from request_params_parser.models.endpoint import EndpointDefinition


@pytest.fixture
def examples_path() -> Path:
    """Get the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def project_schema() -> dict[str, Any]:
    """Params schema of the user projects endpoint."""
    return {
        "type": "object",
        "properties": {
            "user_id": {"type": "number"},
            "project_language": {"type": "string"},
            "integer": {"type": "integer"},
        },
        "required": ["user_id", "project_language"],
    }


@pytest.fixture
def project_endpoint(project_schema: dict[str, Any]) -> EndpointDefinition:
    """The user projects endpoint, version 1.0."""
    return EndpointDefinition(
        route="/users/:user_id/projects/:project_language",
        method="GET",
        version="1.0",
        params_schema=project_schema,
        name="user_projects",
    )


def make_request(
    path: str = "/users/12/projects/ruby",
    method: str = "GET",
    query_string: bytes = b"",
    headers: Optional[list[tuple[bytes, bytes]]] = None,
) -> Request:
    """Build a bare request for unit tests."""
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "root_path": "",
            "query_string": query_string,
            "headers": headers or [],
        }
    )


@pytest.fixture
def request_factory():
    """Factory for bare requests."""
    return make_request
