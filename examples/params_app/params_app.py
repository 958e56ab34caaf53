"""
Sample FastAPI application using the request params parser.

Run with ``uvicorn params_app:app`` from this directory.
"""

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from request_params_parser import (
    EndpointDefinition,
    ParserConfig,
    RequestParamsParser,
    params,
    unparsed_params,
)

PROJECT_PARAMS = {
    "type": "object",
    "properties": {
        "user_id": {"type": "number"},
        "project_language": {"type": "string"},
        "integer": {"type": "integer"},
    },
    "required": ["user_id", "project_language"],
}

config = ParserConfig(
    endpoints=[
        EndpointDefinition(
            route="/users/:user_id/projects/:project_language",
            method="GET",
            version="1.0",
            params_schema=PROJECT_PARAMS,
            name="user_projects",
        ),
        EndpointDefinition(
            route="/users/:user_id/projects/:project_language",
            method="GET",
            version="2.0",
            params_schema=PROJECT_PARAMS,
            name="user_projects",
        ),
    ],
    api_version=lambda request: request.headers.get("x-api-version", "1.0"),
)


@config.on_invalid_params
def reject(error):
    return PlainTextResponse(error.message, status_code=422)


app = FastAPI(title="Request Params Parser Example")
app.add_middleware(RequestParamsParser, config=config)


@app.get("/users/{user_id}/projects/{project_language}")
def user_projects(request: Request, validated=Depends(params)) -> dict:
    return {
        "raw": unparsed_params(request),
        "params": validated.to_dict(),
    }
