"""
Per-request context.
"""

from dataclasses import dataclass, field
from typing import Optional

import anyio
from starlette.responses import Response

from request_params_parser.exceptions import ValidationError
from request_params_parser.models.endpoint import EndpointDefinition
from request_params_parser.models.params import ValidatedParams


@dataclass
class RequestContext:
    """
    State owned by one physical request.

    Created the first time the parser sees the request, mutated only by
    the parser's pipeline and discarded with the request.
    """

    raw_params: dict[str, str] = field(default_factory=dict)
    # Whether a declared route matched the request path, whatever its version
    routed: bool = False
    endpoint: Optional[EndpointDefinition] = None
    validated: Optional[ValidatedParams] = None
    error: Optional[ValidationError] = None
    # Response chosen by a hook to halt the request, replayed on later passes
    response: Optional[Response] = None
    executed: bool = False
    completed: Optional[anyio.Event] = field(default=None, repr=False, compare=False)

    @property
    def matched(self) -> bool:
        """Whether an endpoint definition was resolved for the request."""
        return self.endpoint is not None

    @property
    def halted(self) -> bool:
        """Whether the pipeline decided to stop the request with a response."""
        return self.response is not None
