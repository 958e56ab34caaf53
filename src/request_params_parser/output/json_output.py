"""
JSON output formatter.
"""

import json

from request_params_parser.models.endpoint import EndpointDefinition
from request_params_parser.output.formatters import BaseFormatter, register_formatter


@register_formatter("json")
class JsonFormatter(BaseFormatter):
    """
    Format output as JSON.
    """

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def format_endpoints(self, endpoints: list[EndpointDefinition]) -> str:
        """Format endpoint definitions as JSON."""
        data = {
            "total": len(endpoints),
            "endpoints": [self.endpoint_to_dict(ep) for ep in endpoints],
        }

        return json.dumps(data, indent=self.indent, default=str)
