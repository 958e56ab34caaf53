"""
YAML output formatter.
"""

import yaml

from request_params_parser.models.endpoint import EndpointDefinition
from request_params_parser.output.formatters import BaseFormatter, register_formatter


@register_formatter("yaml")
class YamlFormatter(BaseFormatter):
    """
    Format output as YAML.
    """

    def format_endpoints(self, endpoints: list[EndpointDefinition]) -> str:
        """Format endpoint definitions as YAML."""
        data = {
            "total": len(endpoints),
            "endpoints": [self.endpoint_to_dict(ep) for ep in endpoints],
        }

        return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
