"""
Human-readable text output formatter.
"""

from io import StringIO

from rich.console import Console
from rich.table import Table

from request_params_parser.models.endpoint import EndpointDefinition
from request_params_parser.output.formatters import BaseFormatter, register_formatter


@register_formatter("text")
class TextFormatter(BaseFormatter):
    """
    Format output as human-readable text using Rich.
    """

    def __init__(self, colorize: bool = True) -> None:
        """
        Initialize the text formatter.

        Args:
            colorize: Whether to use colors in output.
        """
        self.colorize = colorize

    def format_endpoints(self, endpoints: list[EndpointDefinition]) -> str:
        """Format endpoint definitions as a table."""
        output = StringIO()
        console = Console(file=output, force_terminal=self.colorize, width=120)

        if not endpoints:
            console.print("[yellow]No endpoint definitions registered[/yellow]")
            return output.getvalue()

        table = Table(title=f"Endpoint Definitions ({len(endpoints)})")
        table.add_column("Method", style="cyan" if self.colorize else "")
        table.add_column("Route", style="bold" if self.colorize else "")
        table.add_column("Version")
        table.add_column("Params")
        table.add_column("Required", style="dim" if self.colorize else "")

        for endpoint in sorted(endpoints, key=lambda e: (e.route, e.method.value, e.version)):
            table.add_row(
                endpoint.method.value,
                endpoint.route,
                endpoint.version,
                ", ".join(endpoint.param_names) or "-",
                ", ".join(endpoint.params_schema.get("required", [])) or "-",
            )

        console.print(table)
        return output.getvalue()
