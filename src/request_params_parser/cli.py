"""
Command-line interface for the request params parser.

This module provides the CLI using Click framework for inspecting the
params parser configuration of an application.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from request_params_parser import __version__
from request_params_parser.config import find_config_file, load_config

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="request-params-parser")
def cli() -> None:
    """Request Params Parser - Inspect endpoint definitions and middleware setup."""


@cli.command()
@click.option(
    "--app",
    "-a",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Path to the application file or package directory.",
)
@click.option(
    "--app-var",
    type=str,
    default="app",
    help="Name of the application variable (default: app).",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file path. If not specified, prints to stdout.",
)
def routes(
    app: Path,
    app_var: str,
    output_format: str,
    output: Optional[Path],
) -> None:
    """List the endpoint definitions registered on the params parser."""
    from request_params_parser.app_loader import AppLoader, find_parser_config
    from request_params_parser.output.formatters import get_formatter

    try:
        application = AppLoader(app_path=app, app_variable=app_var).load()
        config = find_parser_config(application)
        if config is None:
            console.print("[red]Error:[/red] the application does not use RequestParamsParser")
            raise click.Abort()

        formatted_output = get_formatter(output_format).format_endpoints(config.endpoints)

        if output:
            output.write_text(formatted_output, encoding="utf-8")
            console.print(f"[green]Results written to:[/green] {output}")
        else:
            sys.stdout.write(formatted_output)
            sys.stdout.flush()

    except click.Abort:
        raise
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort()


@cli.command()
@click.option(
    "--app",
    "-a",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Path to the application file or package directory.",
)
@click.option(
    "--app-var",
    type=str,
    default="app",
    help="Name of the application variable (default: app).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Settings file to validate. Searched for next to the app if omitted.",
)
def check(app: Path, app_var: str, config_path: Optional[Path]) -> None:
    """Verify the middleware order and configuration of an application."""
    from request_params_parser.app_loader import AppLoader, find_parser_config
    from request_params_parser.exceptions import ConfigurationError
    from request_params_parser.middleware.composition import check_middleware_order
    from request_params_parser.middleware.params_parser import RequestParamsParser

    try:
        application = AppLoader(app_path=app, app_variable=app_var).load()
        config = find_parser_config(application)
        if config is None:
            console.print("[red]Error:[/red] the application does not use RequestParamsParser")
            raise click.Abort()

        check_middleware_order(application)
        # Building a parser validates endpoints and schemas
        RequestParamsParser(app=application, config=config)

        settings_path = config_path or find_config_file(app.parent if app.is_file() else app)
        if settings_path is not None:
            load_config(settings_path)
            console.print(f"[blue]Settings file:[/blue] {settings_path}")

        console.print(
            f"[green]OK[/green] {len(config.endpoints)} endpoint definition(s), "
            f"middleware order verified"
        )

    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise click.Abort()
    except click.Abort:
        raise
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort()


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
