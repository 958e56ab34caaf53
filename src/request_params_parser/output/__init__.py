"""
Output package for the request params parser CLI.

This package contains formatters for displaying endpoint definitions
in various formats (text, JSON, YAML).
"""

from request_params_parser.output.formatters import (
    BaseFormatter,
    get_formatter,
)
from request_params_parser.output.json_output import JsonFormatter
from request_params_parser.output.text_output import TextFormatter
from request_params_parser.output.yaml_output import YamlFormatter

__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "TextFormatter",
    "YamlFormatter",
    "get_formatter",
]
