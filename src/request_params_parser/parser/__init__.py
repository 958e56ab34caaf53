"""
Parser package for the request params parser.

This package contains modules for:
- Raw params extraction (path captures and query string)
- Schema validation and type coercion (using jsonschema)
"""

from request_params_parser.parser.params_extractor import ParamsExtractor
from request_params_parser.parser.schema_validator import (
    JSONSchemaValidator,
    SchemaValidator,
    coerce_value,
)

__all__ = [
    "JSONSchemaValidator",
    "ParamsExtractor",
    "SchemaValidator",
    "coerce_value",
]
