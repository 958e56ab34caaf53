"""
Schema validation of raw request params.

The validator is a pluggable collaborator. The default adapter coerces
string values towards the types declared in a JSON schema and validates
the result with the jsonschema library.
"""

import re
from typing import Any, Awaitable, Callable, Mapping, Protocol, Union

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.exceptions import SchemaError

from request_params_parser.exceptions import ConfigurationError, ValidationError

ValidatedValues = Mapping[str, Any]


class SchemaValidator(Protocol):
    """
    Contract for params validators.

    ``validate`` receives every raw param and the endpoint's schema. It
    returns the validated values (or an awaitable resolving to them) and
    raises ValidationError with field-name-bearing messages on failure.
    """

    def validate(
        self,
        raw_params: Mapping[str, str],
        schema: Mapping[str, Any],
    ) -> Union[ValidatedValues, Awaitable[ValidatedValues]]:
        ...


_INTEGER = re.compile(r"^[+-]?\d+$")
_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_BOOLEANS = {"true": True, "false": False}


def _to_integer(value: str) -> int:
    if not _INTEGER.match(value):
        raise ValueError(value)
    return int(value)


def _to_number(value: str) -> float:
    if not _NUMBER.match(value):
        raise ValueError(value)
    return float(value)


def _to_boolean(value: str) -> bool:
    try:
        return _BOOLEANS[value.lower()]
    except KeyError:
        raise ValueError(value) from None


def _to_null(value: str) -> None:
    if value not in ("", "null"):
        raise ValueError(value)
    return None


_COERCERS: dict[str, Callable[[str], Any]] = {
    "integer": _to_integer,
    "number": _to_number,
    "boolean": _to_boolean,
    "null": _to_null,
    "string": str,
}


def coerce_value(value: Any, schema: Mapping[str, Any]) -> Any:
    """
    Coerce a raw string towards the JSON schema type(s) of a property.

    Types are tried in declaration order. A value that fits none of them
    is returned unchanged so that validation reports it.
    """
    if not isinstance(value, str):
        return value

    declared = schema.get("type")
    if declared is None:
        return value
    if isinstance(declared, str):
        declared = [declared]

    for type_name in declared:
        coercer = _COERCERS.get(type_name)
        if coercer is None:
            continue
        try:
            return coercer(value)
        except ValueError:
            continue
    return value


class JSONSchemaValidator:
    """
    Validate request params against a JSON schema (Draft 7).

    Compiled validators are cached per schema object; schemas are owned
    by immutable endpoint definitions so their identity is stable.
    """

    def __init__(self) -> None:
        self._compiled: dict[int, tuple[Mapping[str, Any], Draft7Validator]] = {}

    def check_schema(self, schema: Mapping[str, Any]) -> None:
        """
        Reject a malformed schema at configuration time.

        Raises:
            ConfigurationError: If the schema is not a valid Draft 7 schema.
        """
        try:
            Draft7Validator.check_schema(schema)
        except SchemaError as e:
            raise ConfigurationError(f"Invalid params schema: {e.message}") from e

    def _validator_for(self, schema: Mapping[str, Any]) -> Draft7Validator:
        cached = self._compiled.get(id(schema))
        if cached is not None and cached[0] is schema:
            return cached[1]
        validator = Draft7Validator(schema, format_checker=FormatChecker())
        self._compiled[id(schema)] = (schema, validator)
        return validator

    def coerce(
        self,
        raw_params: Mapping[str, str],
        schema: Mapping[str, Any],
    ) -> dict[str, Any]:
        """Coerce every raw param towards its declared type."""
        properties = schema.get("properties", {})
        return {
            name: coerce_value(value, properties.get(name, {}))
            for name, value in raw_params.items()
        }

    def validate(
        self,
        raw_params: Mapping[str, str],
        schema: Mapping[str, Any],
    ) -> dict[str, Any]:
        """
        Coerce and validate the raw params.

        Args:
            raw_params: The string-valued params of the request.
            schema: The endpoint's params schema.

        Returns:
            The coerced values, keyed like raw_params.

        Raises:
            ValidationError: With one message per failure, ordered by field.
        """
        values = self.coerce(raw_params, schema)
        errors = sorted(
            self._validator_for(schema).iter_errors(values),
            key=lambda e: ([str(p) for p in e.absolute_path], e.message),
        )
        if errors:
            raise ValidationError([_format_error(e) for e in errors])
        return values


def _format_error(error: Any) -> str:
    path = ".".join(str(p) for p in error.absolute_path)
    if path:
        return f"{path}: {error.message}"
    return error.message
