"""
Validated params view.

The view is a concrete pydantic model whose fields are derived from the
matched endpoint's schema. A model class is built once per endpoint
definition and instantiated for every validated request.
"""

from typing import Any, ClassVar, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr, create_model

from request_params_parser.models.endpoint import EndpointDefinition


class ValidatedParams(BaseModel):
    """
    Typed, schema-conformant view of a request's params.

    Declared params are model fields (and therefore attributes) unless
    their name clashes with the view's own API. Every declared param is a
    key of the view, present in the request or not, and every validated
    value is reachable by key, so the view's keys are always a superset of
    both the schema's and the raw params' keys.
    """

    model_config = ConfigDict(extra="allow", protected_namespaces=())

    declared_params: ClassVar[tuple[str, ...]] = ()

    _values: dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> "ValidatedParams":
        """Build a view from a mapping of validated values."""
        view = cls.model_validate(
            {k: v for k, v in values.items() if _is_attribute_name(k)}
        )
        view._values = dict(values)
        return view

    def fields(self) -> list[str]:
        """All param names: declared ones first, then the rest in arrival order."""
        names = list(self.declared_params)
        names.extend(k for k in type(self).model_fields if k not in names)
        names.extend(k for k in self._values if k not in names)
        return names

    def get(self, name: str, default: Any = None) -> Any:
        if name in self._values:
            return self._values[name]
        if name in type(self).model_fields:
            return getattr(self, name)
        return default

    def to_dict(self) -> dict[str, Any]:
        """Return every param as a plain dict, declared-but-absent ones as None."""
        return {name: self.get(name) for name in self.fields()}

    def __getitem__(self, name: str) -> Any:
        if name not in self:
            raise KeyError(name)
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return (
            name in self._values
            or name in self.declared_params
            or name in type(self).model_fields
        )

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.fields())

    def __len__(self) -> int:
        return len(self.fields())


def _is_attribute_name(name: str) -> bool:
    return (
        name.isidentifier()
        and not name.startswith("_")
        and not hasattr(ValidatedParams, name)
    )


def build_params_model(
    endpoint: EndpointDefinition,
    model_name: Optional[str] = None,
) -> type[ValidatedParams]:
    """
    Create the view model for an endpoint definition.

    Args:
        endpoint: The endpoint whose schema drives the field set.
        model_name: Optional class name for the generated model.

    Returns:
        A ValidatedParams subclass listing every declared param, with one
        optional field per declared param usable as an attribute.
    """
    declared = tuple(endpoint.param_names)

    class DeclaredParams(ValidatedParams):
        declared_params = declared

    fields: dict[str, Any] = {
        name: (Optional[Any], None)
        for name in declared
        if _is_attribute_name(name)
    }
    name = model_name or f"{endpoint.method.value.title()}{_camel(endpoint.route)}V{_camel(endpoint.version)}Params"
    return create_model(name, __base__=DeclaredParams, **fields)


def _camel(text: str) -> str:
    parts = [p for p in "".join(c if c.isalnum() else " " for c in text).split() if p]
    return "".join(p[:1].upper() + p[1:] for p in parts)
