"""Builders for the JSON Schema primitive types."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, ClassVar

from schematik.builder_core import InvalidArgumentError, Schematik, is_schematik
from schematik.extensions import MethodTable

from .fragments import render_fragment, require_count


class TypedSchematik(Schematik):
    """Builder whose schema starts with a fixed ``type``."""

    __slots__ = ()

    json_type: ClassVar[str]

    def __init__(self) -> None:
        super().__init__()
        self.assign_type(self.json_type).copy_to(self)


class ArraySchematik(TypedSchematik):
    __slots__ = ()
    json_type = "array"

    def of(self, item: Schematik | Mapping[str, Any]) -> ArraySchematik:
        """Set the schema every array item must match."""
        return self.schema({"items": render_fragment(item)})

    def min_count(self, count: int) -> ArraySchematik:
        return self.schema({"minItems": require_count(count, "minItems")})

    def max_count(self, count: int) -> ArraySchematik:
        return self.schema({"maxItems": require_count(count, "maxItems")})


class BooleanSchematik(TypedSchematik):
    __slots__ = ()
    json_type = "boolean"


class NullSchematik(TypedSchematik):
    __slots__ = ()
    json_type = "null"


class NumberSchematik(TypedSchematik):
    __slots__ = ()
    json_type = "number"

    def minimum(self, value: float, exclusive: bool = False) -> NumberSchematik:
        keyword = "exclusiveMinimum" if exclusive else "minimum"
        return self.schema({keyword: _require_number(value, keyword)})

    def maximum(self, value: float, exclusive: bool = False) -> NumberSchematik:
        keyword = "exclusiveMaximum" if exclusive else "maximum"
        return self.schema({keyword: _require_number(value, keyword)})

    def multiple_of(self, value: float) -> NumberSchematik:
        if _require_number(value, "multipleOf") <= 0:
            raise InvalidArgumentError("multipleOf must be greater than zero.")
        return self.schema({"multipleOf": value})


class IntegerSchematik(NumberSchematik):
    __slots__ = ()
    json_type = "integer"


class ObjectSchematik(TypedSchematik):
    """Object builder; additional properties are allowed until restricted."""

    __slots__ = ()
    json_type = "object"

    def __init__(self) -> None:
        super().__init__()
        self.schema({"additionalProperties": True}).copy_to(self)

    def with_property(self, name: str, child: Schematik | Mapping[str, Any]) -> ObjectSchematik:
        """Set a property schema; it is required unless ``child`` is flagged optional.

        Redefining a property replaces its schema and required status.
        """
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("Property name must be a non-empty string.")
        properties = dict(self.schema("properties") or {})
        properties[name] = render_fragment(child)
        optional = is_schematik(child) and child.flag("optional")
        required = tuple(self.schema("required") or ())
        if optional:
            required = tuple(item for item in required if item != name)
        elif name not in required:
            required = (*required, name)
        if not required and self.schema("required") is None:
            return self.schema({"properties": properties})
        return self.schema({"properties": properties, "required": list(required)})

    def min_count(self, count: int) -> ObjectSchematik:
        return self.schema({"minProperties": require_count(count, "minProperties")})

    def max_count(self, count: int) -> ObjectSchematik:
        return self.schema({"maxProperties": require_count(count, "maxProperties")})

    def additional(self, value: bool | Schematik | Mapping[str, Any]) -> ObjectSchematik:
        """Allow, forbid or constrain properties not listed explicitly."""
        if isinstance(value, bool):
            return self.schema({"additionalProperties": value})
        return self.schema({"additionalProperties": render_fragment(value)})


class StringSchematik(TypedSchematik):
    __slots__ = ()
    json_type = "string"

    def matches(self, pattern: str | re.Pattern[str]) -> StringSchematik:
        """Constrain values to a regular expression."""
        source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        if not isinstance(source, str):
            raise InvalidArgumentError("Pattern must be a string or a compiled regular expression.")
        return self.schema({"pattern": source})

    def min_length(self, length: int) -> StringSchematik:
        return self.schema({"minLength": require_count(length, "minLength")})

    def max_length(self, length: int) -> StringSchematik:
        return self.schema({"maxLength": require_count(length, "maxLength")})

    def format(self, name: str) -> StringSchematik:
        return self.schema({"format": name})


TYPE_BUILDERS: dict[str, type[TypedSchematik]] = {
    builder.json_type: builder
    for builder in (
        ObjectSchematik,
        ArraySchematik,
        BooleanSchematik,
        IntegerSchematik,
        NullSchematik,
        NumberSchematik,
        StringSchematik,
    )
}


def install_type_shortcuts(_instance_surface: MethodTable, _static_surface: MethodTable) -> None:
    """Register one shortcut per primitive type; typedef covers both surfaces."""
    for name, builder in TYPE_BUILDERS.items():
        Schematik.typedef(name, builder)


def _require_number(value: Any, keyword: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{keyword} must be a number.")
    return value
