"""Family-wide keyword tests."""

from __future__ import annotations

import pytest
from schematik import Schematik
from schematik.builder_core import InvalidArgumentError


def test_unique_is_available_on_every_builder() -> None:
    builder = Schematik().unique()

    assert isinstance(builder, Schematik)
    assert builder.schema("uniqueItems") is True


def test_nullable_and_optional_set_flags() -> None:
    builder = Schematik.string().nullable().optional()

    assert builder.flag("nullable") is True
    assert builder.flag("optional") is True
    assert builder.nullable(False).flag("nullable") is False


def test_annotations() -> None:
    document = (
        Schematik.string()
        .title("Colour")
        .describe("Primary colour")
        .enum("red", "green")
        .default("red")
        .done()
    )

    assert document == {
        "type": "string",
        "title": "Colour",
        "description": "Primary colour",
        "enum": ["red", "green"],
        "default": "red",
    }


def test_enum_requires_values() -> None:
    with pytest.raises(InvalidArgumentError):
        Schematik().enum()


def test_composites_on_class_surface() -> None:
    document = Schematik.one_of(Schematik.string(), {"type": "integer"}).done()

    assert document == {"oneOf": [{"type": "string"}, {"type": "integer"}]}


def test_composites_on_instance_surface() -> None:
    document = Schematik().any_of(Schematik.string()).all_of(Schematik.string().min_length(1))

    assert document.done() == {
        "anyOf": [{"type": "string"}],
        "allOf": [{"type": "string", "minLength": 1}],
    }


def test_composite_requires_choices() -> None:
    with pytest.raises(InvalidArgumentError, match="oneOf requires at least one schema."):
        Schematik.one_of()


def test_nullable_children_are_rendered_as_composites() -> None:
    document = Schematik.array().of(Schematik.number().nullable()).done()

    assert document["items"] == {"oneOf": [{"type": "null"}, {"type": "number"}]}
