"""Keywords available on every builder regardless of its type."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from schematik.builder_core import InvalidArgumentError, Schematik
from schematik.extensions import MethodTable, wrap

from .fragments import render_fragment

COMPOSITE_KEYWORDS = {
    "one_of": "oneOf",
    "any_of": "anyOf",
    "all_of": "allOf",
}


def unique(receiver: Schematik) -> Schematik:
    return receiver.schema({"uniqueItems": True})


def nullable(receiver: Schematik, value: bool = True) -> Schematik:
    return receiver.flag("nullable", value)


def optional(receiver: Schematik, value: bool = True) -> Schematik:
    return receiver.flag("optional", value)


def title(receiver: Schematik, text: str) -> Schematik:
    return receiver.schema({"title": text})


def describe(receiver: Schematik, text: str) -> Schematik:
    return receiver.schema({"description": text})


def enum(receiver: Schematik, *values: Any) -> Schematik:
    if not values:
        raise InvalidArgumentError("enum requires at least one value.")
    return receiver.schema({"enum": list(values)})


def default(receiver: Schematik, value: Any) -> Schematik:
    return receiver.schema({"default": value})


def composite(keyword: str) -> Callable[..., Schematik]:
    """Build a method combining its arguments under ``keyword``."""

    def combine(receiver: Schematik, *choices: Any) -> Schematik:
        if not choices:
            raise InvalidArgumentError(f"{keyword} requires at least one schema.")
        return receiver.schema({keyword: [render_fragment(choice) for choice in choices]})

    combine.__name__ = combine.__qualname__ = keyword
    return combine


def install_keywords(instance_surface: MethodTable, static_surface: MethodTable) -> None:
    """Install the family-wide keywords; composites also work on the class."""
    for method in (unique, nullable, optional, title, describe, enum, default):
        wrap(instance_surface, method.__name__, method)
    for name, keyword in COMPOSITE_KEYWORDS.items():
        combine = composite(keyword)
        wrap(instance_surface, name, combine)
        wrap(static_surface, name, combine)
