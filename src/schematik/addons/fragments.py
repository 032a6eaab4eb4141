"""Conversion of addon arguments into schema fragments."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schematik.builder_core import InvalidArgumentError, TypeMismatchError, is_schematik
from schematik.state_storage import freeze, thaw


def render_fragment(value: Any) -> dict[str, Any]:
    """Return a plain schema document for a builder or a schema mapping."""
    if is_schematik(value):
        return value.done()
    if isinstance(value, Mapping):
        return thaw(freeze(value))
    raise TypeMismatchError("Expected a Schematik object or a schema mapping.")


def require_count(value: Any, keyword: str) -> int:
    """Validate a non-negative integer keyword value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{keyword} must be an integer.")
    if value < 0:
        raise InvalidArgumentError(f"{keyword} must not be negative.")
    return value
