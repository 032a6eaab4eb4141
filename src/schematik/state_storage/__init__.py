"""Immutable state storage exports."""

from .immutable_map import ImmutableMap, freeze, thaw

__all__ = [
    "ImmutableMap",
    "freeze",
    "thaw",
]
