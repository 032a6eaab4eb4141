"""Persistent mapping used for builder flags and schema fragments."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any


class ImmutableMap(Mapping[str, Any]):
    """Read-only mapping whose updates return new instances.

    Nested mappings are stored as ``ImmutableMap`` and sequences as tuples, so a
    snapshot can be shared between builders without copying.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        frozen = {key: freeze(value) for key, value in (entries or {}).items()}
        object.__setattr__(self, "_entries", frozen)

    @classmethod
    def _adopt(cls, entries: dict[str, Any]) -> ImmutableMap:
        # entries must already be frozen and owned by nobody else
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_entries", entries)
        return instance

    def __getitem__(self, key: str) -> Any:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"

    def merge(self, partial: Mapping[str, Any], *, deep: bool = False) -> ImmutableMap:
        """Return a new map with ``partial`` applied on top of this one.

        Args:
          partial: Entries to apply; they win on key conflicts.
          deep: Merge nested mappings recursively instead of replacing them.

        Raises:
          TypeError: If ``partial`` is not a mapping.
        """
        if not isinstance(partial, Mapping):
            raise TypeError(f"Cannot merge {type(partial).__name__} into {type(self).__name__}.")

        merged = dict(self._entries)
        for key, value in partial.items():
            current = merged.get(key)
            if deep and isinstance(current, ImmutableMap) and isinstance(value, Mapping):
                merged[key] = current.merge(value, deep=True)
            else:
                merged[key] = freeze(value)
        return ImmutableMap._adopt(merged)

    def without(self, key: str) -> ImmutableMap:
        """Return a new map omitting ``key``."""
        if key not in self._entries:
            return self
        remaining = {name: value for name, value in self._entries.items() if name != key}
        return ImmutableMap._adopt(remaining)

    def as_mutable(self) -> dict[str, Any]:
        """Return a deep, independently owned ``dict`` copy."""
        return {key: thaw(value) for key, value in self._entries.items()}


def freeze(value: Any) -> Any:
    """Convert caller-supplied containers into their immutable counterparts."""
    if isinstance(value, ImmutableMap):
        return value
    if isinstance(value, Mapping):
        return ImmutableMap(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of ``freeze``: produce plain ``dict``/``list`` structures."""
    if isinstance(value, ImmutableMap):
        return value.as_mutable()
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value
