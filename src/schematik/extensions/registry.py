"""Process-wide table of methods contributed by extensions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

_LOGGER = logging.getLogger(__name__)

SurfaceMethod = Callable[..., Any]
Extension = Callable[["MethodTable", "MethodTable"], Any]


class MethodTable:
    """Named methods available on one surface of the builder family.

    Every method takes the receiving builder as its first positional argument.
    """

    def __init__(self, label: str) -> None:
        self.label = label
        self._methods: dict[str, SurfaceMethod] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __repr__(self) -> str:
        return f"MethodTable({self.label!r}, names={self.names()!r})"

    def get(self, name: str) -> SurfaceMethod | None:
        return self._methods.get(name)

    def install(self, name: str, method: SurfaceMethod) -> None:
        """Install ``method`` under ``name``, replacing any earlier method."""
        if not name or not name.isidentifier():
            raise ValueError(f"Method name must be a valid identifier: {name!r}")
        if name in self._methods:
            _LOGGER.debug("Replacing %s method %s", self.label, name)
        self._methods[name] = method

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._methods))


class ExtensionRegistry:
    """Instance and class surfaces plus the set of applied extensions."""

    def __init__(self) -> None:
        self.instance_surface = MethodTable("instance")
        self.static_surface = MethodTable("static")
        self._applied: list[Extension] = []

    def is_reserved(self, name: str) -> bool:
        return name in self.instance_surface or name in self.static_surface

    def is_applied(self, extension: Extension) -> bool:
        return any(applied is extension for applied in self._applied)

    def applied_extensions(self) -> tuple[Extension, ...]:
        return tuple(self._applied)

    def use(self, extension: Extension) -> bool:
        """Apply ``extension`` once; return ``False`` if it was applied before."""
        if self.is_applied(extension):
            return False
        # marked first so an extension that re-enters use() with itself is a no-op
        self._applied.append(extension)
        try:
            extension(self.instance_surface, self.static_surface)
        except Exception:
            self._applied.remove(extension)
            raise
        _LOGGER.debug("Applied extension %s", getattr(extension, "__name__", extension))
        return True


EXTENSIONS = ExtensionRegistry()
