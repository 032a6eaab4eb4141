"""Immutable fluent builder for JSON Schema documents."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeAlias

from schematik.configuration.runtime_settings import active_settings
from schematik.extensions.registry import EXTENSIONS, Extension
from schematik.state_storage import ImmutableMap

from .errors import (
    InvalidArgumentError,
    InvalidTypeError,
    NameCollisionError,
    OverwriteNotAllowedError,
    TypeMismatchError,
)

_LOGGER = logging.getLogger(__name__)

_UNSET: Any = object()

TypedefBase: TypeAlias = "type[Schematik] | Callable[[Schematik], Schematik]"


class SchemaArgumentKind(str, Enum):
    """Shapes accepted by ``Schematik.schema``."""

    KEY = "key"
    PARTIAL_DOCUMENT = "partial_document"
    INVALID = "invalid"


def classify_schema_argument(value: object) -> SchemaArgumentKind:
    """Classify a ``schema()`` argument before acting on it."""
    if isinstance(value, str):
        return SchemaArgumentKind.KEY
    if isinstance(value, Mapping):
        return SchemaArgumentKind.PARTIAL_DOCUMENT
    return SchemaArgumentKind.INVALID


class SchematikMeta(type):
    """Resolves class-level shortcuts from the static extension surface."""

    def __getattr__(cls, name: str) -> Any:
        method = None if name.startswith("__") else EXTENSIONS.static_surface.get(name)
        if method is None:
            raise AttributeError(f"type object {cls.__name__!r} has no attribute {name!r}")

        @functools.wraps(method)
        def shortcut(*args: Any, **kwargs: Any) -> Any:
            return method(cls.receiver(), *args, **kwargs)

        return shortcut


class _ReceiverAccessor:
    """``receiver()`` returns the instance itself, or a fresh one when called on the class."""

    def __get__(self, instance: Schematik | None, owner: type[Schematik]) -> Callable[[], Schematik]:
        if instance is None:

            def fresh() -> Schematik:
                return owner()

            return fresh

        def current() -> Schematik:
            return instance

        return current


class Schematik(metaclass=SchematikMeta):
    """Base class of every builder in the family.

    The whole visible state is one flags snapshot and one schema snapshot.
    Setters never touch them; they hand a new snapshot to a clone.
    """

    __slots__ = ("_flags", "_schema")

    receiver = _ReceiverAccessor()

    def __init__(self) -> None:
        self._flags = ImmutableMap(active_settings().default_flags)
        self._schema = ImmutableMap()

    def __getattr__(self, name: str) -> Any:
        method = None if name.startswith("__") else EXTENSIONS.instance_surface.get(name)
        if method is None:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return functools.partial(method, self)

    def __str__(self) -> str:
        return "[object Schematik]"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} flags={dict(self._flags)!r} schema={self._schema.as_mutable()!r}>"

    def done(self) -> dict[str, Any]:
        """Convert the builder into a plain JSON schema document.

        Nullable builders are wrapped as ``oneOf`` a null schema and the
        current schema; the ``nullable`` flag never reaches the output.
        """
        document = self._schema.as_mutable()
        if not self.flag("nullable"):
            return document

        composite = Schematik.receiver().schema({"oneOf": [{"type": "null"}, document]})
        composite._flags = composite._flags.without("nullable").merge(
            self._flags.without("nullable")
        )
        return composite.done()

    def clone(self) -> Schematik:
        """Return a builder sharing this builder's snapshots."""
        copy = object.__new__(type(self))
        self.copy_to(copy)
        return copy

    def flag(self, key: str, value: Any = _UNSET) -> Any:
        """Get a flag value, or return a copy with the flag set to ``value``."""
        if value is _UNSET:
            return self._flags.get(key)

        result = self.clone()
        result._flags = self._flags.merge({key: value})
        return result

    def schema(self, value: str | Mapping[str, Any], deep: bool = False) -> Any:
        """Get a top-level schema value, or return a copy with ``value`` merged in.

        Args:
          value: Keyword to read, or a partial schema to merge. Builders nested
            in the partial are stored as their finished documents.
          deep: Merge nested mappings recursively instead of replacing them.

        Raises:
          InvalidArgumentError: If ``value`` is neither a string nor a mapping.
        """
        kind = classify_schema_argument(value)
        if kind is SchemaArgumentKind.KEY:
            return self._schema.get(value)  # type: ignore[arg-type]
        if kind is SchemaArgumentKind.PARTIAL_DOCUMENT:
            merged = self._schema.merge(_render_builders(value), deep=deep)
            result = self.clone()
            result._schema = merged
            return result
        raise InvalidArgumentError("Value must be a string or an object.")

    def copy_to(self, target: Schematik) -> Schematik:
        """Overwrite ``target``'s snapshots with this builder's; return ``self``."""
        if not is_schematik(target):
            raise TypeMismatchError("Cannot copy to a non-Schematik object.")
        target._flags = self._flags
        target._schema = self._schema
        return self

    def assign_type(self, value: Any = _UNSET, force: bool = False) -> Any:
        """Get the assigned type, or return a copy with ``type`` set to ``value``.

        Replacing an existing type requires ``force`` or the
        ``allow_type_overwrite`` setting.
        """
        current = self._schema.get("type")
        if value is _UNSET:
            return current

        settings = active_settings()
        if not isinstance(value, str) or value not in settings.whitelisted_types:
            raise InvalidTypeError(f"Invalid type value {value}")
        if current and not force and not settings.allow_type_overwrite:
            raise OverwriteNotAllowedError("Overwriting existing type is not allowed.")
        return self.schema({"type": value})

    @classmethod
    def use(cls, extension: Extension) -> type[Schematik]:
        """Apply an extension to the builder family once."""
        EXTENSIONS.use(extension)
        return cls

    @classmethod
    def typedef(
        cls,
        name: str,
        base: TypedefBase | Callable[..., Any] | None = None,
        expression: Callable[..., Any] | None = None,
    ) -> type[Schematik]:
        """Register ``name`` as a shortcut on both builders and the builder class.

        Args:
          name: Shortcut name; must not already exist on either surface.
          base: Builder class, or factory taking the receiver. Defaults to the
            registered ``object`` shortcut.
          expression: Callable receiving the new instance and the shortcut's
            arguments.

        Returns:
          The builder class, for chaining. The installed shortcut returns the
          expression's result, or the new instance when the expression
          returns ``None``.

        Raises:
          NameCollisionError: If ``name`` is taken.
        """
        if expression is None:
            if isinstance(base, type):
                expression = _identity
            else:
                base, expression = None, base
        if not callable(expression):
            raise InvalidArgumentError("Typedef expression must be callable.")
        if base is not None and not callable(base):
            raise InvalidArgumentError("Typedef base must be a Schematik class or a factory.")
        if EXTENSIONS.is_reserved(name) or hasattr(Schematik, name):
            raise NameCollisionError(f"Cannot define type named '{name}'")

        def shortcut(receiver: Schematik, *args: Any, **kwargs: Any) -> Any:
            instance = instantiate(receiver.receiver(), base or _default_base())
            result = expression(instance, *args, **kwargs)
            return instance if result is None else result

        shortcut.__name__ = shortcut.__qualname__ = name
        EXTENSIONS.instance_surface.install(name, shortcut)
        EXTENSIONS.static_surface.install(name, shortcut)
        _LOGGER.debug("Defined type shortcut %s", name)
        return cls


def is_schematik(value: object) -> bool:
    """Return whether ``value`` is a builder of this family."""
    return isinstance(value, Schematik)


def _render_builders(value: Any) -> Any:
    # stored snapshots never hold builders, so ImmutableMap values are skipped
    if is_schematik(value):
        return value.done()
    if isinstance(value, ImmutableMap):
        return value
    if isinstance(value, Mapping):
        return {key: _render_builders(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_render_builders(item) for item in value]
    return value


def instantiate(receiver: Schematik, base: TypedefBase) -> Schematik:
    """Create a ``base`` builder that carries over ``receiver``'s flags."""
    if isinstance(base, type):
        if not issubclass(base, Schematik):
            raise TypeMismatchError("Typedef base must be a Schematik class.")
        instance = base()
        instance._flags = instance._flags.merge(receiver._flags)  # pylint: disable=protected-access
        return instance

    instance = base(receiver)
    if not is_schematik(instance):
        raise TypeMismatchError("Typedef base must produce a Schematik object.")
    return instance


def _default_base() -> Callable[..., Any]:
    factory = EXTENSIONS.static_surface.get("object")
    if factory is None:
        raise InvalidArgumentError("No 'object' shortcut is registered as the default base.")
    return factory


def _identity(instance: Schematik) -> Schematik:
    return instance
