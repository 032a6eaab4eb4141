"""Builder usage errors."""

from __future__ import annotations


class SchematikError(Exception):
    """Base class for builder usage errors."""


class InvalidArgumentError(SchematikError):
    """Raised when an argument has an unsupported shape."""


class TypeMismatchError(SchematikError):
    """Raised when a builder object is required but something else was passed."""


class InvalidTypeError(SchematikError):
    """Raised when assigning a type that is not whitelisted."""


class OverwriteNotAllowedError(SchematikError):
    """Raised when replacing an already assigned type without permission."""


class NameCollisionError(SchematikError):
    """Raised when an extension name is already taken."""
