"""Builder core exports."""

from .errors import (
    InvalidArgumentError,
    InvalidTypeError,
    NameCollisionError,
    OverwriteNotAllowedError,
    SchematikError,
    TypeMismatchError,
)
from .schematik import (
    SchemaArgumentKind,
    Schematik,
    classify_schema_argument,
    instantiate,
    is_schematik,
)

__all__ = [
    "Schematik",
    "SchemaArgumentKind",
    "classify_schema_argument",
    "instantiate",
    "is_schematik",
    "SchematikError",
    "InvalidArgumentError",
    "InvalidTypeError",
    "NameCollisionError",
    "OverwriteNotAllowedError",
    "TypeMismatchError",
]
