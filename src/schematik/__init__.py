"""Fluent, immutable JSON Schema builder."""

import logging

from .addons import (
    BUILTIN_EXTENSIONS,
    ArraySchematik,
    BooleanSchematik,
    IntegerSchematik,
    NullSchematik,
    NumberSchematik,
    ObjectSchematik,
    StringSchematik,
)
from .builder_core import (
    InvalidArgumentError,
    InvalidTypeError,
    NameCollisionError,
    OverwriteNotAllowedError,
    Schematik,
    SchematikError,
    TypeMismatchError,
    is_schematik,
)
from .extensions import EXTENSIONS, wrap

logging.getLogger(__name__).addHandler(logging.NullHandler())

for _extension in BUILTIN_EXTENSIONS:
    Schematik.use(_extension)

__all__ = [
    "Schematik",
    "ArraySchematik",
    "BooleanSchematik",
    "IntegerSchematik",
    "NullSchematik",
    "NumberSchematik",
    "ObjectSchematik",
    "StringSchematik",
    "EXTENSIONS",
    "wrap",
    "is_schematik",
    "SchematikError",
    "InvalidArgumentError",
    "InvalidTypeError",
    "NameCollisionError",
    "OverwriteNotAllowedError",
    "TypeMismatchError",
]
