"""Built-in addons."""

from .fragments import render_fragment
from .keywords import install_keywords
from .type_builders import (
    TYPE_BUILDERS,
    ArraySchematik,
    BooleanSchematik,
    IntegerSchematik,
    NullSchematik,
    NumberSchematik,
    ObjectSchematik,
    StringSchematik,
    TypedSchematik,
    install_type_shortcuts,
)

BUILTIN_EXTENSIONS = (install_type_shortcuts, install_keywords)

__all__ = [
    "ArraySchematik",
    "BooleanSchematik",
    "IntegerSchematik",
    "NullSchematik",
    "NumberSchematik",
    "ObjectSchematik",
    "StringSchematik",
    "TypedSchematik",
    "TYPE_BUILDERS",
    "BUILTIN_EXTENSIONS",
    "install_keywords",
    "install_type_shortcuts",
    "render_fragment",
]
