"""Extension registry exports."""

from .method_wrap import wrap
from .registry import EXTENSIONS, Extension, ExtensionRegistry, MethodTable, SurfaceMethod

__all__ = [
    "EXTENSIONS",
    "Extension",
    "ExtensionRegistry",
    "MethodTable",
    "SurfaceMethod",
    "wrap",
]
