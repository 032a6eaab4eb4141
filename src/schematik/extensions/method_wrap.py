"""Chainable method installation for addons."""

from __future__ import annotations

import functools
import logging
from typing import Any

from .registry import MethodTable, SurfaceMethod

_LOGGER = logging.getLogger(__name__)


def wrap(surface: MethodTable, name: str, fn: SurfaceMethod) -> SurfaceMethod:
    """Install ``fn`` on ``surface`` so that every call stays chainable.

    The installed method calls ``fn(receiver, *args, **kwargs)``. When ``fn``
    returns ``None`` the method returns ``receiver.clone()`` instead, so addons
    that only inspect or validate the receiver still continue the chain.
    """

    @functools.wraps(fn)
    def method(receiver: Any, *args: Any, **kwargs: Any) -> Any:
        result = fn(receiver, *args, **kwargs)
        return receiver.clone() if result is None else result

    surface.install(name, method)
    _LOGGER.debug("Wrapped %s method %s", surface.label, name)
    return method
