"""Process-wide builder settings."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

_LOGGER = logging.getLogger(__name__)

JSON_SCHEMA_TYPES = frozenset(
    {"array", "boolean", "integer", "null", "number", "object", "string"}
)


@dataclass(frozen=True)
class SchematikSettings:
    """Read-only seed data consumed by every builder."""

    default_flags: Mapping[str, object] = field(
        default_factory=lambda: MappingProxyType({"nullable": False, "optional": False})
    )
    whitelisted_types: frozenset[str] = JSON_SCHEMA_TYPES
    allow_type_overwrite: bool = False


DEFAULT_SETTINGS = SchematikSettings()

_active = DEFAULT_SETTINGS


def active_settings() -> SchematikSettings:
    """Return the settings currently seeding new builders."""
    return _active


def configure(settings: SchematikSettings) -> SchematikSettings:
    """Replace the process-wide settings and return the previous ones.

    Meant for application startup; builders created earlier keep their flags.
    """
    global _active  # pylint: disable=global-statement
    previous = _active
    _active = settings
    _LOGGER.debug(
        "Configured settings: types=%s allow_type_overwrite=%s",
        sorted(settings.whitelisted_types),
        settings.allow_type_overwrite,
    )
    return previous
