"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_settings,
    write_placeholder_settings,
)
from .loader import ConfigurationError, load_settings
from .runtime_settings import (
    DEFAULT_SETTINGS,
    JSON_SCHEMA_TYPES,
    SchematikSettings,
    active_settings,
    configure,
)

__all__ = [
    "SchematikSettings",
    "DEFAULT_SETTINGS",
    "JSON_SCHEMA_TYPES",
    "active_settings",
    "configure",
    "ConfigurationError",
    "load_settings",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_settings",
    "write_placeholder_settings",
]
