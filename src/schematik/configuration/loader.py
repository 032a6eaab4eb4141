"""Settings loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .runtime_settings import DEFAULT_SETTINGS, JSON_SCHEMA_TYPES, SchematikSettings


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_settings(config_path: Path | str) -> SchematikSettings:
    """Load and validate a YAML settings file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(set(parsed) - {"default_flags", "whitelisted_types", "allow_type_overwrite"})
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(map(str, unknown))}")

    default_flags = _parse_default_flags(parsed.get("default_flags"))
    whitelisted_types = _parse_whitelisted_types(parsed.get("whitelisted_types"))
    allow_type_overwrite = _parse_bool(
        parsed.get("allow_type_overwrite", DEFAULT_SETTINGS.allow_type_overwrite),
        "allow_type_overwrite",
    )

    return SchematikSettings(
        default_flags=default_flags,
        whitelisted_types=whitelisted_types,
        allow_type_overwrite=allow_type_overwrite,
    )


def _parse_default_flags(value: Any) -> Mapping[str, object]:
    if value is None:
        return DEFAULT_SETTINGS.default_flags
    if not isinstance(value, Mapping):
        raise ConfigurationError("default_flags must be a mapping.")
    flags: dict[str, object] = {}
    for key, flag_value in value.items():
        if not isinstance(key, str) or not key.strip():
            raise ConfigurationError("default_flags keys must be non-empty strings.")
        if isinstance(flag_value, (Mapping, list)):
            raise ConfigurationError(f"default_flags.{key} must be a scalar value.")
        flags[key.strip()] = flag_value
    return MappingProxyType(flags)


def _parse_whitelisted_types(value: Any) -> frozenset[str]:
    if value is None:
        return DEFAULT_SETTINGS.whitelisted_types
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("whitelisted_types must be a list of strings.")
    types: set[str] = set()
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError("whitelisted_types entries must be strings.")
        stripped = item.strip()
        if stripped not in JSON_SCHEMA_TYPES:
            raise ConfigurationError(f"whitelisted_types entry '{stripped}' is not a JSON Schema type.")
        types.add(stripped)
    if not types:
        raise ConfigurationError("whitelisted_types must contain at least one type.")
    return frozenset(types)


def _parse_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
