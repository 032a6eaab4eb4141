"""Settings loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from schematik.configuration import DEFAULT_SETTINGS, active_settings, configure
from schematik.configuration.loader import ConfigurationError, load_settings


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_settings(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schematik.yaml",
        """
default_flags:
  nullable: true
  strict: false
whitelisted_types:
  - string
  - "null"
allow_type_overwrite: true
""",
    )

    settings = load_settings(config_path)

    assert dict(settings.default_flags) == {"nullable": True, "strict": False}
    assert settings.whitelisted_types == frozenset({"string", "null"})
    assert settings.allow_type_overwrite is True


def test_empty_file_falls_back_to_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "schematik.yaml", "")

    settings = load_settings(config_path)

    assert settings == DEFAULT_SETTINGS


def test_errors_when_file_is_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_settings(tmp_path / "missing.yaml")


def test_errors_when_configuration_root_is_not_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "schematik.yaml", "[]")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping"):
        load_settings(config_path)


def test_errors_when_yaml_is_malformed(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "schematik.yaml", "default_flags: [unclosed")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_settings(config_path)


@pytest.mark.parametrize(
    ("config", "message"),
    [
        ({"unknown": 1}, "Unknown configuration keys: unknown"),
        ({"default_flags": ["nullable"]}, "default_flags must be a mapping"),
        ({"default_flags": {"nullable": {"deep": True}}}, "default_flags.nullable must be a scalar"),
        ({"whitelisted_types": "string"}, "whitelisted_types must be a list of strings"),
        ({"whitelisted_types": [1]}, "whitelisted_types entries must be strings"),
        ({"whitelisted_types": ["text"]}, "'text' is not a JSON Schema type"),
        ({"whitelisted_types": []}, "at least one type"),
        ({"allow_type_overwrite": "yes"}, "allow_type_overwrite must be a boolean"),
    ],
)
def test_errors_when_sections_are_invalid(tmp_path: Path, config: dict, message: str) -> None:
    config_path = _write_file(tmp_path / "schematik.yaml", yaml.safe_dump(config))

    with pytest.raises(ConfigurationError, match=message):
        load_settings(config_path)


def test_configure_swaps_active_settings_and_seeds_new_builders(tmp_path: Path) -> None:
    from schematik import Schematik

    config_path = _write_file(tmp_path / "schematik.yaml", "default_flags:\n  strict: true\n")
    previous = configure(load_settings(config_path))
    try:
        assert active_settings().default_flags == {"strict": True}
        assert Schematik().flag("strict") is True
        assert Schematik().flag("nullable") is None
    finally:
        configure(previous)

    assert active_settings() is previous
