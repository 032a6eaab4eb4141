"""Settings scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from schematik.configuration import DEFAULT_SETTINGS, load_settings
from schematik.configuration.config_scaffold_builder import (
    build_placeholder_settings,
    write_placeholder_settings,
)


def test_build_placeholder_settings_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_settings()

    assert "default_flags:" in scaffold
    assert "whitelisted_types:" in scaffold
    assert "allow_type_overwrite:" in scaffold


def test_written_scaffold_loads_as_default_settings(tmp_path: Path) -> None:
    output_path = tmp_path / "schematik.yaml"

    written_path = write_placeholder_settings(output_path)

    assert written_path == output_path.resolve()
    assert load_settings(written_path) == DEFAULT_SETTINGS


def test_write_placeholder_settings_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "schematik.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_settings(output_path)
