"""CLI command integration tests."""

from __future__ import annotations

from pathlib import Path

import yaml
from click.testing import CliRunner
from schematik.cli import cli


def test_generate_then_show_config_round_trip(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "schematik.yaml"

    generated = runner.invoke(cli, ["generate-config", "--output", str(output_path)])
    shown = runner.invoke(cli, ["show-config", "--config", str(output_path)])

    assert generated.exit_code == 0
    assert generated.output.strip() == str(output_path.resolve())
    assert shown.exit_code == 0
    assert yaml.safe_load(shown.output) == {
        "default_flags": {"nullable": False, "optional": False},
        "whitelisted_types": ["array", "boolean", "integer", "null", "number", "object", "string"],
        "allow_type_overwrite": False,
    }


def test_show_config_without_file_prints_active_settings() -> None:
    result = CliRunner().invoke(cli, ["show-config"])

    assert result.exit_code == 0
    assert yaml.safe_load(result.output)["allow_type_overwrite"] is False


def test_list_extensions_prints_both_surfaces() -> None:
    result = CliRunner().invoke(cli, ["list-extensions"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "instance:"
    assert "static:" in lines
    assert "  unique" in lines[: lines.index("static:")]
    assert "  one_of" in lines[lines.index("static:") :]
