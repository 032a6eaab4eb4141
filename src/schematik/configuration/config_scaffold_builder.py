"""Settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schematik.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Builder settings for schematik.
# Every key is optional; omitted keys keep their built-in defaults.

# Flags every new builder starts with.
default_flags:
  nullable: false
  optional: false

# Values accepted by type assignment.
whitelisted_types:
  - array
  - boolean
  - integer
  - "null"
  - number
  - object
  - string

# Allow replacing an assigned type without forcing it.
allow_type_overwrite: false
"""


def build_placeholder_settings() -> str:
    """Build a YAML settings template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_settings(output_path: Path | str) -> Path:
    """Write the settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_settings(), encoding="utf-8")
    return destination.resolve()
