"""Command line interface entry point."""

from __future__ import annotations

import sys

import click
import yaml

from schematik.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    SchematikSettings,
    active_settings,
    load_settings,
    write_placeholder_settings,
)
from schematik.extensions import EXTENSIONS


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schematik")
def cli() -> None:
    """Fluent JSON Schema builder utility."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML settings template with guidance comments."""
    try:
        resolved_output = write_placeholder_settings(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="show-config")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML settings file; built-in defaults are shown when omitted",
)
def show_config(config_path: str | None) -> None:
    """Print the effective builder settings as YAML."""
    try:
        settings = load_settings(config_path) if config_path else active_settings()
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    click.echo(yaml.safe_dump(_settings_document(settings), sort_keys=False), nl=False)


@cli.command(name="list-extensions")
def list_extensions() -> None:
    """List the names registered on the instance and class surfaces."""
    for surface in (EXTENSIONS.instance_surface, EXTENSIONS.static_surface):
        click.echo(f"{surface.label}:")
        for name in surface.names():
            click.echo(f"  {name}")


def _settings_document(settings: SchematikSettings) -> dict[str, object]:
    return {
        "default_flags": dict(settings.default_flags),
        "whitelisted_types": sorted(settings.whitelisted_types),
        "allow_type_overwrite": settings.allow_type_overwrite,
    }


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
