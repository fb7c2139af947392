"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from proto_config_schema.configuration import DEFAULT_SETTINGS
from proto_config_schema.generation_run import GenerationRunError, execute_schema_generation


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="proto-config-schema")
def cli() -> None:
    """Generate config_schema.json from the compiled .proto descriptor sets below
    the current directory.

    Every matching file must hold a binary FileDescriptorSet (protoc
    --descriptor_set_out). Fields of all top-level messages are merged into one
    flat JSON Schema object.
    """
    try:
        execute_schema_generation(DEFAULT_SETTINGS)
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"JSON schema has been generated as '{DEFAULT_SETTINGS.output_filename}'")


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
