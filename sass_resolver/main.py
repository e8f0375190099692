"""Command-line entry point for inspecting stylesheet import resolution."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.table import Table

from .console import console
from .console import err_console
from .logging_setup import init_json_logging
from .settings import ResolverSettings
from .settings import SettingsError
from .settings import load_settings


def _load(config_file: Path | None, include_paths: tuple[Path, ...] = ()) -> ResolverSettings:
    try:
        settings = load_settings(config_file=config_file)
    except SettingsError as e:
        raise click.ClickException(str(e)) from e

    if include_paths:
        settings.include_paths = list(include_paths) + settings.include_paths
    return settings


@click.group()
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), help="Write JSONL logs to this file")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
)
def cli(log_file: Path | None, log_level: str):
    """Resolve stylesheet import specifiers against include paths."""
    if log_file is not None:
        init_json_logging(log_file, log_level)


@cli.command()
@click.argument("specifier")
@click.option(
    "--include-path",
    "-I",
    "include_paths",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Search root (repeatable, searched in order before configured roots)",
)
@click.option("--config", "config_file", type=click.Path(dir_okay=False, path_type=Path), help="Settings file")
@click.option("--url", "as_url", is_flag=True, help="Print a file:// URL instead of a path")
def resolve(specifier: str, include_paths: tuple[Path, ...], config_file: Path | None, as_url: bool):
    """Resolve SPECIFIER and print the matching file."""
    settings = _load(config_file, include_paths)
    if not settings.include_paths:
        raise click.UsageError("No include paths given (use -I or configure include_paths)")

    resolver = settings.create_resolver()
    result = resolver.resolve(specifier)
    if result is None:
        err_console.print(f"[red]Not found:[/red] {specifier}", highlight=False)
        sys.exit(1)

    output = result.to_url().href if as_url else str(result.path)
    console.print(output, soft_wrap=True, highlight=False, markup=False)


@cli.command("config")
@click.option("--config", "config_file", type=click.Path(dir_okay=False, path_type=Path), help="Settings file")
def show_config(config_file: Path | None):
    """Show the effective resolver settings."""
    settings = _load(config_file)

    table = Table(title="sass-resolver settings", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="green")
    table.add_column("Value")
    roots = "\n".join(str(p) for p in settings.include_paths) or "(none)"
    table.add_row("include_paths", roots)
    table.add_row("extensions", ", ".join(settings.extensions))
    table.add_row("manifest_fields", ", ".join(settings.manifest_fields))
    console.print(table)


def main():
    cli()


if __name__ == "__main__":
    main()
