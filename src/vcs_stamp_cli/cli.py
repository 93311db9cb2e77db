from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from vcs_stamp_core import __version__
from vcs_stamp_core.config import StampConfigLoader
from vcs_stamp_core.errors import StampError
from vcs_stamp_ops.generate import generate_version_file, resolve_start

from .util import configure_logging, configure_stdio

app = typer.Typer(help="vcs-stamp: write repository head metadata into a Go source file", add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def generate(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="The output file to generate [default: ./version.go]"
    ),
    package: Optional[str] = typer.Option(
        None, "--pkg", "--package", help="The package of the output file [default: main]"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        help="Path to a vcs-stamp TOML config file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print instead of writing the output file"),
    output_format: str = typer.Option("go", "--format", help="Dry-run output format: go|json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log VCS queries to stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
):
    """Detect the enclosing git/bzr/hg repository and generate the version file."""
    configure_stdio()
    configure_logging(verbose)

    if output_format not in ("go", "json"):
        typer.echo(f"Error: unknown format {output_format!r} (expected go|json)", err=True)
        raise typer.Exit(2)

    try:
        cwd = resolve_start()
        config = StampConfigLoader.load(
            cwd=cwd,
            config_file=config_file,
            output=output,
            package=package,
        )
        result = generate_version_file(
            output=config.output,
            package=config.package,
            start=cwd,
            dry_run=dry_run,
        )
    except StampError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not dry_run:
        return

    if output_format == "json":
        payload = {
            "repository": {
                "kind": result.repository.kind.value,
                "root": str(result.repository.root),
            },
            "metadata": result.metadata.to_dict(),
            "package": config.package,
            "path": str(result.path),
        }
        typer.echo(json.dumps(payload, ensure_ascii=True, indent=2))
        return

    typer.echo(result.source, nl=False)


def main():
    app()
