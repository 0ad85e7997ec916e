from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="unitassert", help="Configure xUnit-style assertions")

EXAMPLE_CONFIG = """\
# yaml-language-server: $schema=unitassert.schema.json
sink: raise          # raise | pytest
logging:
  # debug_file: ${TMPDIR:-/tmp}/unitassert/debug.log
  verbose: false
"""


@app.command()
def check(
    config: str = typer.Argument(help="Path to unitassert YAML config"),
):
    """Validate a config file and print the resolved settings."""
    from pydantic import ValidationError
    import yaml

    from unitassert.config import load_config

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError) as e:
        typer.echo(f"Error: invalid config {config}:\n{e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"sink: {cfg.sink.value}")
    typer.echo(f"debug_file: {cfg.logging.debug_file or '-'}")
    typer.echo(f"verbose: {cfg.logging.verbose}")


@app.command()
def schema(
    out: str = typer.Option("unitassert.schema.json", help="Output path for JSON Schema"),
):
    """Write the JSON Schema for the config file."""
    from unitassert.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Schema written: {out_path}")


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to write unitassert.yaml into"),
):
    """Write an example unitassert.yaml."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "unitassert.yaml"
    if example.exists():
        typer.echo(f"unitassert.yaml already exists in {dir}, skipping.")
        return

    example.write_text(EXAMPLE_CONFIG)
    typer.echo(f"Initialized {example}")


def main() -> None:
    app()
