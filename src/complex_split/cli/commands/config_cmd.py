"""CLI commands for configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from complex_split.cli._helpers import fail, output_result
from complex_split.errors import ComplexSplitError
from complex_split.utils.config import (
    DEFAULT_CONFIG_NAME,
    find_config_path,
    load_config,
    render_config,
    write_default_config,
)

config_app = typer.Typer(help="Configuration management")


@config_app.command("show")
def show_cmd(
    config_path: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="Path to a complex_split.toml")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Show the effective configuration and where it came from.

    Examples:
        csplit config show
        csplit config show --config project.toml --json
    """
    try:
        source = find_config_path(config_path)
        config = load_config(source)
    except ComplexSplitError as e:
        fail(e)

    if json_output:
        output_result(
            {"source": str(source) if source else None, "split": config.to_dict()}, True
        )
        return

    typer.secho(f"# source: {source or 'defaults'}", fg=typer.colors.BRIGHT_BLACK)
    typer.echo(render_config(config), nl=False)


@config_app.command("init")
def init_cmd(
    path: Annotated[
        Path, typer.Argument(help="Where to write the config file")
    ] = Path(DEFAULT_CONFIG_NAME),
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite an existing file")] = False,
) -> None:
    """Write a default configuration file.

    Examples:
        csplit config init
        csplit config init conf/split.toml --force
    """
    if not write_default_config(path, force=force):
        typer.secho(f"{path} already exists (use --force to overwrite)", fg=typer.colors.YELLOW)
        raise typer.Exit(1)
    output_result({"message": f"Wrote {path}"})
