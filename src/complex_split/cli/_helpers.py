"""Shared helpers for CLI commands."""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import Any, NoReturn

import typer

from complex_split.engine.allocator import SplitConfig
from complex_split.errors import ComplexSplitError
from complex_split.utils.config import load_config


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route library logs to stderr at the requested level."""
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def fail(error: ComplexSplitError) -> NoReturn:
    """Report a complex-split error and exit with status 1."""
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


def get_config(
    config_path: Path | None = None,
    **overrides: Any,
) -> SplitConfig:
    """Load configuration and apply command-line overrides that were given."""
    config = load_config(config_path)
    given = {key: value for key, value in overrides.items() if value is not None}
    if given:
        config = dataclasses.replace(config, **given)
    return config


def output_result(data: dict[str, Any], as_json: bool = False) -> None:
    """Output result in appropriate format."""
    if as_json:
        typer.echo(json.dumps(data, indent=2, default=str))
        return

    if "splits" in data:
        typer.echo(f"{data['total']} complexes in {data['components']} components")
        for name, info in data["splits"].items():
            target = f", target {info['target']}" if info.get("target") is not None else ""
            typer.echo(
                f"  {name:<10} {info['complexes']:>7} complexes "
                f"{info['components']:>6} components "
                f"({info['fraction']:.1%} vs {info['requested']:.1%} requested{target})"
            )
    if "leakage" in data:
        leakage = data["leakage"]
        if leakage["ok"]:
            typer.secho("[OK] No component straddles two splits", fg=typer.colors.GREEN)
        else:
            typer.secho("[!!] Leakage detected", fg=typer.colors.RED)
            for cid, splits in leakage["straddling"].items():
                typer.echo(f"  component {cid}: {', '.join(splits)}")
            if leakage["missing"]:
                typer.echo(f"  without split: {', '.join(leakage['missing'])}")
            if leakage["unknown"]:
                typer.echo(f"  without component: {', '.join(leakage['unknown'])}")
    if "written" in data:
        for path in data["written"]:
            typer.secho(f"Wrote {path}", fg=typer.colors.BRIGHT_BLACK)
    if "message" in data:
        typer.secho(data["message"], fg=typer.colors.GREEN)
