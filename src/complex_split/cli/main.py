"""complex-split CLI main entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from complex_split.cli._helpers import configure_logging, fail, get_config, output_result
from complex_split.cli.commands.config_cmd import config_app
from complex_split.engine.leakage import verify_partition
from complex_split.engine.pipeline import SplitPipeline
from complex_split.errors import ComplexSplitError, TableFormatError
from complex_split.io.tables import load_complexes, read_assignment, write_assignment

# Main app
app = typer.Typer(
    name="csplit",
    help="complex-split - leakage-free dataset splits for protein complexes",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

InputArg = Annotated[
    Path,
    typer.Argument(
        help="Subunit table (structure_id, chain_id, cluster_id) or JSON of complex -> cluster ids",
        exists=True,
        dir_okay=False,
    ),
]
ConfigOpt = Annotated[
    Optional[Path], typer.Option("--config", "-c", help="Path to a complex_split.toml")
]
EngineOpt = Annotated[
    Optional[str], typer.Option("--engine", "-e", help="Union-find engine: relabel, compressed")
]
JsonOpt = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Warnings only")] = False,
) -> None:
    """Group complexes that share subunit clusters and split them without leakage."""
    configure_logging(verbose=verbose, quiet=quiet)


# =============================================================================
# Core Commands
# =============================================================================


@app.command()
def split(
    input_path: InputArg,
    out_dir: Annotated[
        Path, typer.Option("--out-dir", "-o", help="Directory for components.tsv and splits.tsv")
    ] = Path("splits"),
    train: Annotated[
        Optional[float], typer.Option("--train", help="Train fraction, in (0, 1)")
    ] = None,
    valid: Annotated[
        Optional[float], typer.Option("--valid", help="Validation fraction; test gets the rest")
    ] = None,
    engine: EngineOpt = None,
    config_path: ConfigOpt = None,
    json_output: JsonOpt = False,
) -> None:
    """Split complexes into train/validation/test with no shared component.

    Examples:
        csplit split chains.tsv
        csplit split complexes.json --train 0.7 --valid 0.15 -o out/
        csplit split chains.tsv --engine compressed --json
    """
    try:
        config = get_config(
            config_path, train_fraction=train, valid_fraction=valid, engine=engine
        )
        complexes = load_complexes(input_path)
        result = SplitPipeline(config).run(complexes)
    except ComplexSplitError as e:
        fail(e)

    assignment = result.components.assignment
    written = [
        write_assignment(out_dir / "components.tsv", assignment, "component_id"),
        write_assignment(
            out_dir / "splits.tsv",
            {cid: result.split.membership[cid] for cid in assignment},
            "split",
        ),
    ]
    summary = result.summary()
    summary["written"] = [str(p) for p in written]
    output_result(summary, json_output)


@app.command()
def components(
    input_path: InputArg,
    out: Annotated[
        Optional[Path], typer.Option("--out", "-o", help="Write complex_id -> component_id TSV")
    ] = None,
    engine: EngineOpt = None,
    config_path: ConfigOpt = None,
    json_output: JsonOpt = False,
) -> None:
    """Group complexes into connected components (group labels for grouped CV).

    Examples:
        csplit components chains.tsv -o groups.tsv
        csplit components complexes.json --json
    """
    try:
        config = get_config(config_path, engine=engine)
        result = SplitPipeline(config).components(load_complexes(input_path))
    except ComplexSplitError as e:
        fail(e)

    sizes = sorted((len(m) for m in result.components.values()), reverse=True)
    data: dict[str, object] = {
        "complexes": len(result.assignment),
        "components": len(result.components),
        "largest": sizes[:5],
        "singletons": sum(1 for s in sizes if s == 1),
        "universe_size": result.universe_size,
        "pairs": result.pair_count,
        "merges": result.merges,
    }
    if out is not None:
        data["written"] = [str(write_assignment(out, result.assignment, "component_id"))]

    if json_output:
        if out is None:
            data["assignment"] = result.assignment
        output_result(data, True)
        return

    typer.echo(f"{data['complexes']} complexes in {data['components']} components")
    typer.echo(f"  largest: {', '.join(str(s) for s in sizes[:5])}")
    typer.echo(f"  singletons: {data['singletons']}")
    output_result({k: v for k, v in data.items() if k == "written"})


@app.command()
def folds(
    input_path: InputArg,
    n_folds: Annotated[
        Optional[int], typer.Option("--n-folds", "-k", help="Number of folds (>= 2)")
    ] = None,
    out: Annotated[
        Path, typer.Option("--out", "-o", help="Write complex_id -> fold TSV")
    ] = Path("folds.tsv"),
    engine: EngineOpt = None,
    config_path: ConfigOpt = None,
) -> None:
    """Assign grouped k-fold labels; a component never spans two folds.

    Examples:
        csplit folds chains.tsv -k 5
    """
    try:
        config = get_config(config_path, n_folds=n_folds, engine=engine)
        fold_of = SplitPipeline(config).folds(load_complexes(input_path))
    except ComplexSplitError as e:
        fail(e)

    counts: dict[int, int] = {}
    for fold in fold_of.values():
        counts[fold] = counts.get(fold, 0) + 1
    for fold in sorted(counts):
        typer.echo(f"  fold {fold}: {counts[fold]} complexes")
    output_result({"written": [str(write_assignment(out, fold_of, "fold"))]})


@app.command()
def check(
    splits_path: Annotated[
        Path, typer.Argument(help="complex_id -> split TSV", exists=True, dir_okay=False)
    ],
    components_path: Annotated[
        Path, typer.Argument(help="complex_id -> component_id TSV", exists=True, dir_okay=False)
    ],
    json_output: JsonOpt = False,
) -> None:
    """Verify an existing split: no component in two splits, every complex covered.

    Examples:
        csplit check splits/splits.tsv splits/components.tsv
    """
    try:
        membership = read_assignment(splits_path)
        raw_components = read_assignment(components_path)
        assignment: dict[str, int] = {}
        for line, (cid, value) in enumerate(raw_components.items(), start=2):
            try:
                assignment[cid] = int(value)
            except ValueError:
                raise TableFormatError(
                    str(components_path), line, f"component id of {cid!r} is not an integer"
                ) from None
    except ComplexSplitError as e:
        fail(e)

    report = verify_partition(membership, assignment)
    output_result({"leakage": report.to_dict()}, json_output)
    if not report.ok:
        raise typer.Exit(1)


# =============================================================================
# Utility Commands
# =============================================================================


@app.command()
def version() -> None:
    """Show version information."""
    from complex_split import __version__

    typer.echo(f"complex-split v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
