"""Command-line entry point for yamlsymbols."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from omegaconf.errors import OmegaConfBaseException

from yamlsymbols import __version__
from yamlsymbols.config import load_config
from yamlsymbols.discovery import DocumentNotFoundError
from yamlsymbols.pipeline import run_pipeline
from yamlsymbols.reporting.report import emit_report

app = typer.Typer(help="yamlsymbols: outline the key hierarchy of YAML documents.")


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{level_name}'", param_hint="--log-level")
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"yamlsymbols {__version__}")
        raise typer.Exit()


@app.command()
def main(
    paths: list[Path] | None = typer.Argument(
        None,
        help="YAML files or directories to outline (defaults to the current directory).",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional YAML configuration to load before applying CLI overrides.",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print one line per key instead of rich panels.",
    ),
    no_recursive: bool = typer.Option(
        False,
        "--no-recursive",
        help="Only look at the top level of directory arguments.",
    ),
    max_depth: int | None = typer.Option(
        None,
        "--max-depth",
        "-d",
        help="Hide keys nested deeper than this many path segments.",
    ),
    export_json: Path | None = typer.Option(None, "--export-json", help="Optional JSON export path."),
    export_csv: Path | None = typer.Option(None, "--export-csv", help="Optional CSV export path."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, ...)."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show the installed version and exit.",
    ),
) -> None:
    """Print the dotted key outline of YAML documents."""
    _configure_logging(log_level)

    overrides_raw = {
        "output.rich_output": False if plain else None,
        "discovery.recursive": False if no_recursive else None,
        "output.max_depth": max_depth,
        "output.export_json": export_json,
        "output.export_csv": export_csv,
    }
    overrides = {
        key: (str(value) if isinstance(value, Path) else value)
        for key, value in overrides_raw.items()
        if value is not None
    }

    try:
        config = load_config(paths=paths, config_path=config_file, overrides=overrides)
    except (ValueError, OmegaConfBaseException, OSError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    logging.getLogger(__name__).info("Starting yamlsymbols pipeline")
    try:
        output = run_pipeline(config)
    except DocumentNotFoundError as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc
    emit_report(output.outlines, config)


if __name__ == "__main__":  # pragma: no cover
    app()
