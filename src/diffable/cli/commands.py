from __future__ import annotations

from pathlib import Path

import typer

from diffable.config import load_config
from diffable.constants import DEFAULT_CONFIG_PATH, EXIT_INTERNAL_ERROR, REPORT_FORMATS
from diffable.core.errors import ERROR_CODE_CONFIG_INVALID, DiffableError
from diffable.engine import run_checks
from diffable.report.renderers import render, write_report


def _version_callback(value: bool) -> None:
    if value:
        from diffable import __version__

        typer.echo(f"diffable {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Readable divergence reports for comparable models")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
) -> None:
    pass


@app.command()
def check(
    config_path: Path = typer.Argument(DEFAULT_CONFIG_PATH, help="Check-suite YAML file"),
    fmt: str = typer.Option("text", "--format", "-f", help="Report format: text | markdown | json"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the report to this file"),
) -> None:
    """Compare every configured actual/expected pair and report divergences."""
    if fmt not in REPORT_FORMATS:
        typer.echo(f"ERROR: --format must be one of {'|'.join(REPORT_FORMATS)}; got: {fmt}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR)

    try:
        config = load_config(config_path)
    except Exception as exc:
        error = DiffableError(code=ERROR_CODE_CONFIG_INVALID, message=str(exc))
        typer.echo(f"ERROR: [{error.code}] {error.message}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    try:
        summary = run_checks(config)
    except Exception as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    if output is not None:
        write_report(summary, output, fmt)
        typer.echo(f"Report written to {output}")
    else:
        typer.echo(render(summary, fmt), nl=False)

    for outcome in summary.outcomes:
        if outcome.error is not None:
            typer.echo(f"ERROR: {outcome.name}: {outcome.error.message}", err=True)

    raise typer.Exit(summary.exit_code)
