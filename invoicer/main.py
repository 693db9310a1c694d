from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import load_config
from .exceptions import InvoiceError
from .pipeline.run import create_pdf
from .pipeline.translations import available_languages

app = typer.Typer(help="Monthly invoice generator")


def _generate(config_path: Optional[Path], out: Optional[Path]) -> None:
    try:
        config = load_config(config_path)
        path = create_pdf(config, base_dir=out)
    except InvoiceError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(path.name)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Without a command, generate the invoice from the bundled config into the cwd."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        _generate(None, None)


@app.command()
def generate(
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config YAML (default: bundled)"),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory (default: cwd)"),
) -> None:
    _generate(config_path, out)


@app.command()
def form(
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config YAML (default: bundled)"),
) -> None:
    from .ui import run_form

    run_form(config_path)


@app.command()
def languages() -> None:
    for code in available_languages():
        typer.echo(code)


if __name__ == "__main__":
    app()
