"""CLI entry-point (Typer).

Commands:
- `fetch`: fetch and merge one subject with the chosen variant.
- `compare`: run the three variants and check they agree.
- `doctor run`: configuration and connectivity checks.

During development: `python -m cli.main ...` from `src/`.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from adapters.json_exporter import export_person_info_json, person_info_to_json
from cli import doctor
from cli.ui_components import build_films_table, build_person_table, print_banner
from core.config import AppSettings
from core.domain.variant import FetchVariant
from core.services.person_info import compare_variants, fetch_person_info

app = typer.Typer(
    no_args_is_help=True,
    help="Fetch a SWAPI person with its homeworld and films as one merged record.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

# Fallos esperables de la operación: red, status, body o forma.
_FETCH_ERRORS = (httpx.HTTPError, ValidationError, ValueError)


def configure_logging(level: str, *, verbose: bool = False) -> None:
    """Configura el logger raíz una sola vez (RichHandler a stderr)."""

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING))
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    # httpx/httpcore loguean cada conexión a DEBUG; nos basta con nuestros hooks.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@app.command()
def fetch(
    person_id: Optional[int] = typer.Option(None, "--person-id", "-p", min=1, help="SWAPI person id."),
    variant: Optional[FetchVariant] = typer.Option(None, "--variant", "-v", help="Concurrency idiom to use."),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the record to a JSON file."),
    verbose: bool = typer.Option(False, "--verbose", help="Log every HTTP request."),
) -> None:
    """Fetch one person and print the merged record."""

    settings = AppSettings()
    configure_logging(settings.log_level, verbose=verbose)
    chosen = variant or settings.default_variant

    try:
        info = asyncio.run(fetch_person_info(settings=settings, variant=chosen, person_id=person_id))
    except _FETCH_ERRORS as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(person_info_to_json(info), nl=False)
    else:
        print_banner(_console)
        _console.print(build_person_table(info, variant=chosen))
        _console.print(build_films_table(info))

    if output is not None:
        path = export_person_info_json(info=info, output_path=output)
        if not as_json:
            _console.print(f"[green]Saved JSON to:[/green] {path}")


@app.command()
def compare(
    person_id: Optional[int] = typer.Option(None, "--person-id", "-p", min=1, help="SWAPI person id."),
    verbose: bool = typer.Option(False, "--verbose", help="Log every HTTP request."),
) -> None:
    """Run all three variants and report whether their records are equal."""

    settings = AppSettings()
    configure_logging(settings.log_level, verbose=verbose)

    try:
        results = asyncio.run(compare_variants(settings=settings, person_id=person_id))
    except _FETCH_ERRORS as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    reference = results[FetchVariant.ASYNC]
    table = Table(title="Variants")
    table.add_column("Variant", style="cyan", no_wrap=True)
    table.add_column("Films", justify="right")
    table.add_column("Matches async", style="white")
    all_equal = True
    for variant, info in results.items():
        same = info == reference
        all_equal = all_equal and same
        table.add_row(variant.value, str(len(info.films)), "yes" if same else "[red]no[/red]")
    _console.print(table)

    if not all_equal:
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
