"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.gender import Gender
from core.domain.models import PersonInfo
from core.domain.variant import FetchVariant


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (--json).
    """

    title = Text("SWAPI-MERGE", style="bold cyan")
    subtitle = Text("Persona • Planeta • Películas", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_person_table(info: PersonInfo, *, variant: FetchVariant | None = None) -> Table:
    """Tabla con los campos escalares del registro."""

    title = info.name if variant is None else f"{info.name} ({variant.label()})"
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    gender_style = "white" if Gender.is_known(info.gender) else "yellow"
    table.add_row("Name", info.name)
    table.add_row("Height", info.height)
    table.add_row("Gender", Text(info.gender, style=gender_style))
    table.add_row("Homeworld", info.homeworld)
    return table


def build_films_table(info: PersonInfo) -> Table:
    table = Table(title="Films")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Director", style="white")
    table.add_column("Release date", style="magenta", no_wrap=True)
    for index, film in enumerate(info.films, start=1):
        table.add_row(str(index), film.title, film.director, film.release_date)
    return table
