"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""

from core.domain.gender import Gender
from core.domain.models import Film, FilmSummary, Person, PersonInfo, Planet
from core.domain.variant import FetchVariant

__all__ = [
    "FetchVariant",
    "Film",
    "FilmSummary",
    "Gender",
    "Person",
    "PersonInfo",
    "Planet",
]
