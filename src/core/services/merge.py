"""Fan-in: fusión de persona, planeta y películas en `PersonInfo`.

Función pura compartida por las tres variantes de fetcher, de modo que el
único punto donde difieren es el idioma de concurrencia.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.models import Film, Person, PersonInfo, Planet


def merge_person_info(person: Person, homeworld: Planet, films: Sequence[Film]) -> PersonInfo:
    """Construye el registro final.

    `films[i]` debe ser la película obtenida de `person.films[i]`; el orden
    lo fija quien emitió las peticiones, no el orden de llegada.
    """

    if len(films) != len(person.films):
        raise ValueError(
            f"expected {len(person.films)} films for {person.name!r}, got {len(films)}"
        )

    return PersonInfo(
        name=person.name,
        height=person.height,
        gender=person.gender,
        homeworld=homeworld.name,
        films=[film.summary() for film in films],
    )
