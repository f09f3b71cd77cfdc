"""Variante 1: futures encadenados con callbacks.

Cada etapa es un `asyncio.Future` y la siguiente se engancha con
`add_done_callback`, igual que una cadena de promesas. El fan-in usa
`asyncio.gather`, que también devuelve un future: falla con el primer error
y conserva el orden de los argumentos.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from adapters.swapi.resources import fetch_film, fetch_person, fetch_planet, person_url
from core.config import DEFAULT_BASE_URL, DEFAULT_PERSON_ID
from core.domain.models import Person, PersonInfo
from core.services.merge import merge_person_info


def _forward_failure(source: asyncio.Future[Any], target: asyncio.Future[Any]) -> bool:
    """Propaga cancelación/excepción de `source` a `target`.

    Devuelve True si la cadena debe detenerse.
    """

    if target.done():
        return True
    if source.cancelled():
        target.cancel()
        return True
    exc = source.exception()
    if exc is not None:
        target.set_exception(exc)
        return True
    return False


class CallbackPersonInfoFetcher:
    """Fetcher basado en callbacks sobre futures."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        base_url: str = DEFAULT_BASE_URL,
        default_person_id: int = DEFAULT_PERSON_ID,
    ) -> None:
        self._client = client
        self._base_url = base_url
        self._default_person_id = default_person_id

    def fetch(self, person_id: int | None = None) -> asyncio.Future[PersonInfo]:
        """Devuelve un future con el `PersonInfo`.

        Requiere un event loop en marcha (se llama desde código async).
        """

        loop = asyncio.get_running_loop()
        outcome: asyncio.Future[PersonInfo] = loop.create_future()

        if person_id is None:
            person_id = self._default_person_id
        url = person_url(self._base_url, person_id)
        person_task = asyncio.ensure_future(fetch_person(self._client, url))
        person_task.add_done_callback(lambda task: self._on_person(task, outcome))
        return outcome

    def _on_person(self, task: asyncio.Future[Person], outcome: asyncio.Future[PersonInfo]) -> None:
        if _forward_failure(task, outcome):
            return
        person = task.result()

        # Planeta y películas salen a la vez; gather conserva el orden de argumentos.
        related = asyncio.gather(
            fetch_planet(self._client, person.homeworld),
            *(fetch_film(self._client, url) for url in person.films),
        )
        related.add_done_callback(lambda joined: self._on_related(joined, person, outcome))

    def _on_related(
        self,
        joined: asyncio.Future[list[Any]],
        person: Person,
        outcome: asyncio.Future[PersonInfo],
    ) -> None:
        if _forward_failure(joined, outcome):
            return
        homeworld, *films = joined.result()
        try:
            info = merge_person_info(person, homeworld, films)
        except ValueError as exc:
            outcome.set_exception(exc)
            return
        outcome.set_result(info)
