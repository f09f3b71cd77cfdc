"""Variante 3: composición de streams reactivos (reactivex).

- Cada petición es un observable frío: la petición sale al suscribirse.
- `flat_map` encadena persona -> relacionados.
- `fork_join` espera a todos los relacionados y emite una tupla en el orden
  de los argumentos; el primer error termina el stream y cancela el resto.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import httpx
import reactivex
from reactivex import Observable
from reactivex import operators as ops

from adapters.swapi.resources import fetch_film, fetch_person, fetch_planet, person_url
from core.config import DEFAULT_BASE_URL, DEFAULT_PERSON_ID
from core.domain.models import Film, Person, PersonInfo, Planet
from core.services.merge import merge_person_info

T = TypeVar("T")


def _from_request(
    client: httpx.AsyncClient,
    request: Callable[[httpx.AsyncClient, str], Awaitable[T]],
    url: str,
) -> Observable[T]:
    return reactivex.defer(
        lambda _scheduler: reactivex.from_future(asyncio.ensure_future(request(client, url)))
    )


class ReactivePersonInfoFetcher:
    """Fetcher declarativo: `observe()` construye el pipeline, `fetch()` lo ejecuta."""

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

    def observe(self, person_id: int | None = None) -> Observable[PersonInfo]:
        """Observable frío que emite un único `PersonInfo` y completa."""

        if person_id is None:
            person_id = self._default_person_id
        url = person_url(self._base_url, person_id)
        return _from_request(self._client, fetch_person, url).pipe(
            ops.flat_map(self._resolve_related),
        )

    async def fetch(self, person_id: int | None = None) -> PersonInfo:
        return await self.observe(person_id).pipe(ops.to_future())

    def _resolve_related(self, person: Person) -> Observable[PersonInfo]:
        homeworld: Observable[Planet] = _from_request(self._client, fetch_planet, person.homeworld)

        film_streams = [_from_request(self._client, fetch_film, url) for url in person.films]
        # fork_join() sin fuentes nunca completa.
        films: Observable[tuple[Film, ...]] = (
            reactivex.fork_join(*film_streams) if film_streams else reactivex.just(())
        )

        return reactivex.fork_join(homeworld, films).pipe(
            ops.map(lambda related: merge_person_info(person, related[0], related[1])),
        )
