"""Variante 2: async/await lineal.

Se lee como código secuencial; el fan-out se expresa con un único
`asyncio.gather` sobre el planeta y todas las películas.
"""

from __future__ import annotations

import asyncio

import httpx

from adapters.swapi.resources import fetch_film, fetch_person, fetch_planet, person_url
from core.config import DEFAULT_BASE_URL, DEFAULT_PERSON_ID
from core.domain.models import PersonInfo
from core.services.merge import merge_person_info


class AsyncPersonInfoFetcher:
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

    async def fetch(self, person_id: int | None = None) -> PersonInfo:
        if person_id is None:
            person_id = self._default_person_id
        url = person_url(self._base_url, person_id)
        person = await fetch_person(self._client, url)

        homeworld, *films = await asyncio.gather(
            fetch_planet(self._client, person.homeworld),
            *(fetch_film(self._client, film_url) for film_url in person.films),
        )
        return merge_person_info(person, homeworld, films)
