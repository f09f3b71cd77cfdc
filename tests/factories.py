"""Shared payload factories and a fake SWAPI transport for tests.

The fake is plugged into a real `httpx.AsyncClient` through
`httpx.MockTransport`, so fetchers run their normal HTTP path.
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings

BASE_URL = "https://swapi.test/api"
PERSON_URL = f"{BASE_URL}/people/1/"
HOMEWORLD_URL = f"{BASE_URL}/planets/1/"
FILM_1_URL = f"{BASE_URL}/films/1/"
FILM_2_URL = f"{BASE_URL}/films/2/"

A_NEW_HOPE = {
    "title": "A New Hope",
    "episode_id": 4,
    "director": "George Lucas",
    "producer": "Gary Kurtz, Rick McCallum",
    "release_date": "1977-05-25",
    "url": FILM_1_URL,
}
EMPIRE = {
    "title": "The Empire Strikes Back",
    "episode_id": 5,
    "director": "Irvin Kershner",
    "producer": "Gary Kurtz, Rick McCallum",
    "release_date": "1980-05-17",
    "url": FILM_2_URL,
}
TATOOINE = {
    "name": "Tatooine",
    "climate": "arid",
    "terrain": "desert",
    "url": HOMEWORLD_URL,
}


def make_settings(**overrides: Any) -> AppSettings:
    """AppSettings pointed at the fake API, ignoring any local .env files."""
    data: dict[str, Any] = {"base_url": BASE_URL, "http_timeout_seconds": 5.0}
    data.update(overrides)
    return AppSettings(_env_file=None, **data)


def make_person_payload(**overrides: Any) -> dict[str, Any]:
    """Build a Luke-like person payload with optional overrides."""
    data: dict[str, Any] = {
        "name": "Luke Skywalker",
        "height": "172",
        "mass": "77",
        "gender": "male",
        "homeworld": HOMEWORLD_URL,
        "films": [FILM_1_URL, FILM_2_URL],
        "url": PERSON_URL,
    }
    data.update(overrides)
    return data


def default_routes(**person_overrides: Any) -> dict[str, Any]:
    return {
        PERSON_URL: make_person_payload(**person_overrides),
        HOMEWORLD_URL: TATOOINE,
        FILM_1_URL: A_NEW_HOPE,
        FILM_2_URL: EMPIRE,
    }


class FakeSwapi:
    """Minimal SWAPI fake.

    - `routes`: url -> JSON payload (or raw `bytes` body).
    - `statuses`: url -> HTTP status to answer with.
    - `errors`: url -> exception raised instead of answering.
    - `delays`: url -> seconds to sleep before answering.
    - `barrier`: urls whose responses are held until all of them were requested.
    """

    def __init__(
        self,
        routes: dict[str, Any],
        *,
        statuses: dict[str, int] | None = None,
        errors: dict[str, Exception] | None = None,
        delays: dict[str, float] | None = None,
        barrier: Iterable[str] = (),
    ) -> None:
        self.routes = dict(routes)
        self.statuses = statuses or {}
        self.errors = errors or {}
        self.delays = delays or {}
        self.requests: list[str] = []
        self.completed: list[str] = []
        self._barrier = set(barrier)
        self._arrived: set[str] = set()
        self._all_arrived: asyncio.Event | None = None

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)

        if url in self._barrier:
            if self._all_arrived is None:
                self._all_arrived = asyncio.Event()
            self._arrived.add(url)
            if self._arrived == self._barrier:
                self._all_arrived.set()
            await asyncio.wait_for(self._all_arrived.wait(), timeout=2.0)

        delay = self.delays.get(url)
        if delay:
            await asyncio.sleep(delay)

        self.completed.append(url)
        if url in self.errors:
            raise self.errors[url]
        if url not in self.routes:
            return httpx.Response(404, json={"detail": "Not found"})

        status = self.statuses.get(url, 200)
        body = self.routes[url]
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def client(self, settings: AppSettings | None = None) -> httpx.AsyncClient:
        return build_async_client(settings or make_settings(), transport=httpx.MockTransport(self))
