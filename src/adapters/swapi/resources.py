"""Recursos de SWAPI: URLs y decodificación.

Estos helpers están en adapters porque son I/O puro (HTTP) más el paso
de JSON crudo a modelos del dominio. Las tres variantes de fetcher los
comparten para emitir exactamente las mismas peticiones.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import get_json
from core.domain.models import Film, Person, Planet


def person_url(base_url: str, person_id: int) -> str:
    """URL canónica de una persona (`{base}/people/{id}/`)."""

    return f"{base_url.rstrip('/')}/people/{person_id}/"


def decode_person(payload: Any) -> Person:
    return Person.model_validate(payload)


def decode_planet(payload: Any) -> Planet:
    return Planet.model_validate(payload)


def decode_film(payload: Any) -> Film:
    return Film.model_validate(payload)


async def fetch_person(client: httpx.AsyncClient, url: str) -> Person:
    return decode_person(await get_json(client, url))


async def fetch_planet(client: httpx.AsyncClient, url: str) -> Planet:
    return decode_planet(await get_json(client, url))


async def fetch_film(client: httpx.AsyncClient, url: str) -> Film:
    return decode_film(await get_json(client, url))
