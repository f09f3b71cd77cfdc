"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y logging de todas las peticiones.
- Facilita testeo: se puede inyectar un `httpx.MockTransport` o un cliente
  ya construido en lugar de la red real.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import AppSettings

logger = logging.getLogger(__name__)


async def _log_request(request: httpx.Request) -> None:
    logger.debug("GET %s", request.url)


async def _log_response(response: httpx.Response) -> None:
    logger.debug("%s %s -> HTTP %s", response.request.method, response.request.url, response.status_code)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que las tres variantes se comporten igual.
    - `transport` permite sustituir la red en tests sin tocar los fetchers.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
        event_hooks={"request": [_log_request], "response": [_log_response]},
    )


async def get_json(client: httpx.AsyncClient, url: str) -> Any:
    """GET + status check + decode JSON.

    Errores (se propagan sin traducir):
    - `httpx.TransportError` para fallos de red/timeout.
    - `httpx.HTTPStatusError` para respuestas no 2xx.
    - `ValueError` (json.JSONDecodeError) si el body no es JSON.
    """

    response = await client.get(url)
    response.raise_for_status()
    return response.json()
