"""Contrato de los fetchers de `PersonInfo`.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Las tres implementaciones (futures encadenados, async/await, streams)
  son intercambiables y testeables sin acoplar el Core a ninguna de ellas.
"""

from __future__ import annotations

from typing import Awaitable, Protocol, runtime_checkable

from core.domain.models import PersonInfo


@runtime_checkable
class PersonInfoFetcher(Protocol):
    """Contrato mínimo de un fetcher.

    Reglas de diseño:
    - `fetch` devuelve un awaitable porque hace I/O (HTTP).
    - Emite exactamente 1 + 1 + N peticiones (persona, planeta, N películas).
    - Planeta y películas se piden en paralelo una vez resuelta la persona.
    - Cualquier fallo hace fallar la operación completa, sin resultados parciales.
    """

    def fetch(self, person_id: int | None = None) -> Awaitable[PersonInfo]:
        """Obtiene y fusiona el registro de `person_id` (o del sujeto por defecto)."""

        ...
