"""Person-info orchestration utilities.

The CLI (and any future entry-point) delegates here: pick a fetcher
variant, provide an HTTP client, run it. Side-effects such as printing stay
in the CLI layer.
"""

from __future__ import annotations

import httpx

from adapters.http_client import build_async_client
from adapters.swapi import (
    AsyncPersonInfoFetcher,
    CallbackPersonInfoFetcher,
    ReactivePersonInfoFetcher,
)
from core.config import AppSettings, DEFAULT_BASE_URL, DEFAULT_PERSON_ID
from core.domain.models import PersonInfo
from core.domain.variant import FetchVariant
from core.interfaces.fetcher import PersonInfoFetcher

_FETCHERS: dict[FetchVariant, type] = {
    FetchVariant.CALLBACKS: CallbackPersonInfoFetcher,
    FetchVariant.ASYNC: AsyncPersonInfoFetcher,
    FetchVariant.STREAM: ReactivePersonInfoFetcher,
}


def build_fetcher(
    variant: FetchVariant,
    client: httpx.AsyncClient,
    *,
    base_url: str = DEFAULT_BASE_URL,
    default_person_id: int = DEFAULT_PERSON_ID,
) -> PersonInfoFetcher:
    """Instantiate the fetcher implementing `variant`."""

    fetcher_cls = _FETCHERS[FetchVariant(variant)]
    return fetcher_cls(client, base_url=base_url, default_person_id=default_person_id)


async def fetch_person_info(
    *,
    settings: AppSettings,
    variant: FetchVariant | None = None,
    person_id: int | None = None,
    client: httpx.AsyncClient | None = None,
) -> PersonInfo:
    """Fetch and merge one subject using the requested variant.

    When `client` is None a client is built from `settings` and closed
    afterwards; a caller-provided client is left open. Errors propagate
    unchanged.
    """

    variant = variant or settings.default_variant
    person_id = person_id if person_id is not None else settings.person_id

    if client is not None:
        fetcher = build_fetcher(variant, client, base_url=settings.api_root())
        return await fetcher.fetch(person_id)

    async with build_async_client(settings) as owned:
        fetcher = build_fetcher(variant, owned, base_url=settings.api_root())
        return await fetcher.fetch(person_id)


async def compare_variants(
    *,
    settings: AppSettings,
    person_id: int | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[FetchVariant, PersonInfo]:
    """Run every variant one after another and return their results."""

    results: dict[FetchVariant, PersonInfo] = {}
    for variant in FetchVariant:
        results[variant] = await fetch_person_info(
            settings=settings,
            variant=variant,
            person_id=person_id,
            client=client,
        )
    return results
