"""Fetchers de SWAPI (tres variantes de un mismo contrato).

Cada módulo implementa `core.interfaces.fetcher.PersonInfoFetcher`.
"""

from adapters.swapi.callbacks import CallbackPersonInfoFetcher
from adapters.swapi.sequential import AsyncPersonInfoFetcher
from adapters.swapi.stream import ReactivePersonInfoFetcher

__all__ = [
	"AsyncPersonInfoFetcher",
	"CallbackPersonInfoFetcher",
	"ReactivePersonInfoFetcher",
]
