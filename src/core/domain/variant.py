"""Implementation variants of the person-info fetcher.

This module centralizes the variant names shared by the CLI, the settings
and the service layer. Keeping it in the domain layer avoids circular
imports between `core.config` and the adapters.
"""

from __future__ import annotations

from enum import Enum


class FetchVariant(str, Enum):
    """Concurrency idiom used to express the fan-out/fan-in."""

    CALLBACKS = "callbacks"
    ASYNC = "async"
    STREAM = "stream"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        labels = {
            FetchVariant.CALLBACKS: "Chained futures",
            FetchVariant.ASYNC: "async/await",
            FetchVariant.STREAM: "Reactive streams",
        }
        return labels[self]
