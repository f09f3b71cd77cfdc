from __future__ import annotations

import pytest

from core.domain.variant import FetchVariant


@pytest.fixture(params=list(FetchVariant), ids=lambda v: v.value)
def variant(request: pytest.FixtureRequest) -> FetchVariant:
    """Every test taking `variant` runs once per fetcher implementation."""
    return request.param
