"""Shared test fixtures for the catalogarr test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from catalogarr.domain.ports.transport import CatalogContext
from catalogarr.infrastructure.catalog.decoder import PydanticCatalogDecoder

# ---------------------------------------------------------------------------
# Context fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_transport() -> AsyncMock:
    """Mock CatalogTransportPort; set ``get_json.return_value`` per test."""
    transport = AsyncMock()
    transport.get_json = AsyncMock(return_value={"total": 0, "data": []})
    return transport


@pytest.fixture()
def decoder() -> PydanticCatalogDecoder:
    return PydanticCatalogDecoder()


@pytest.fixture()
def catalog_context(
    mock_transport: AsyncMock, decoder: PydanticCatalogDecoder
) -> CatalogContext:
    """CatalogContext with a mocked transport and the real pydantic decoder."""
    return CatalogContext(transport=mock_transport, decoder=decoder)
