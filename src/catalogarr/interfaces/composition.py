"""Composition root: wires config, HTTP client, transport and use cases."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
import structlog

from catalogarr.application.pagination import PaginationEngine
from catalogarr.application.use_cases.catalog_browse import CatalogBrowseUseCase
from catalogarr.application.use_cases.catalog_search import (
    CatalogSearchUseCase,
    QueryResults,
)
from catalogarr.domain.entities.browse import BrowseOptions
from catalogarr.domain.entities.catalog import Locale, MediaCollection, SimulcastSeason
from catalogarr.domain.entities.pagination import DEFAULT_PAGE_SIZE
from catalogarr.domain.ports.transport import CatalogContext
from catalogarr.infrastructure.catalog.decoder import PydanticCatalogDecoder
from catalogarr.infrastructure.catalog.transport import HttpxCatalogTransport
from catalogarr.infrastructure.config.schema import AppConfig

log = structlog.get_logger(__name__)


class Catalog:
    """Application-facing entry point for browsing and searching the catalog."""

    def __init__(
        self, context: CatalogContext, *, page_size: int = DEFAULT_PAGE_SIZE
    ) -> None:
        self.context = context
        self._browse = CatalogBrowseUseCase(context, page_size=page_size)
        self._search = CatalogSearchUseCase(context, page_size=page_size)

    def browse(
        self,
        options: BrowseOptions | None = None,
        *,
        max_results: int | None = None,
    ) -> PaginationEngine[MediaCollection]:
        return self._browse.browse(options, max_results=max_results)

    def query(self, text: str, *, max_results: int | None = None) -> QueryResults:
        return self._search.query(text, max_results=max_results)

    async def simulcast_seasons(self, locale: Locale) -> list[SimulcastSeason]:
        return await self._browse.simulcast_seasons(locale)


def build_context(config: AppConfig, http_client: httpx.AsyncClient) -> CatalogContext:
    """Build the shared network context on top of an existing HTTP client."""
    transport = HttpxCatalogTransport(
        http_client=http_client,
        base_url=config.http_base_url,
        access_token=config.catalog.access_token,
        locale=config.catalog.locale,
        preferred_audio_language=config.catalog.preferred_audio_language,
    )
    return CatalogContext(transport=transport, decoder=PydanticCatalogDecoder())


@asynccontextmanager
async def build_catalog(config: AppConfig) -> AsyncIterator[Catalog]:
    """Open the shared HTTP client and yield a ready ``Catalog``.

    Engines created from the catalog must not be used after the block exits.
    """
    async with httpx.AsyncClient(
        timeout=config.http_timeout_seconds,
        follow_redirects=True,
        headers={"User-Agent": config.http_user_agent},
    ) as http_client:
        context = build_context(config, http_client)
        log.info(
            "catalog_initialized",
            base_url=config.http_base_url,
            page_size=config.catalog.page_size,
            locale=config.catalog.locale.to_wire() if config.catalog.locale else None,
        )
        yield Catalog(context, page_size=config.catalog.page_size)
