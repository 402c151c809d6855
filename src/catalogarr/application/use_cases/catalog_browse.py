"""Catalog browse use case: filtered catalog listing and simulcast seasons."""

from __future__ import annotations

import structlog

from catalogarr.application.pagination import PaginationEngine
from catalogarr.application.strategies import (
    BROWSE_PATH,
    SEASON_LIST_PATH,
    BulkFetchStrategy,
)
from catalogarr.domain.entities.browse import BrowseOptions, compile_filters
from catalogarr.domain.entities.catalog import (
    Locale,
    MediaCollection,
    SimulcastSeason,
)
from catalogarr.domain.entities.pagination import DEFAULT_PAGE_SIZE
from catalogarr.domain.ports.transport import CatalogContext

log = structlog.get_logger(__name__)


class CatalogBrowseUseCase:
    """Browses the catalog under a filter set."""

    def __init__(
        self, context: CatalogContext, *, page_size: int = DEFAULT_PAGE_SIZE
    ) -> None:
        self._context = context
        self._page_size = page_size

    def browse(
        self,
        options: BrowseOptions | None = None,
        *,
        max_results: int | None = None,
    ) -> PaginationEngine[MediaCollection]:
        """Return a lazy stream of series and movie listings matching *options*."""
        filters = compile_filters(options or BrowseOptions())
        log.debug("catalog_browse_created", filters=filters, page_size=self._page_size)
        return PaginationEngine(
            BulkFetchStrategy(path=BROWSE_PATH, record=MediaCollection),
            self._context,
            filters,
            page_size=self._page_size,
            max_results=max_results,
        )

    async def simulcast_seasons(self, locale: Locale) -> list[SimulcastSeason]:
        """List all simulcast seasons, localized into *locale*.

        The season ``id`` is what ``BrowseOptions.simulcast_season`` expects.
        """
        payload = await self._context.transport.get_json(
            SEASON_LIST_PATH, [("locale", locale.to_wire())]
        )
        raw = self._context.decoder.decode_bulk(payload)
        seasons = self._context.decoder.decode_records(raw.items, SimulcastSeason)
        log.debug("simulcast_seasons_loaded", locale=locale.to_wire(), count=len(seasons))
        return seasons
