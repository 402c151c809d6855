"""Catalog search use case: one free-text query, four facet cursors."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from catalogarr.application.pagination import PaginationEngine
from catalogarr.application.strategies import FacetFetchStrategy
from catalogarr.domain.entities.catalog import (
    Episode,
    MediaCollection,
    MovieListing,
    SearchFacet,
    Series,
)
from catalogarr.domain.entities.pagination import DEFAULT_PAGE_SIZE, SearchQuery
from catalogarr.domain.ports.transport import CatalogContext

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class QueryResults:
    """Independent lazy result streams for each search facet."""

    top_results: PaginationEngine[MediaCollection]
    series: PaginationEngine[Series]
    movie_listing: PaginationEngine[MovieListing]
    episode: PaginationEngine[Episode]

    def by_facet(self, facet: SearchFacet) -> PaginationEngine:
        return {
            SearchFacet.TOP_RESULTS: self.top_results,
            SearchFacet.SERIES: self.series,
            SearchFacet.MOVIE_LISTING: self.movie_listing,
            SearchFacet.EPISODE: self.episode,
        }[facet]


class CatalogSearchUseCase:
    """Builds the per-facet pagination engines for a search.

    All engines share the same context and search text but keep separate
    cursors; they can be consumed in any order or concurrently.
    """

    def __init__(
        self, context: CatalogContext, *, page_size: int = DEFAULT_PAGE_SIZE
    ) -> None:
        self._context = context
        self._page_size = page_size

    def _engine(
        self,
        facet: SearchFacet,
        record: object,
        query: SearchQuery,
        max_results: int | None,
    ) -> PaginationEngine:
        return PaginationEngine(
            FacetFetchStrategy(facet=facet, record=record),
            self._context,
            query.to_filters(),
            page_size=self._page_size,
            max_results=max_results,
        )

    def query(self, text: str, *, max_results: int | None = None) -> QueryResults:
        """Search the catalog for *text*.

        No request is sent until one of the returned engines is consumed.
        """
        query = SearchQuery(text=text)
        log.debug("catalog_search_created", query=text, page_size=self._page_size)
        return QueryResults(
            top_results=self._engine(
                SearchFacet.TOP_RESULTS, MediaCollection, query, max_results
            ),
            series=self._engine(SearchFacet.SERIES, Series, query, max_results),
            movie_listing=self._engine(
                SearchFacet.MOVIE_LISTING, MovieListing, query, max_results
            ),
            episode=self._engine(SearchFacet.EPISODE, Episode, query, max_results),
        )
