"""Fetch strategies for the browse and search endpoints.

A strategy is an explicit value holding everything that differs between
engines (endpoint, facet discriminant, record type). Shared state arrives
through the ``CatalogContext`` argument on every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from catalogarr.domain.entities.catalog import SearchFacet
from catalogarr.domain.entities.pagination import FilterEntry, Page, PageRequest
from catalogarr.domain.ports.transport import CatalogContext

from .facets import extract_facet

T = TypeVar("T")

BROWSE_PATH = "/content/v2/discover/browse"
SEARCH_PATH = "/content/v2/discover/search"
SEASON_LIST_PATH = "/content/v1/season_list"


@dataclass(frozen=True)
class BulkFetchStrategy(Generic[T]):
    """Fetch a plain bulk envelope; the filter list is sent as-is."""

    path: str
    record: Any
    page_size_param: str = "n"
    locale: bool = False

    async def __call__(self, request: PageRequest, context: CatalogContext) -> Page[T]:
        cursor = request.cursor
        params: list[FilterEntry] = [
            *request.filters,
            (self.page_size_param, str(cursor.page_size)),
            ("start", str(cursor.start)),
        ]
        payload = await context.transport.get_json(
            self.path, params, locale=self.locale
        )
        raw = context.decoder.decode_bulk(payload)
        return Page(
            items=context.decoder.decode_records(raw.items, self.record),
            total=raw.total,
        )


@dataclass(frozen=True)
class FacetFetchStrategy(Generic[T]):
    """Fetch one facet of the multi-facet search envelope.

    Only the bucket matching ``facet`` is decoded into records; other buckets
    in the same response are ignored.
    """

    facet: SearchFacet
    record: Any
    path: str = SEARCH_PATH

    async def __call__(self, request: PageRequest, context: CatalogContext) -> Page[T]:
        cursor = request.cursor
        params: list[FilterEntry] = [
            *request.filters,
            ("type", self.facet.to_wire()),
            ("limit", str(cursor.page_size)),
            ("start", str(cursor.start)),
        ]
        payload = await context.transport.get_json(self.path, params, locale=True)
        buckets = context.decoder.decode_facets(payload)
        raw = extract_facet(buckets, self.facet.to_wire())
        return Page(
            items=context.decoder.decode_records(raw.items, self.record),
            total=raw.total,
        )
