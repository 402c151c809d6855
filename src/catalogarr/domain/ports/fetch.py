"""Port for page-fetch strategies driven by ``PaginationEngine``."""

from __future__ import annotations

from typing import Protocol, TypeVar

from catalogarr.domain.entities.pagination import Page, PageRequest

from .transport import CatalogContext

T_co = TypeVar("T_co", covariant=True)


class FetchStrategyPort(Protocol[T_co]):
    """Fetches one page for a cursor.

    Must not mutate the request or the context. Errors propagate unchanged.
    """

    async def __call__(
        self, request: PageRequest, context: CatalogContext
    ) -> Page[T_co]: ...
