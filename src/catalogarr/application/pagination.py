"""Lazy, forward-only pagination over a page-fetch strategy."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from dataclasses import replace
from typing import Generic, TypeVar

import structlog

from catalogarr.domain.entities.pagination import (
    DEFAULT_PAGE_SIZE,
    Cursor,
    FilterEntry,
    PageRequest,
    as_filters,
)
from catalogarr.domain.ports.fetch import FetchStrategyPort
from catalogarr.domain.ports.transport import CatalogContext

log = structlog.get_logger(__name__)

T = TypeVar("T")


class PaginationEngine(Generic[T]):
    """Forward-only cursor over items reachable only through paged fetches.

    The engine owns its ``Cursor`` and replaces it only after a successful
    fetch, so a failed ``next_page()`` can simply be retried by the caller and
    resumes at the same offset. Once exhausted the engine never touches the
    network again and cannot be rewound.

    ``context`` is shared with other engines and only ever read.
    ``max_results`` optionally stops the engine after that many items.
    """

    def __init__(
        self,
        fetch: FetchStrategyPort[T],
        context: CatalogContext,
        filters: Sequence[FilterEntry] | None = None,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_results: int | None = None,
    ) -> None:
        if max_results is not None and max_results < 0:
            raise ValueError("max_results must be >= 0")
        self._fetch = fetch
        self._context = context
        self._filters = as_filters(filters)
        self._max_results = max_results
        self._cursor = Cursor(
            page_size=page_size,
            exhausted=max_results == 0,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def exhausted(self) -> bool:
        return self._cursor.exhausted

    @property
    def filters(self) -> tuple[FilterEntry, ...]:
        return self._filters

    def current_total(self) -> int | None:
        """Last total reported by the source, ``None`` before the first fetch."""
        return self._cursor.total

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    async def next_page(self) -> list[T]:
        """Fetch and return the next page of items.

        Returns an empty list without any network access once exhausted.
        Transport and decode errors propagate with the cursor untouched.
        """
        cursor = self._cursor
        if cursor.exhausted:
            return []

        log.debug(
            "pagination_fetch",
            strategy=type(self._fetch).__name__,
            start=cursor.start,
            page_size=cursor.page_size,
        )
        page = await self._fetch(
            PageRequest(cursor=cursor, filters=self._filters), self._context
        )

        items = list(page.items)
        exhausted = not items or cursor.start + len(items) >= page.total

        if self._max_results is not None:
            remaining = self._max_results - cursor.start
            if len(items) >= remaining:
                items = items[:remaining]
                exhausted = True

        self._cursor = replace(
            cursor,
            start=cursor.start + len(items),
            total=page.total,
            exhausted=exhausted,
        )
        if exhausted:
            log.debug(
                "pagination_exhausted",
                strategy=type(self._fetch).__name__,
                start=self._cursor.start,
                total=page.total,
            )
        return items

    async def collect_all(self) -> list[T]:
        """Drain the engine and return every remaining item in order.

        Stops as soon as the cursor has reached the last reported total, even
        if the source never signalled exhaustion on its own.
        """
        collected: list[T] = []
        while not self._cursor.exhausted:
            collected.extend(await self.next_page())

            total = self._cursor.total
            if total is not None and self._cursor.start >= total:
                self._cursor = replace(self._cursor, exhausted=True)
        return collected

    async def __aiter__(self) -> AsyncIterator[T]:
        while not self._cursor.exhausted:
            for item in await self.next_page():
                yield item
