"""Cursor and page value objects shared by every paginated retrieval."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

# Ordered (key, value) query parameter; duplicates are meaningful.
FilterEntry = tuple[str, str]

DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class Cursor:
    """Position of one pagination engine.

    ``total`` stays ``None`` until the first successful fetch.
    """

    start: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    total: int | None = None
    exhausted: bool = False

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("start must be >= 0")
        if self.page_size <= 0:
            raise ValueError("page_size must be > 0")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One fetched page plus the total the source reported for the query."""

    items: list[T] = field(default_factory=list)
    total: int = 0


@dataclass(frozen=True)
class PageRequest:
    """Everything a fetch strategy needs to request the next page."""

    cursor: Cursor
    filters: tuple[FilterEntry, ...] = ()


@dataclass(frozen=True)
class FacetBucket(Generic[T]):
    """One named slice of a multi-facet envelope."""

    discriminant: str
    items: list[T] = field(default_factory=list)
    total: int = 0


@dataclass(frozen=True)
class SearchQuery:
    """Free-text search input shared by all facet cursors of one search."""

    text: str

    def to_filters(self) -> tuple[FilterEntry, ...]:
        return (("q", self.text),)


def as_filters(entries: Sequence[FilterEntry] | None) -> tuple[FilterEntry, ...]:
    """Freeze a filter list so engines can share it safely."""
    if not entries:
        return ()
    return tuple((str(k), str(v)) for k, v in entries)
