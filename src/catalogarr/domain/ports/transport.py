"""Ports for talking to the catalog service and decoding its responses."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from catalogarr.domain.entities.pagination import FacetBucket, FilterEntry, Page


@runtime_checkable
class CatalogTransportPort(Protocol):
    """Async GET transport for the catalog service.

    Implementations raise ``CatalogTransportError`` on network/HTTP failures
    and ``CatalogDecodeError`` when the body is not JSON.
    """

    async def get_json(
        self,
        path: str,
        params: Sequence[FilterEntry],
        *,
        locale: bool = False,
    ) -> Any:
        """GET *path* with *params* in order and return the decoded JSON body.

        With ``locale=True`` the configured locale parameters are appended.
        """
        ...


@runtime_checkable
class CatalogDecoderPort(Protocol):
    """Turns raw JSON payloads into envelopes and typed records.

    Every method raises ``CatalogDecodeError`` on a schema mismatch.
    """

    def decode_bulk(self, payload: Any) -> Page[Any]:
        """Decode ``{"total": n, "data"|"items": [...]}`` into a raw page."""
        ...

    def decode_facets(self, payload: Any) -> list[FacetBucket[Any]]:
        """Decode ``{"data": [{"type", "items", "total"}, ...]}`` into buckets."""
        ...

    def decode_records(self, items: Sequence[Any], record: Any) -> list[Any]:
        """Validate raw *items* against the *record* type (or union)."""
        ...


@dataclass(frozen=True)
class CatalogContext:
    """Shared, read-only network context handed to every fetch strategy.

    Engines hold a reference to the same instance; it is never copied.
    """

    transport: CatalogTransportPort
    decoder: CatalogDecoderPort
