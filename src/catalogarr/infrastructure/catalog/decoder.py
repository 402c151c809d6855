"""Pydantic-backed decoder for catalog envelopes and records.

Implements ``CatalogDecoderPort`` from domain.ports.transport.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import Annotated, Any

import structlog
from pydantic import Field, TypeAdapter, ValidationError

from catalogarr.domain.entities.catalog import MediaCollection
from catalogarr.domain.entities.errors import CatalogDecodeError
from catalogarr.domain.entities.pagination import FacetBucket, Page

from .schemas import BulkEnvelope, FacetEnvelope

log = structlog.get_logger(__name__)

# Mixed record lists are tagged by "type"; an unknown tag is a decode error.
_TAGGED_UNIONS: dict[Any, Any] = {
    MediaCollection: Annotated[MediaCollection, Field(discriminator="type")],
}


@lru_cache(maxsize=None)
def _records_adapter(record: Any) -> TypeAdapter[list[Any]]:
    item_type = _TAGGED_UNIONS.get(record, record)
    return TypeAdapter(list[item_type])  # type: ignore[valid-type]


def _describe(record: Any) -> str:
    return getattr(record, "__name__", None) or str(record)


class PydanticCatalogDecoder:
    """Validates payloads with pydantic and maps failures to ``CatalogDecodeError``."""

    def decode_bulk(self, payload: Any) -> Page[Any]:
        try:
            envelope = BulkEnvelope.model_validate(payload)
        except ValidationError as exc:
            log.warning("catalog_decode_error", shape="bulk", errors=exc.error_count())
            raise CatalogDecodeError(f"Invalid bulk envelope: {exc}") from exc
        return Page(items=envelope.items, total=envelope.total)

    def decode_facets(self, payload: Any) -> list[FacetBucket[Any]]:
        try:
            envelope = FacetEnvelope.model_validate(payload)
        except ValidationError as exc:
            log.warning("catalog_decode_error", shape="facets", errors=exc.error_count())
            raise CatalogDecodeError(f"Invalid multi-facet envelope: {exc}") from exc
        return [
            FacetBucket(discriminant=bucket.type, items=bucket.items, total=bucket.total)
            for bucket in envelope.buckets
        ]

    def decode_records(self, items: Sequence[Any], record: Any) -> list[Any]:
        if not items:
            return []
        try:
            return _records_adapter(record).validate_python(list(items))
        except ValidationError as exc:
            log.warning(
                "catalog_decode_error",
                shape=_describe(record),
                errors=exc.error_count(),
            )
            raise CatalogDecodeError(
                f"Invalid {_describe(record)} records: {exc}"
            ) from exc
