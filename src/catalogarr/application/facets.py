"""Facet extraction from multi-facet search envelopes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

import structlog

from catalogarr.domain.entities.pagination import FacetBucket, Page

log = structlog.get_logger(__name__)

T = TypeVar("T")


def extract_facet(envelope: Iterable[FacetBucket[T]], discriminant: str) -> Page[T]:
    """Return the items and total of the facet tagged *discriminant*.

    A facet missing from the envelope is a normal outcome and yields an empty
    page with ``total=0``. The first matching bucket wins.
    """
    for bucket in envelope:
        if bucket.discriminant == discriminant:
            return Page(items=list(bucket.items), total=bucket.total)

    log.debug("facet_absent", discriminant=discriminant)
    return Page(items=[], total=0)
