"""Pydantic models for the catalog service's response envelopes."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class BulkEnvelope(BaseModel):
    """``{"total": n, "data": [...]}`` (v2) or ``{"total": n, "items": [...]}`` (v1)."""

    model_config = ConfigDict(extra="ignore")

    total: int = Field(ge=0)
    items: list[Any] = Field(validation_alias=AliasChoices("data", "items"))


class FacetBucketSchema(BaseModel):
    """One ``{"type", "items", "total"}`` entry of a search response."""

    model_config = ConfigDict(extra="ignore")

    type: str
    items: list[Any] = Field(default_factory=list)
    total: int = Field(ge=0)


class FacetEnvelope(BaseModel):
    """``{"data": [<bucket>, ...]}``; buckets may omit any known facet."""

    model_config = ConfigDict(extra="ignore")

    buckets: list[FacetBucketSchema] = Field(
        validation_alias=AliasChoices("data", "items"),
    )
