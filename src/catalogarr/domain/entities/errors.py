"""Catalog error hierarchy."""

from __future__ import annotations


class CatalogError(Exception):
    """Base error for catalog browsing and search."""


class CatalogTransportError(CatalogError):
    """Network or HTTP-level failure while talking to the catalog service."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class CatalogDecodeError(CatalogError):
    """Response did not match the expected envelope, record or enum shape."""
