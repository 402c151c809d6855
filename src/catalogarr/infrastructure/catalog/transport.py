"""Catalog service transport: async httpx implementation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx
import structlog

from catalogarr.domain.entities.catalog import Locale
from catalogarr.domain.entities.errors import CatalogDecodeError, CatalogTransportError
from catalogarr.domain.entities.pagination import FilterEntry

log = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://www.crunchyroll.com"


class HttpxCatalogTransport:
    """Async GET transport using a shared ``httpx.AsyncClient``.

    Implements ``CatalogTransportPort`` from domain.ports.transport.

    The client is borrowed, not owned: closing it is the caller's job. Session
    handling is reduced to an optional bearer token; locale negotiation to the
    ``locale`` / ``preferred_audio_language`` parameters appended on request.
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        base_url: str = DEFAULT_BASE_URL,
        access_token: str | None = None,
        locale: Locale | None = None,
        preferred_audio_language: Locale | None = None,
    ) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._access_token = access_token
        self._locale = locale
        self._preferred_audio_language = preferred_audio_language

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        if not self._access_token:
            return {}
        return {"Authorization": f"Bearer {self._access_token}"}

    def locale_params(self) -> list[FilterEntry]:
        """Locale query parameters appended to locale-aware requests."""
        params: list[FilterEntry] = []
        if self._locale is not None:
            params.append(("locale", self._locale.to_wire()))
        if self._preferred_audio_language is not None:
            params.append(
                ("preferred_audio_language", self._preferred_audio_language.to_wire())
            )
        return params

    # ------------------------------------------------------------------
    # Public API (CatalogTransportPort)
    # ------------------------------------------------------------------

    async def get_json(
        self,
        path: str,
        params: Sequence[FilterEntry],
        *,
        locale: bool = False,
    ) -> Any:
        """GET *path* and return the parsed JSON body.

        Raises:
            CatalogTransportError: network failure or non-2xx status.
            CatalogDecodeError: the body is not valid JSON.
        """
        url = f"{self._base_url}{path}"
        query = list(params)
        if locale:
            query.extend(self.locale_params())

        log.debug("catalog_request", path=path, params=query)
        try:
            resp = await self._http.get(url, params=query, headers=self._headers())
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            log.warning("catalog_http_error", path=path, status=status)
            raise CatalogTransportError(
                f"{path} returned HTTP {status}", status_code=status, url=url
            ) from exc
        except httpx.HTTPError as exc:
            log.warning("catalog_network_error", path=path, exc_info=True)
            raise CatalogTransportError(
                f"{path} request failed: {exc!r}", url=url
            ) from exc

        try:
            return resp.json()
        except ValueError as exc:
            log.warning("catalog_invalid_json", path=path, status=resp.status_code)
            raise CatalogDecodeError(f"{path} returned a non-JSON body") from exc
