"""Integration tests for the full catalog pipeline.

Wires the real composition root (httpx client, transport, pydantic decoder,
use cases, pagination engines) and mocks only the HTTP layer via respx.
"""

from __future__ import annotations

import asyncio

import httpx
import pytest
import respx
from factories import episode_record, movie_listing_record, series_record

from catalogarr.domain.entities.browse import BrowseOptions
from catalogarr.domain.entities.catalog import (
    Category,
    Episode,
    Locale,
    MovieListing,
    Series,
)
from catalogarr.domain.entities.errors import CatalogDecodeError, CatalogTransportError
from catalogarr.infrastructure.config.schema import AppConfig, CatalogConfig
from catalogarr.interfaces.composition import build_catalog

pytestmark = pytest.mark.integration

_BASE = "https://catalog.example.test"
_BROWSE = f"{_BASE}/content/v2/discover/browse"
_SEARCH = f"{_BASE}/content/v2/discover/search"
_SEASONS = f"{_BASE}/content/v1/season_list"


def _config(**catalog: object) -> AppConfig:
    return AppConfig(
        http_base_url=_BASE,
        catalog=CatalogConfig(page_size=2, **catalog),  # type: ignore[arg-type]
    )


def _browse_page(request: httpx.Request) -> httpx.Response:
    """Serve five series across pages sized by the ``n``/``start`` params."""
    start = int(request.url.params["start"])
    size = int(request.url.params["n"])
    records = [series_record(f"G{i}") for i in range(5)][start : start + size]
    return httpx.Response(200, json={"total": 5, "data": records, "meta": {}})


def _search_page(request: httpx.Request) -> httpx.Response:
    facet = request.url.params["type"]
    start = int(request.url.params["start"])
    builders = {
        "top_results": series_record,
        "series": series_record,
        "movie_listing": movie_listing_record,
        "episode": episode_record,
    }
    records = [builders[facet](f"{facet}-{start + i}") for i in range(2)]
    top = records if facet == "top_results" else []
    data = [
        {"type": "top_results", "items": top, "total": 4},
        {"type": facet, "items": records, "total": 4},
    ]
    return httpx.Response(200, json={"total": 4, "data": data})


class TestBrowsePipeline:
    @respx.mock
    async def test_collect_all_pages(self) -> None:
        route = respx.get(_BROWSE).mock(side_effect=_browse_page)

        async with build_catalog(_config()) as catalog:
            engine = catalog.browse(BrowseOptions(categories=[Category.ACTION]))
            items = await engine.collect_all()

        assert [s.id for s in items] == ["G0", "G1", "G2", "G3", "G4"]
        assert all(isinstance(s, Series) for s in items)
        assert route.call_count == 3
        assert engine.exhausted
        first = route.calls[0].request.url.params
        assert first.multi_items() == [
            ("categories", "action"),
            ("sort", "newly_added"),
            ("n", "2"),
            ("start", "0"),
        ]

    @respx.mock
    async def test_user_agent_and_token_sent(self) -> None:
        route = respx.get(_BROWSE).mock(side_effect=_browse_page)

        async with build_catalog(_config(access_token="tok")) as catalog:
            await catalog.browse().next_page()

        headers = route.calls.last.request.headers
        assert headers["User-Agent"] == "Catalogarr/0.1.0"
        assert headers["Authorization"] == "Bearer tok"

    @respx.mock
    async def test_failure_keeps_cursor_and_allows_retry(self) -> None:
        recovered = {"total": 1, "data": [series_record("G0")]}
        route = respx.get(_BROWSE).mock(
            side_effect=[httpx.Response(503), httpx.Response(200, json=recovered)]
        )

        async with build_catalog(_config()) as catalog:
            engine = catalog.browse()
            with pytest.raises(CatalogTransportError):
                await engine.next_page()
            assert engine.cursor.start == 0

            page = await engine.next_page()

        assert [s.id for s in page] == ["G0"]
        assert route.calls[1].request.url.params["start"] == "0"


class TestSearchPipeline:
    @respx.mock
    async def test_facets_are_independent_and_typed(self) -> None:
        route = respx.get(_SEARCH).mock(side_effect=_search_page)

        async with build_catalog(_config(locale=Locale.EN_US)) as catalog:
            results = catalog.query("classroom")
            movies, episodes = await asyncio.gather(
                results.movie_listing.next_page(),
                results.episode.next_page(),
            )

        assert [type(m) for m in movies] == [MovieListing, MovieListing]
        assert [type(e) for e in episodes] == [Episode, Episode]
        assert results.series.cursor.start == 0
        assert results.top_results.cursor.start == 0
        assert route.call_count == 2
        params = sorted(
            (call.request.url.params.multi_items() for call in route.calls),
            key=lambda items: dict(items)["type"],
        )
        assert params[0] == [
            ("q", "classroom"),
            ("type", "episode"),
            ("limit", "2"),
            ("start", "0"),
            ("locale", "en-US"),
        ]

    @respx.mock
    async def test_absent_facet_is_empty(self) -> None:
        respx.get(_SEARCH).respond(json={"total": 0, "data": []})

        async with build_catalog(_config()) as catalog:
            results = catalog.query("nothing")
            assert await results.series.next_page() == []
            assert results.series.exhausted
            assert results.series.current_total() == 0

    @respx.mock
    async def test_malformed_envelope_is_decode_error(self) -> None:
        respx.get(_SEARCH).respond(json={"unexpected": True})

        async with build_catalog(_config()) as catalog:
            with pytest.raises(CatalogDecodeError):
                await catalog.query("x").series.next_page()


class TestSeasonsPipeline:
    @respx.mock
    async def test_season_list(self) -> None:
        route = respx.get(_SEASONS).respond(
            json={
                "total": 1,
                "items": [{"id": "fall-2023", "localization": {"title": "Fall 2023"}}],
            }
        )

        async with build_catalog(_config()) as catalog:
            seasons = await catalog.simulcast_seasons(Locale.DE_DE)

        assert [s.id for s in seasons] == ["fall-2023"]
        assert route.calls.last.request.url.params["locale"] == "de-DE"
