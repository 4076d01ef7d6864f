"""HTTP API tests: payload shapes, error mapping and health telemetry."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from reelscout.tests.utils import (
    OMDB_URL,
    TMDB_BASE,
    WATCHMODE_SEARCH_URL,
    StubProvider,
    omdb_record,
    omdb_search_page,
    omdb_summary,
    watchmode_source,
    watchmode_sources_url,
)


@pytest.mark.asyncio
async def test_trending_route(client: AsyncClient, stub: StubProvider) -> None:
    stub.add(
        f"{TMDB_BASE}/trending/all/day",
        json_data={"results": [{"id": 7, "name": "Severance", "media_type": "tv", "poster_path": "/s.jpg"}]},
    )

    response = await client.get("/api/trending", params={"window": "day"})

    assert response.status_code == 200
    [item] = response.json()
    assert item["display_title"] == "Severance"
    assert item["media_kind"] == "tv"
    assert item["poster_url"].endswith("/s.jpg")


@pytest.mark.asyncio
async def test_blank_search_route_makes_no_upstream_calls(client: AsyncClient, stub: StubProvider) -> None:
    response = await client.get("/api/search", params={"q": "  "})

    assert response.status_code == 200
    assert response.json()["results"] == []
    assert stub.requests == []


@pytest.mark.asyncio
async def test_search_route_reports_dropped_hits(client: AsyncClient, stub: StubProvider) -> None:
    stub.add(OMDB_URL, params={"s": "heat"}, json_data=omdb_search_page(
        omdb_summary("ttH", "Heat", "1995"),
        omdb_summary("ttX", "Heat Wave", "2022"),
    ))
    stub.add(OMDB_URL, params={"i": "ttH"}, json_data=omdb_record("ttH", "Heat", "1995"))
    stub.add(OMDB_URL, params={"i": "ttX"}, connect_error=True)

    response = await client.get("/api/search", params={"q": "heat"})

    assert response.status_code == 200
    payload = response.json()
    assert [record["external_id"] for record in payload["results"]] == ["ttH"]
    assert payload["results"][0]["rotten_tomatoes_score"] == "87%"
    assert payload["failures"][0]["external_id"] == "ttX"


@pytest.mark.asyncio
async def test_search_route_maps_no_results_to_404(client: AsyncClient, stub: StubProvider) -> None:
    stub.add(OMDB_URL, params={"s": "qwxz"}, json_data={"Response": "False", "Error": "Movie not found!"})

    response = await client.get("/api/search", params={"q": "qwxz"})

    assert response.status_code == 404
    assert response.json()["error"] == "NotFoundError"
    assert "qwxz" in response.json()["detail"]


@pytest.mark.asyncio
async def test_title_route_includes_sources(client: AsyncClient, stub: StubProvider) -> None:
    stub.add(OMDB_URL, params={"i": "tt1"}, json_data=omdb_record("tt1", "Arrival", "2016"))
    stub.add(WATCHMODE_SEARCH_URL, params={"search_value": "tt1"}, json_data={"title_results": [{"id": 3}]})
    stub.add(watchmode_sources_url(3), json_data=[watchmode_source("Paramount+", offer_type="free")])

    response = await client.get("/api/titles/tt1")

    assert response.status_code == 200
    payload = response.json()
    assert payload["record"]["title"] == "Arrival"
    assert payload["sources"] == [
        {
            "provider_id": 1,
            "name": "Paramount+",
            "offer_type": "free",
            "region": "US",
            "web_url": None,
            "display_type": "Free",
        }
    ]


@pytest.mark.asyncio
async def test_catalog_title_route_surfaces_identity_errors(client: AsyncClient, stub: StubProvider) -> None:
    stub.add(f"{TMDB_BASE}/movie/5/external_ids", json_data={"imdb_id": None})

    response = await client.get("/api/titles/catalog/movie/5")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_sources_route_is_best_effort(client: AsyncClient, stub: StubProvider) -> None:
    stub.add(WATCHMODE_SEARCH_URL, status=500, json_data={})

    response = await client.get("/api/titles/tt1/sources")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_missing_detail_key_maps_to_503(client: AsyncClient, omdb) -> None:
    omdb.api_key = None

    response = await client.get("/api/titles/tt1")

    assert response.status_code == 503
    assert response.json()["error"] == "ConfigError"


@pytest.mark.asyncio
async def test_health_reports_degraded_provider(client: AsyncClient, stub: StubProvider) -> None:
    healthy = await client.get("/health")
    assert healthy.json()["status"] == "ok"
    assert healthy.json()["configured"] == {"tmdb": True, "omdb": True, "watchmode": True}

    stub.add(OMDB_URL, params={"i": "tt1"}, status=500, json_data={})
    await client.get("/api/titles/tt1")

    response = await client.get("/api/health")
    payload = response.json()
    assert payload["status"] == "degraded"
    assert payload["providers"]["sources"]["omdb"]["state"] == "degraded"
    assert payload["providers"]["issues"][0]["operation"] == "fetch"


@pytest.mark.asyncio
async def test_health_stays_ok_after_well_formed_absences(client: AsyncClient, stub: StubProvider) -> None:
    stub.add(OMDB_URL, params={"s": "zzqx"}, json_data={"Response": "False", "Error": "Movie not found!"})
    stub.add(OMDB_URL, params={"i": "tt9"}, json_data=omdb_record("tt9", "Obscure", "1971"))
    stub.add(WATCHMODE_SEARCH_URL, params={"search_value": "tt9"}, json_data={"title_results": []})

    assert (await client.get("/api/search", params={"q": "zzqx"})).status_code == 404
    title = await client.get("/api/titles/tt9")
    assert title.status_code == 200
    assert title.json()["sources"] == []

    payload = (await client.get("/health")).json()
    assert payload["status"] == "ok"
    assert payload["providers"]["issues"] == []
    assert payload["providers"]["sources"]["omdb"]["operations"]["search"]["not_found"] == 1
    assert payload["providers"]["sources"]["watchmode"]["state"] == "ok"
