"""Shared helpers for provider and service tests."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import httpx

OMDB_URL = "https://www.omdbapi.com/"
WATCHMODE_SEARCH_URL = "https://api.watchmode.com/v1/search/"
TMDB_BASE = "https://api.themoviedb.org/3"


def watchmode_sources_url(title_id: int) -> str:
    return f"https://api.watchmode.com/v1/title/{title_id}/sources/"


@dataclass(slots=True)
class StubRoute:
    url: str
    params: dict[str, str]
    status: int = 200
    json_data: Any = None
    text: str | None = None
    connect_error: bool = False
    delay: float = 0.0


@dataclass
class StubProvider:
    """Fake upstream answering canned responses by URL and query params."""

    routes: list[StubRoute] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)

    def add(
        self,
        url: str,
        *,
        params: dict[str, str] | None = None,
        status: int = 200,
        json_data: Any = None,
        text: str | None = None,
        connect_error: bool = False,
        delay: float = 0.0,
    ) -> None:
        self.routes.append(
            StubRoute(
                url=url,
                params=params or {},
                status=status,
                json_data=json_data,
                text=text,
                connect_error=connect_error,
                delay=delay,
            )
        )

    def _match(self, request: httpx.Request) -> StubRoute:
        base_url = str(request.url.copy_with(query=None))
        for route in self.routes:
            if route.url != base_url:
                continue
            if all(request.url.params.get(key) == value for key, value in route.params.items()):
                return route
        raise AssertionError(f"No stub configured for {request.url}")

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._match(request)
        if route.delay:
            await asyncio.sleep(route.delay)
        if route.connect_error:
            raise httpx.ConnectError("connection refused", request=request)
        if route.text is not None:
            return httpx.Response(route.status, text=route.text, request=request)
        return httpx.Response(route.status, json=route.json_data, request=request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def urls(self) -> list[str]:
        return [str(request.url.copy_with(query=None)) for request in self.requests]


def omdb_record(imdb_id: str, title: str, year: str, **overrides: Any) -> dict[str, Any]:
    """Build a detail-provider payload with the fields the provider always sends."""
    payload: dict[str, Any] = {
        "Title": title,
        "Year": year,
        "Rated": "PG-13",
        "Released": "16 Jul 2010",
        "Runtime": "148 min",
        "Genre": "Action, Sci-Fi",
        "Director": "Christopher Nolan",
        "Writer": "Christopher Nolan",
        "Actors": "Leonardo DiCaprio, Joseph Gordon-Levitt",
        "Plot": "A thief who steals corporate secrets.",
        "Language": "English",
        "Country": "United States",
        "Awards": "Won 4 Oscars",
        "Poster": "https://m.media-amazon.com/poster.jpg",
        "Ratings": [
            {"Source": "Internet Movie Database", "Value": "8.8/10"},
            {"Source": "Rotten Tomatoes", "Value": "87%"},
        ],
        "Metascore": "74",
        "imdbRating": "8.8",
        "imdbID": imdb_id,
        "Type": "movie",
        "Response": "True",
    }
    payload.update(overrides)
    return payload


def omdb_summary(imdb_id: str, title: str, year: str, kind: str = "movie") -> dict[str, str]:
    return {"Title": title, "Year": year, "imdbID": imdb_id, "Type": kind, "Poster": "N/A"}


def omdb_search_page(*summaries: dict[str, str]) -> dict[str, Any]:
    return {"Search": list(summaries), "totalResults": str(len(summaries)), "Response": "True"}


def watchmode_source(name: str, region: str = "US", offer_type: str = "sub", source_id: int = 1) -> dict[str, Any]:
    return {"source_id": source_id, "name": name, "type": offer_type, "region": region}
