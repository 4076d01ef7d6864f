"""Shared pytest fixtures: provider credentials, fake upstreams and the ASGI client."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from reelscout.core.config import settings
from reelscout.providers import reset_connectors
from reelscout.providers.observability import provider_monitor
from reelscout.providers.omdb import OMDBConnector
from reelscout.providers.tmdb import TMDBConnector
from reelscout.providers.watchmode import WatchmodeConnector
from reelscout.tests.utils import StubProvider


@pytest.fixture(autouse=True)
def _provider_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "tmdb_api_key", "tmdb-test-key")
    monkeypatch.setattr(settings, "tmdb_api_auth_header", None)
    monkeypatch.setattr(settings, "omdb_api_key", "omdb-test-key")
    monkeypatch.setattr(settings, "watchmode_api_key", "watchmode-test-key")
    monkeypatch.setattr(settings, "streaming_region", "US")
    reset_connectors()
    provider_monitor.reset()
    yield
    reset_connectors()
    provider_monitor.reset()


@pytest.fixture()
def stub() -> StubProvider:
    return StubProvider()


@pytest.fixture()
def tmdb(stub: StubProvider) -> TMDBConnector:
    return TMDBConnector(client=stub.client())


@pytest.fixture()
def omdb(stub: StubProvider) -> OMDBConnector:
    return OMDBConnector(client=stub.client())


@pytest.fixture()
def watchmode(stub: StubProvider) -> WatchmodeConnector:
    return WatchmodeConnector(client=stub.client())


@pytest_asyncio.fixture()
async def client(
    monkeypatch: pytest.MonkeyPatch,
    tmdb: TMDBConnector,
    omdb: OMDBConnector,
    watchmode: WatchmodeConnector,
) -> AsyncClient:
    from reelscout import providers
    from reelscout.main import app

    monkeypatch.setitem(providers._CONNECTORS, "tmdb", tmdb)
    monkeypatch.setitem(providers._CONNECTORS, "omdb", omdb)
    monkeypatch.setitem(providers._CONNECTORS, "watchmode", watchmode)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as async_client:
        yield async_client
