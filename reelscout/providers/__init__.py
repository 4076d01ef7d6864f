"""Connector registry for upstream providers."""

from __future__ import annotations

from typing import Dict

from reelscout.providers.base import BaseConnector
from reelscout.providers.omdb import OMDBConnector
from reelscout.providers.tmdb import TMDBConnector
from reelscout.providers.watchmode import WatchmodeConnector

_CONNECTORS: Dict[str, BaseConnector] = {}


def get_connector(source: str) -> BaseConnector:
    """Return a connector instance for the given source name."""
    key = source.lower()
    if key not in _CONNECTORS:
        if key == "tmdb":
            _CONNECTORS[key] = TMDBConnector()
        elif key == "omdb":
            _CONNECTORS[key] = OMDBConnector()
        elif key == "watchmode":
            _CONNECTORS[key] = WatchmodeConnector()
        else:
            raise ValueError(f"Unsupported source {source}")
    return _CONNECTORS[key]


def reset_connectors() -> None:
    """Drop cached connectors so the next lookup re-reads settings."""
    _CONNECTORS.clear()
