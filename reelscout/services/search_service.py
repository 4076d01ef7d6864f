"""Free-text search hydrated into full detail records.

Invariants:
- A blank query never reaches the network.
- One failed detail fetch drops that title only; the aggregate still succeeds.
- Result order depends only on the records, never on fetch completion order.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Iterable, cast

from reelscout.providers import get_connector
from reelscout.providers.http import ExternalAPIError
from reelscout.providers.observability import provider_monitor
from reelscout.providers.omdb import OMDBConnector
from reelscout.schema.details import DetailRecord, SearchKind
from reelscout.services import catalog_service
from reelscout.utils.redaction import redact_secrets

logger = logging.getLogger("reelscout.services.search")


@dataclass(slots=True)
class FetchFailure:
    """A search hit whose detail fetch failed and was left out."""
    external_id: str
    error_kind: str
    error: str


@dataclass(slots=True)
class SearchOutcome:
    query: str
    records: list[DetailRecord] = field(default_factory=list)
    failures: list[FetchFailure] = field(default_factory=list)


def sort_by_year(records: Iterable[DetailRecord]) -> list[DetailRecord]:
    """Order newest first by four-character year prefix.

    Equal years fall back to case-folded title, then external id.
    """
    by_title = sorted(records, key=lambda record: (record.title.casefold(), record.external_id))
    return sorted(by_title, key=lambda record: record.year_key, reverse=True)


async def search(
    query: str,
    kind: SearchKind = SearchKind.ALL,
    *,
    connector: OMDBConnector | None = None,
) -> SearchOutcome:
    """Search the detail provider and hydrate every hit concurrently.

    Implementation notes:
    - Errors from the initial search call propagate, including NotFoundError
      when the provider reports no matches.
    - Detail fetches fan out with no concurrency limit and are joined with
      ``asyncio.gather``; failures are logged and reported in
      ``SearchOutcome.failures``.
    """
    cleaned = query.strip()
    if not cleaned:
        return SearchOutcome(query=cleaned)

    omdb = connector or cast(OMDBConnector, get_connector("omdb"))
    summaries = await provider_monitor.track(
        omdb.source_name,
        "search",
        lambda: omdb.search(cleaned),
        context={"query": cleaned},
    )

    results = await asyncio.gather(
        *(catalog_service.fetch_details(summary.external_id, connector=omdb) for summary in summaries),
        return_exceptions=True,
    )

    outcome = SearchOutcome(query=cleaned)
    hydrated: list[DetailRecord] = []
    for summary, result in zip(summaries, results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            outcome.failures.append(
                FetchFailure(
                    external_id=summary.external_id,
                    error_kind=type(result).__name__,
                    error=redact_secrets(str(result)),
                )
            )
            continue
        if kind.matches(result.media_kind):
            hydrated.append(result)
    outcome.records = sort_by_year(hydrated)

    payload = {
        "event": "search_joined",
        "query": cleaned,
        "kind": kind.value,
        "hits": len(summaries),
        "returned": len(outcome.records),
        "dropped": [failure.external_id for failure in outcome.failures],
    }
    if outcome.failures:
        logger.warning(json.dumps(payload))
    else:
        logger.info(json.dumps(payload))
    return outcome


class SearchSession:
    """Keeps the newest search result for one consumer.

    Each submission takes a token; a submission that finishes after a newer
    one was issued is discarded instead of overwriting ``latest``.
    """

    def __init__(self, *, connector: OMDBConnector | None = None) -> None:
        self._connector = connector
        self._token = 0
        self.latest: SearchOutcome | None = None

    @property
    def current_token(self) -> int:
        return self._token

    async def submit(self, query: str, kind: SearchKind = SearchKind.ALL) -> SearchOutcome | None:
        """Run a search; return its outcome, or None if it was superseded."""
        self._token += 1
        token = self._token
        try:
            outcome = await search(query, kind, connector=self._connector)
        except ExternalAPIError:
            if token != self._token:
                logger.info("Discarding error from superseded search %r (token %d)", query, token)
                return None
            raise
        if token != self._token:
            logger.info("Discarding superseded search %r (token %d, latest %d)", query, token, self._token)
            return None
        self.latest = outcome
        return outcome
