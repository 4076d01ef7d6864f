"""Per-provider call metrics and structured logging."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, DefaultDict, TypeVar

from reelscout.providers.http import NotFoundError
from reelscout.utils.redaction import redact_secrets

logger = logging.getLogger("reelscout.providers")

T = TypeVar("T")


@dataclass
class OperationMetrics:
    """Aggregated counters for a provider operation."""
    started: int = 0
    succeeded: int = 0
    failed: int = 0
    not_found: int = 0
    last_latency_ms: float | None = None
    last_error: str | None = None
    last_error_kind: str | None = None


class ProviderMonitor:
    """Track provider call outcomes without altering them.

    Every tracked call is attempted exactly once; failures are recorded and
    re-raised unchanged. NotFoundError is a well-formed answer, so it is
    counted separately and leaves the provider's error state clear.
    """
    def __init__(self) -> None:
        self._metrics: DefaultDict[str, DefaultDict[str, OperationMetrics]] = defaultdict(
            lambda: defaultdict(OperationMetrics)
        )
        self._lock = asyncio.Lock()

    async def track(
        self,
        source: str,
        operation: str,
        func: Callable[[], Awaitable[T]],
        *,
        context: dict[str, Any] | None = None,
    ) -> T:
        """Execute a provider call while recording latency and outcome."""
        context = context or {}
        async with self._lock:
            self._metrics[source][operation].started += 1

        start = time.monotonic()
        try:
            result = await func()
        except NotFoundError as exc:
            latency_ms = (time.monotonic() - start) * 1000
            async with self._lock:
                metrics = self._metrics[source][operation]
                metrics.not_found += 1
                metrics.last_latency_ms = latency_ms
                metrics.last_error = None
                metrics.last_error_kind = None
            payload = {
                "event": "provider_not_found",
                "source": source,
                "operation": operation,
                "detail": redact_secrets(str(exc)),
                "latency_ms": round(latency_ms, 2),
                "context": context,
            }
            logger.info(json.dumps(payload))
            raise
        except Exception as exc:  # noqa: BLE001
            latency_ms = (time.monotonic() - start) * 1000
            error = redact_secrets(str(exc))
            async with self._lock:
                metrics = self._metrics[source][operation]
                metrics.failed += 1
                metrics.last_latency_ms = latency_ms
                metrics.last_error = error
                metrics.last_error_kind = type(exc).__name__
            payload = {
                "event": "provider_failure",
                "source": source,
                "operation": operation,
                "error": error,
                "error_kind": type(exc).__name__,
                "latency_ms": round(latency_ms, 2),
                "context": context,
            }
            logger.warning(json.dumps(payload))
            raise

        latency_ms = (time.monotonic() - start) * 1000
        async with self._lock:
            metrics = self._metrics[source][operation]
            metrics.succeeded += 1
            metrics.last_latency_ms = latency_ms
            metrics.last_error = None
            metrics.last_error_kind = None
        payload = {
            "event": "provider_success",
            "source": source,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "context": context,
        }
        logger.info(json.dumps(payload))
        return result

    async def snapshot(self) -> dict[str, Any]:
        """Return a snapshot of all tracked provider metrics."""
        async with self._lock:
            return {
                source: {
                    name: {
                        "started": metrics.started,
                        "succeeded": metrics.succeeded,
                        "failed": metrics.failed,
                        "not_found": metrics.not_found,
                        "last_latency_ms": metrics.last_latency_ms,
                        "last_error": metrics.last_error,
                        "last_error_kind": metrics.last_error_kind,
                    }
                    for name, metrics in operations.items()
                }
                for source, operations in self._metrics.items()
            }

    def reset(self) -> None:
        self._metrics.clear()


provider_monitor = ProviderMonitor()
