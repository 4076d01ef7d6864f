"""FastAPI application entrypoint, error mapping and health reporting.

Invariants:
- Provider errors map to a fixed status per kind; messages never carry API keys.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reelscout.api.router import api_router
from reelscout.core.config import settings
from reelscout.providers.http import ConfigError, DecodeError, ExternalAPIError, NotFoundError, TransportError
from reelscout.providers.observability import provider_monitor
from reelscout.utils.redaction import redact_secrets

LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"

ERROR_STATUS: dict[type[ExternalAPIError], int] = {
    NotFoundError: 404,
    ConfigError: 503,
    TransportError: 502,
    DecodeError: 502,
}

app = FastAPI(title=settings.app_name)
app.include_router(api_router, prefix=settings.api_prefix)


@app.on_event("startup")
async def _configure_logging() -> None:
    """Apply the configured log level and format on startup."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, force=True)


@app.exception_handler(ExternalAPIError)
async def _provider_error(request: Request, exc: ExternalAPIError) -> JSONResponse:
    status_code = next(
        (code for kind, code in ERROR_STATUS.items() if isinstance(exc, kind)),
        502,
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": redact_secrets(str(exc)), "error": type(exc).__name__},
    )


def _summarize_providers(snapshot: dict[str, Any]) -> dict[str, Any]:
    """Condense provider monitor state into health-friendly telemetry.

    Implementation notes:
    - A provider is degraded while any of its operations' last call failed.
    - Missing credentials are reported as configuration issues, not outages.
    """
    issues: list[dict[str, Any]] = []
    sources: dict[str, Any] = {}
    for source, operations in snapshot.items():
        state = "ok"
        failure_total = 0
        for operation, metrics in operations.items():
            failure_total += int(metrics.get("failed") or 0)
            last_error = metrics.get("last_error")
            if not last_error:
                continue
            reason = "missing_credentials" if metrics.get("last_error_kind") == ConfigError.__name__ else "last_error"
            issues.append(
                {
                    "source": source,
                    "operation": operation,
                    "reason": reason,
                    "error": last_error,
                }
            )
            state = "degraded"
        sources[source] = {
            "state": state,
            "operations": operations,
            "failure_total": failure_total,
        }
    return {"sources": sources, "issues": issues}


def _configured_providers() -> dict[str, bool]:
    return {
        "tmdb": bool(settings.tmdb_api_auth_header or settings.tmdb_api_key),
        "omdb": bool(settings.omdb_api_key),
        "watchmode": bool(settings.watchmode_api_key),
    }


@app.get("/health", tags=["internal"])
@app.get(f"{settings.api_prefix}/health", tags=["internal"])
async def health() -> dict[str, Any]:
    """Return health status with provider telemetry."""
    snapshot = await provider_monitor.snapshot()
    telemetry = _summarize_providers(snapshot)
    status = "ok" if not telemetry["issues"] else "degraded"
    return {"status": status, "configured": _configured_providers(), "providers": telemetry}
