"""Redaction helpers that keep provider API keys out of logs and error text."""

from __future__ import annotations

import re
from typing import Any, Mapping

SECRET_PARAM_NAMES = frozenset({"api_key", "apikey", "access_token", "token"})

_QUERY_SECRET_RE = re.compile(r"(?i)\b(api_key|apikey|access_token|token)=([^&\s'\"]+)")
_BEARER_RE = re.compile(r"(?i)(bearer\s+)([A-Za-z0-9._~-]+)")


def redact_secrets(text: str) -> str:
    """Mask API keys embedded in URLs or authorization headers."""
    if not text:
        return text
    redacted = _QUERY_SECRET_RE.sub(r"\1=***", text)
    redacted = _BEARER_RE.sub(r"\1***", redacted)
    return redacted


def redact_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a copy of query params with secret values masked."""
    if not params:
        return {}
    return {
        key: "***" if key.lower() in SECRET_PARAM_NAMES else value
        for key, value in params.items()
    }
