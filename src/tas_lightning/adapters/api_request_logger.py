"""Utility for logging outgoing API requests when TAS_LOG_REQUESTS is enabled."""

import logging
import os
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_PARAMS = frozenset({"client_id", "client_secret", "token", "api_key"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via TAS_LOG_REQUESTS environment variable."""
    return os.getenv("TAS_LOG_REQUESTS", "").lower() == "true"


def redact_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a copy of query parameters with credentials masked."""
    if not params:
        return {}
    return {k: REDACTED if k.lower() in SENSITIVE_PARAMS else v for k, v in params.items()}


def _build_url_with_params(url: str, params: Mapping[str, Any]) -> str:
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}&{param_str}" if "?" in url else f"{url}?{param_str}"


def log_api_request(method: str, url: str, params: Mapping[str, Any] | None = None) -> None:
    """Log an outgoing request with credentials redacted, if TAS_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL without query string parameters.
        params: Query parameters (optional).
    """
    if not should_log_requests():
        return
    logger.info(f"API Request: {method} {_build_url_with_params(url, redact_params(params))}")
