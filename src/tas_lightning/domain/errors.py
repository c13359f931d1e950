"""Exception hierarchy for lightning scans and line lookups."""

from __future__ import annotations

from typing import Any


class LightningServiceError(Exception):
    """Base exception for all tas_lightning errors."""


class ConfigurationError(LightningServiceError):
    """Missing or invalid configuration, such as absent provider credentials."""


class ValidationError(LightningServiceError):
    """A request parameter is missing or invalid."""


class ProviderError(LightningServiceError):
    """The strike provider failed for a single station.

    `details` is the provider's own error object when it sent one.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.details = details if details is not None else {"description": message}
        super().__init__(message)


class NetworkError(LightningServiceError):
    """Connection-level failure talking to a remote service."""

    def __init__(self, message: str, *, url: str = "", status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)
