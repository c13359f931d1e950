"""Web adapter."""

from tas_lightning.adapters.web.api_routes import LightningApi, parse_scan_request
from tas_lightning.adapters.web.app import LightningWebServer, create_app

__all__ = ["LightningApi", "LightningWebServer", "create_app", "parse_scan_request"]
