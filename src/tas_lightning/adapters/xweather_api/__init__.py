"""Xweather lightning API adapter."""

from tas_lightning.adapters.xweather_api.strike_parser import StrikeParser
from tas_lightning.adapters.xweather_api.xweather_strike_repository import (
    MISSING_CREDENTIALS_MESSAGE,
    XweatherStrikeRepository,
)

__all__ = ["MISSING_CREDENTIALS_MESSAGE", "StrikeParser", "XweatherStrikeRepository"]
