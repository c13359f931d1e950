"""Constants for the Xweather lightning API."""

XWEATHER_API_BASE_URL = "https://data.api.xweather.com"
XWEATHER_LIGHTNING_PATH = "/lightning/{lat},{lon}"

# Provider maximum per request
XWEATHER_STRIKE_LIMIT = 1000

BAD_JSON_DESCRIPTION = "Bad JSON from Xweather"
REQUEST_FAILED_DESCRIPTION = "request failed"
TIMEOUT_DESCRIPTION = "Xweather request timed out"
