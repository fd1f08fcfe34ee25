"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "0") == "1"

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

# Upstream
UPSTREAM_STRATEGY = os.getenv("UPSTREAM_STRATEGY", "mirror")
QUERY_BASE_URL = "https://www.worldcubeassociation.org/api/v0"
MIRROR_BASE_URL = "https://raw.githubusercontent.com/robiningelbrecht/wca-rest-api/master/api"
# Overrides the per-strategy default above
UPSTREAM_BASE_URL = os.getenv("UPSTREAM_BASE_URL")
UPSTREAM_API_KEY = os.getenv("UPSTREAM_API_KEY")
UPSTREAM_BEARER_TOKEN = os.getenv("UPSTREAM_BEARER_TOKEN")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "30"))
API_RETRIES = int(os.getenv("API_RETRIES", "3"))
REQUEST_DELAY = float(os.getenv("REQUEST_DELAY", "0.05"))
MAX_CONCURRENT = int(os.getenv("MAX_CONCURRENT", "10"))

# Records
COUNTRY_ISO2 = os.getenv("COUNTRY_ISO2", "CH")
COUNTRY_NAME = os.getenv("COUNTRY_NAME", "Switzerland")
LOOKBACK_DAYS = int(os.getenv("LOOKBACK_DAYS", "7"))
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "100"))
MIRROR_PAGE_SIZE = int(os.getenv("MIRROR_PAGE_SIZE", "1000"))

# Cache (seconds)
PAGE_CACHE_TTL = float(os.getenv("PAGE_CACHE_TTL", "600"))
RESULT_CACHE_TTL = float(os.getenv("RESULT_CACHE_TTL", "120"))


def upstream_headers() -> dict[str, str]:
    """Optional credential headers for the upstream source."""
    headers = {}
    if UPSTREAM_API_KEY:
        headers["X-API-Key"] = UPSTREAM_API_KEY
    if UPSTREAM_BEARER_TOKEN:
        headers["Authorization"] = f"Bearer {UPSTREAM_BEARER_TOKEN}"
    return headers
