"""Global configuration values."""

import os

# Jikan (unofficial MyAnimeList) REST API
JIKAN_BASE_URL = os.environ.get("JIKAN_BASE_URL", "https://api.jikan.moe/v4").rstrip("/")

# Fixed delay (seconds) before every Jikan request to stay under its rate limit
JIKAN_REQUEST_DELAY = float(os.environ.get("JIKAN_REQUEST_DELAY", "1.0"))

# HTTP timeout (seconds) for Jikan requests
JIKAN_TIMEOUT = float(os.environ.get("JIKAN_TIMEOUT", "15"))

# Hard upper bound on returned recommendations and on parallel detail fetches
RESULT_CAP = 5

# Response size cap (never above RESULT_CAP) and the threshold below which
# the top list is used
MAX_RECOMMENDATIONS = min(int(os.environ.get("MAX_RECOMMENDATIONS", "5")), RESULT_CAP)
MIN_RECOMMENDATIONS = int(os.environ.get("MIN_RECOMMENDATIONS", "3"))

# Number of entries requested from the top list fallback
TOP_LIMIT = int(os.environ.get("TOP_LIMIT", "5"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

PORT = int(os.environ.get("PORT", "5000"))
