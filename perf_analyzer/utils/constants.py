"""
Shared constants for the performance analyzer.

Contains common configuration values used across multiple modules.
"""

# Default user agent string for all HTTP requests
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Default request timeout in seconds
DEFAULT_TIMEOUT = 30

# Content relay used for page retrieval when direct access is unavailable.
# Accepts the target as the ``url`` query parameter and answers with a JSON
# envelope whose ``contents`` field holds the original body.
DEFAULT_RELAY_URL = "https://api.allorigins.win/get"

# Accept header for page documents
PAGE_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

# Accept header for the relay envelope
RELAY_ACCEPT = "application/json"

# Accept header for API endpoints, favoring structured text formats
API_ACCEPT = "application/json,text/plain,*/*"

# Environment variable naming a JSON threshold file for the web app
THRESHOLDS_ENV_VAR = "PERF_ANALYZER_THRESHOLDS"
