"""Constants for the MVG API adapter.

No authentication required.
"""

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}
