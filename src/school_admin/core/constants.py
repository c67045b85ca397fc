"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

NOTIFICATION_TIMEOUT_SECONDS = 5.0
DEFAULT_REQUEST_TIMEOUT = 30
API_VERSION_PREFIX = "/v1"

GENERIC_SERVER_ERROR = "Server error"

JSON_ACCEPT_HEADERS = {"Accept": "application/json"}
JSON_BODY_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}
