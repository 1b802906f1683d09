"""
Horizon client constants.

Central location for service endpoints, paging limits and transport defaults.
"""

# Public Horizon deployments
DEFAULT_PUBLIC_URL = "https://horizon.stellar.org/"
DEFAULT_TESTNET_URL = "https://horizon-testnet.stellar.org/"

# Environment variable holding the Horizon base URL used by HorizonClient.from_env()
HORIZON_URL_ENV_VAR = "HORIZON_URL"

# Cursor sentinel: only records created after the stream is opened
CURSOR_NOW = "now"

# Paging
MAX_PAGE_LIMIT = 200

# Media types
EVENT_STREAM_MEDIA_TYPE = "text/event-stream"
HAL_JSON_MEDIA_TYPE = "application/hal+json"

# Transport defaults (seconds). Streams never time out on reads.
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0

# Payloads the service sends on stream open/close; never handed to decoders
STREAM_CONTROL_PAYLOADS = frozenset({b'"hello"', b'"byebye"'})
