"""Constants for the Sesame cloud API."""

DEFAULT_ENDPOINT = "https://app.candyhouse.co/api/sesame2"

# seconds
DEFAULT_TIMEOUT = 10.0

API_KEY_HEADER = "x-api-key"
USER_AGENT = "sesame-client/0.1.0 python-requests"

# History query parameters, named by the server
PARAM_PAGE = "page"
PARAM_PAGE_SIZE = "lg"

# Body read granularity; cancellation is checked between chunks
CHUNK_SIZE = 8192

# seconds between checks of the cancel event while a call is in flight
POLL_INTERVAL = 0.02
