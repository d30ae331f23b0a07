# Environment variables
ENV_BASE_URL = "RESOURCEFUL_URL"
ENV_TIMEOUT = "RESOURCEFUL_TIMEOUT"
ENV_DEBUG = "RESOURCEFUL_DEBUG"
ENV_ID_KEY = "RESOURCEFUL_ID_KEY"
ENV_ERROR_MESSAGE_PROP = "RESOURCEFUL_ERROR_MESSAGE_PROP"

# Headers
HEADER_CONTENT_TYPE = "content-type"
HEADER_USER_AGENT = "user-agent"

# Content types
CONTENT_TYPE_JSON = "application/json"

# Messages
CONNECTION_ERROR = "Connection Error"

# Events
EVENT_REQUEST = "req"
EVENT_RESPONSE = "res"
EVENT_STATUS = "status"
OUTCOME_SUCCESS = "success"
OUTCOME_ERROR = "error"

LOGGER_NAME = "resourceful"

# Response types answered with the undecoded body bytes
BINARY_RESPONSE_TYPES = frozenset({"arraybuffer", "blob", "bytes"})
