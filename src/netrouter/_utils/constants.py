# Environment variables
ENV_BASE_URL = "NETROUTER_BASE_URL"
ENV_TIMEOUT = "NETROUTER_TIMEOUT"
ENV_VERIFY_SSL = "NETROUTER_VERIFY_SSL"
ENV_FOLLOW_REDIRECTS = "NETROUTER_FOLLOW_REDIRECTS"

# Files
DOTENV_FILE = ".env"

# Logging
LOGGER_NAME = "netrouter"

# Defaults
DEFAULT_TIMEOUT = 30.0
