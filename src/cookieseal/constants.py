"""Default configuration constants for cookieseal."""

# Upper bound for a serialized Set-Cookie value, in bytes
MAX_COOKIE_SIZE = 4096

# Default cookie attributes
DEFAULT_COOKIE_PATH = "/"

# Environment variable names (without prefix)
ENV_PREFIX = "COOKIESEAL_"
ENV_SECRET_KEY = "SECRET_KEY"
ENV_COOKIE_PATH = "COOKIE_PATH"
ENV_COOKIE_MAX_AGE = "COOKIE_MAX_AGE"
ENV_COOKIE_SECURE = "COOKIE_SECURE"
