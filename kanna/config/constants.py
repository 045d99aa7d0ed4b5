"""
Application-wide constants for configuration and tuning.

Note: Environment-dependent settings (database URL, API key, paths) belong in settings.py.
This file is for operational parameters that rarely change between environments.
"""

# ==============================================================================
# COMMAND DISPATCH
# ==============================================================================

# Pending commands accepted before producers block
COMMAND_QUEUE_MAXSIZE: int = 10

# Word list size used when the requested count is missing or not a number
DEFAULT_WORD_LIST_SIZE: int = 5

# Command keys exposed to front ends
LOOKUP_COMMAND: str = "w"
LIST_COMMAND: str = "wl"

# ==============================================================================
# HTTP CLIENT
# ==============================================================================

# Per-request timeout for provider lookups and audio downloads (seconds)
HTTP_TIMEOUT_SEC: float = 10.0

# Idle keep-alive connections held by the shared client
MAX_IDLE_CONNECTIONS: int = 100

# Seconds an idle connection stays in the pool
IDLE_CONNECTION_EXPIRY_SEC: float = 90.0

# ==============================================================================
# PROVIDER QUERY
# ==============================================================================

YOUDAO_QUERY_TYPE: str = "data"
YOUDAO_DOCTYPE: str = "json"
YOUDAO_API_VERSION: str = "1.2"

# ==============================================================================
# PRONUNCIATION AUDIO
# ==============================================================================

SPEECH_FILE_EXTENSION: str = ".mp3"

# Concurrent clip downloads allowed at once
AUDIO_DOWNLOAD_CONCURRENCY: int = 4

# Player command per sys.platform; the clip path is appended as last argument
AUDIO_PLAYER_COMMANDS: dict[str, list[str]] = {
    "darwin": ["afplay"],
    "linux": ["mpg123", "-q"],
}

# ==============================================================================
# SHUTDOWN
# ==============================================================================

# Time allowed for the dispatcher and background tasks to finish on shutdown
GRACEFUL_SHUTDOWN_TIMEOUT_SEC: float = 5.0

# ==============================================================================
# DATABASE
# ==============================================================================

# Connection pool size (server databases only; SQLite uses its default pool)
DB_POOL_SIZE: int = 10

# Max overflow connections beyond pool size
DB_POOL_MAX_OVERFLOW: int = 5

WORD_MAX_LENGTH: int = 255
