"""Application-level constants for localchat.

This module keeps only cross-cutting app/file/path constants and the
built-in setting defaults.
"""

# ============================================================================
# Application identity
# ============================================================================

APP_NAME = "localchat"

# ============================================================================
# File extensions
# ============================================================================

LOG_FILE_EXTENSION = ".log"

# ============================================================================
# Default directories and paths
# ============================================================================

# User data directory (created in home directory)
USER_DATA_DIR = f"~/.{APP_NAME}"

DEFAULT_SETTINGS_PATH = f"{USER_DATA_DIR}/settings.json"
DEFAULT_LOGS_DIR = f"{USER_DATA_DIR}/logs"

DATETIME_FORMAT_FILENAME = "%Y-%m-%d_%H-%M-%S"

# ============================================================================
# Secret storage
# ============================================================================

SECRET_SERVICE_NAME = APP_NAME
SECRET_KEY_API_TOKEN = "localchat.apiToken"

# ============================================================================
# Setting defaults
# ============================================================================

DEFAULT_API_URL = "http://localhost:11434"
DEFAULT_MODEL = "llama3.1"
DEFAULT_API_COMPAT = "openai"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2048
DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful coding assistant. Keep answers concise. "
    "When proposing file content, respond with a fenced code block beginning "
    'with ```file path="relative/path.ext" followed by the complete file content.'
)
DEFAULT_MAX_HISTORY_MESSAGES = 50
DEFAULT_REQUEST_TIMEOUT_MS = 120000
DEFAULT_MAX_FILE_SIZE = 1048576

# ============================================================================
# Workspace queries
# ============================================================================

# Entry names never shown by directory listings.
IGNORED_ENTRY_NAMES = frozenset({"node_modules", "__pycache__"})

# Cap on /search results.
SEARCH_RESULT_LIMIT = 50

# Files that mark a directory as a package-managed project.
PACKAGE_MANIFEST_NAMES = ("package.json", "pyproject.toml", "setup.py")
