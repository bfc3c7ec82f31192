"""reportflow constants: exit codes, defaults and prompt tokens."""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_CONFIG = 1
EXIT_STALE_FOLDER = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "reportflow"
APP_VERSION = "1.0.0"

# Supported file formats
SUPPORTED_OUTPUT_FORMATS = ["html", "pdf"]
SUPPORTED_CONFIG_FORMATS = ["yaml", "yml", "json"]

# Default values
DEFAULT_DATE_FORMAT = "%d%b%y"  # e.g. 02Apr16
DEFAULT_TAG_DELIMITER = "."
DEFAULT_COMPONENT_DELIMITER = "_"
DEFAULT_CURRENT_DIR = "current"
SOURCE_EXTENSION = ".md"

# Interactive confirmation tokens
OVERWRITE_TOKEN = "overwrite"
RECOMPILE_TOKENS = ("y", "Y")
