"""Constants, logging and path helpers shared by the reportflow packages."""

from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_COMPONENT_DELIMITER,
    DEFAULT_CURRENT_DIR,
    DEFAULT_DATE_FORMAT,
    DEFAULT_TAG_DELIMITER,
    EXIT_INVALID_CONFIG,
    EXIT_RUNTIME_ERROR,
    EXIT_STALE_FOLDER,
    EXIT_SUCCESS,
    OVERWRITE_TOKEN,
    RECOMPILE_TOKENS,
    SOURCE_EXTENSION,
    SUPPORTED_CONFIG_FORMATS,
    SUPPORTED_OUTPUT_FORMATS,
)
from .file_helpers import (
    PathValidationError,
    ensure_directory,
    get_file_extension,
    is_supported_config_format,
    require_file,
    resolve_against,
)
from .logging import get_logger, log_banner, setup_logging

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_COMPONENT_DELIMITER",
    "DEFAULT_CURRENT_DIR",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_TAG_DELIMITER",
    "EXIT_INVALID_CONFIG",
    "EXIT_RUNTIME_ERROR",
    "EXIT_STALE_FOLDER",
    "EXIT_SUCCESS",
    "OVERWRITE_TOKEN",
    "RECOMPILE_TOKENS",
    "SOURCE_EXTENSION",
    "SUPPORTED_CONFIG_FORMATS",
    "SUPPORTED_OUTPUT_FORMATS",
    "PathValidationError",
    "ensure_directory",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "log_banner",
    "resolve_against",
    "require_file",
    "setup_logging",
]
