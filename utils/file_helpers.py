"""Path helpers for reportflow.

Every folder a job touches comes from configuration, so these helpers take
explicit paths (and an explicit base directory for relative ones) and hand
back resolved paths. Nothing here depends on the process working directory.
"""

import logging
from pathlib import Path

from .constants import SUPPORTED_CONFIG_FORMATS

logger = logging.getLogger(__name__)


class PathValidationError(Exception):
    """Raised when a configured path is unusable."""

    pass


def ensure_directory(path: Path) -> Path:
    """Create ``path`` (and parents) unless it already exists.

    A missing folder is not an error; its creation is reported at INFO.

    Returns:
        The resolved folder path

    Raises:
        OSError: If the folder cannot be created
    """
    folder = Path(path).expanduser().resolve()
    if folder.is_dir():
        return folder

    logger.info(f"The folder {folder} doesn't exist. Creating it")
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create folder {folder}: {e}")
        raise
    return folder


def get_file_extension(file_path: str | Path) -> str:
    """Lower-case extension of ``file_path`` without the dot ("" if none)."""
    return Path(file_path).suffix.lstrip(".").lower()


def is_supported_config_format(file_path: str | Path) -> bool:
    """True for job files reportflow can load (YAML or JSON)."""
    return get_file_extension(file_path) in SUPPORTED_CONFIG_FORMATS


def resolve_against(base_dir: Path, value: str | Path) -> Path:
    """Resolve a possibly relative path against an explicit base directory.

    Args:
        base_dir: Directory relative paths are anchored to
        value: Path from configuration or the command line

    Returns:
        Absolute, resolved Path
    """
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = Path(base_dir) / path
    return path.resolve()


def require_file(file_path: str | Path) -> Path:
    """Resolve ``file_path`` and check that it is an existing regular file.

    Raises:
        FileNotFoundError: If nothing exists at the path
        PathValidationError: If the path cannot be resolved or is not a file
    """
    try:
        resolved = Path(file_path).expanduser().resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if not resolved.exists():
        raise FileNotFoundError(f"File does not exist: {file_path}")
    if not resolved.is_file():
        raise PathValidationError(f"Path is not a file: {file_path}")
    return resolved
