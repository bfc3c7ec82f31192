"""Loading and validation of report job files.

A job file is YAML or JSON. Relative folders in it are anchored to the
directory holding the file, command-line overrides are layered on top, and
the result is validated into an immutable ReportJob. Every failure surfaces
as a JobValidationError with a message meant for the operator.
"""

import json
import pathlib
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from job.schema import ReportJob
from utils import (
    SUPPORTED_CONFIG_FORMATS,
    PathValidationError,
    get_logger,
    is_supported_config_format,
    require_file,
    resolve_against,
)

logger = get_logger(__name__)

FOLDER_KEYS = ("templates", "source", "reports", "today", "current")


class JobValidationError(Exception):
    """Raised when a job file cannot be loaded or does not describe a valid job."""

    pass


def _parse(path: pathlib.Path, text: str) -> Any:
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise JobValidationError(f"Invalid JSON syntax in {path}: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise JobValidationError(f"Invalid YAML syntax in {path}: {e}") from e


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Read a job file into a plain dictionary.

    Args:
        config_path: .yaml, .yml or .json job file

    Returns:
        The parsed top-level mapping

    Raises:
        JobValidationError: If the file is missing, unreadable, malformed,
            empty, or not a mapping
    """
    try:
        path = require_file(config_path)
    except FileNotFoundError as e:
        raise JobValidationError(f"Job file not found: {config_path}") from e
    except PathValidationError as e:
        raise JobValidationError(f"Invalid job file path: {e}") from e

    if not is_supported_config_format(path):
        raise JobValidationError(
            f"Unsupported file format: {path.suffix or '(none)'}. "
            f"Supported formats: {', '.join(SUPPORTED_CONFIG_FORMATS)}"
        )

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise JobValidationError(f"Job file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise JobValidationError(f"Failed to read job file {path}: {e}") from e

    config = _parse(path, text)
    if config is None:
        raise JobValidationError(f"Job file {path} is empty")
    if not isinstance(config, dict):
        raise JobValidationError(
            f"Job file {path} must contain a dictionary at the top level, got {type(config).__name__}"
        )

    logger.debug(f"Loaded job file {path}")
    return config


def resolve_folders(config: dict, base_dir: pathlib.Path) -> dict:
    """Return a copy of ``config`` whose folder entries are absolute.

    Relative entries are anchored to ``base_dir``, never to the working
    directory. Entries that are missing or empty are left alone.
    """
    folders = config.get("folders")
    if not isinstance(folders, dict):
        return config

    resolved = dict(folders)
    for key in FOLDER_KEYS:
        if resolved.get(key):
            resolved[key] = str(resolve_against(base_dir, resolved[key]))
    return {**config, "folders": resolved}


def apply_overrides(config: dict, overrides: Optional[dict[str, Any]]) -> dict:
    """Apply top-level overrides, skipping entries whose value is None."""
    if not overrides:
        return config
    return {**config, **{k: v for k, v in overrides.items() if v is not None}}


def describe_errors(error: ValidationError) -> str:
    """One ``field -> path: message (type)`` line per pydantic error."""
    lines = []
    for err in error.errors():
        location = " -> ".join(str(part) for part in err.get("loc", ())) or "job"
        lines.append(f"  {location}: {err.get('msg', 'invalid value')} ({err.get('type', 'unknown')})")
    return "\n".join(lines)


def validate_job(config: dict) -> ReportJob:
    """Validate a configuration dictionary into a ReportJob.

    Raises:
        JobValidationError: Listing every invalid field
    """
    try:
        return ReportJob.model_validate(config)
    except ValidationError as e:
        raise JobValidationError(f"Job validation failed:\n{describe_errors(e)}") from e


def load_and_validate_job(
    config_path: Union[str, pathlib.Path],
    overrides: Optional[dict[str, Any]] = None,
) -> ReportJob:
    """Load, anchor, override and validate a job file.

    This is the entry point used by the CLI.

    Args:
        config_path: YAML or JSON job file
        overrides: Top-level values (e.g. from command-line flags) that win
            over the file; None values are ignored

    Returns:
        Validated ReportJob

    Raises:
        JobValidationError: If loading or validation fails
    """
    config = load_config_file(config_path)
    base_dir = pathlib.Path(config_path).expanduser().resolve().parent
    config = resolve_folders(config, base_dir)
    config = apply_overrides(config, overrides)
    return validate_job(config)
