"""Renderer contract.

A renderer turns a source document into a finished artifact on disk. The
rest of the system only relies on this contract; the conversion itself is
opaque to it.
"""

from pathlib import Path
from typing import Any, Optional, Protocol

from job.schema import OutputFormat
from utils import SUPPORTED_OUTPUT_FORMATS


class RenderError(Exception):
    """Raised when rendering a source document fails."""

    pass


class UnsupportedFormatError(ValueError):
    """Raised for an output format other than html or pdf."""

    pass


class Renderer(Protocol):
    """Anything that can write ``output_filename`` into ``output_dir``."""

    def render(
        self,
        source_path: Path,
        output_dir: Path,
        output_filename: str,
        output_format: OutputFormat,
        context: Optional[dict[str, Any]] = None,
    ) -> Path:
        ...


def parse_output_format(value: OutputFormat | str) -> OutputFormat:
    """Validate an output format at the boundary.

    Args:
        value: OutputFormat or its string value

    Returns:
        OutputFormat

    Raises:
        UnsupportedFormatError: If the value is not html or pdf
    """
    if isinstance(value, OutputFormat):
        return value
    try:
        return OutputFormat(str(value).strip().lower())
    except ValueError as e:
        raise UnsupportedFormatError(
            f"Incorrect file format {value!r}! Choose one of: {', '.join(SUPPORTED_OUTPUT_FORMATS)}"
        ) from e
