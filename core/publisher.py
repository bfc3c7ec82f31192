"""Render a source document and archive the result.

This is the save step of a report job: validate the dated folder, render
``{base}_{today}.{ext}`` into it, then mirror it into the current folder.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

from archive.dated_folder import get_today, validate_today_folder
from archive.logging import log_report_rendered
from archive.manager import ArchiveError, archive_report
from job.schema import OutputFormat
from naming.filename import dated_filename
from rendering.base import Renderer, parse_output_format
from utils import DEFAULT_DATE_FORMAT, ensure_directory, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SavedReport:
    """A rendered and archived report."""

    filename: str
    path: Path
    output_format: OutputFormat
    current_path: Optional[Path] = None
    created_at: datetime = field(default_factory=datetime.now)


def save_report(
    source_path: str | Path,
    output_base_name: str,
    output_format: OutputFormat | str,
    output_folder: str | Path,
    renderer: Renderer,
    mirror_to_current: bool = True,
    current_folder: Optional[str | Path] = None,
    date_format: str = DEFAULT_DATE_FORMAT,
    today: Optional[date] = None,
    context: Optional[dict[str, Any]] = None,
) -> SavedReport:
    """Render ``source_path`` into the dated folder and archive it.

    Args:
        source_path: Source document to render
        output_base_name: Artifact base name; the date is appended automatically
        output_format: html or pdf
        output_folder: Dated folder named after today's date; created if missing
        renderer: Renderer used to produce the artifact
        mirror_to_current: Also replace the report in ``current_folder``
        current_folder: Folder holding the latest report per base name
        date_format: strftime format of the dated folder and filename suffix
        today: Date to use instead of the system clock
        context: Extra variables handed to the renderer

    Returns:
        SavedReport describing the archived artifact

    Raises:
        UnsupportedFormatError: If the format is not html or pdf
        StaleFolderError: If ``output_folder`` is not named after today
        RenderError: If the renderer fails
        ArchiveError: If mirroring is requested without a current folder, or archiving fails
    """
    output_format = parse_output_format(output_format)
    today = today or date.today()

    validate_today_folder(output_folder, date_format, today)
    if mirror_to_current and current_folder is None:
        raise ArchiveError("Mirroring to current requested but no current folder configured")
    output_folder = ensure_directory(Path(output_folder))

    filename = dated_filename(output_base_name, get_today(date_format, today), output_format.value)
    render_context = {"date": get_today(date_format, today), "today": today, **(context or {})}
    rendered = renderer.render(
        Path(source_path),
        output_folder,
        filename,
        output_format,
        context=render_context,
    )
    log_report_rendered(str(source_path), str(rendered), output_format.value)

    filename = archive_report(
        rendered,
        output_folder,
        output_base_name,
        mirror_to_current=mirror_to_current,
        current_folder=current_folder,
    )

    current_path = Path(current_folder).resolve() / filename if mirror_to_current else None
    return SavedReport(
        filename=filename,
        path=output_folder / filename,
        output_format=output_format,
        current_path=current_path,
    )
