"""Archive manager for rendered reports.

Rendered artifacts are kept in a dated folder and mirrored into a "current"
folder that holds at most one artifact per base name. There is no rollback:
if the stale mirror is removed but the copy fails, current is left without
that report until the next successful run.
"""

import shutil
from pathlib import Path
from typing import Optional

from utils import ensure_directory, get_logger

from .logging import log_artifact_archived, log_current_replaced

logger = get_logger(__name__)


class ArchiveError(Exception):
    """Raised when archiving a rendered artifact fails."""

    pass


def _same_folder(a: str | Path, b: str | Path) -> bool:
    return Path(a).expanduser().resolve() == Path(b).expanduser().resolve()


def remove_previous_current(current_folder: Path, output_base_name: str) -> list[str]:
    """Delete every file in ``current_folder`` whose name contains the base name.

    The match is a plain substring test so that earlier dated variants of the
    same report are caught. Finding nothing is not an error.

    Args:
        current_folder: Current folder (must exist)
        output_base_name: Report base name without date or extension

    Returns:
        Names of the deleted files
    """
    removed = []
    for candidate in sorted(current_folder.iterdir()):
        if candidate.is_file() and output_base_name in candidate.name:
            candidate.unlink(missing_ok=True)
            removed.append(candidate.name)
            logger.debug(f"Removed previous current report: {candidate}")
    return removed


def archive_report(
    rendered_path: str | Path,
    output_folder: str | Path,
    output_base_name: str,
    mirror_to_current: bool = True,
    current_folder: Optional[str | Path] = None,
) -> str:
    """File a rendered artifact in its dated folder and mirror it to current.

    Args:
        rendered_path: Rendered artifact, named ``{base}_{date}.{ext}``
        output_folder: Dated folder; created if missing
        output_base_name: Report base name without date or extension
        mirror_to_current: Whether to replace the report in ``current_folder``
        current_folder: Folder holding the latest report per base name; created if missing

    Returns:
        Dated filename (with extension) of the archived artifact

    Raises:
        ArchiveError: If the artifact is missing or a filesystem operation fails
    """
    rendered_path = Path(rendered_path)
    filename = rendered_path.name

    if not rendered_path.is_file():
        raise ArchiveError(f"Rendered artifact does not exist: {rendered_path}")

    if mirror_to_current and current_folder is None:
        raise ArchiveError("Mirroring to current requested but no current folder configured")
    if mirror_to_current and _same_folder(output_folder, current_folder):
        raise ArchiveError(f"Current folder must differ from the dated folder: {current_folder}")

    try:
        output_folder = ensure_directory(Path(output_folder))
        archived_path = output_folder / filename
        if rendered_path.resolve() != archived_path:
            shutil.move(str(rendered_path), str(archived_path))
        log_artifact_archived(filename, str(output_folder))

        if mirror_to_current:
            current = ensure_directory(Path(current_folder))
            removed = remove_previous_current(current, output_base_name)
            shutil.copyfile(archived_path, current / filename)
            log_current_replaced(removed, filename, str(current))
    except (OSError, shutil.Error) as e:
        raise ArchiveError(f"Failed to archive {filename}: {e}") from e

    return filename
