"""Dated output folders.

Reports are filed under a folder named after the day they were produced. A
long interactive session can cross midnight, and a folder path computed
earlier can go stale, so every save re-checks the folder name against the
actual date.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

from utils import DEFAULT_DATE_FORMAT, get_logger

logger = get_logger(__name__)


class StaleFolderError(Exception):
    """Raised when a dated folder's name is not today's date."""

    pass


def get_today(date_format: str = DEFAULT_DATE_FORMAT, today: Optional[date] = None) -> str:
    """Return today's date rendered with ``date_format`` (default: 02Apr16).

    Args:
        date_format: strftime format
        today: Date to use instead of the system clock

    Returns:
        Formatted date string
    """
    today = today or date.today()
    return today.strftime(date_format)


def today_folder(reports_root: Path, date_format: str = DEFAULT_DATE_FORMAT, today: Optional[date] = None) -> Path:
    """Default dated folder for ``today`` under ``reports_root``."""
    return Path(reports_root) / get_today(date_format, today)


def parse_folder_date(folder_path: str | Path, date_format: str) -> Optional[date]:
    """Parse the last path segment of ``folder_path`` as a date.

    Returns:
        The parsed date, or None if the name does not match ``date_format``
    """
    candidate = Path(folder_path).name
    try:
        return datetime.strptime(candidate, date_format).date()
    except ValueError:
        return None


def validate_today_folder(
    folder_path: str | Path,
    date_format: str = DEFAULT_DATE_FORMAT,
    today: Optional[date] = None,
) -> None:
    """Check that ``folder_path`` is named after today's date.

    Args:
        folder_path: Dated output folder
        date_format: strftime format the folder name was written with
        today: Date to compare against instead of the system clock

    Raises:
        StaleFolderError: If the name does not parse or is not today
    """
    today = today or date.today()
    folder_date = parse_folder_date(folder_path, date_format)

    if folder_date is None:
        raise StaleFolderError(
            f"The today folder {folder_path} is not a date in format {date_format!r}. "
            "Change the folder."
        )

    if folder_date != today:
        raise StaleFolderError(
            f"The today folder {folder_path} is dated {folder_date.isoformat()}, "
            f"which does not correspond to today's date ({today.isoformat()}). Change the folder."
        )

    logger.debug(f"Today folder validated: {folder_path}")
