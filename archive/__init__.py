"""Archiving of rendered reports.

Dated folders hold every rendered artifact; the current folder mirrors only
the latest artifact per base name. This package validates dated folders,
files artifacts, and catalogs what has been archived. It does not render.
"""

from .catalog import CatalogError, build_catalog, export_catalog, latest_reports
from .dated_folder import (
    StaleFolderError,
    get_today,
    parse_folder_date,
    today_folder,
    validate_today_folder,
)
from .manager import ArchiveError, archive_report, remove_previous_current

__all__ = [
    "ArchiveError",
    "CatalogError",
    "StaleFolderError",
    "archive_report",
    "build_catalog",
    "export_catalog",
    "get_today",
    "latest_reports",
    "parse_folder_date",
    "remove_previous_current",
    "today_folder",
    "validate_today_folder",
]
