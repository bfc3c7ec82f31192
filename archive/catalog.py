"""Catalog of archived reports.

Scans the dated folders under a reports root and tabulates every archived
artifact. Folders whose names do not parse under the date format (such as
the current folder) are skipped.
"""

from pathlib import Path
from typing import Optional

import pandas as pd

from utils import ensure_directory, get_file_extension, get_logger

from .dated_folder import parse_folder_date

logger = get_logger(__name__)

CATALOG_COLUMNS = ["date", "folder", "filename", "base_name", "format", "size_bytes", "is_current"]


class CatalogError(Exception):
    """Raised when the catalog cannot be built or exported."""

    pass


def _base_name(stem: str, date_str: str) -> str:
    suffix = f"_{date_str}"
    return stem[: -len(suffix)] if stem.endswith(suffix) else stem


def build_catalog(
    reports_root: str | Path,
    date_format: str,
    current_folder: Optional[str | Path] = None,
) -> pd.DataFrame:
    """Tabulate archived artifacts under ``reports_root``.

    Args:
        reports_root: Folder containing the dated folders
        date_format: strftime format of the dated folder names
        current_folder: Current folder, used to flag mirrored artifacts

    Returns:
        DataFrame with one row per artifact, sorted by date then filename

    Raises:
        CatalogError: If ``reports_root`` does not exist
    """
    root = Path(reports_root)
    if not root.is_dir():
        raise CatalogError(f"Reports folder does not exist: {root}")

    current = Path(current_folder) if current_folder is not None else None
    rows = []
    for folder in sorted(p for p in root.iterdir() if p.is_dir()):
        folder_date = parse_folder_date(folder, date_format)
        if folder_date is None:
            logger.debug(f"Skipping non-dated folder: {folder}")
            continue
        for artifact in sorted(p for p in folder.iterdir() if p.is_file()):
            rows.append(
                {
                    "date": pd.Timestamp(folder_date),
                    "folder": folder.name,
                    "filename": artifact.name,
                    "base_name": _base_name(artifact.stem, folder.name),
                    "format": get_file_extension(artifact),
                    "size_bytes": artifact.stat().st_size,
                    "is_current": bool(current is not None and (current / artifact.name).is_file()),
                }
            )

    if not rows:
        return pd.DataFrame(columns=CATALOG_COLUMNS)

    df = pd.DataFrame(rows, columns=CATALOG_COLUMNS)
    return df.sort_values(["date", "filename"]).reset_index(drop=True)


def latest_reports(catalog: pd.DataFrame) -> pd.DataFrame:
    """Keep only the most recent artifact per base name and format."""
    if catalog.empty:
        return catalog
    latest = catalog.sort_values(["date", "filename"]).groupby(["base_name", "format"], as_index=False).tail(1)
    return latest.reset_index(drop=True)


def export_catalog(catalog: pd.DataFrame, path: str | Path) -> Path:
    """Write the catalog as CSV or JSON, chosen by the file extension.

    Args:
        catalog: DataFrame from build_catalog
        path: Target file (.csv or .json)

    Returns:
        Path of the written file

    Raises:
        CatalogError: If the extension is unsupported or the write fails
    """
    path = Path(path)
    extension = get_file_extension(path)
    if extension not in ("csv", "json"):
        raise CatalogError(f"Unsupported catalog export format: {path.suffix}. Use .csv or .json")

    try:
        ensure_directory(path.parent)
        if extension == "csv":
            catalog.to_csv(path, index=False)
        else:
            catalog.to_json(path, orient="records", date_format="iso", indent=2)
    except OSError as e:
        raise CatalogError(f"Failed to export catalog to {path}: I/O error: {e}") from e

    logger.info(f"Catalog exported: {path} ({extension})")
    return path
