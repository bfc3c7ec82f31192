"""Logging helpers for archive operations."""

import logging

logger = logging.getLogger(__name__)


def log_artifact_archived(filename: str, output_folder: str) -> None:
    """Log a rendered artifact landing in its dated folder.

    Args:
        filename: Dated artifact filename
        output_folder: Dated folder
    """
    logger.info(f"Artifact archived: {filename} -> {output_folder}")


def log_current_replaced(removed: list[str], filename: str, current_folder: str) -> None:
    """Log the current-folder swap.

    Args:
        removed: Filenames deleted from the current folder
        filename: Filename copied in
        current_folder: Current folder
    """
    if removed:
        logger.info(f"Removed previous current report(s): {', '.join(removed)}")
    logger.info(f"Current report updated: {filename} -> {current_folder}")


def log_report_rendered(source: str, target: str, output_format: str) -> None:
    """Log a render.

    Args:
        source: Source document path
        target: Rendered artifact path
        output_format: html or pdf
    """
    logger.info(f"Report rendered: {source} -> {target} ({output_format})")
