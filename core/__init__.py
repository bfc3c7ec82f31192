"""Report job orchestration: source preparation, rendering and archiving."""

from .lifecycle import (
    ConfirmationProvider,
    JobResult,
    ReportLifecycleController,
    SourceCreationError,
    SourceOutcome,
    render_context,
)
from .publisher import SavedReport, save_report

__all__ = [
    "ConfirmationProvider",
    "JobResult",
    "ReportLifecycleController",
    "SavedReport",
    "SourceCreationError",
    "SourceOutcome",
    "render_context",
    "save_report",
]
