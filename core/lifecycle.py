"""Report lifecycle controller.

This module defines the ReportLifecycleController class which takes a
validated ReportJob through template -> source -> render -> archive:

1) Derive the source filename from the job's tagging scheme.
2) Copy the template into the source folder, or keep an existing source
   depending on the overwrite policy. With ``ask`` the operator must type
   ``overwrite`` exactly; anything else keeps the existing file.
3) Optionally render the fresh source right away so the operator can see
   the tables and plots while writing comments.
4) Optionally wait for the operator to finish editing and recompile once on
   ``y``/``Y``.

Prompts go through an injected ConfirmationProvider so that scripted
answers can stand in for the console.
"""

import shutil
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Protocol

from archive.dated_folder import today_folder
from job.schema import OverwritePolicy, ReportJob
from naming.filename import source_filename
from rendering.base import Renderer
from utils import OVERWRITE_TOKEN, RECOMPILE_TOKENS, get_logger, log_banner

from .publisher import SavedReport, save_report

logger = get_logger(__name__)


class SourceCreationError(Exception):
    """Raised when the template cannot be copied into the source folder."""

    pass


class ConfirmationProvider(Protocol):
    """Source of operator answers."""

    def ask(self, message: str) -> str:
        ...


class SourceOutcome(str, Enum):
    """How the source document was obtained."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    REUSED = "reused"


@dataclass
class JobResult:
    """Outcome of one report job."""

    source_path: Path
    source_outcome: SourceOutcome
    reports: list[SavedReport] = field(default_factory=list)
    recompiled: bool = False

    @property
    def latest_report(self) -> Optional[SavedReport]:
        return self.reports[-1] if self.reports else None


def render_context(job: ReportJob) -> dict:
    """Variables available to the source document when rendering."""
    naming = job.naming
    filename = naming.build()
    return {
        "project": naming.project_name,
        "data_type": naming.data_type,
        "tags": dict(naming.tags),
        "values": dict(naming.values),
        "title": job.title or filename,
        "filename": filename,
    }


class ReportLifecycleController:
    """Runs one report job from template to archived report.

    Args:
        job: Validated ReportJob (read-only)
        renderer: Renderer producing artifacts from the source document
        confirmer: Provider answering the overwrite and recompile prompts
        clock: Callable returning today's date
    """

    def __init__(
        self,
        job: ReportJob,
        renderer: Renderer,
        confirmer: ConfirmationProvider,
        clock: Callable[[], date] = date.today,
    ):
        self.job = job
        self.renderer = renderer
        self.confirmer = confirmer
        self.clock = clock

        self.filename = job.naming.build()
        self.source_path = job.folders.source / source_filename(self.filename)
        self.template_path = job.folders.templates / job.template_file
        # Pinned at job start; save_report rejects it once the day has changed.
        self.output_folder = job.folders.today or today_folder(job.folders.reports, job.date_format, clock())
        self.current_folder = job.folders.current_folder

        logger.info("ReportLifecycleController initialized")
        logger.debug(f"Source: {self.source_path}, template: {self.template_path}")
        logger.debug(f"Output folder: {self.output_folder}, current folder: {self.current_folder}")

    def _should_overwrite(self) -> bool:
        policy = self.job.overwrite_source
        if policy is OverwritePolicy.YES:
            return True
        if policy is OverwritePolicy.NO:
            return False

        answer = self.confirmer.ask(
            f"Source file {self.source_path.name} exists! "
            f"Overwrite? (type `{OVERWRITE_TOKEN}` to do so) "
        )
        return answer == OVERWRITE_TOKEN

    def _copy_template(self) -> None:
        if not self.template_path.is_file():
            raise SourceCreationError(f"Template does not exist: {self.template_path}")
        try:
            self.source_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(self.template_path, self.source_path)
        except OSError as e:
            raise SourceCreationError(f"Creating source file failed: {e}") from e
        if not self.source_path.is_file():
            raise SourceCreationError(f"Creating source file failed: {self.source_path} was not written")

    def prepare_source(self) -> SourceOutcome:
        """Create the source document from the template, or keep the existing one.

        Returns:
            SourceOutcome describing what happened

        Raises:
            SourceCreationError: If copying the template fails
        """
        log_banner(logger, "Preparing source document")

        if self.source_path.exists():
            if not self._should_overwrite():
                logger.info(f"✓ Keeping existing source: {self.source_path}")
                return SourceOutcome.REUSED
            self._copy_template()
            logger.info(f"✓ Source overwritten from template: {self.source_path}")
            return SourceOutcome.OVERWRITTEN

        self._copy_template()
        logger.info(f"✓ Source created from template: {self.source_path}")
        return SourceOutcome.CREATED

    def compile(self) -> SavedReport:
        """Render the source document and archive the artifact.

        Raises:
            StaleFolderError: If the dated folder no longer matches today
            RenderError: If rendering fails
            ArchiveError: If archiving fails
        """
        log_banner(logger, "Compiling report")
        report = save_report(
            self.source_path,
            self.filename,
            self.job.output_format,
            self.output_folder,
            self.renderer,
            mirror_to_current=self.job.copy_to_current,
            current_folder=self.current_folder,
            date_format=self.job.date_format,
            today=self.clock(),
            context=render_context(self.job),
        )
        logger.info(f"✓ Report saved: {report.path}")
        return report

    def run(self) -> JobResult:
        """Run the report job.

        Returns:
            JobResult with the source outcome and every report produced

        Raises:
            SourceCreationError: If the source document cannot be created
            StaleFolderError: If the dated folder is not today's
            RenderError: If rendering fails
            ArchiveError: If archiving fails
        """
        logger.info(f"Starting report job: {self.filename}")

        outcome = self.prepare_source()
        result = JobResult(source_path=self.source_path, source_outcome=outcome)

        if self.job.compile_report:
            result.reports.append(self.compile())

        if self.job.wait_to_recompile:
            answer = self.confirmer.ask("Recompile report? (y/n) ")
            if answer.strip() in RECOMPILE_TOKENS:
                result.reports.append(self.compile())
                result.recompiled = True
            else:
                logger.info("Recompile skipped")

        logger.info(f"Report job finished: source {outcome.value}, {len(result.reports)} report(s) saved")
        return result
