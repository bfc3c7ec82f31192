"""Command-line interface for reportflow.

Subcommands:

    reportflow name     --config job.yaml
    reportflow prepare  --config job.yaml [--overwrite ask|yes|no] [--no-compile] [--no-wait]
    reportflow render   --config job.yaml [--format html|pdf] [--no-current]
    reportflow history  --config job.yaml [--latest] [--export catalog.csv]

The interactive prompts live in `cli/interactive.py`.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from archive import (
    ArchiveError,
    CatalogError,
    StaleFolderError,
    build_catalog,
    export_catalog,
    latest_reports,
    today_folder,
)
from core import ReportLifecycleController, SourceCreationError, render_context, save_report
from job import JobValidationError, ReportJob, load_and_validate_job
from naming import source_filename
from rendering import MarkdownRenderer, RenderError, UnsupportedFormatError
from utils import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_CONFIG,
    EXIT_RUNTIME_ERROR,
    EXIT_STALE_FOLDER,
    EXIT_SUCCESS,
    PathValidationError,
    get_logger,
    resolve_against,
    setup_logging,
)

from .interactive import ConsolePrompter, display_job_summary

logger = get_logger(__name__)

__all__ = [
    "EXIT_INVALID_CONFIG",
    "EXIT_RUNTIME_ERROR",
    "EXIT_STALE_FOLDER",
    "EXIT_SUCCESS",
    "ConsolePrompter",
    "MarkdownRenderer",
    "main",
    "parse_args",
]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_NAME} - dated reports from templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to YAML/JSON report job config",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute", required=True)

    subparsers.add_parser("name", parents=[common], help="Print the report filename for a job")

    prepare_parser = subparsers.add_parser(
        "prepare", parents=[common], help="Create the source from its template, render and archive it"
    )
    prepare_parser.add_argument("--template", type=str, default=None, help="Template file (overrides config)")
    prepare_parser.add_argument("--format", type=str, default=None, help="Output format: html or pdf")
    prepare_parser.add_argument(
        "--overwrite",
        type=str,
        default=None,
        help="What to do if the source exists: ask, yes or no",
    )
    prepare_parser.add_argument("--no-compile", action="store_true", help="Do not render right away")
    prepare_parser.add_argument("--no-wait", action="store_true", help="Do not offer to recompile")

    render_parser = subparsers.add_parser(
        "render", parents=[common], help="Render the existing source document and archive it"
    )
    render_parser.add_argument("--format", type=str, default=None, help="Output format: html or pdf")
    render_parser.add_argument("--source", type=str, default=None, help="Source document (defaults to the job's)")
    render_parser.add_argument("--no-current", action="store_true", help="Do not mirror into the current folder")

    history_parser = subparsers.add_parser("history", parents=[common], help="List archived reports")
    history_parser.add_argument("--latest", action="store_true", help="Only the latest report per base name")
    history_parser.add_argument(
        "--export",
        type=str,
        default=None,
        help="Write the catalog to a .csv or .json file (relative paths resolve against the config file's folder)",
    )

    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> dict:
    overrides = {
        "template_file": getattr(args, "template", None),
        "output_format": getattr(args, "format", None),
        "overwrite_source": getattr(args, "overwrite", None),
    }
    if getattr(args, "no_compile", False):
        overrides["compile_report"] = False
    if getattr(args, "no_wait", False):
        overrides["wait_to_recompile"] = False
    if getattr(args, "no_current", False):
        overrides["copy_to_current"] = False
    return overrides


def run_name(job: ReportJob) -> int:
    """Print the derived filename of the job's source document."""
    print(source_filename(job.naming.build()))
    return EXIT_SUCCESS


def run_prepare(job: ReportJob) -> int:
    """Run the full report lifecycle for a validated job."""
    display_job_summary(job)
    controller = ReportLifecycleController(job, MarkdownRenderer(), ConsolePrompter())
    result = controller.run()

    print(f"✓ Source {result.source_outcome.value}: {result.source_path}")
    for report in result.reports:
        print(f"✓ Report saved: {report.path}")
    return EXIT_SUCCESS


def run_render(job: ReportJob, source: Optional[str] = None) -> int:
    """Render the job's existing source document and archive it."""
    name = job.naming.build()
    if source:
        source_path = resolve_against(job.folders.source, source)
    else:
        source_path = job.folders.source / source_filename(name)
    output_folder = job.folders.today or today_folder(job.folders.reports, job.date_format)

    report = save_report(
        source_path,
        name,
        job.output_format,
        output_folder,
        MarkdownRenderer(),
        mirror_to_current=job.copy_to_current,
        current_folder=job.folders.current_folder,
        date_format=job.date_format,
        context=render_context(job),
    )
    print(f"✓ Report saved: {report.path}")
    return EXIT_SUCCESS


def run_history(job: ReportJob, latest: bool = False, export: Optional[str | Path] = None) -> int:
    """Print, and optionally export, the catalog of archived reports."""
    catalog = build_catalog(job.folders.reports, job.date_format, job.folders.current_folder)
    if latest:
        catalog = latest_reports(catalog)

    if catalog.empty:
        print("No archived reports found.")
    else:
        print(catalog.to_string(index=False))

    if export:
        path = export_catalog(catalog, export)
        print(f"✓ Catalog exported: {path}")
    return EXIT_SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the `reportflow` command.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        job = load_and_validate_job(args.config, overrides=_overrides(args))

        if args.command == "name":
            return run_name(job)
        if args.command == "prepare":
            return run_prepare(job)
        if args.command == "render":
            return run_render(job, source=args.source)
        if args.command == "history":
            export = None
            if args.export:
                export = resolve_against(Path(args.config).expanduser().resolve().parent, args.export)
            return run_history(job, latest=args.latest, export=export)

        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    except (JobValidationError, UnsupportedFormatError, PathValidationError) as e:
        print(f"✗ Invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG
    except StaleFolderError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_STALE_FOLDER
    except (SourceCreationError, RenderError, ArchiveError, CatalogError) as e:
        print(f"✗ {type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except KeyboardInterrupt:
        print("\n✗ Interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except (OSError, IOError) as e:
        print(f"✗ I/O error: {e}", file=sys.stderr)
        logger.exception("I/O error during report job")
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        print(f"✗ Unexpected error: {type(e).__name__}: {e}", file=sys.stderr)
        logger.exception(f"Unexpected error during report job: {type(e).__name__}")
        return EXIT_RUNTIME_ERROR
