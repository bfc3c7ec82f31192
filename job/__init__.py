"""Report job configuration: schema and loader."""

from .schema import FilenameSpec, FoldersConfig, OutputFormat, OverwritePolicy, ReportJob
from .validator import JobValidationError, load_and_validate_job, load_config_file, validate_job

__all__ = [
    "FilenameSpec",
    "FoldersConfig",
    "JobValidationError",
    "OutputFormat",
    "OverwritePolicy",
    "ReportJob",
    "load_and_validate_job",
    "load_config_file",
    "validate_job",
]
