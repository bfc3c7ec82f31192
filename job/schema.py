"""Report job schema definitions using Pydantic.

This module defines the validated, immutable description of one report job:
how its filename is derived, which folders it touches, and which of the
optional lifecycle steps run.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from naming.filename import build_name
from utils.constants import (
    DEFAULT_COMPONENT_DELIMITER,
    DEFAULT_CURRENT_DIR,
    DEFAULT_DATE_FORMAT,
    DEFAULT_TAG_DELIMITER,
)


class OverwritePolicy(str, Enum):
    """What to do when the source document already exists."""

    ASK = "ask"
    YES = "yes"
    NO = "no"


class OutputFormat(str, Enum):
    """Supported rendered artifact formats."""

    HTML = "html"
    PDF = "pdf"

    @property
    def extension(self) -> str:
        return f".{self.value}"


class FilenameSpec(BaseModel):
    """Tagging scheme used to derive a report's filename.

    ``tags`` maps each component key to its short tag and ``values`` maps the
    same keys, in the same order, to the values of this particular analysis.
    """

    project_name: str = Field(..., min_length=1, description="Project name; the filename starts with it")
    data_type: Optional[str] = Field(default=None, description="Optional data type inserted after the project name")
    tags: dict[str, str] = Field(default_factory=dict, description="Component key -> short tag")
    values: dict[str, str] = Field(default_factory=dict, description="Component key -> value")
    tag_delimiter: str = Field(default=DEFAULT_TAG_DELIMITER)
    component_delimiter: str = Field(default=DEFAULT_COMPONENT_DELIMITER)

    @field_validator("project_name")
    @classmethod
    def validate_project_name(cls, v: str) -> str:
        """Validate project name."""
        if not v.strip():
            raise ValueError("project_name cannot be empty")
        return v.strip()

    @model_validator(mode="after")
    def validate_components(self) -> "FilenameSpec":
        """Tags and values must describe the same components in the same order."""
        if list(self.tags) != list(self.values):
            raise ValueError(
                f"tags and values must share keys and ordering: "
                f"tags={list(self.tags)}, values={list(self.values)}"
            )
        return self

    def build(self) -> str:
        """Render the filename (without extension)."""
        return build_name(
            self.project_name,
            self.tags,
            self.values,
            tag_delimiter=self.tag_delimiter,
            component_delimiter=self.component_delimiter,
            data_type=self.data_type,
        )

    model_config = ConfigDict(frozen=True, extra="forbid")


class FoldersConfig(BaseModel):
    """Folder layout for templates, sources and rendered reports.

    ``today`` pins the dated output folder explicitly; when omitted it is
    derived from ``reports`` and the date format at job start. ``current``
    defaults to ``reports/current``.
    """

    templates: Path = Field(..., description="Folder holding report templates")
    source: Path = Field(..., description="Folder holding editable source documents")
    reports: Path = Field(..., description="Root folder for dated report folders")
    today: Optional[Path] = Field(default=None, description="Explicit dated output folder")
    current: Optional[Path] = Field(default=None, description="Folder mirroring the latest reports")

    @property
    def current_folder(self) -> Path:
        return self.current if self.current is not None else self.reports / DEFAULT_CURRENT_DIR

    model_config = ConfigDict(frozen=True, extra="forbid")


class ReportJob(BaseModel):
    """Complete report job - immutable once validated."""

    naming: FilenameSpec = Field(..., description="Filename tagging scheme")
    template_file: str = Field(..., min_length=1, description="Template file name inside the templates folder")
    folders: FoldersConfig = Field(..., description="Folder layout")
    output_format: OutputFormat = Field(default=OutputFormat.HTML)
    overwrite_source: OverwritePolicy = Field(default=OverwritePolicy.ASK)
    copy_to_current: bool = Field(default=True, description="Mirror rendered reports into the current folder")
    compile_report: bool = Field(default=True, description="Render right after preparing the source")
    wait_to_recompile: bool = Field(default=True, description="Offer one recompile after editing")
    date_format: str = Field(default=DEFAULT_DATE_FORMAT, min_length=1)
    title: Optional[str] = Field(default=None, description="Report title passed to the renderer")

    @field_validator("template_file")
    @classmethod
    def validate_template_file(cls, v: str) -> str:
        """Validate template file name."""
        if not v.strip():
            raise ValueError("template_file cannot be empty")
        return v.strip()

    model_config = ConfigDict(frozen=True, extra="forbid")
