from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Optional

import pytest

from job.schema import OutputFormat, ReportJob
from rendering.base import RenderError

TEMPLATE_TEXT = """# {{ title }}

Project: {{ project }}

| metric | value |
|--------|-------|
| rows   | 42    |
"""

NAMING = {
    "project_name": "proj1",
    "data_type": "data",
    "tags": {"markup": "mk", "analysis": "an"},
    "values": {"markup": "parker-like", "analysis": "variant4"},
}

REPORT_NAME = "proj1_data_mk.parker-like_an.variant4"


class ScriptedConfirmer:
    """Answers prompts from a fixed list and records what was asked."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.asked: list[str] = []

    def ask(self, message: str) -> str:
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        return self.answers.pop(0)


class FakeRenderer:
    """Writes a small text artifact and records each call."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: list[dict[str, Any]] = []

    def render(
        self,
        source_path: Path,
        output_dir: Path,
        output_filename: str,
        output_format: OutputFormat,
        context: Optional[dict[str, Any]] = None,
    ) -> Path:
        self.calls.append(
            {
                "source_path": source_path,
                "output_dir": output_dir,
                "output_filename": output_filename,
                "output_format": output_format,
                "context": context,
            }
        )
        if self.fail:
            raise RenderError("renderer exploded")
        target = Path(output_dir) / output_filename
        target.write_text(f"rendered {Path(source_path).name} #{len(self.calls)}", encoding="utf-8")
        return target


@pytest.fixture
def layout(tmp_path: Path) -> dict[str, Path]:
    folders = {
        "templates": tmp_path / "templates",
        "source": tmp_path / "source",
        "reports": tmp_path / "reports",
    }
    for folder in folders.values():
        folder.mkdir()
    (folders["templates"] / "summary.md").write_text(TEMPLATE_TEXT, encoding="utf-8")
    return folders


@pytest.fixture
def make_job(layout):
    def _make(**overrides: Any) -> ReportJob:
        folders = {key: str(path) for key, path in layout.items()}
        folders.update(overrides.pop("folders", {}))
        config = {
            "naming": NAMING,
            "template_file": "summary.md",
            "folders": folders,
            "output_format": "html",
            "overwrite_source": "ask",
            "compile_report": True,
            "wait_to_recompile": False,
        }
        config.update(overrides)
        return ReportJob(**config)

    return _make


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def day() -> date:
    return date(2016, 4, 2)
