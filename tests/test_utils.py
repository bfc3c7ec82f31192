from __future__ import annotations

from pathlib import Path

import pytest

from utils import (
    PathValidationError,
    ensure_directory,
    get_file_extension,
    is_supported_config_format,
    require_file,
    resolve_against,
)


def test_ensure_directory_creates_nested_folders(tmp_path: Path):
    folder = ensure_directory(tmp_path / "reports" / "02Apr16")
    assert folder.is_dir()
    assert folder.is_absolute()
    assert ensure_directory(folder) == folder


def test_resolve_against_anchors_relative_paths(tmp_path: Path):
    assert resolve_against(tmp_path, "source") == tmp_path.resolve() / "source"
    assert resolve_against(tmp_path / "ignored", tmp_path / "abs") == (tmp_path / "abs").resolve()


def test_require_file(tmp_path: Path):
    path = tmp_path / "job.yaml"
    path.write_text("a: 1", encoding="utf-8")

    assert require_file(path) == path.resolve()
    with pytest.raises(FileNotFoundError):
        require_file(tmp_path / "missing.yaml")
    with pytest.raises(PathValidationError):
        require_file(tmp_path)


@pytest.mark.parametrize(
    "name, supported",
    [("job.yaml", True), ("job.YML", True), ("job.json", True), ("job.toml", False), ("job", False)],
)
def test_config_formats(name, supported):
    assert is_supported_config_format(name) is supported


def test_get_file_extension():
    assert get_file_extension("report1_02Apr16.PDF") == "pdf"
    assert get_file_extension("README") == ""
