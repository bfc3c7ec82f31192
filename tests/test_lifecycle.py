from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from archive import StaleFolderError
from core import ReportLifecycleController, SourceCreationError, SourceOutcome
from rendering import RenderError
from tests.conftest import REPORT_NAME, TEMPLATE_TEXT, FakeRenderer, ScriptedConfirmer

EDITED_TEXT = "# Edited by hand"


def _controller(job, renderer, confirmer, day=date(2016, 4, 2)):
    return ReportLifecycleController(job, renderer, confirmer, clock=lambda: day)


def _existing_source(layout) -> Path:
    path = layout["source"] / f"{REPORT_NAME}.md"
    path.write_text(EDITED_TEXT, encoding="utf-8")
    return path


def test_new_source_is_created_and_compiled(make_job, layout, renderer):
    result = _controller(make_job(), renderer, ScriptedConfirmer()).run()

    assert result.source_outcome is SourceOutcome.CREATED
    assert result.source_path == layout["source"] / f"{REPORT_NAME}.md"
    assert result.source_path.read_text(encoding="utf-8") == TEMPLATE_TEXT
    assert len(result.reports) == 1
    assert result.latest_report.filename == f"{REPORT_NAME}_02Apr16.html"
    assert (layout["reports"] / "02Apr16" / f"{REPORT_NAME}_02Apr16.html").is_file()
    assert (layout["reports"] / "current" / f"{REPORT_NAME}_02Apr16.html").is_file()
    assert result.recompiled is False


def test_policy_no_never_touches_existing_source(make_job, layout, renderer):
    source = _existing_source(layout)
    confirmer = ScriptedConfirmer("overwrite")

    result = _controller(make_job(overwrite_source="no"), renderer, confirmer).run()

    assert result.source_outcome is SourceOutcome.REUSED
    assert source.read_text(encoding="utf-8") == EDITED_TEXT
    assert confirmer.asked == []


def test_policy_yes_overwrites_without_prompting(make_job, layout, renderer):
    source = _existing_source(layout)
    confirmer = ScriptedConfirmer()

    result = _controller(make_job(overwrite_source="yes"), renderer, confirmer).run()

    assert result.source_outcome is SourceOutcome.OVERWRITTEN
    assert source.read_text(encoding="utf-8") == TEMPLATE_TEXT
    assert confirmer.asked == []


def test_policy_ask_overwrites_on_exact_token(make_job, layout, renderer):
    source = _existing_source(layout)
    confirmer = ScriptedConfirmer("overwrite")

    result = _controller(make_job(overwrite_source="ask"), renderer, confirmer).run()

    assert result.source_outcome is SourceOutcome.OVERWRITTEN
    assert source.read_text(encoding="utf-8") == TEMPLATE_TEXT
    assert len(confirmer.asked) == 1


@pytest.mark.parametrize("answer", ["yes", "y", "Overwrite", "overwrite please", ""])
def test_policy_ask_keeps_source_otherwise(make_job, layout, renderer, answer):
    source = _existing_source(layout)

    result = _controller(make_job(overwrite_source="ask"), renderer, ScriptedConfirmer(answer)).run()

    assert result.source_outcome is SourceOutcome.REUSED
    assert source.read_text(encoding="utf-8") == EDITED_TEXT


def test_new_source_never_prompts_even_with_ask(make_job, renderer):
    confirmer = ScriptedConfirmer()
    _controller(make_job(overwrite_source="ask"), renderer, confirmer).run()
    assert confirmer.asked == []


@pytest.mark.parametrize("answer", ["y", "Y", " y "])
def test_recompile_on_confirmation(make_job, renderer, answer):
    confirmer = ScriptedConfirmer(answer)

    result = _controller(make_job(wait_to_recompile=True), renderer, confirmer).run()

    assert result.recompiled is True
    assert len(result.reports) == 2
    assert len(renderer.calls) == 2
    assert confirmer.asked[-1].startswith("Recompile")


@pytest.mark.parametrize("answer", ["n", "yes", ""])
def test_recompile_declined(make_job, renderer, answer):
    result = _controller(make_job(wait_to_recompile=True), renderer, ScriptedConfirmer(answer)).run()

    assert result.recompiled is False
    assert len(result.reports) == 1


def test_recompile_without_first_compile(make_job, renderer):
    result = _controller(make_job(compile_report=False, wait_to_recompile=True), renderer, ScriptedConfirmer("y")).run()

    assert len(result.reports) == 1
    assert result.recompiled is True


def test_no_compile_no_wait_only_prepares_source(make_job, layout, renderer):
    result = _controller(make_job(compile_report=False), renderer, ScriptedConfirmer()).run()

    assert result.source_outcome is SourceOutcome.CREATED
    assert result.reports == []
    assert renderer.calls == []
    assert not (layout["reports"] / "02Apr16").exists()


def test_missing_template_is_fatal(make_job, renderer):
    with pytest.raises(SourceCreationError):
        _controller(make_job(template_file="missing.md"), renderer, ScriptedConfirmer()).run()
    assert renderer.calls == []


def test_stale_explicit_today_folder_is_fatal(make_job, layout, renderer):
    job = make_job(folders={"today": str(layout["reports"] / "01Apr16")})

    with pytest.raises(StaleFolderError):
        _controller(job, renderer, ScriptedConfirmer()).run()

    assert renderer.calls == []


def test_recompile_after_midnight_is_rejected(make_job, layout, renderer):
    clock_days = [date(2016, 4, 2)]

    class MidnightConfirmer(ScriptedConfirmer):
        def ask(self, message: str) -> str:
            clock_days[0] = date(2016, 4, 3)
            return super().ask(message)

    controller = ReportLifecycleController(
        make_job(wait_to_recompile=True), renderer, MidnightConfirmer("y"), clock=lambda: clock_days[0]
    )

    with pytest.raises(StaleFolderError):
        controller.run()

    assert len(renderer.calls) == 1
    assert not (layout["reports"] / "03Apr16").exists()


def test_render_context_reaches_renderer(make_job, renderer):
    _controller(make_job(title="Weekly summary"), renderer, ScriptedConfirmer()).run()

    context = renderer.calls[0]["context"]
    assert context["project"] == "proj1"
    assert context["title"] == "Weekly summary"
    assert context["values"] == {"markup": "parker-like", "analysis": "variant4"}
    assert context["date"] == "02Apr16"


def test_render_failure_surfaces(make_job):
    with pytest.raises(RenderError, match="renderer exploded"):
        _controller(make_job(), FakeRenderer(fail=True), ScriptedConfirmer()).run()
