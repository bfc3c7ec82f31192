from __future__ import annotations

from collections import OrderedDict

import pytest
from pydantic import ValidationError

from job.schema import FilenameSpec
from naming import NamingError, build_name, dated_filename, source_filename


def test_build_name_with_data_type():
    name = build_name(
        "proj1",
        tags=OrderedDict([("markup", "mk"), ("analysis", "an")]),
        values=OrderedDict([("markup", "parker-like"), ("analysis", "variant4")]),
        tag_delimiter=".",
        component_delimiter="_",
        data_type="data",
    )
    assert name == "proj1_data_mk.parker-like_an.variant4"


def test_build_name_without_data_type():
    name = build_name("proj1", {"markup": "mk"}, {"markup": "parker-like"})
    assert name == "proj1_mk.parker-like"


def test_empty_data_type_is_ignored():
    assert build_name("proj1", {"a": "x"}, {"a": "1"}, data_type="") == "proj1_x.1"


def test_custom_delimiters():
    name = build_name("p", {"a": "x", "b": "y"}, {"a": "1", "b": "2"}, tag_delimiter="-", component_delimiter="__")
    assert name == "p__x-1__y-2"


def test_build_name_is_deterministic_and_sensitive_to_inputs():
    tags = {"markup": "mk", "analysis": "an"}
    values = {"markup": "parker-like", "analysis": "variant4"}
    first = build_name("proj1", tags, values)
    assert first == build_name("proj1", dict(tags), dict(values))
    assert first != build_name("proj1", tags, {**values, "analysis": "variant5"})
    assert first != build_name("proj1", {**tags, "markup": "mu"}, values)


def test_no_components_gives_bare_project():
    assert build_name("proj1", {}, {}) == "proj1"
    assert build_name("proj1", {}, {}, data_type="data") == "proj1_data"


def test_mismatched_keys_rejected():
    with pytest.raises(NamingError):
        build_name("proj1", {"markup": "mk"}, {"analysis": "variant4"})


def test_mismatched_ordering_rejected():
    with pytest.raises(NamingError):
        build_name("proj1", {"a": "x", "b": "y"}, {"b": "2", "a": "1"})


def test_naming_error_is_value_error():
    assert issubclass(NamingError, ValueError)


def test_filename_helpers():
    assert source_filename("proj1_mk.a") == "proj1_mk.a.md"
    assert dated_filename("report1", "02Apr16", "html") == "report1_02Apr16.html"
    assert dated_filename("report1", "02Apr16", ".pdf") == "report1_02Apr16.pdf"


def test_filename_spec_builds_name():
    spec = FilenameSpec(
        project_name="proj1",
        data_type="data",
        tags={"markup": "mk", "analysis": "an"},
        values={"markup": "parker-like", "analysis": "variant4"},
    )
    assert spec.build() == "proj1_data_mk.parker-like_an.variant4"


def test_filename_spec_rejects_mismatched_components():
    with pytest.raises(ValidationError):
        FilenameSpec(project_name="proj1", tags={"markup": "mk"}, values={"analysis": "x"})
