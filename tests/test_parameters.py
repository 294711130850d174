"""Unit tests for command-line parsing (autograph.parameters).

Tests cover:
- Defaults for an empty argument list
- -verbose / -help / -project_name recognition
- Raw flag/value collection, including flags with no value
- The missing -project_name value failure
- Verbose trace output
- ExecutionParameters immutability and helpers
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from autograph.errors import AutographError, ParameterError
from autograph.models import ExecutionParameters
from autograph.parameters import ExecutionParametersReader, is_flag
from autograph.utils import RecordingLog


def _read(arguments: list[str], log: RecordingLog | None = None) -> ExecutionParameters:
    return ExecutionParametersReader(log=log or RecordingLog()).read(arguments)


# ---------------------------------------------------------------------------
# Recognised flags
# ---------------------------------------------------------------------------


class TestRecognisedFlags:
    @pytest.mark.unit
    def test_defaults(self):
        params = _read([])
        assert params.project_name == "GEN"
        assert params.verbose is False
        assert params.print_help is False
        assert params.raw == {}

    @pytest.mark.unit
    def test_verbose_project_name_and_bare_flag(self):
        params = _read(["-verbose", "-project_name", "Foo", "-x"])
        assert params.project_name == "Foo"
        assert params.verbose is True
        assert params.raw["-project_name"] == "Foo"
        assert params.raw["-x"] == ""

    @pytest.mark.unit
    def test_raw_contains_every_flag_token(self):
        params = _read(["-verbose", "-project_name", "Foo", "-x"])
        assert params.raw == {"-verbose": "", "-project_name": "Foo", "-x": ""}

    @pytest.mark.unit
    def test_help(self):
        params = _read(["-help"])
        assert params.print_help is True
        assert params.raw == {"-help": ""}

    @pytest.mark.unit
    def test_program_name_is_ignored(self):
        params = _read(["generator", "-project_name", "App"])
        assert params.project_name == "App"
        assert params.raw == {"-project_name": "App"}

    @pytest.mark.unit
    def test_custom_default_project_name(self):
        reader = ExecutionParametersReader(log=RecordingLog(), default_project_name="MYAPP")
        assert reader.read([]).project_name == "MYAPP"

    @pytest.mark.unit
    def test_last_project_name_wins(self):
        params = _read(["-project_name", "One", "-project_name", "Two"])
        assert params.project_name == "Two"
        assert params.raw["-project_name"] == "Two"


# ---------------------------------------------------------------------------
# Raw flags
# ---------------------------------------------------------------------------


class TestRawFlags:
    @pytest.mark.unit
    def test_flag_with_value(self):
        params = _read(["-input", "Sources/Models"])
        assert params.raw == {"-input": "Sources/Models"}

    @pytest.mark.unit
    def test_flag_followed_by_flag_has_empty_value(self):
        params = _read(["-a", "-b", "value"])
        assert params.raw == {"-a": "", "-b": "value"}

    @pytest.mark.unit
    def test_trailing_flag_has_empty_value(self):
        params = _read(["-output"])
        assert params.raw == {"-output": ""}

    @pytest.mark.unit
    def test_dash_prefixed_value_counts_as_flag(self):
        params = _read(["-offset", "-5"])
        assert params.raw == {"-offset": "", "-5": ""}

    @pytest.mark.unit
    def test_stray_values_are_not_collected(self):
        params = _read(["stray", "-input", "src", "another"])
        assert params.raw == {"-input": "src"}

    @pytest.mark.unit
    def test_is_flag(self):
        assert is_flag("-verbose")
        assert is_flag("-")
        assert not is_flag("verbose")
        assert not is_flag("")


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestMissingProjectName:
    @pytest.mark.unit
    def test_project_name_as_last_token(self):
        with pytest.raises(ParameterError) as exc_info:
            _read(["-project_name"])
        assert exc_info.value.flag == "-project_name"
        assert "-project_name" in str(exc_info.value)

    @pytest.mark.unit
    def test_project_name_followed_by_flag(self):
        with pytest.raises(ParameterError):
            _read(["-project_name", "-verbose"])

    @pytest.mark.unit
    def test_is_an_autograph_error(self):
        with pytest.raises(AutographError):
            _read(["-verbose", "-project_name"])

    @pytest.mark.unit
    def test_other_flags_never_fail(self):
        params = _read(["-input", "-output", "-anything"])
        assert set(params.raw) == {"-input", "-output", "-anything"}


# ---------------------------------------------------------------------------
# Verbose trace
# ---------------------------------------------------------------------------


class TestVerboseTrace:
    @pytest.mark.unit
    def test_quiet_run_logs_nothing(self, recording_log: RecordingLog):
        _read(["-project_name", "Foo", "-x", "1"], log=recording_log)
        assert recording_log.messages == []

    @pytest.mark.unit
    def test_verbose_logs_tokens_and_working_directory(self, recording_log: RecordingLog):
        _read(["-project_name", "Foo", "-x", "-verbose"], log=recording_log)
        assert recording_log.contains("Project name: Foo")
        assert recording_log.contains("Found pair of arguments: -project_name = Foo")
        assert recording_log.contains("Found argument: -x")
        assert recording_log.contains("Found argument: -verbose")
        assert recording_log.messages[-1] == f"Working directory: {os.getcwd()}"


# ---------------------------------------------------------------------------
# ExecutionParameters
# ---------------------------------------------------------------------------


class TestExecutionParameters:
    @pytest.mark.unit
    def test_working_directory_is_captured(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        params = _read([])
        assert Path(params.working_directory) == Path(os.getcwd())

    @pytest.mark.unit
    def test_is_frozen(self):
        params = _read(["-verbose"])
        with pytest.raises(ValidationError):
            params.verbose = False

    @pytest.mark.unit
    def test_raw_is_read_only(self):
        params = _read(["-x", "1"])
        with pytest.raises(TypeError):
            params.raw["-x"] = "changed"
        with pytest.raises(TypeError):
            params.raw["-new"] = ""
        assert params.raw == {"-x": "1"}

    @pytest.mark.unit
    def test_raw_is_copied_from_input(self):
        source = {"-x": "1"}
        params = ExecutionParameters(raw=source)
        source["-x"] = "changed"
        assert params.get("-x") == "1"

    @pytest.mark.unit
    def test_default_raw_is_read_only(self):
        with pytest.raises(TypeError):
            ExecutionParameters().raw["-x"] = ""

    @pytest.mark.unit
    def test_hashable(self):
        first = _read(["-project_name", "Foo", "-x"])
        second = _read(["-x", "-project_name", "Foo"])
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    @pytest.mark.unit
    def test_equality_ignores_working_directory(self):
        raw = {"-project_name": "Foo", "-x": ""}
        in_a = ExecutionParameters(project_name="Foo", raw=raw, working_directory="/a")
        in_b = ExecutionParameters(project_name="Foo", raw=raw, working_directory="/b")
        assert in_a == in_b
        assert hash(in_a) == hash(in_b)
        assert in_a.working_directory != in_b.working_directory

    @pytest.mark.unit
    def test_equality_compares_remaining_fields(self):
        base = ExecutionParameters(project_name="Foo", raw={"-x": ""})
        assert base != ExecutionParameters(project_name="Bar", raw={"-x": ""})
        assert base != ExecutionParameters(project_name="Foo", verbose=True, raw={"-x": ""})
        assert base != ExecutionParameters(project_name="Foo", print_help=True, raw={"-x": ""})
        assert base != ExecutionParameters(project_name="Foo", raw={"-x": "1"})
        assert base != "Foo"

    @pytest.mark.unit
    def test_dump_returns_plain_dict(self):
        dumped = _read(["-x", "1"]).model_dump()
        assert dumped["raw"] == {"-x": "1"}
        assert type(dumped["raw"]) is dict

    @pytest.mark.unit
    def test_value_equality(self):
        assert _read(["-project_name", "Foo", "-x"]) == _read(["-x", "-project_name", "Foo"])
        assert _read(["-project_name", "Foo"]) != _read(["-project_name", "Bar"])

    @pytest.mark.unit
    def test_get_and_flag(self):
        params = _read(["-input", "src", "-dry"])
        assert params.get("-input") == "src"
        assert params.get("-dry") == ""
        assert params.get("-missing") is None
        assert params.get("-missing", "fallback") == "fallback"
        assert params.flag("-dry") is True
        assert params.flag("-missing") is False
