"""Tests for result formatting."""

from __future__ import annotations

import json

from prflow.output.console import create_console, get_output, style_for_kind
from prflow.output.formatters import format_plan, format_result
from prflow.services.result import ServiceError, ServiceResult


class TestFormatResult:
    def test_ok_human(self) -> None:
        result = ServiceResult(ok=True, op="run", data={"steps_run": 3, "tags": ["r1"]})
        output = format_result(result)
        assert output.splitlines()[0] == "OK: run"
        assert "  steps_run: 3" in output
        assert '  tags: ["r1"]' in output

    def test_error_human(self) -> None:
        result = ServiceResult(
            ok=False,
            op="run",
            error=ServiceError(code="REMOTE_NOT_EMPTY", message="remote has branches"),
        )
        assert format_result(result) == "ERROR: run [REMOTE_NOT_EMPTY] - remote has branches"

    def test_json(self) -> None:
        result = ServiceResult(ok=True, op="run", data={"steps_run": 3})
        parsed = json.loads(format_result(result, json_output=True))
        assert parsed["ok"] is True
        assert parsed["data"]["steps_run"] == 3

    def test_plan_is_rendered_as_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="plan",
            data={
                "repository": "https://github.com/acme/pr-demo",
                "steps": [{"kind": "git", "description": "git init", "label": "Init"}],
                "tags": ["r1"],
                "pull_requests": 0,
            },
        )
        output = format_result(result, no_color=True)
        assert "git init" in output
        assert "Init" in output
        assert "tags: r1" in output


class TestConsole:
    def test_style_for_kind(self) -> None:
        assert style_for_kind("open_pr") == "prflow.kind.open_pr"
        assert style_for_kind("write_marker") == ""

    def test_console_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"


def test_format_plan_handles_brackets_literally() -> None:
    data = {
        "repository": "r",
        "steps": [{"kind": "git", "description": "git tag [x]", "label": None}],
    }
    assert "git tag [x]" in format_plan(data, no_color=True)
