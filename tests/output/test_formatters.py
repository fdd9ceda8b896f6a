"""Tests for the format_result dispatcher and OutputSettings."""

import json

from regcheck.output.formatters import OutputSettings, format_result
from regcheck.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail", **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg, detail=dict(detail)),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("validate", strategy="fail-fast"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "validate"
        assert data["data"]["strategy"] == "fail-fast"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("register", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"


class TestFormatResultQuiet:
    def test_ok(self) -> None:
        assert format_result(_ok("validate"), settings=OutputSettings(quiet=True)) == "OK: validate"

    def test_error(self) -> None:
        output = format_result(_err("validate", "Invalid age of 13"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: validate — Invalid age of 13"


class TestFormatResultHuman:
    def test_default_settings(self) -> None:
        output = format_result(_ok("validate", strategy="accumulate"))
        assert "OK" in output
        assert "validate" in output
        assert "accumulate" in output

    def test_register_shows_region_label(self) -> None:
        result = _ok(
            "register",
            user={
                "first_name": "Jane",
                "last_name": "Doe",
                "age": 37,
                "gender": "F",
                "region": "north_america",
            },
        )
        output = format_result(result)
        assert "Jane Doe" in output
        assert "North America" in output

    def test_regions_table(self) -> None:
        result = _ok(
            "regions",
            count=1,
            items=[{"country": "Belgium", "region": "europe"}],
        )
        output = format_result(result)
        assert "Belgium" in output
        assert "Europe" in output

    def test_error_lists_each_message(self) -> None:
        result = _err(
            "validate",
            "Invalid age of 13; Invalid sex of G",
            errors=["Invalid age of 13", "Invalid sex of G"],
        )
        output = format_result(result)
        assert "ERROR" in output
        assert "- Invalid age of 13" in output
        assert "- Invalid sex of G" in output

    def test_single_error_inline(self) -> None:
        output = format_result(_err("register", "Request could not be resolved to a user"))
        assert "ERROR" in output
        assert "could not be resolved" in output
