"""Tests for format_result."""

import json

from ilp_plugin_shared.output.formatters import format_result
from ilp_plugin_shared.services.result import ServiceError, ServiceResult


def _ok(op: str = "normalize_transfer", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "validate_transfer", msg: str = "must have an id") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="INVALID_FIELDS", message=msg))


class TestFormatResultJSON:
    def test_json_round_trip(self) -> None:
        output = format_result(_ok(id="1"), json_output=True)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"] == {"id": "1"}

    def test_json_error(self) -> None:
        data = json.loads(format_result(_err(), json_output=True))
        assert data["error"]["code"] == "INVALID_FIELDS"


class TestFormatResultHuman:
    def test_ok_header_and_fields(self) -> None:
        output = format_result(_ok(id="1", custom={"k": 1}), no_color=True)
        lines = output.splitlines()
        assert lines[0] == "OK: normalize_transfer"
        assert "  id: 1" in lines
        assert '  custom: {"k":1}' in lines

    def test_error_line(self) -> None:
        output = format_result(_err(), no_color=True)
        assert output == "ERROR: validate_transfer - must have an id"

    def test_markup_in_values_is_escaped(self) -> None:
        output = format_result(_ok(ilp="[bold]x[/bold]"), no_color=True)
        assert "[bold]x[/bold]" in output


class TestFormatResultQuiet:
    def test_quiet_prints_payload_only(self) -> None:
        output = format_result(_ok(id="1", to="b"), quiet=True)
        assert json.loads(output) == {"id": "1", "to": "b"}

    def test_quiet_error_message(self) -> None:
        assert format_result(_err(), quiet=True) == "must have an id"
