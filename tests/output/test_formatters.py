"""Tests for the format_result dispatcher and OutputSettings."""

import json

from pubky_app_specs.output.formatters import OutputSettings, format_result
from pubky_app_specs.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="INVALID_URI", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("hash_id", id="2GN0JCHX9NYXPECQDS8KSMSE7M")
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "hash_id"
        assert data["data"]["id"] == "2GN0JCHX9NYXPECQDS8KSMSE7M"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("parse_uri", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_URI"
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(id="x"), settings=settings))["data"] == {"id": "x"}


class TestFormatResultQuiet:
    def test_quiet_prints_primary_value(self) -> None:
        settings = OutputSettings(quiet=True)
        result = _ok("build_path", path="/pub/pubky.app/last_read")
        assert format_result(result, settings=settings) == "/pub/pubky.app/last_read"

    def test_quiet_error(self) -> None:
        output = format_result(_err("parse_uri", "Bad"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: parse_uri — Bad"


class TestFormatResultRich:
    def test_default_is_rich(self) -> None:
        output = format_result(_ok("hash_id", id="ABC", data="text"))
        assert output.startswith("OK")
        assert "hash_id" in output
        assert "ABC" in output

    def test_no_settings_uses_defaults(self) -> None:
        assert "fail" in format_result(_err())
