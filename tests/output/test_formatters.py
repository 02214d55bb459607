"""Tests for the format_result dispatcher and OutputSettings."""

import json

from projname.domain.moderation import LexiconClassifier
from projname.output.formatters import OutputSettings, format_result
from projname.services.result import ServiceError, ServiceResult
from projname.services.validation import NameService


def _check(*results: tuple[str, bool]) -> ServiceResult:
    items = [{"name": n, "valid": v} for n, v in results]
    invalid = [n for n, v in results if not v]
    data = {
        "results": items,
        "valid_count": len(items) - len(invalid),
        "invalid_count": len(invalid),
    }
    if invalid:
        return ServiceResult(
            ok=False,
            op="check",
            data=data,
            error=ServiceError(code="INVALID_NAME", message="Invalid project name."),
        )
    return ServiceResult(ok=True, op="check", data=data)


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_check(("my-app", True)), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "check"
        assert data["data"]["results"] == [{"name": "my-app", "valid": True}]

    def test_json_mode_error(self) -> None:
        output = format_result(_check(("Bad", False)), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_NAME"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(
            _check(("my-app", True)), settings=OutputSettings(json_output=True, quiet=True)
        )
        assert json.loads(output)["ok"] is True


class TestFormatResultHuman:
    def test_default_settings(self) -> None:
        output = format_result(_check(("my-app", True)))
        assert output.startswith("OK")
        assert "my-app" in output

    def test_check_marks(self) -> None:
        output = format_result(_check(("my-app", True), ("Bad", False)))
        assert "ERROR" in output
        assert "✓ my-app" in output
        assert "✗ Bad" in output
        assert "valid: 1" in output
        assert "invalid: 1" in output
        assert "Invalid project name." in output

    def test_names_with_markup_are_literal(self) -> None:
        output = format_result(_check(("[bold]x[/bold]", False)))
        assert "[bold]x[/bold]" in output

    def test_verbose_shows_meta(self) -> None:
        result = ServiceResult(
            ok=True,
            op="check",
            data={"results": [], "valid_count": 0, "invalid_count": 0},
            meta={"duration_ms": 1.5},
        )
        output = format_result(result, settings=OutputSettings(verbose=True))
        assert "duration_ms: 1.5" in output
        assert "duration_ms" not in format_result(result)

    def test_rules(self) -> None:
        result = ServiceResult(
            ok=True,
            op="rules",
            data={"rules": ["be short.", "be nice."], "reserved": ["console"], "max_length": 63},
        )
        output = format_result(result)
        assert "1. be short." in output
        assert "2. be nice." in output
        assert "reserved: console" in output

    def test_every_service_op_has_renderer(self) -> None:
        svc = NameService(LexiconClassifier())
        for result in (svc.check(["my-app"]), svc.rules()):
            assert format_result(result).startswith("OK")


class TestFormatResultQuiet:
    def test_quiet_success_lists_names(self) -> None:
        output = format_result(
            _check(("a1", True), ("b2", True)), settings=OutputSettings(quiet=True)
        )
        assert output == "a1\nb2"

    def test_quiet_failure_lists_invalid_names(self) -> None:
        output = format_result(
            _check(("a1", True), ("Bad", False)), settings=OutputSettings(quiet=True)
        )
        assert output == "Bad"

    def test_quiet_other_op(self) -> None:
        result = ServiceResult(ok=True, op="rules", data={"rules": []})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: rules"
