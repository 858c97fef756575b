"""Tests for the format_result dispatcher and OutputSettings."""

import json

from commitlinter.domain.rules import RuleConfig
from commitlinter.output.formatters import OutputSettings, format_result
from commitlinter.services.lint import LintService


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.color is False


class TestFormatResult:
    def test_json_mode(self, rules: RuleConfig) -> None:
        result = LintService(rules).check("invalid(test): test")
        output = format_result(result, rules, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "TYPE_ERROR"

    def test_json_beats_quiet(self, rules: RuleConfig) -> None:
        result = LintService(rules).check("feat: x")
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(result, rules, settings=settings))["ok"] is True

    def test_quiet_mode(self, rules: RuleConfig) -> None:
        result = LintService(rules).check("feat: x")
        assert format_result(result, rules, settings=OutputSettings(quiet=True)) == ""

    def test_default_is_human(self, rules: RuleConfig) -> None:
        result = LintService(rules).check("feat: x")
        assert format_result(result, rules) == "OK  feat: x"
