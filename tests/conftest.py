"""Shared pytest fixtures and test helpers for commitlinter tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from commitlinter.domain.rules import RuleConfig, default_rule_config


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def rules() -> RuleConfig:
    """The built-in rule configuration."""
    return default_rule_config()


@pytest.fixture
def _isolated_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no ambient message sources.

    Use via ``@pytest.mark.usefixtures("_isolated_repo")`` on command test
    classes. Tests that need the path can also request ``tmp_path`` directly
    (pytest deduplicates — it's the same directory).
    """
    for var in (
        "COMMITLINTER_RULE_PATH",
        "COMMITLINTER_MESSAGE_FILE",
        "COMMITLINTER_JSON_OUTPUT",
        "COMMITLINTER_QUIET",
        "COMMITLINTER_VERBOSE",
        "COMMITLINTER_LOG_JSON",
        "GITHUB_EVENT_PATH",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_rules(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a YAML rule file into the temp directory."""

    def _write(content: str, name: str = ".commitlinter.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
