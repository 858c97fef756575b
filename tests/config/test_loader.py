"""Tests for rule file decoding and the ConfigSource seam."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

from commitlinter.config.loader import (
    ConfigError,
    FileConfigSource,
    decode_rule_config,
    load_rule_config,
)
from commitlinter.domain.rules import TypeRule, default_rule_config


@dataclass(frozen=True)
class _MemorySource:
    data: bytes
    name: str = "<memory>"

    def read(self) -> bytes:
        return self.data


FULL_RULES = """\
skip_prefixes:
  - "Merge pull request "
  - "Revert "
type_rules:
  - type: feature
    description: new functionality
  - type: bugfix
    description: a fix
reference: https://example.com/commits
style_doc: lowercase please
scope_doc: scope must not be empty
subject_doc: subject starts lowercase
scope_pattern: "[a-z]+$"
subject_pattern: "[a-z]"
"""


class TestLoadRuleConfig:
    def test_none_returns_defaults(self) -> None:
        assert load_rule_config(None) == default_rule_config()

    def test_file_source(self, write_rules: Callable[..., Path]) -> None:
        path = write_rules(FULL_RULES)
        config = load_rule_config(FileConfigSource(path))
        assert config.skip_prefixes == ("Merge pull request ", "Revert ")
        assert config.type_rules == (
            TypeRule(type="feature", description="new functionality"),
            TypeRule(type="bugfix", description="a fix"),
        )
        assert config.reference == "https://example.com/commits"
        assert config.style_doc == "lowercase please"
        assert config.scope_doc == "scope must not be empty"
        assert config.subject_doc == "subject starts lowercase"
        assert config.scope_pattern is not None
        assert config.scope_pattern.pattern == "[a-z]+$"
        assert config.subject_pattern is not None

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Failed to open"):
            load_rule_config(FileConfigSource(tmp_path / "nope.yaml"))

    def test_any_config_source(self) -> None:
        config = load_rule_config(_MemorySource(b"reference: https://x.test\n"))
        assert config.reference == "https://x.test"

    def test_file_source_name(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        assert FileConfigSource(path).name == str(path)


class TestDecodeRuleConfig:
    def test_sparse_document_keeps_defaults(self) -> None:
        config = decode_rule_config(b"reference: https://x.test\n")
        defaults = default_rule_config()
        assert config.reference == "https://x.test"
        assert config.type_rules == defaults.type_rules
        assert config.skip_prefixes == defaults.skip_prefixes

    def test_empty_document_is_default(self) -> None:
        assert decode_rule_config(b"") == default_rule_config()

    def test_explicit_empty_skip_prefixes(self) -> None:
        assert decode_rule_config(b"skip_prefixes: []\n").skip_prefixes == ()

    def test_invalid_yaml(self) -> None:
        with pytest.raises(ConfigError, match="Invalid YAML"):
            decode_rule_config(b"type_rules: [unclosed\n", name="bad.yaml")

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ConfigError, match="must contain a mapping"):
            decode_rule_config(b"- feat\n- fix\n")

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="Invalid rule file"):
            decode_rule_config(b"skip_prefix: [x]\n")

    def test_type_rule_without_type(self) -> None:
        with pytest.raises(ConfigError):
            decode_rule_config(b"type_rules:\n  - description: orphan\n")

    def test_invalid_pattern(self) -> None:
        with pytest.raises(ConfigError):
            decode_rule_config(b"scope_pattern: '[unclosed'\n")

    def test_not_utf8(self) -> None:
        with pytest.raises(ConfigError, match="UTF-8"):
            decode_rule_config(b"reference: \xff\xfe\n")

    def test_error_names_source(self) -> None:
        with pytest.raises(ConfigError, match="team.yaml"):
            decode_rule_config(b"- x\n", name="team.yaml")
