"""Decode rule files into :class:`RuleConfig`.

The loader only knows how to turn bytes into a RuleConfig. Where the
bytes come from is behind :class:`ConfigSource`, so tests and callers can
hand in anything with a ``read()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from commitlinter.domain.rules import RuleConfig, default_rule_config

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A rule file could not be read or decoded."""


class ConfigSource(Protocol):
    """Anything that can produce the raw bytes of a rule file."""

    @property
    def name(self) -> str: ...

    def read(self) -> bytes: ...


@dataclass(frozen=True)
class FileConfigSource:
    """Rule file on disk."""

    path: Path

    @property
    def name(self) -> str:
        return str(self.path)

    def read(self) -> bytes:
        return self.path.read_bytes()


def decode_rule_config(raw: bytes, *, name: str = "<memory>") -> RuleConfig:
    """Decode a YAML rule document.

    Keys absent from the document keep their built-in defaults. An empty
    document yields the default configuration.

    Raises:
        ConfigError: the document is not valid UTF-8 YAML, is not a
            mapping, or fails validation.
    """
    try:
        data: Any = YAML(typ="safe").load(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Rule file {name} is not valid UTF-8: {exc}") from exc
    except YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {name}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Rule file {name} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)

    try:
        return RuleConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid rule file {name}:\n{exc}") from exc


def load_rule_config(source: ConfigSource | None = None) -> RuleConfig:
    """Return the default rules, or the rules decoded from *source*."""
    if source is None:
        logger.debug("No rule file, using built-in rules")
        return default_rule_config()

    try:
        raw = source.read()
    except OSError as exc:
        raise ConfigError(f"Failed to open rule file {source.name}: {exc}") from exc

    config = decode_rule_config(raw, name=source.name)
    logger.debug("Loaded rule file %s (%d types)", source.name, len(config.type_rules))
    return config
