"""Unified settings — CLI flags, env vars, and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``COMMITLINTER_*`` prefix
  3. Code defaults

The rule file itself is not part of the settings; only its path is.
Decoding happens in :mod:`commitlinter.config.loader`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings

DEFAULT_MESSAGE_FILE = Path(".git") / "COMMIT_EDITMSG"


class LintSettings(BaseSettings):
    """Settings for one commitlinter invocation.

    Stored in ``click.Context.obj`` (via AppContext) at the CLI root level.

    Attributes:
        rule_path: Explicit rule file, or None for walk-up discovery.
        message_file: Commit message file read when stdin is empty.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "COMMITLINTER_",
    }

    rule_path: Path | None = None
    message_file: Path = DEFAULT_MESSAGE_FILE

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, *, rule_path: str | None = None, **cli_flags: Any) -> LintSettings:
        """Construct settings from a CLI invocation.

        Unset CLI values are dropped so env vars can fill them in.
        """
        overrides = {key: value for key, value in cli_flags.items() if value is not None}
        if rule_path:
            overrides["rule_path"] = Path(rule_path)
        return cls(**overrides)
