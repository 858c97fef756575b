"""config command — print the effective rule configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commitlinter.commands._base import LintCommand

if TYPE_CHECKING:
    from commitlinter.commands._context import AppContext


@click.command(
    "config",
    cls=LintCommand,
    examples="""\
  commitlinter config > .commitlinter.yaml
  commitlinter --rule custom.yaml config
  commitlinter --json config""",
)
@click.pass_obj
def config_cmd(app: AppContext) -> None:
    """Print the rules in effect as YAML (a starting point for a rule file)."""
    from commitlinter.services.lint import LintService

    app.emit(LintService(app.rules).show_config())
