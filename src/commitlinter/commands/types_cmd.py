"""types command — list the allowed <type> vocabulary."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commitlinter.commands._base import LintCommand

if TYPE_CHECKING:
    from commitlinter.commands._context import AppContext


@click.command(
    "types",
    cls=LintCommand,
    examples="""\
  commitlinter types
  commitlinter --json types
  commitlinter --rule .commitlinter.yaml types""",
)
@click.pass_obj
def types_cmd(app: AppContext) -> None:
    """List the allowed <type> values and what each is for."""
    from commitlinter.services.lint import LintService

    app.emit(LintService(app.rules).list_types())
