"""check command — lint a commit message or pull-request title."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from commitlinter.commands._base import LintCommand

if TYPE_CHECKING:
    from commitlinter.commands._context import AppContext


@click.command(
    cls=LintCommand,
    examples="""\
  echo "feat(cli): add --rule flag" | commitlinter check
  commitlinter check .git/COMMIT_EDITMSG
  commitlinter --json check -m "Feat: wrong case"
  commitlinter --rule .commitlinter.yaml check -m "fix: handle empty scope"
  commitlinter -q check .git/COMMIT_EDITMSG""",
)
@click.argument(
    "message_file",
    required=False,
    type=click.Path(path_type=Path, dir_okay=False),
)
@click.option("-m", "--message", default=None, help="Lint this text instead of reading it.")
@click.pass_obj
def check(app: AppContext, message_file: Path | None, message: str | None) -> None:
    """Check a message against <type>(<scope>): <subject>.

    Without -m, the message is the first non-empty line of stdin, else the
    first line of MESSAGE_FILE (default .git/COMMIT_EDITMSG), else the pull
    request title in GitHub Actions.
    """
    from commitlinter.infrastructure.message_source import (
        MessageNotFoundError,
        resolve_message,
    )
    from commitlinter.services.lint import LintService

    svc = LintService(app.rules)

    if message is None:
        try:
            message = resolve_message(
                # An explicit file argument wins over whatever is on stdin.
                stdin=None if message_file else sys.stdin,
                message_file=message_file or app.settings.message_file,
            )
        except MessageNotFoundError as exc:
            app.emit(svc.missing_message(str(exc)))
            return

    app.emit(svc.check(message))
