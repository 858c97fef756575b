"""LintCommand: a click Command with an ``--examples`` flag.

Subcommands pass ``examples=`` with a few sample invocations. ``--help``
stays short; ``--examples`` prints the samples and exits 0.
"""

from __future__ import annotations

from typing import Any

import click


class LintCommand(click.Command):
    """Command that prints its sample invocations on ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show sample invocations and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
