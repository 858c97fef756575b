"""Subcommand modules for commitlinter.

Provides register_commands() which uses deferred imports to keep
``commitlinter --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from commitlinter.commands.check import check
    from commitlinter.commands.config_cmd import config_cmd
    from commitlinter.commands.types_cmd import types_cmd

    cli.add_command(check)
    cli.add_command(types_cmd)
    cli.add_command(config_cmd)
