"""Root CLI group for commitlinter with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click
from click.core import ParameterSource

from commitlinter import __version__
from commitlinter.commands import register_commands
from commitlinter.commands._context import AppContext
from commitlinter.config.settings import LintSettings


def _given_flags(ctx: click.Context, **flags: Any) -> dict[str, Any]:
    """Map flags the user did not pass to None so COMMITLINTER_* env vars apply."""
    return {
        name: None if ctx.get_parameter_source(name) is ParameterSource.DEFAULT else value
        for name, value in flags.items()
    }


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="commitlinter")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Only print failures.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-r", "--rule", "rule_path", default=None, help="Select rule file path (YAML).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    rule_path: str | None,
) -> None:
    """commitlinter — lint commit messages and pull request titles."""
    ctx.ensure_object(dict)
    settings = LintSettings.from_cli(
        rule_path=rule_path,
        **_given_flags(
            ctx,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        ),
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
