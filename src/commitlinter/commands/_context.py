"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy rule loading and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from commitlinter.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from commitlinter.config.settings import LintSettings
    from commitlinter.domain.rules import RuleConfig
    from commitlinter.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. Rules are loaded on
    first use so ``--help`` and ``--version`` never touch the rule file.
    """

    def __init__(self, settings: LintSettings) -> None:
        self.settings = settings
        self._rules: RuleConfig | None = None

        from commitlinter.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def rules(self) -> RuleConfig:
        """The rule configuration (loaded lazily on first access).

        A broken rule file is a setup problem, not a lint failure, so it
        aborts the command with a ClickException.
        """
        if self._rules is None:
            from commitlinter.config.discovery import resolve_rule_path
            from commitlinter.config.loader import (
                ConfigError,
                FileConfigSource,
                load_rule_config,
            )

            path = resolve_rule_path(self.settings.rule_path)
            source = FileConfigSource(path) if path is not None else None
            try:
                self._rules = load_rule_config(source)
            except ConfigError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._rules

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        stream = sys.stdout if result.ok else sys.stderr
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=not self.settings.json_output and stream.isatty(),
        )
        output = format_result(result, self.rules, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
