"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from commitlinter.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from commitlinter.domain.rules import RuleConfig
    from commitlinter.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode selected by the global CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = False


def format_result(
    result: ServiceResult,
    config: RuleConfig,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    Priority: JSON, then quiet, then the Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, config, color=settings.color, verbose=settings.verbose)
