"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Rejected messages get the full diagnostic block, which needs the rule
configuration to explain what was expected.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from ruamel.yaml import YAML

from commitlinter.output.console import create_console, get_output
from commitlinter.output.diagnostics import Diagnostic, build_diagnostic

if TYPE_CHECKING:
    from rich.console import Console

    from commitlinter.domain.rules import RuleConfig
    from commitlinter.services.result import ServiceResult

ERROR_TITLE = "============================ Invalid Message ================================"
FOOTER = "============================================================================="


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    config: RuleConfig,
    *,
    color: bool = False,
    verbose: bool = False,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) unless *color* is set.
    """
    console = create_console(color=color)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    elif result.error and (kind := result.error.kind) is not None:
        diagnostic = build_diagnostic(str(result.error.detail.get("message", "")), config, kind)
        render_diagnostic(diagnostic, console)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: nothing on success."""
    if result.ok:
        return ""
    err = result.error
    msg = err.message if err else "Unknown error"
    code = err.code if err else "ERROR"
    return f"ERROR: {result.op} — {code}: {msg}"


def render_diagnostic(diagnostic: Diagnostic, console: Console) -> None:
    """Print the invalid-message block for one rejected line."""
    console.print()
    console.print(Text(ERROR_TITLE, style="lint.error"))
    console.print(Text("title message:\t"), Text(diagnostic.message, style="lint.error"), sep="")
    console.print(Text("correct format:\t"), Text(diagnostic.expected, style="lint.format"), sep="")
    console.print()

    if diagnostic.type_rules:
        console.print("Allowed <type> values")
        for rule in diagnostic.type_rules:
            console.print(Text(rule.type, style="lint.type"), Text(f"\t{rule.description}"), sep="")
    elif diagnostic.doc:
        console.print(Text(diagnostic.doc, style="lint.doc"))

    console.print()
    console.print(Text("See: "), Text(diagnostic.reference, style="lint.link"), sep="")
    console.print(Text(FOOTER, style="lint.error"))


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="lint.key"), Text(str(value)), sep="")


# ── Success renderers ─────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if d.get("skipped"):
        console.print(Text("SKIP", style="lint.skip"), Text(f"  {d.get('message', '')}"), sep="")
        if verbose:
            _field(console, "skip_prefix", d.get("skip_prefix", ""))
        return

    console.print(Text("OK", style="lint.ok"), Text(f"  {d.get('message', '')}"), sep="")
    if verbose:
        for key in ("type", "scope", "subject"):
            if key in d:
                _field(console, key, d[key])


def _render_types(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Type", style="lint.type", no_wrap=True)
    table.add_column("Description")
    for item in result.data.get("items", []):
        table.add_row(str(item.get("type", "")), str(item.get("description", "")))
    console.print(table)


def _render_config(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    yaml = YAML()
    yaml.default_flow_style = False
    buf = StringIO()
    yaml.dump(result.data.get("config", {}), buf)
    console.print(buf.getvalue().rstrip("\n"), markup=False, emoji=False, soft_wrap=True)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="lint.ok"), Text(f"  {result.op}"), sep="")
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="lint.error"), Text(f"  {result.op} — {msg}"), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="lint.key"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


_OP_RENDERERS = {
    "check": _render_check,
    "types": _render_types,
    "config": _render_config,
}
