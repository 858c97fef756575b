"""Plain diagnostic data for a rejected message.

No styling lives here; :mod:`commitlinter.output.renderers` decides how a
Diagnostic looks on a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass

from commitlinter.domain.errors import FailureKind
from commitlinter.domain.message import FORMAT_DOC
from commitlinter.domain.rules import RuleConfig, TypeRule


@dataclass(frozen=True)
class Diagnostic:
    """What to tell the author about one rejected line.

    Exactly one of ``doc`` and ``type_rules`` is meaningful: type and
    format failures list the vocabulary, the others quote a doc string.
    """

    kind: FailureKind
    message: str
    expected: str
    reference: str
    doc: str | None = None
    type_rules: tuple[TypeRule, ...] = ()


def build_diagnostic(line: str, config: RuleConfig, kind: FailureKind) -> Diagnostic:
    """Pick the context that explains *kind* from *config*."""
    doc: str | None = None
    type_rules: tuple[TypeRule, ...] = ()
    if kind in (FailureKind.FORMAT, FailureKind.TYPE):
        type_rules = config.type_rules
    elif kind == FailureKind.STYLE:
        doc = config.style_doc
    elif kind == FailureKind.SCOPE:
        doc = config.scope_doc
    elif kind == FailureKind.SUBJECT:
        doc = config.subject_doc
    return Diagnostic(
        kind=kind,
        message=line,
        expected=FORMAT_DOC,
        reference=config.reference,
        doc=doc,
        type_rules=type_rules,
    )
