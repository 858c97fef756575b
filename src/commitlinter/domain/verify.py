"""Rule verification — ordered, short-circuiting checks over a ParsedMessage.

Check order is a contract: type, then scope, then subject. The first
failing check decides the outcome and later checks never run.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Self

from pydantic import BaseModel

from commitlinter.domain.errors import FailureKind, MessageError
from commitlinter.domain.message import ParsedMessage, parse_message
from commitlinter.domain.rules import RuleConfig


class Outcome(BaseModel):
    """Result of linting one line: pass, skip, or a single failure kind."""

    model_config = {"frozen": True}

    kind: FailureKind | None = None
    skipped_by: str | None = None
    message: ParsedMessage | None = None

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def passed(cls, message: ParsedMessage | None = None) -> Self:
        return cls(message=message)

    @classmethod
    def skipped(cls, prefix: str) -> Self:
        return cls(skipped_by=prefix)

    @classmethod
    def failed(cls, kind: FailureKind, message: ParsedMessage | None = None) -> Self:
        return cls(kind=kind, message=message)


def check_type(msg: ParsedMessage, config: RuleConfig) -> FailureKind | None:
    """Exact vocabulary match, else STYLE for wrong case, else TYPE."""
    if msg.type in config.type_names:
        return None
    if msg.type != msg.type.lower():
        return FailureKind.STYLE
    return FailureKind.TYPE


def check_scope(msg: ParsedMessage, config: RuleConfig) -> FailureKind | None:
    """An empty scope is a global change and always passes."""
    if not msg.scope:
        return None
    if not config.scope_matches(msg.scope):
        return FailureKind.STYLE
    return None


def check_subject(msg: ParsedMessage, config: RuleConfig) -> FailureKind | None:
    if not msg.subject:
        return FailureKind.FORMAT
    if not config.subject_matches(msg.subject):
        return FailureKind.SUBJECT
    return None


CHECKS: tuple[Callable[[ParsedMessage, RuleConfig], FailureKind | None], ...] = (
    check_type,
    check_scope,
    check_subject,
)


def verify(msg: ParsedMessage, config: RuleConfig) -> Outcome:
    """Run :data:`CHECKS` in order and report the first failure."""
    for check in CHECKS:
        kind = check(msg, config)
        if kind is not None:
            return Outcome.failed(kind, msg)
    return Outcome.passed(msg)


def lint_line(line: str, config: RuleConfig) -> Outcome:
    """Skip-prefix check, parse, then verify a raw line.

    Skip-prefixes are matched against the line exactly as given, before
    any trimming.
    """
    prefix = config.skip_prefix_for(line)
    if prefix is not None:
        return Outcome.skipped(prefix)
    try:
        msg = parse_message(line)
    except MessageError as exc:
        return Outcome.failed(exc.kind)
    return verify(msg, config)
