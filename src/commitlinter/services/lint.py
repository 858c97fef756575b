"""LintService — check one message line against a RuleConfig.

Every method returns a :class:`ServiceResult`. A rejected message is a
normal failed result (error code = failure kind), never an exception.
"""

from __future__ import annotations

from typing import Any

import structlog

from commitlinter.domain.errors import FailureKind
from commitlinter.domain.message import FORMAT_DOC
from commitlinter.domain.rules import RuleConfig
from commitlinter.domain.verify import Outcome, lint_line
from commitlinter.services.result import ServiceError, ServiceResult

logger = structlog.get_logger(__name__)

NO_MESSAGE = "NO_MESSAGE"

_KIND_MESSAGES: dict[FailureKind, str] = {
    FailureKind.FORMAT: f"message does not match {FORMAT_DOC}",
    FailureKind.SCOPE: "<scope> must not be empty when parentheses are present",
    FailureKind.TYPE: "<type> is not in the allowed vocabulary",
    FailureKind.STYLE: "<type> and <scope> must be lowercase",
    FailureKind.SUBJECT: "<subject> has the wrong shape",
}


class LintService:
    """Lints message lines with a fixed, immutable rule configuration."""

    def __init__(self, config: RuleConfig) -> None:
        self._config = config

    @property
    def config(self) -> RuleConfig:
        return self._config

    def check(self, line: str) -> ServiceResult:
        """Lint *line* and report pass, skip, or the first failure."""
        outcome = lint_line(line, self._config)
        logger.debug(
            "message checked",
            kind=outcome.kind.value if outcome.kind else None,
            skipped_by=outcome.skipped_by,
        )

        data = _outcome_data(line, outcome)
        if outcome.ok:
            return ServiceResult(ok=True, op="check", data=data)

        assert outcome.kind is not None
        return ServiceResult(
            ok=False,
            op="check",
            error=ServiceError(
                code=outcome.kind.value,
                message=_KIND_MESSAGES[outcome.kind],
                detail=data,
            ),
        )

    def missing_message(self, reason: str) -> ServiceResult:
        """Failed result for when no source produced a message."""
        return ServiceResult(
            ok=False,
            op="check",
            error=ServiceError(code=NO_MESSAGE, message=reason),
        )

    def list_types(self) -> ServiceResult:
        """Return the allowed type vocabulary in display order."""
        items = [rule.model_dump() for rule in self._config.type_rules]
        return ServiceResult(ok=True, op="types", data={"items": items, "count": len(items)})

    def show_config(self) -> ServiceResult:
        """Return the effective rule configuration as plain data."""
        return ServiceResult(
            ok=True,
            op="config",
            data={"config": self._config.model_dump(mode="json")},
        )


def _outcome_data(line: str, outcome: Outcome) -> dict[str, Any]:
    data: dict[str, Any] = {"message": line, "skipped": outcome.skipped_by is not None}
    if outcome.skipped_by is not None:
        data["skip_prefix"] = outcome.skipped_by
    if outcome.message is not None:
        data["type"] = outcome.message.type
        data["scope"] = outcome.message.scope
        data["subject"] = outcome.message.subject
    return data
