"""ServiceResult and ServiceError — what every LintService method returns.

A rejected message is an ordinary failed result whose error code is the
:class:`FailureKind` value; anything else (``NO_MESSAGE``) is a plain
error. ``--json`` prints the model as-is.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from commitlinter.domain.errors import FailureKind


class ServiceError(BaseModel):
    """Why an operation failed; ``detail`` holds the checked line's fields."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @property
    def kind(self) -> FailureKind | None:
        """The lint failure kind, or None for non-lint errors."""
        try:
            return FailureKind(self.code)
        except ValueError:
            return None


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: True for pass, skip, and listings; False exits the CLI with 1.
        op: Name of the operation (``"check"``, ``"types"``, ``"config"``).
        data: Operation-specific payload on success.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
