"""Failure kinds and the exceptions raised by the grammar parser."""

from __future__ import annotations

from enum import StrEnum


class FailureKind(StrEnum):
    """The single reason a message was rejected."""

    FORMAT = "FORMAT_ERROR"
    SCOPE = "SCOPE_ERROR"
    TYPE = "TYPE_ERROR"
    STYLE = "STYLE_ERROR"
    SUBJECT = "SUBJECT_ERROR"


class MessageError(Exception):
    """Base for messages that cannot be turned into a ParsedMessage."""

    kind: FailureKind = FailureKind.FORMAT

    def __init__(self, line: str, message: str | None = None) -> None:
        self.line = line
        super().__init__(message or f"invalid message: {line!r}")


class FormatError(MessageError):
    """The line does not match the grammar, or a required field is empty."""

    kind = FailureKind.FORMAT


class ScopeError(MessageError):
    """A scope group was written but left empty, e.g. ``feat(): x``."""

    kind = FailureKind.SCOPE
