"""Grammar for a single message line: ``<type>(<scope>): <subject>``.

Three "empty" states are kept apart on purpose:

- no parentheses at all   -> parses, ``scope == ""`` (a global change)
- empty parentheses ``()`` -> :class:`ScopeError`
- whitespace-only subject  -> :class:`FormatError`
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from commitlinter.domain.errors import FormatError, ScopeError

FORMAT_DOC = "<type>(<scope>): <subject>"

# Anchored at the start of the line; the subject runs to the end.
MESSAGE_PATTERN = re.compile(r"(?P<type>[a-zA-Z]+)(?P<scope>\(.*\))?:\s+(?P<subject>.*)")


class ParsedMessage(BaseModel):
    """A line that matched the grammar. Never partially populated."""

    model_config = {"frozen": True}

    type: str
    scope: str = ""
    subject: str


def parse_message(line: str) -> ParsedMessage:
    """Split *line* into type, scope and subject.

    Raises:
        FormatError: the line does not match the grammar or the subject
            is empty after trimming.
        ScopeError: a scope group was present but empty.

    Examples:
        >>> parse_message("feat(cli): add flag")
        ParsedMessage(type='feat', scope='cli', subject='add flag')
        >>> parse_message("fix: typo").scope
        ''
    """
    match = MESSAGE_PATTERN.match(line)
    if match is None:
        raise FormatError(line, f"message does not match {FORMAT_DOC!r}: {line!r}")

    commit_type = match.group("type")
    subject = match.group("subject").strip()
    if not commit_type or not subject:
        raise FormatError(line, f"message has an empty type or subject: {line!r}")

    group = match.group("scope")
    scope = ""
    if group is not None:
        scope = group[1:-1]
        if not scope:
            raise ScopeError(line, f"message has an empty scope: {line!r}")

    return ParsedMessage(type=commit_type, scope=scope, subject=subject)
