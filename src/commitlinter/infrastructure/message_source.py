"""Resolve the one line of text to lint.

Lookup order:
  1. First non-empty line of standard input, when stdin is not a terminal
  2. First line of the commit message file (``.git/COMMIT_EDITMSG``)
  3. Pull-request title from the GitHub Actions event payload
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any

logger = logging.getLogger(__name__)

GITHUB_EVENT_PATH_VAR = "GITHUB_EVENT_PATH"


class MessageNotFoundError(Exception):
    """No source produced a message to lint."""


def first_non_empty_line(text: str) -> str | None:
    """Return the first line of *text* that has any non-whitespace content."""
    for line in text.splitlines():
        if line.strip():
            return line
    return None


def read_stdin(stream: IO[str] | None) -> str | None:
    """Read the first non-empty line from a piped *stream*.

    Interactive terminals are never read, so a bare ``commitlinter check``
    does not block waiting for input.
    """
    if stream is None or stream.isatty():
        return None
    return first_non_empty_line(stream.read())


def read_message_file(path: Path) -> str | None:
    """Return the first line of *path*, or None if the file does not exist."""
    if not path.is_file():
        return None
    with path.open(encoding="utf-8") as f:
        return f.readline().rstrip("\r\n")


def read_pr_title(environ: Mapping[str, str]) -> str | None:
    """Return ``pull_request.title`` from the GitHub Actions event payload.

    Returns None outside of GitHub Actions or for non-PR events.

    Raises:
        MessageNotFoundError: the event file is set but unreadable.
    """
    event_path = environ.get(GITHUB_EVENT_PATH_VAR)
    if not event_path:
        return None
    try:
        event: Any = json.loads(Path(event_path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        msg = f"Could not read GitHub event payload {event_path}: {exc}"
        raise MessageNotFoundError(msg) from exc

    pull_request = event.get("pull_request") if isinstance(event, dict) else None
    if not isinstance(pull_request, dict):
        return None
    title = pull_request.get("title")
    return title if isinstance(title, str) else None


def resolve_message(
    *,
    stdin: IO[str] | None,
    message_file: Path,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the line to lint from the first source that has one."""
    env = os.environ if environ is None else environ

    line = read_stdin(stdin)
    if line is not None:
        logger.debug("Message read from stdin")
        return line

    line = read_message_file(message_file)
    if line is not None:
        logger.debug("Message read from %s", message_file)
        return line

    line = read_pr_title(env)
    if line is not None:
        logger.debug("Message read from pull request title")
        return line

    msg = f"No message on stdin, no {message_file}, and no pull request title"
    raise MessageNotFoundError(msg)
