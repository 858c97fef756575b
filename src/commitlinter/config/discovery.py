"""Rule file discovery.

Walk-up finder locates ``.commitlinter.yaml``, similar to how git finds
``.git/``. An explicit ``--rule`` path (or ``COMMITLINTER_RULE_PATH``)
always wins over discovery.
"""

from __future__ import annotations

from pathlib import Path

RULE_FILENAMES = (".commitlinter.yaml", ".commitlinter.yml")


def find_rule_file(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a rule file.

    Returns the path to the first rule file found, or None.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        for name in RULE_FILENAMES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def resolve_rule_path(explicit: Path | None, start: Path | None = None) -> Path | None:
    """Return *explicit* when given, otherwise the discovered rule file."""
    if explicit is not None:
        return explicit
    return find_rule_file(start)
