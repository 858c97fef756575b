"""Rule configuration models with code-baked defaults.

Sparse YAML contract: defaults baked here, a rule file only contains
overrides. Type names are expected to be lowercase; nothing enforces it
at load time, but the type check relies on it.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

DEFAULT_SKIP_PREFIXES: tuple[str, ...] = ("Merge branch ", "BREAKING: ")
DEFAULT_REFERENCE = "https://www.conventionalcommits.org/en/v1.0.0/"

STYLE_DOC = "The <type> and <scope> should always be lowercase."
SCOPE_DOC = (
    "The <scope> can be empty (e.g. if the change is a global or difficult to assign "
    "to a single component), in which case the parentheses are omitted."
)
SUBJECT_DOC = "The first letter of <subject> should be lowercase."


class TypeRule(BaseModel):
    """One allowed ``<type>`` and what it is for."""

    model_config = {"frozen": True, "extra": "forbid"}

    type: str
    description: str = ""


DEFAULT_TYPE_RULES: tuple[TypeRule, ...] = (
    TypeRule(
        type="feat",
        description="for a new feature for the user, not a new feature for build script.",
    ),
    TypeRule(type="fix", description="for a bug fix for the user, not a fix to a build script."),
    TypeRule(type="perf", description="for performance improvements."),
    TypeRule(type="docs", description="for changes to the documentation."),
    TypeRule(type="style", description="for formatting changes, missing semicolons, etc."),
    TypeRule(
        type="refactor",
        description="for refactoring production code, e.g. renaming a variable.",
    ),
    TypeRule(
        type="test",
        description="for adding missing tests, refactoring tests; no production code change.",
    ),
    TypeRule(
        type="build",
        description=(
            "for updating build configuration, development tools or other changes "
            "irrelevant to the user."
        ),
    ),
    TypeRule(
        type="chore",
        description="for updates that do not apply to the above, such as dependency updates.",
    ),
)


class RuleConfig(BaseModel):
    """Everything the verifier and the diagnostic renderer need.

    Attributes:
        skip_prefixes: Literal prefixes that bypass all checking.
        type_rules: Allowed type vocabulary, in display order.
        scope_pattern: Shape rule for a non-empty scope. ``None`` means
            "fully lowercase".
        subject_pattern: Shape rule for the subject. ``None`` means
            "first character is not uppercase".
        reference: Link printed at the bottom of every diagnostic.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    skip_prefixes: tuple[str, ...] = DEFAULT_SKIP_PREFIXES
    type_rules: tuple[TypeRule, ...] = DEFAULT_TYPE_RULES
    reference: str = DEFAULT_REFERENCE
    style_doc: str = STYLE_DOC
    scope_doc: str = SCOPE_DOC
    subject_doc: str = SUBJECT_DOC
    scope_pattern: re.Pattern[str] | None = None
    subject_pattern: re.Pattern[str] | None = None

    @property
    def type_names(self) -> tuple[str, ...]:
        return tuple(rule.type for rule in self.type_rules)

    def skip_prefix_for(self, line: str) -> str | None:
        """Return the first skip-prefix *line* starts with, if any."""
        for prefix in self.skip_prefixes:
            if line.startswith(prefix):
                return prefix
        return None

    def scope_matches(self, scope: str) -> bool:
        """Check a non-empty scope against the scope shape rule."""
        if self.scope_pattern is None:
            return scope == scope.lower()
        return self.scope_pattern.match(scope) is not None

    def subject_matches(self, subject: str) -> bool:
        """Check a subject against the subject shape rule."""
        if self.subject_pattern is None:
            return bool(subject) and not subject[0].isupper()
        return self.subject_pattern.match(subject) is not None


def default_rule_config() -> RuleConfig:
    """Return a freshly built default configuration."""
    return RuleConfig()
