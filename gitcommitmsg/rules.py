"""Commit message format rules.

Every rule inspects a parsed ``CommitMessage`` and returns zero or more
diagnostics. Rules are independent of each other and are evaluated in the
fixed order of ``ACTIVE_RULES``.
"""
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Optional

from .config import RuleConfig
from .models import Diagnostic, RuleScope, Severity
from .parser import is_semver_tag

if TYPE_CHECKING:
    from .commit_message import CommitMessage

BODY_FIRST_LINE = 3
LINE_BREAK = re.compile(r"\r?\n")


class Rule(ABC):
    """Abstract base class for rules."""

    name: str
    scope: RuleScope

    @abstractmethod
    def check(self, message: 'CommitMessage', config: RuleConfig) -> List[Diagnostic]:
        """Inspect the message and return the violations found."""
        pass


class TitleRule(Rule):
    """Rule operating on the title line. Reports at most one violation."""

    scope = RuleScope.TITLE
    severity = Severity.ERROR
    violation_message: str

    def check(self, message: 'CommitMessage', config: RuleConfig) -> List[Diagnostic]:
        column = self.find_violation(message.title, config)
        if column is None:
            return []
        return [Diagnostic(self.format_message(config), self.severity, (1, column))]

    def format_message(self, config: RuleConfig) -> str:
        return self.violation_message

    @abstractmethod
    def find_violation(self, title: str, config: RuleConfig) -> Optional[int]:
        """Return the 1-indexed column of the first violation, if any."""
        pass


class CapitalizedTitleRule(TitleRule):
    name = "capitalized-title"
    violation_message = "Commit message should start with a capitalized letter"

    def find_violation(self, title: str, config: RuleConfig) -> Optional[int]:
        if not title[:1].isupper():
            return 1
        return None


class TitleTrailingRule(TitleRule):
    name = "title-trailing-period-or-whitespace"
    violation_message = "First line (summary) should not end with a period or whitespace"

    def find_violation(self, title: str, config: RuleConfig) -> Optional[int]:
        if title and (title.endswith('.') or title[-1].isspace()):
            return len(title)
        return None


class TitleInvalidCharactersRule(TitleRule):
    name = "title-invalid-characters"
    violation_message = "First line (summary) contains invalid characters"

    def find_violation(self, title: str, config: RuleConfig) -> Optional[int]:
        allowed = re.compile(config.title_allowed_characters)
        for index, char in enumerate(title):
            if not allowed.fullmatch(char):
                return index + 1
        return None


class TitleInvalidWhitespaceRule(TitleRule):
    name = "title-invalid-whitespace"
    violation_message = "First line (summary) contains invalid whitespace"

    def find_violation(self, title: str, config: RuleConfig) -> Optional[int]:
        index = title.find('  ')
        if index < 0:
            return None
        return index + 1


class TitleLengthRule(TitleRule):
    """Opt-in: inactive unless ``title_max_length`` is configured."""

    name = "title-max-length"
    violation_message = "First line (summary) should not be longer than {limit} characters"

    def format_message(self, config: RuleConfig) -> str:
        return self.violation_message.format(limit=config.title_max_length)

    def find_violation(self, title: str, config: RuleConfig) -> Optional[int]:
        limit = config.title_max_length
        if limit is None or len(title) <= limit:
            return None
        return limit + 1


class BodyLineLengthRule(Rule):
    """Warns about body lines longer than the configured maximum.

    A single diagnostic lists every offending line, numbered within the body,
    and points at the first body line of the message.
    """

    name = "body-max-line-length"
    scope = RuleScope.BODY

    def check(self, message: 'CommitMessage', config: RuleConfig) -> List[Diagnostic]:
        if message.body is None:
            return []

        limit = config.body_max_line_length
        long_lines = [
            number
            for number, line in enumerate(LINE_BREAK.split(message.body), start=1)
            if len(line) > limit
        ]
        if not long_lines:
            return []

        numbers = ', '.join(str(n) for n in long_lines)
        if len(long_lines) == 1:
            subject = f"Line {numbers} in the commit body is"
        else:
            subject = f"Lines {numbers} in the commit body are"
        text = (
            f"{subject} longer than {limit} characters. Body lines should not "
            f"exceed {limit} characters, except for compiler error messages "
            f"or other \"non-prose\" explanation"
        )
        return [Diagnostic(text, Severity.WARNING, (BODY_FIRST_LINE, limit))]


class SemverTagExemption(Rule):
    """Release commits consisting of a version tag skip all style rules."""

    name = "semver-tag-exemption"
    scope = RuleScope.EXEMPTION

    def exempts(self, message: 'CommitMessage') -> bool:
        return is_semver_tag(message.raw)

    def check(self, message: 'CommitMessage', config: RuleConfig) -> List[Diagnostic]:
        return []


class ReservedRule(Rule):
    """Named slot for a rule that is not implemented yet. Never reports."""

    scope = RuleScope.RESERVED

    def check(self, message: 'CommitMessage', config: RuleConfig) -> List[Diagnostic]:
        return []


class ImperativeTenseRule(ReservedRule):
    """Would flag titles starting with a non-imperative verb ("Changes")."""

    name = "imperative-present-tense"


class IssueReferenceRule(ReservedRule):
    """Would recognize references to external issue trackers."""

    name = "issue-reference"


_ALL_RULES: List[Rule] = [
    SemverTagExemption(),
    CapitalizedTitleRule(),
    TitleTrailingRule(),
    TitleInvalidCharactersRule(),
    TitleInvalidWhitespaceRule(),
    TitleLengthRule(),
    BodyLineLengthRule(),
    ImperativeTenseRule(),
    IssueReferenceRule(),
]

RULES: Dict[str, Rule] = {rule.name: rule for rule in _ALL_RULES}

EXEMPTIONS = ("semver-tag-exemption",)

ACTIVE_RULES = (
    "capitalized-title",
    "title-trailing-period-or-whitespace",
    "title-invalid-characters",
    "title-invalid-whitespace",
    "title-max-length",
    "body-max-line-length",
)


def is_exempt(message: 'CommitMessage') -> bool:
    return any(RULES[name].exempts(message) for name in EXEMPTIONS)


def evaluate(message: 'CommitMessage', config: RuleConfig) -> List[Diagnostic]:
    """Run the active rules in order and collect their diagnostics."""
    if is_exempt(message):
        return []

    diagnostics: List[Diagnostic] = []
    for name in ACTIVE_RULES:
        diagnostics.extend(RULES[name].check(message, config))
    return diagnostics
