"""Shared models for git-commit-msg."""
from typing import Iterable, Optional, Tuple
from dataclasses import dataclass
from enum import Enum

Position = Tuple[int, int]


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class RuleScope(str, Enum):
    TITLE = "title"
    BODY = "body"
    EXEMPTION = "exemption"
    RESERVED = "reserved"


@dataclass(frozen=True)
class Diagnostic:
    """A single format violation found in a commit message.

    Attributes:
        message: Human readable description of the violation
        severity: ERROR blocks the commit, WARNING is advisory
        position: 1-indexed (line, column), or None when the diagnostic
            applies to the whole message
    """

    message: str
    severity: Severity
    position: Optional[Position] = None

    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        if self.position is None:
            return f"{self.severity.value}: {self.message}"
        line, column = self.position
        return f"{line}:{column}: {self.severity.value}: {self.message}"


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    """True if any diagnostic is an ERROR. Warnings alone never fail a message."""
    return any(d.is_error() for d in diagnostics)
