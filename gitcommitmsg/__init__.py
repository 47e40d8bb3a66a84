"""Commit message format checker."""

__version__ = "0.1.0"

from .commit_message import CommitMessage, parse, parse_from_file, parse_from_revision
from .config import DEFAULT_CONFIG, RuleConfig
from .models import Diagnostic, Severity, has_errors

__all__ = [
    'CommitMessage',
    'parse',
    'parse_from_file',
    'parse_from_revision',
    'DEFAULT_CONFIG',
    'RuleConfig',
    'Diagnostic',
    'Severity',
    'has_errors',
]
