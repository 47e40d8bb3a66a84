"""Git hook commands.

This package implements the Command Pattern for changes git-commit-msg makes
to a repository, so that every change can be undone.
"""

from .base import GitCommand
from .hook import InstallHookCommand

__all__ = [
    'GitCommand',
    'InstallHookCommand',
]
