"""Base command class for git repository changes.

This module provides the abstract base class for all commands,
implementing the Command Pattern.
"""

from abc import ABC, abstractmethod
from typing import Optional

from git import Repo
from rich.console import Console


class GitCommand(ABC):
    """Abstract base class for git commands.

    Concrete commands should implement the execute() and undo() methods.

    Attributes:
        repo (Repo): The git repository to operate on
        console (Console): Rich console for output
    """

    def __init__(self, repo: Repo, console: Optional[Console] = None):
        """Initialize the command.

        Args:
            repo: The git repository to operate on
            console: Optional Rich console for output
        """
        self.repo = repo
        self.console = console or Console()

    @abstractmethod
    def execute(self) -> bool:
        """Execute the command.

        Returns:
            bool: True if the command was executed successfully, False otherwise
        """
        pass

    @abstractmethod
    def undo(self) -> bool:
        """Undo the command.

        Returns:
            bool: True if the command was undone successfully, False otherwise
        """
        pass
