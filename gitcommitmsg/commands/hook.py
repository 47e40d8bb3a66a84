"""Command for installing the commit-msg git hook."""

import stat
from pathlib import Path
from typing import Optional

from git import Repo
from rich.console import Console

from .base import GitCommand

HOOK_NAME = "commit-msg"
HOOK_MARKER = "# installed by git-commit-msg"
HOOK_SCRIPT = f"""#!/bin/sh
{HOOK_MARKER}
exec git-commit-msg "$1"
"""


class InstallHookCommand(GitCommand):
    """Command for installing the commit-msg hook.

    This command handles:
    1. Locating the hooks directory of the repository
    2. Backing up a commit-msg hook that was not installed by us
    3. Writing an executable hook that validates the message file

    Undo removes our hook and restores the backup, if any.
    """

    def __init__(self, repo: Repo, console: Optional[Console] = None):
        super().__init__(repo, console)
        self.hooks_dir = Path(repo.git_dir) / "hooks"
        self.hook_path = self.hooks_dir / HOOK_NAME
        self.backup_path = self.hooks_dir / f"{HOOK_NAME}.backup"

    def is_installed(self) -> bool:
        return self.hook_path.exists() and HOOK_MARKER in self.hook_path.read_text()

    def execute(self) -> bool:
        """Install the hook.

        Returns:
            bool: True if the hook is in place afterwards
        """
        try:
            if self.is_installed():
                self.console.print("[green]✓ commit-msg hook already installed[/green]")
                return True

            self.hooks_dir.mkdir(parents=True, exist_ok=True)
            if self.hook_path.exists():
                self.hook_path.replace(self.backup_path)
                self.console.print(
                    f"[yellow]Existing hook moved to {self.backup_path.name}[/yellow]"
                )

            self.hook_path.write_text(HOOK_SCRIPT)
            mode = self.hook_path.stat().st_mode
            self.hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
            self.console.print(f"[green]Installed commit-msg hook at {self.hook_path}[/green]")
            return True
        except OSError as e:
            self.console.print(f"[red]Failed to install commit-msg hook: {e}[/red]")
            return False

    def undo(self) -> bool:
        """Remove the hook and restore the previous one.

        Returns:
            bool: True if the hook was removed (or was not installed)
        """
        try:
            if not self.is_installed():
                self.console.print("[yellow]commit-msg hook is not installed[/yellow]")
                return True

            self.hook_path.unlink()
            if self.backup_path.exists():
                self.backup_path.replace(self.hook_path)
                self.console.print("[green]Restored previous commit-msg hook[/green]")
            self.console.print("[green]Removed commit-msg hook[/green]")
            return True
        except OSError as e:
            self.console.print(f"[red]Failed to remove commit-msg hook: {e}[/red]")
            return False
