"""Observer pattern for reporting validation results."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape

from .commit_message import CommitMessage
from .models import Severity


class ValidationObserver(ABC):
    """Abstract base class for validation observers."""

    @abstractmethod
    def on_validation_completed(self, message: CommitMessage) -> None:
        """Called once a message has been parsed and validated."""
        pass


class ConsoleLogObserver(ValidationObserver):
    """Observer that prints diagnostics to the console."""

    STYLES = {Severity.ERROR: "red", Severity.WARNING: "yellow"}

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_validation_completed(self, message: CommitMessage) -> None:
        for diagnostic in message.diagnostics:
            style = self.STYLES[diagnostic.severity]
            location = ""
            if diagnostic.position is not None:
                location = "{}:{}: ".format(*diagnostic.position)
            self.console.print(
                f"[{style}]{location}{diagnostic.severity.value}:[/{style}] "
                f"{escape(diagnostic.message)}"
            )

        if message.has_errors():
            self.console.print("[red]Commit message rejected[/red]")
        elif message.warnings:
            self.console.print("[yellow]Commit message accepted with warnings[/yellow]")
        else:
            self.console.print("[green]Commit message OK[/green]")


class FileLogObserver(ValidationObserver):
    """Observer that appends validation results to a log file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_validation_completed(self, message: CommitMessage) -> None:
        status = "Rejected" if message.has_errors() else "Accepted"
        self._log(f"{status} commit message: {message.title!r}")
        for diagnostic in message.diagnostics:
            self._log(str(diagnostic).replace("\n", " "))


def report(message: CommitMessage, observers: Iterable[ValidationObserver]) -> None:
    """Notify every observer about a validated message."""
    for observer in observers:
        observer.on_validation_completed(message)
