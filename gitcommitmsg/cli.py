#!/usr/bin/env python3
import sys
from pathlib import Path
from typing import Optional

import click
from git import Repo
from rich.console import Console
from rich.markup import escape

from .commands import InstallHookCommand
from .commit_message import CommitMessage
from .config import DEFAULT_CONFIG_FILENAME, RuleConfig
from .observers import ConsoleLogObserver, FileLogObserver, report

console = Console()


def read_message(
    file: Optional[Path], message: Optional[str], rev: Optional[str], repo_path: Path,
    config: RuleConfig,
) -> CommitMessage:
    """Parse the message from whichever source was given on the command line."""
    if message is not None:
        return CommitMessage.parse(message, config)
    if rev is not None:
        return CommitMessage.parse_from_revision(repo_path, rev, config)
    if file is None:
        raise click.UsageError("Provide a message FILE, '-' for stdin, --message or --rev")
    if str(file) == "-":
        return CommitMessage.parse(click.get_text_stream("stdin").read(), config)
    return CommitMessage.parse_from_file(file, config)


def print_config(config: RuleConfig, config_path: Path) -> None:
    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {config_path.as_posix()}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    source = "config" if config_path.exists() else "default"
    console.print(f"\n{'Setting':<26} {'Value':<40} {'Source':<10}")
    console.print("-" * 78)
    for name, value in config.model_dump().items():
        console.print(f"{name:<26} {str(value):<40} {source:<10}", markup=False)

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


@click.command()
@click.argument(
    "file",
    required=False,
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option("-m", "--message", help="Validate this text instead of a file")
@click.option("-r", "--rev", help="Validate the message of an existing commit (e.g. HEAD)")
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--body-max-line-length",
    type=click.IntRange(min=1),
    help="Maximum body line length (overrides config setting)",
)
@click.option(
    "--title-max-length",
    type=click.IntRange(min=1),
    help="Maximum title length (overrides config setting)",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log validation results",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option("--install-hook", is_flag=True, help="Install the commit-msg git hook")
@click.option("--uninstall-hook", is_flag=True, help="Remove the commit-msg git hook")
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    file: Optional[Path],
    message: Optional[str],
    rev: Optional[str],
    path: Path,
    body_max_line_length: Optional[int],
    title_max_length: Optional[int],
    log_file: Optional[Path],
    config_list: bool,
    install_hook: bool,
    uninstall_hook: bool,
    version: bool,
):
    """
    Check the format of a commit message.

    FILE is the message file git passes to the commit-msg hook, or '-' to
    read from stdin. Exits with status 1 when the message has errors;
    warnings are reported but do not fail the check.

    Configuration can be set in .gitcommitmsg.toml in the repository root.
    Command line options override configuration file settings.
    """
    failed = False
    try:
        if version:
            from .version import display_version_info

            display_version_info()
            return

        repo_path = path.absolute()

        if install_hook or uninstall_hook:
            command = InstallHookCommand(Repo(str(repo_path), search_parent_directories=True), console)
            ok = command.execute() if install_hook else command.undo()
            if not ok:
                raise click.Abort()
            return

        config = RuleConfig.load(repo_path).configure(
            body_max_line_length=body_max_line_length,
            title_max_length=title_max_length,
        )

        if config_list:
            print_config(config, repo_path / DEFAULT_CONFIG_FILENAME)
            return

        commit_message = read_message(file, message, rev, repo_path, config)

        observers = [ConsoleLogObserver(console)]
        if log_file is not None:
            observers.append(FileLogObserver(str(log_file)))
        report(commit_message, observers)

        failed = commit_message.has_errors()
    except (click.ClickException, click.Abort):
        raise
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise click.Abort()
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
