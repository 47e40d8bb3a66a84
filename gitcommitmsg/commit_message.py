"""Parsed commit messages and their diagnostics."""
from pathlib import Path
from typing import List, Optional, Union

from git import Repo

from .config import DEFAULT_CONFIG, RuleConfig
from .models import Diagnostic, Severity, has_errors
from .parser import StructuralError, split_message
from . import rules

STRUCTURE_MESSAGE = "Commit message is not in the correct format, see\n{url}"


class CommitMessage:
    """A commit message split into title and body, with its diagnostics.

    Use ``CommitMessage.parse`` (or one of the module level helpers) rather
    than the constructor: parsing never raises for string input, every
    problem is reported as a ``Diagnostic``.

    Attributes:
        raw (str): The text exactly as given
        title (str): The first line
        body (Optional[str]): Everything after the blank line, if present
    """

    def __init__(self, raw: str, title: str, body: Optional[str] = None):
        self._raw = raw
        self._title = title
        self._body = body
        self._diagnostics: List[Diagnostic] = []

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def title(self) -> str:
        return self._title

    @property
    def body(self) -> Optional[str]:
        return self._body

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self._diagnostics if d.severity is Severity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self._diagnostics if d.severity is Severity.WARNING]

    def has_errors(self) -> bool:
        """Whether the message should be rejected. Warnings never count."""
        return has_errors(self._diagnostics)

    @classmethod
    def parse(cls, raw: str, config: Optional[RuleConfig] = None) -> 'CommitMessage':
        """Parse and validate raw commit message text.

        Args:
            raw: The complete message text
            config: Rule parameters, defaults to ``DEFAULT_CONFIG``

        Returns:
            CommitMessage: The parsed message. A misshaped message has an
            empty title and exactly one positionless error.
        """
        config = config or DEFAULT_CONFIG

        try:
            title, body = split_message(raw)
        except StructuralError:
            message = cls(raw, "")
            message._diagnostics.append(Diagnostic(
                STRUCTURE_MESSAGE.format(url=config.format_docs_url),
                Severity.ERROR,
            ))
            return message

        message = cls(raw, title, body)
        message._diagnostics.extend(rules.evaluate(message, config))
        return message

    @classmethod
    def parse_from_file(
        cls, path: Union[str, Path], config: Optional[RuleConfig] = None
    ) -> 'CommitMessage':
        """Read a message file, e.g. ``.git/COMMIT_EDITMSG``, and parse it.

        Line terminators are kept as written so reported columns match the
        file. ``OSError`` from reading propagates to the caller.
        """
        with Path(path).open('r', encoding='utf-8', newline='') as f:
            raw = f.read()
        return cls.parse(raw, config)

    @classmethod
    def parse_from_revision(
        cls,
        repo_path: Union[str, Path],
        rev: str = "HEAD",
        config: Optional[RuleConfig] = None,
    ) -> 'CommitMessage':
        """Parse the message of an existing commit."""
        repo = Repo(str(repo_path), search_parent_directories=True)
        raw = repo.commit(rev).message
        if isinstance(raw, bytes):
            raw = raw.decode('utf-8', errors='replace')
        return cls.parse(raw, config)

    def __repr__(self) -> str:
        return (
            f"CommitMessage(title={self._title!r}, body={self._body!r}, "
            f"diagnostics={self._diagnostics!r})"
        )


def parse(raw: str, config: Optional[RuleConfig] = None) -> CommitMessage:
    return CommitMessage.parse(raw, config)


def parse_from_file(path: Union[str, Path], config: Optional[RuleConfig] = None) -> CommitMessage:
    return CommitMessage.parse_from_file(path, config)


def parse_from_revision(
    repo_path: Union[str, Path], rev: str = "HEAD", config: Optional[RuleConfig] = None
) -> CommitMessage:
    return CommitMessage.parse_from_revision(repo_path, rev, config)
