"""Structural parsing of raw commit message text.

The parser only knows about the shape of a message: a single title line,
optionally followed by one blank line and a body. Style rules live in
``rules``.
"""
import re
from typing import Optional, Tuple

BLANK_LINE = re.compile(r'\r?\n\r?\n')
LINE_BREAKS = ('\n', '\r')

# semver.org 2.0.0 grammar, with an optional leading "v" as used in tags.
SEMVER_TAG = re.compile(
    r'^v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)'
    r'(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)'
    r'(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?'
    r'(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$'
)


class StructuralError(ValueError):
    """Raised when a message does not have the title/blank line/body shape."""


def is_semver_tag(raw: str) -> bool:
    """Check whether the whole message is a version tag like ``v1.0.0-alpha``."""
    return SEMVER_TAG.match(raw.strip()) is not None


def split_message(raw: str) -> Tuple[str, Optional[str]]:
    """Split raw text into ``(title, body)``.

    Line terminators at the very end of the text are ignored, everything
    else is kept as is.

    Raises:
        StructuralError: If the text is empty, starts with a line break,
            has a multi-line title or has more than one blank line between
            title and body.
    """
    if not raw.strip():
        raise StructuralError("empty message")
    if raw.startswith(LINE_BREAKS):
        raise StructuralError("message starts with a line break")

    text = raw.rstrip('\r\n')
    parts = BLANK_LINE.split(text, maxsplit=1)
    title = parts[0]
    body = parts[1] if len(parts) > 1 else None

    if '\n' in title or '\r' in title:
        raise StructuralError("title spans more than one line")
    if body is not None and body.startswith(LINE_BREAKS):
        raise StructuralError("body starts with a line break")

    return title, body
