"""Tests for structural parsing."""
import pytest

from gitcommitmsg.parser import StructuralError, is_semver_tag, split_message


def test_title_only():
    assert split_message("Add feature") == ("Add feature", None)


def test_trailing_newlines_are_ignored():
    assert split_message("Add feature\n") == ("Add feature", None)
    assert split_message("Add feature\n\nBody\n\n") == ("Add feature", "Body")


def test_split_on_first_blank_line_only():
    title, body = split_message("Title\n\nFirst paragraph\n\nSecond paragraph")
    assert title == "Title"
    assert body == "First paragraph\n\nSecond paragraph"


def test_interior_whitespace_is_kept():
    title, body = split_message("Title with  spaces \n\n  indented body")
    assert title == "Title with  spaces "
    assert body == "  indented body"


def test_crlf_separator():
    assert split_message("Title\r\n\r\nBody\r\nMore") == ("Title", "Body\r\nMore")


@pytest.mark.parametrize("raw", [
    "",
    "   ",
    "\n\n",
    "\nTitle after newline",
    "\r\nTitle after newline",
    "Title\n\n\nBody after two blank lines",
    "Title\nSecond line without blank separator",
])
def test_structural_errors(raw):
    with pytest.raises(StructuralError):
        split_message(raw)


@pytest.mark.parametrize("raw", [
    "v1.0.0",
    "1.0.0",
    "v1.0.0-alpha",
    "v1.0.0-alpha.1",
    "v1.0.0+20130313144700",
    "v1.0.0-beta+exp.sha.5114f85",
    " v2.3.4\n",
])
def test_semver_tags(raw):
    assert is_semver_tag(raw)


@pytest.mark.parametrize("raw", [
    "v1.0",
    "v01.0.0",
    "Release v1.0.0",
    "v1.0.0\n\nWith a body",
    "v1.0.0-",
])
def test_not_semver_tags(raw):
    assert not is_semver_tag(raw)
