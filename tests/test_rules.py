"""Tests for the individual format rules."""
import pytest

from gitcommitmsg.commit_message import CommitMessage
from gitcommitmsg.config import DEFAULT_CONFIG, RuleConfig
from gitcommitmsg.models import RuleScope, Severity
from gitcommitmsg.rules import (
    ACTIVE_RULES,
    RULES,
    BodyLineLengthRule,
    CapitalizedTitleRule,
    TitleInvalidCharactersRule,
    TitleInvalidWhitespaceRule,
    TitleLengthRule,
    TitleTrailingRule,
    evaluate,
)

CONFIG = DEFAULT_CONFIG


def message(title, body=None):
    raw = title if body is None else f"{title}\n\n{body}"
    return CommitMessage(raw, title, body)


def test_capitalized_title_rule():
    rule = CapitalizedTitleRule()
    assert rule.check(message("Add feature"), CONFIG) == []
    assert rule.check(message("Élan vital"), CONFIG) == []

    for title in ("add feature", "1st feature", "(scope) add"):
        diagnostics = rule.check(message(title), CONFIG)
        assert len(diagnostics) == 1
        assert diagnostics[0].position == (1, 1)
        assert diagnostics[0].severity is Severity.ERROR


def test_title_trailing_rule():
    rule = TitleTrailingRule()
    assert rule.check(message("Add feature"), CONFIG) == []
    assert rule.check(message("Add feature?"), CONFIG) == []
    assert rule.check(message("Add feature."), CONFIG)[0].position == (1, 12)
    assert rule.check(message("Add feature\t"), CONFIG)[0].position == (1, 12)


def test_invalid_characters_reports_first_offender_only():
    rule = TitleInvalidCharactersRule()
    diagnostics = rule.check(message("Use <b> and <i> tags"), CONFIG)
    assert len(diagnostics) == 1
    assert diagnostics[0].position == (1, 5)


@pytest.mark.parametrize("title", [
    "Fix path\\to\\file handling",
    "Bump count += 1 [skip ci]",
    "Handle 100% of {cases}; really!",
    "Ünïcödé letters are fine",
    "Reply to @user about #12",
])
def test_allowed_characters(title):
    assert TitleInvalidCharactersRule().check(message(title), CONFIG) == []


def test_allowed_characters_are_configurable():
    config = RuleConfig(title_allowed_characters=r"[A-Za-z ]")
    diagnostics = TitleInvalidCharactersRule().check(message("Fix bug 42"), config)
    assert diagnostics[0].position == (1, 9)


def test_invalid_whitespace_rule():
    rule = TitleInvalidWhitespaceRule()
    assert rule.check(message("One space only"), CONFIG) == []
    diagnostics = rule.check(message("Two  then   three"), CONFIG)
    assert len(diagnostics) == 1
    assert diagnostics[0].position == (1, 4)


def test_title_length_rule_is_opt_in():
    rule = TitleLengthRule()
    long_title = "A" + "b" * 99
    assert rule.check(message(long_title), CONFIG) == []

    config = RuleConfig(title_max_length=50)
    diagnostics = rule.check(message(long_title), config)
    assert diagnostics[0].message == "First line (summary) should not be longer than 50 characters"
    assert diagnostics[0].position == (1, 51)
    assert rule.check(message("A" * 50), config) == []


def test_body_line_length_rule():
    rule = BodyLineLengthRule()
    assert rule.check(message("Title"), CONFIG) == []
    assert rule.check(message("Title", "x" * 72), CONFIG) == []

    body = "\n".join(["short", "y" * 73, "short", "z" * 100])
    diagnostics = rule.check(message("Title", body), CONFIG)
    assert len(diagnostics) == 1
    assert diagnostics[0].message.startswith("Lines 2, 4 in the commit body are longer than 72")
    assert diagnostics[0].severity is Severity.WARNING
    assert diagnostics[0].position == (3, 72)


def test_evaluate_order():
    diagnostics = evaluate(message("fix  <thing>.", "w" * 80), CONFIG)
    assert [d.position for d in diagnostics] == [(1, 1), (1, 13), (1, 6), (1, 4), (3, 72)]


def test_evaluate_skips_semver_tags():
    assert evaluate(message("v1.2.3"), CONFIG) == []


def test_rule_table():
    assert list(ACTIVE_RULES) == [
        "capitalized-title",
        "title-trailing-period-or-whitespace",
        "title-invalid-characters",
        "title-invalid-whitespace",
        "title-max-length",
        "body-max-line-length",
    ]
    for name in ("imperative-present-tense", "issue-reference"):
        assert name in RULES
        assert name not in ACTIVE_RULES
        assert RULES[name].scope is RuleScope.RESERVED
        assert RULES[name].check(message("Changes things"), CONFIG) == []


def test_body_lines_split_on_newlines_only():
    body = "short\x0cpage\n" + "x" * 80
    diagnostics = BodyLineLengthRule().check(message("Title", body), CONFIG)
    assert diagnostics[0].message.startswith("Line 2 in the commit body is longer")

    body = "short\r\n" + "x" * 80 + "\r\nlast"
    diagnostics = BodyLineLengthRule().check(message("Title", body), CONFIG)
    assert diagnostics[0].message.startswith("Line 2 in the commit body is longer")
