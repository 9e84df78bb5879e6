"""Tests for prompt building and display formatting helpers."""

from datetime import UTC, datetime, timedelta, timezone

from prtoolbox.models import ChangedFile, GitHubUser, Label, PRRecord
from prtoolbox.prompt import (
    DESCRIPTION_OUTLINE,
    PROMPT_TEMPLATE,
    SYSTEM_PROMPT,
    build_prompt,
    format_assignees,
    format_labels,
    format_timestamp,
    format_user,
)
from prtoolbox.sources import synthetic_record

NOW = datetime(2024, 3, 1, 9, 5, 7, tzinfo=UTC)


def _record(**overrides) -> PRRecord:
    fields = dict(
        repository="acme/widgets",
        pr_number=42,
        title="Add widgets",
        body="Adds the widget factory.",
        state="open",
        created_at=datetime(2024, 2, 28, 8, 0, 0, tzinfo=UTC),
        updated_at=NOW,
        additions=120,
        deletions=7,
        changed_files=(
            ChangedFile(filename="a.py", additions=100, deletions=7, changes=107),
            ChangedFile(filename="b.py", additions=20, deletions=0, changes=20),
            ChangedFile(filename="c.md", additions=0, deletions=0, changes=0),
        ),
        labels=(Label(name="enhancement"), Label(name="ui")),
        author=GitHubUser(login="octocat"),
        assignees=(GitHubUser(login="alice"), GitHubUser(login="bob")),
    )
    fields.update(overrides)
    return PRRecord(**fields)


class TestFormatting:
    """Label, user, assignee and timestamp rendering."""

    def test_labels(self) -> None:
        assert format_labels([]) == "none"
        assert format_labels([Label(name="bug")]) == "bug"
        assert format_labels([Label(name="b"), Label(name="a")]) == "b, a"

    def test_user(self) -> None:
        assert format_user(None) == "unknown"
        assert format_user(GitHubUser(login="")) == "unknown"
        assert format_user(GitHubUser(login="octocat")) == "octocat"

    def test_assignees(self) -> None:
        assert format_assignees([]) == "none"
        assert format_assignees([GitHubUser(login="x"), GitHubUser(login="y")]) == "x, y"

    def test_timestamp(self) -> None:
        """YYYY-MM-DD HH:MM:SS; aware times converted to UTC."""
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"
        assert format_timestamp(NOW) == "2024-03-01 09:05:07"
        plus_two = datetime(2024, 3, 1, 11, 5, 7, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(plus_two) == "2024-03-01 09:05:07"

    def test_zero_timestamp(self) -> None:
        """Missing timestamps render as the zero time."""
        assert format_timestamp(datetime.min) == "0001-01-01 00:00:00"


class TestTemplates:
    """Constant template text."""

    def test_outline_has_seven_sections_in_order(self) -> None:
        lines = DESCRIPTION_OUTLINE.splitlines()
        assert len(lines) == 7
        headings = [
            "**Summary**",
            "**Changes Made**",
            "**Motivation/Context:**",
            "**How to Test (Optional but Recommended):**",
            "**Potential Impacts/Considerations:**",
            "**Relevant Links (Optional):**",
            "**Contributors**",
        ]
        for i, (line, heading) in enumerate(zip(lines, headings), start=1):
            assert line.startswith(f"{i}. {heading}")

    def test_outline_embedded_in_template(self) -> None:
        assert DESCRIPTION_OUTLINE in PROMPT_TEMPLATE

    def test_system_prompt(self) -> None:
        assert SYSTEM_PROMPT.startswith("You are an expert software developer and technical writer.")


class TestBuildPrompt:
    """Substitution of record values."""

    def test_data_lines(self) -> None:
        prompt = build_prompt(_record())
        lines = prompt.splitlines()
        for expected in [
            "Repository: acme/widgets",
            "PR Number: 42",
            "Title: Add widgets",
            "Current Description: Adds the widget factory.",
            "State: open",
            "Created: 2024-02-28 08:00:00",
            "Updated: 2024-03-01 09:05:07",
            "Additions: 120 lines",
            "Deletions: 7 lines",
            "Changed Files: 3 files",
            "Labels: enhancement, ui",
            "Author: octocat",
            "Assignees: alice, bob",
        ]:
            assert expected in lines

    def test_outline_and_closing_present(self) -> None:
        prompt = build_prompt(_record())
        assert prompt.startswith(
            "You are a helpful assistant that generates professional GitHub pull request descriptions."
        )
        assert DESCRIPTION_OUTLINE in prompt
        assert prompt.endswith(
            "Include the contributors section to acknowledge all team members who contributed to this PR."
        )

    def test_empty_values(self) -> None:
        """Zero-value record renders placeholders without failing."""
        prompt = build_prompt(PRRecord(repository="a/b", pr_number=1))
        lines = prompt.splitlines()
        assert "Current Description: " in lines
        assert "Labels: none" in lines
        assert "Author: unknown" in lines
        assert "Assignees: none" in lines
        assert "Changed Files: 0 files" in lines
        assert "Created: 0001-01-01 00:00:00" in lines

    def test_braces_in_body_kept(self) -> None:
        """Record text is inserted literally, not re-formatted."""
        prompt = build_prompt(_record(body="use {placeholder} and {0}"))
        assert "Current Description: use {placeholder} and {0}" in prompt

    def test_idempotent(self) -> None:
        record = _record()
        assert build_prompt(record) == build_prompt(record)

    def test_synthetic_record_prompt(self) -> None:
        prompt = build_prompt(synthetic_record("acme", "widgets", 42, NOW))
        lines = prompt.splitlines()
        assert "Repository: acme/widgets" in lines
        assert "PR Number: 42" in lines
        assert "Labels: enhancement, documentation" in lines
        assert "Author: sample-user" in lines
        assert "Assignees: reviewer1" in lines
        assert "Changed Files: 2 files" in lines
        assert "Created: 2024-02-29 09:05:07" in lines
