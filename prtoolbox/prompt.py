"""Prompt construction for PR description generation.

The templates below are fixed text: downstream consumers rely on the
seven-section outline, so edits must bump PROMPT_TEMPLATE_VERSION.
build_prompt only substitutes record values into PROMPT_TEMPLATE.
"""

from datetime import UTC, datetime
from typing import Iterable

from prtoolbox.models import GitHubUser, Label, PRRecord

PROMPT_TEMPLATE_VERSION = "1"

SYSTEM_PROMPT = (
    "You are an expert software developer and technical writer. Please create comprehensive, "
    "professional pull request descriptions based on GitHub PR data. Focus on clarity, technical "
    "accuracy, and helpfulness for reviewers."
)

DESCRIPTION_OUTLINE = """\
1. **Summary** - A brief, high-level overview of the purpose of this pull request.
2. **Changes Made** - A clear and itemized list of the specific modifications made in this PR.
3. **Motivation/Context:** Explain *why* these changes were necessary (e.g., bug fix, new feature, refactoring, performance improvement).
4. **How to Test (Optional but Recommended):** Provide instructions for how a reviewer can verify the changes.
5. **Potential Impacts/Considerations:** Mention any known side effects, performance implications, or areas that require particular attention during review.
6. **Relevant Links (Optional):** Include links to related issues, design documents, or external resources.
7. **Contributors** - List of contributors to the PR with their contribution counts"""

PROMPT_TEMPLATE = (
    """\
You are a helpful assistant that generates professional GitHub pull request descriptions.

Given the following GitHub pull request data:

Repository: {repository}
PR Number: {pr_number}
Title: {title}
Current Description: {body}
State: {state}
Created: {created}
Updated: {updated}
Additions: {additions} lines
Deletions: {deletions} lines
Changed Files: {changed_files} files
Labels: {labels}
Author: {author}
Assignees: {assignees}

Please structure the description with the following sections:
"""
    + DESCRIPTION_OUTLINE
    + """

Ensure the description is easy to read, uses clear language, and is formatted for readability (e.g., bullet points, headings).
Make the description clear, professional, and helpful for code reviewers. Focus on the "why" and "what" of the changes. \
Include the contributors section to acknowledge all team members who contributed to this PR."""
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime) -> str:
    """Render as YYYY-MM-DD HH:MM:SS; aware values are shown in UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    value = value.replace(tzinfo=None)
    # strftime does not zero-pad years below 1000 on every platform
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d} {value:%H:%M:%S}"


def _join_or_none(names: Iterable[str]) -> str:
    names = [n for n in names if n]
    return ", ".join(names) if names else "none"


def format_labels(labels: Iterable[Label]) -> str:
    """Comma-joined label names, or "none"."""
    return _join_or_none(lb.name for lb in labels)


def format_user(user: GitHubUser | None) -> str:
    """User login, or "unknown"."""
    if user is None or not user.login:
        return "unknown"
    return user.login


def format_assignees(assignees: Iterable[GitHubUser]) -> str:
    """Comma-joined assignee logins, or "none"."""
    return _join_or_none(a.login for a in assignees)


def build_prompt(record: PRRecord) -> str:
    """Fill PROMPT_TEMPLATE from the record. Pure; never fails."""
    return PROMPT_TEMPLATE.format(
        repository=record.repository,
        pr_number=record.pr_number,
        title=record.title,
        body=record.body,
        state=record.state,
        created=format_timestamp(record.created_at),
        updated=format_timestamp(record.updated_at),
        additions=record.additions,
        deletions=record.deletions,
        changed_files=len(record.changed_files),
        labels=format_labels(record.labels),
        author=format_user(record.author),
        assignees=format_assignees(record.assignees),
    )
