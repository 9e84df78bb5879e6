"""Parse GitHub pull request URLs.

Only the canonical public form is accepted:

    https://github.com/{owner}/{repo}/pull/{number}

The URL is split on "/" and checked by position, so there is no case,
trailing-slash or host normalization (GitHub Enterprise hosts are rejected).
Segments after the number (e.g. /files) are ignored.
"""

import re

from prtoolbox.models import PullRequestURL

GITHUB_HOST = "github.com"
PULL_SEGMENT = "pull"
MIN_SEGMENTS = 7

_DIGITS = re.compile(r"[0-9]+")


class ParseError(ValueError):
    """Raised when a PR URL cannot be parsed."""

    pass


class InvalidURLFormatError(ParseError):
    """URL does not have the https://github.com/owner/repo/pull/N shape."""

    def __init__(self, url: str) -> None:
        super().__init__(f"invalid URL format: {url!r}")
        self.url = url


class InvalidPRNumberError(ParseError):
    """Number segment is not a positive integer."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid PR number: {value!r}")
        self.value = value


def _strip_query_and_fragment(segment: str) -> str:
    segment = segment.split("?", 1)[0]
    return segment.split("#", 1)[0]


def parse_pr_url(url: str) -> PullRequestURL:
    """Extract owner, repo and PR number from a GitHub PR URL.

    Raises:
        InvalidURLFormatError: fewer than 7 segments, wrong host, missing
            "pull" segment, or empty owner/repo
        InvalidPRNumberError: number segment is not a positive integer
    """
    parts = url.split("/")
    if len(parts) < MIN_SEGMENTS or parts[2] != GITHUB_HOST or parts[5] != PULL_SEGMENT:
        raise InvalidURLFormatError(url)

    owner, repo = parts[3], parts[4]
    if not owner or not repo:
        raise InvalidURLFormatError(url)

    number_str = _strip_query_and_fragment(parts[6])
    if not _DIGITS.fullmatch(number_str):
        raise InvalidPRNumberError(number_str)
    number = int(number_str)
    if number <= 0:
        raise InvalidPRNumberError(number_str)

    return PullRequestURL(owner=owner, repo=repo, number=number)
