"""GitHub REST API adapter."""

from datetime import datetime
from typing import Any, Dict, List

import requests
from pydantic import ValidationError

from prtoolbox.adapters.base import GitPlatformAdapter, GitPlatformError
from prtoolbox.deadline import Deadline
from prtoolbox.models import ChangedFile, GitHubUser, Label, PullRequestDetails

PER_PAGE = 100

# Raised by the _*_from_api mappers on payloads of the wrong shape
_PAYLOAD_ERRORS = (AttributeError, KeyError, TypeError, ValueError, ValidationError)


def _parse_iso(s: str | None) -> datetime:
    if not s:
        return datetime.min
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _user_from_api(data: Dict[str, Any] | None) -> GitHubUser | None:
    if not data or not data.get("login"):
        return None
    return GitHubUser(
        login=data["login"],
        id=data.get("id") or 0,
        avatar_url=data.get("avatar_url") or "",
    )


def _pull_request_from_api(data: Dict[str, Any]) -> PullRequestDetails:
    assignees = [_user_from_api(a) for a in (data.get("assignees") or [])]
    return PullRequestDetails(
        number=data["number"],
        title=data.get("title") or "",
        body=data.get("body") or "",
        state=data.get("state") or "",
        created_at=_parse_iso(data.get("created_at")),
        updated_at=_parse_iso(data.get("updated_at")),
        additions=data.get("additions") or 0,
        deletions=data.get("deletions") or 0,
        author=_user_from_api(data.get("user")),
        assignees=[a for a in assignees if a is not None],
    )


def _label_from_api(data: Dict[str, Any]) -> Label:
    return Label(name=data["name"], color=data.get("color") or "")


def _file_from_api(data: Dict[str, Any]) -> ChangedFile:
    return ChangedFile(
        filename=data["filename"],
        additions=data.get("additions") or 0,
        deletions=data.get("deletions") or 0,
        changes=data.get("changes") or 0,
    )


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation of GitPlatformAdapter.

    The requests.Session is only read from after construction, so one
    adapter can serve concurrent requests.
    """

    def __init__(
        self,
        token: str | None = None,
        api_url: str = "https://api.github.com",
        timeout: float = 30,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def _request(
        self,
        method: str,
        path: str,
        deadline: Deadline | None = None,
        **kwargs: Any,
    ) -> requests.Response:
        """Send one request; path may be relative to api_url or absolute
        (pagination links)."""
        url = path if path.startswith("http") else f"{self.api_url}{path}"
        timeout = self.timeout
        if deadline is not None:
            deadline.check()
            timeout = deadline.timeout(self.timeout)
        try:
            resp = self._session.request(method, url, timeout=timeout, **kwargs)
        except requests.RequestException as e:
            raise GitPlatformError(f"GitHub API request failed: {e}") from e
        if resp.status_code == 404:
            raise GitPlatformError(f"Not found: {path}")
        if resp.status_code >= 400:
            msg = resp.text
            try:
                data = resp.json()
                if "message" in data:
                    msg = data["message"]
            except ValueError:
                pass
            raise GitPlatformError(f"GitHub API error {resp.status_code}: {msg}")
        return resp

    def _get_json(self, path: str, deadline: Deadline | None = None, **kwargs: Any) -> Any:
        resp = self._request("GET", path, deadline, **kwargs)
        try:
            return resp.json()
        except ValueError as e:
            raise GitPlatformError(f"Invalid JSON from {path}: {e}") from e

    def _paginate(self, path: str, deadline: Deadline | None = None) -> List[Dict[str, Any]]:
        """GET all pages of a list endpoint by following Link rel="next"."""
        items: List[Dict[str, Any]] = []
        next_url: str | None = path
        params: Dict[str, Any] | None = {"per_page": PER_PAGE}
        while next_url:
            resp = self._request("GET", next_url, deadline, params=params)
            try:
                page = resp.json() or []
            except ValueError as e:
                raise GitPlatformError(f"Invalid JSON from {path}: {e}") from e
            if not isinstance(page, list):
                raise GitPlatformError(f"Expected a list from {path}, got {type(page).__name__}")
            items.extend(page)
            # next link already carries per_page and page
            params = None
            next_url = (resp.links.get("next") or {}).get("url")
        return items

    def get_pull_request(
        self,
        repo: str,
        pr_number: int,
        deadline: Deadline | None = None,
    ) -> PullRequestDetails:
        """Fetch a single pull request by number.

        Args:
            repo: Repository in format owner/repo
            pr_number: Pull request number
            deadline: Optional request deadline

        Returns:
            PullRequestDetails instance

        Raises:
            GitPlatformError: If the API call fails or PR not found
            DeadlineExceeded: If the deadline passed before the call
        """
        data = self._get_json(f"/repos/{repo}/pulls/{pr_number}", deadline)
        try:
            return _pull_request_from_api(data)
        except _PAYLOAD_ERRORS as e:
            raise GitPlatformError(f"Unexpected pull request payload: {e}") from e

    def list_issue_labels(
        self,
        repo: str,
        pr_number: int,
        deadline: Deadline | None = None,
    ) -> List[Label]:
        """List labels of the PR (PRs share the issues label endpoint)."""
        data = self._paginate(f"/repos/{repo}/issues/{pr_number}/labels", deadline)
        try:
            return [_label_from_api(d) for d in data]
        except _PAYLOAD_ERRORS as e:
            raise GitPlatformError(f"Unexpected labels payload: {e}") from e

    def list_pr_files(
        self,
        repo: str,
        pr_number: int,
        deadline: Deadline | None = None,
    ) -> List[ChangedFile]:
        """List files changed in the PR, in API order."""
        data = self._paginate(f"/repos/{repo}/pulls/{pr_number}/files", deadline)
        try:
            return [_file_from_api(d) for d in data]
        except _PAYLOAD_ERRORS as e:
            raise GitPlatformError(f"Unexpected files payload: {e}") from e
