"""GitHub API adapter."""

from typing import Any, Dict, List

import requests

from format_please.adapters.base import GitPlatformAdapter, GitPlatformError
from format_please.models import FileChange, Issue, PullRequestContext

PER_PAGE = 100


def _issue_from_api(data: Dict[str, Any]) -> Issue:
    pull_request = data.get("pull_request") or {}
    return Issue(
        number=data["number"],
        state=data.get("state", "open"),
        pull_request_url=pull_request.get("url"),
    )


def _pr_from_api(data: Dict[str, Any]) -> PullRequestContext:
    head = data.get("head") or {}
    return PullRequestContext(
        number=data["number"],
        state=data.get("state", "open"),
        head_ref=head.get("ref", ""),
    )


def _file_from_api(data: Dict[str, Any]) -> FileChange:
    return FileChange(filename=data["filename"], status=data.get("status", ""))


class GitHubAdapter(GitPlatformAdapter):
    """GitHub REST API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = self._url(path)
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=30)
        except requests.RequestException as e:
            raise GitPlatformError(f"{method} {url}: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except ValueError:
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def get_issue(self, repo: str, issue_number: int) -> Issue:
        resp = self._request("GET", f"/repos/{repo}/issues/{issue_number}")
        return _issue_from_api(resp.json())

    def get_pr_by_url(self, pr_url: str) -> PullRequestContext:
        resp = self._request("GET", pr_url)
        return _pr_from_api(resp.json())

    def list_pr_files(self, repo: str, pr_number: int) -> List[FileChange]:
        """List all changed files, following ``Link: rel="next"`` until exhausted."""
        files: List[FileChange] = []
        url: str | None = f"/repos/{repo}/pulls/{pr_number}/files"
        params: Dict[str, Any] | None = {"per_page": PER_PAGE}
        while url:
            resp = self._request("GET", url, params=params)
            files.extend(_file_from_api(d) for d in resp.json() or [])
            next_link = resp.links.get("next") or {}
            url = next_link.get("url")
            # The next URL already carries per_page and page
            params = None
        return files

    def create_comment_reaction(self, repo: str, comment_id: int, content: str) -> None:
        self._request(
            "POST",
            f"/repos/{repo}/issues/comments/{comment_id}/reactions",
            json={"content": content},
        )

    def create_comment(self, repo: str, issue_number: int, body: str) -> None:
        self._request("POST", f"/repos/{repo}/issues/{issue_number}/comments", json={"body": body})
