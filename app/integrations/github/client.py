"""GitHub REST API client.

Fetches the pull requests a checklist is built from and the repository's
checklist configuration blob.
"""

import base64
import binascii
from typing import Any, Dict, List, Optional

import requests

from infrastructure.configuration.integrations import GitHubSettings
from infrastructure.logging import get_module_logger
from models.checklist import Commit, PullRequest

logger = get_module_logger()

COMMITS_PER_PAGE = 100


class GitHubError(Exception):
    """A GitHub API call failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class GitHubClient:
    """Thin wrapper over the GitHub v3 REST API.

    Args:
        settings: GitHub settings (API URL, token, timeout)
        session: Optional requests session, mainly for tests
    """

    def __init__(
        self, settings: GitHubSettings, session: Optional[requests.Session] = None
    ):
        self.api_url = settings.GITHUB_API_URL.rstrip("/")
        self.timeout_seconds = settings.GITHUB_TIMEOUT_SECONDS
        self.session = session or requests.Session()
        self.session.headers["Accept"] = "application/vnd.github+json"
        if settings.GITHUB_TOKEN:
            self.session.headers["Authorization"] = f"Bearer {settings.GITHUB_TOKEN}"

    def get_pull_request(
        self, owner: str, repo: str, number: int, with_commits: bool = True
    ) -> PullRequest:
        """Fetch a pull request, optionally with its commit messages.

        Raises:
            GitHubError: If the pull request cannot be fetched.
        """
        data = self._get(f"/repos/{owner}/{repo}/pulls/{number}")
        commits: List[Commit] = []
        if with_commits:
            commits = self._list_commits(owner, repo, number)

        return PullRequest(
            title=data.get("title") or "",
            body=data.get("body") or "",
            owner=owner,
            repo=repo,
            number=number,
            is_private=bool(data.get("base", {}).get("repo", {}).get("private")),
            head_sha=data.get("head", {}).get("sha", ""),
            commits=commits,
        )

    def get_file(self, owner: str, repo: str, path: str, ref: str) -> Optional[bytes]:
        """Fetch a file from the repository at ref.

        Returns:
            The raw file contents, or None if the file does not exist. Text
            decoding is left to the caller.

        Raises:
            GitHubError: For failures other than a missing file.
        """
        try:
            data = self._get(f"/repos/{owner}/{repo}/contents/{path}", params={"ref": ref})
        except GitHubError as e:
            if e.status_code == 404:
                return None
            raise

        if data.get("encoding") != "base64" or "content" not in data:
            raise GitHubError(f"unexpected contents response for {path}")
        try:
            return base64.b64decode(data["content"])
        except (binascii.Error, TypeError) as e:
            raise GitHubError(f"malformed base64 content for {path}") from e

    def _list_commits(self, owner: str, repo: str, number: int) -> List[Commit]:
        commits: List[Commit] = []
        page = 1
        while True:
            batch = self._get(
                f"/repos/{owner}/{repo}/pulls/{number}/commits",
                params={"per_page": COMMITS_PER_PAGE, "page": page},
            )
            commits.extend(
                Commit(message=c.get("commit", {}).get("message", "")) for c in batch
            )
            if len(batch) < COMMITS_PER_PAGE:
                return commits
            page += 1

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.api_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as e:
            logger.error("github_request_failed", path=path, error=str(e))
            raise GitHubError(f"GET {path}: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(
                "github_request_unsuccessful",
                path=path,
                status_code=response.status_code,
            )
            raise GitHubError(
                f"GET {path}: HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response.json()
