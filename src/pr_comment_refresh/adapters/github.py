"""Comment store backed by the GitHub REST API."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping

import requests

from ..config import DEFAULT_API_URL
from ..formatting import is_security_comment
from ..models import ExistingComment
from .base import CommentStore

logger = logging.getLogger(__name__)

PAGE_SIZE = 100
REQUEST_TIMEOUT = 10


class GitHubApiError(RuntimeError):
    """Raised when a GitHub API request fails."""


class GitHubCommentStore(CommentStore):
    """Read and write issue comments on a single pull request.

    Only the first page of results is requested. A full page of changed
    files is reported as unknown since the list may be truncated.
    """

    def __init__(
        self,
        repository: str,
        pull_number: int,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        session: requests.Session | None = None,
    ) -> None:
        self._repository = repository
        self._pull_number = pull_number
        self._api_url = api_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

    # ------------------------------------------------------------------
    def list_bot_comments(self) -> List[ExistingComment]:
        payload = self._request(
            "GET",
            f"/repos/{self._repository}/issues/{self._pull_number}/comments",
            params={"per_page": PAGE_SIZE},
        )
        comments = [ExistingComment.from_api(item) for item in payload or []]
        security_comments = [comment for comment in comments if is_security_comment(comment)]
        logger.info(
            "Found %d security bot comments among %d comments on %s#%d",
            len(security_comments),
            len(comments),
            self._repository,
            self._pull_number,
        )
        return security_comments

    def delete_comment(self, comment_id: int) -> None:
        self._request("DELETE", f"/repos/{self._repository}/issues/comments/{comment_id}")
        logger.info("Deleted comment %d", comment_id)

    def create_comment(self, body: str) -> int:
        payload = self._request(
            "POST",
            f"/repos/{self._repository}/issues/{self._pull_number}/comments",
            json={"body": body},
        )
        comment_id = int(payload["id"])
        logger.info("Created comment %d", comment_id)
        return comment_id

    def list_changed_files(self) -> List[str] | None:
        payload = self._request(
            "GET",
            f"/repos/{self._repository}/pulls/{self._pull_number}/files",
            params={"per_page": PAGE_SIZE},
        )
        payload = payload or []
        if len(payload) >= PAGE_SIZE:
            logger.info(
                "Pull request changes %d or more files; not filtering findings by changed files",
                PAGE_SIZE,
            )
            return None
        return [str(item["filename"]) for item in payload if item.get("filename")]

    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Mapping[str, Any] | None = None,
    ) -> Any:
        url = f"{self._api_url}{path}"
        try:
            response = self._session.request(
                method, url, params=params, json=json, timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as exc:
            raise GitHubApiError(f"{method} {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise GitHubApiError(
                f"{method} {url} returned HTTP {response.status_code}: {response.text[:200]}"
            )

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise GitHubApiError(f"{method} {url} returned invalid JSON") from exc
