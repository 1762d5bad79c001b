"""GitHub REST API adapter."""

import logging
from datetime import datetime
from typing import Any, Dict, List

import requests

from nextrelease.github.api import (
    BranchNotFound,
    Branches,
    GitHubError,
    LatestReleaseNotFound,
    PullRequests,
    Releases,
    Statuses,
)
from nextrelease.models import (
    Branch,
    CombinedStatus,
    Commit,
    PullRequest,
    Release,
    Repository,
    Status,
    User,
)

LOG = logging.getLogger("nextrelease.github.adapter")

# The REST API only knows open, closed and all; merged PRs are a subset of closed.
_STATE_ALIASES = {"merged": "closed"}


def _parse_iso(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _release_from_api(data: Dict[str, Any]) -> Release:
    published = data.get("published_at") or data["created_at"]
    return Release(
        tag=data["tag_name"],
        published_at=_parse_iso(published),
        name=data.get("name"),
        html_url=data.get("html_url"),
    )


def _branch_from_api(data: Dict[str, Any]) -> Branch:
    commit = data.get("commit") or {}
    if not commit.get("sha"):
        raise GitHubError(f"Branch {data.get('name')} has no head commit")
    return Branch(name=data["name"], commit=Commit(sha=commit["sha"]))


def _status_from_api(data: Dict[str, Any]) -> CombinedStatus:
    statuses = [
        Status(
            context=s.get("context", ""),
            state=s.get("state", ""),
            description=s.get("description"),
            target_url=s.get("target_url"),
        )
        for s in (data.get("statuses") or [])
    ]
    return CombinedStatus(
        sha=data.get("sha", ""),
        state=data.get("state", "pending"),
        total_count=data.get("total_count", len(statuses)),
        statuses=statuses,
    )


def _pull_request_from_api(data: Dict[str, Any]) -> PullRequest:
    user = data.get("user") or {}
    base = data.get("base") or {}
    labels = [lb["name"] for lb in (data.get("labels") or []) if isinstance(lb, dict) and "name" in lb]
    merged_at = data.get("merged_at")
    return PullRequest(
        number=data["number"],
        title=data.get("title") or "",
        user=User(login=user.get("login", ""), html_url=user.get("html_url")),
        base_branch=base.get("ref", ""),
        merged=bool(data.get("merged", merged_at is not None)),
        merged_at=_parse_iso(merged_at) if merged_at else None,
        html_url=data.get("html_url"),
        labels=labels,
        body=data.get("body") or "",
    )


class GitHubAdapter(Releases, Branches, Statuses, PullRequests):
    """GitHub API implementation of the release, branch, status and pull request lookups."""

    def __init__(
        self,
        token: str | None = None,
        api_url: str = "https://api.github.com",
        timeout: int = 30,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        if token:
            self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        not_found: GitHubError | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        LOG.debug("%s %s params=%s", method, url, params)
        resp = self._session.request(method, url, params=params, timeout=self._timeout)
        if resp.status_code == 404 and not_found is not None:
            raise not_found
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except (ValueError, AttributeError):
                pass
            raise GitHubError(f"{resp.status_code}: {msg}")
        return resp

    def latest(self, repository: Repository) -> Release:
        resp = self._request(
            "GET",
            f"/repos/{repository.full_name}/releases/latest",
            not_found=LatestReleaseNotFound(repository),
        )
        return _release_from_api(resp.json())

    def get(self, repository: Repository, name: str) -> Branch:
        resp = self._request(
            "GET",
            f"/repos/{repository.full_name}/branches/{name}",
            not_found=BranchNotFound(repository, name),
        )
        return _branch_from_api(resp.json())

    def combined(self, repository: Repository, sha: str) -> CombinedStatus:
        resp = self._request("GET", f"/repos/{repository.full_name}/commits/{sha}/status")
        return _status_from_api(resp.json())

    def all(self, repository: Repository, filters: Dict[str, str]) -> List[PullRequest]:
        params: Dict[str, Any] = {"per_page": 100, "sort": "updated", "direction": "desc"}
        state = filters.get("state")
        if state:
            params["state"] = _STATE_ALIASES.get(state, state)
        if filters.get("base"):
            params["base"] = filters["base"]
        resp = self._request("GET", f"/repos/{repository.full_name}/pulls", params=params)
        data = resp.json() or []
        return [_pull_request_from_api(d) for d in data]
