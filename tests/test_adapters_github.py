"""Unit tests for GitHub adapter (mocked API)."""

from datetime import UTC, datetime
from unittest.mock import Mock, patch

import pytest

from nextrelease.github import BranchNotFound, GitHubAdapter, GitHubError, LatestReleaseNotFound
from nextrelease.models import Branch, CombinedStatus, PullRequest, Release, Repository

REPO = Repository(owner="acme", name="widgets")


@pytest.fixture
def adapter() -> GitHubAdapter:
    return GitHubAdapter(token="test-token", api_url="https://api.github.com")


def _response(status_code: int, data=None, text: str = "") -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    resp.json.return_value = data
    return resp


def test_session_headers() -> None:
    """Token and API version headers are set; no Authorization without token."""
    adapter = GitHubAdapter(token="abc")
    assert adapter._session.headers["Authorization"] == "token abc"
    assert adapter._session.headers["Accept"] == "application/vnd.github.v3+json"
    assert "Authorization" not in GitHubAdapter()._session.headers


def test_latest_release_success(adapter: GitHubAdapter) -> None:
    """Latest() returns Release with tag and published_at."""
    data = {
        "tag_name": "v2.3.0",
        "name": "2.3.0",
        "published_at": "2024-01-01T00:00:00Z",
        "created_at": "2023-12-31T23:00:00Z",
        "html_url": "https://github.com/acme/widgets/releases/tag/v2.3.0",
    }
    with patch.object(adapter._session, "request", return_value=_response(200, data)) as req:
        release = adapter.latest(REPO)

    assert isinstance(release, Release)
    assert release.tag == "v2.3.0"
    assert release.published_at == datetime(2024, 1, 1, tzinfo=UTC)
    assert req.call_args[0][0] == "GET"
    assert req.call_args[0][1] == "https://api.github.com/repos/acme/widgets/releases/latest"
    assert req.call_args[1]["timeout"] == 30


def test_latest_release_404_raises_not_found(adapter: GitHubAdapter) -> None:
    with patch.object(adapter._session, "request", return_value=_response(404, text="Not Found")):
        with pytest.raises(LatestReleaseNotFound) as exc_info:
            adapter.latest(REPO)
    assert exc_info.value.repository == REPO
    assert "acme/widgets" in str(exc_info.value)


def test_latest_release_api_error_raises(adapter: GitHubAdapter) -> None:
    with patch.object(adapter._session, "request", return_value=_response(500, text="Server Error")):
        with pytest.raises(GitHubError) as exc_info:
            adapter.latest(REPO)
    assert not isinstance(exc_info.value, LatestReleaseNotFound)
    assert "500" in str(exc_info.value)


def test_get_branch_success(adapter: GitHubAdapter) -> None:
    """Get() returns Branch with head commit sha."""
    data = {"name": "2.x", "commit": {"sha": "abc123", "url": "..."}, "protected": True}
    with patch.object(adapter._session, "request", return_value=_response(200, data)) as req:
        branch = adapter.get(REPO, "2.x")
    assert isinstance(branch, Branch)
    assert branch.name == "2.x"
    assert branch.commit is not None
    assert branch.commit.sha == "abc123"
    assert req.call_args[0][1].endswith("/repos/acme/widgets/branches/2.x")


def test_get_branch_404_raises_branch_not_found(adapter: GitHubAdapter) -> None:
    with patch.object(adapter._session, "request", return_value=_response(404, text="Branch not found")):
        with pytest.raises(BranchNotFound) as exc_info:
            adapter.get(REPO, "9.x")
    assert exc_info.value.name == "9.x"


def test_combined_status_success(adapter: GitHubAdapter) -> None:
    """Combined() maps state and individual statuses."""
    data = {
        "state": "failure",
        "sha": "abc123",
        "total_count": 2,
        "statuses": [
            {"context": "ci/tests", "state": "success", "description": "ok", "target_url": None},
            {"context": "ci/lint", "state": "failure", "description": "lint failed"},
        ],
    }
    with patch.object(adapter._session, "request", return_value=_response(200, data)) as req:
        status = adapter.combined(REPO, "abc123")
    assert isinstance(status, CombinedStatus)
    assert status.state == "failure"
    assert not status.is_successful()
    assert status.total_count == 2
    assert [s.context for s in status.statuses] == ["ci/tests", "ci/lint"]
    assert "/repos/acme/widgets/commits/abc123/status" in req.call_args[0][1]


def test_combined_status_error_uses_api_message(adapter: GitHubAdapter) -> None:
    resp = _response(422, {"message": "No commit found for SHA: nope"}, text="{...}")
    with patch.object(adapter._session, "request", return_value=resp):
        with pytest.raises(GitHubError) as exc_info:
            adapter.combined(REPO, "nope")
    assert str(exc_info.value) == "422: No commit found for SHA: nope"


def test_all_pull_requests_maps_merged_state_to_closed(adapter: GitHubAdapter) -> None:
    """All() sends state=closed for merged and keeps base; maps merged_at."""
    data = [
        {
            "number": 12,
            "title": "Add feature",
            "body": None,
            "user": {"login": "bob", "html_url": "https://github.com/bob"},
            "base": {"ref": "2.x"},
            "merged_at": "2024-02-10T08:30:00Z",
            "labels": [{"name": "minor"}, {"name": "docs"}],
            "html_url": "https://github.com/acme/widgets/pull/12",
        },
        {
            "number": 13,
            "title": "Closed without merge",
            "user": {"login": "carol"},
            "base": {"ref": "2.x"},
            "merged_at": None,
            "labels": [],
        },
    ]
    with patch.object(adapter._session, "request", return_value=_response(200, data)) as req:
        prs = adapter.all(REPO, {"state": "merged", "base": "2.x"})

    assert all(isinstance(pr, PullRequest) for pr in prs)
    assert [pr.number for pr in prs] == [12, 13]
    assert prs[0].is_merged()
    assert prs[0].merged_at == datetime(2024, 2, 10, 8, 30, tzinfo=UTC)
    assert prs[0].user.login == "bob"
    assert prs[0].base_branch == "2.x"
    assert prs[0].labels == ("minor", "docs")
    assert prs[0].body == ""
    assert not prs[1].is_merged()
    assert prs[1].merged_at is None

    assert "/repos/acme/widgets/pulls" in req.call_args[0][1]
    params = req.call_args[1]["params"]
    assert params["state"] == "closed"
    assert params["base"] == "2.x"
    assert params["per_page"] == 100


def test_all_pull_requests_explicit_merged_flag_wins(adapter: GitHubAdapter) -> None:
    data = [{"number": 1, "title": "x", "user": {"login": "a"}, "base": {"ref": "2.x"}, "merged": True, "merged_at": None}]
    with patch.object(adapter._session, "request", return_value=_response(200, data)):
        prs = adapter.all(REPO, {"state": "merged", "base": "2.x"})
    assert prs[0].is_merged()
    assert prs[0].merged_at is None


def test_all_pull_requests_open_state_passed_through(adapter: GitHubAdapter) -> None:
    with patch.object(adapter._session, "request", return_value=_response(200, [])) as req:
        assert adapter.all(REPO, {"state": "open"}) == []
    params = req.call_args[1]["params"]
    assert params["state"] == "open"
    assert "base" not in params


def test_all_pull_requests_rate_limited_raises(adapter: GitHubAdapter) -> None:
    resp = _response(403, {"message": "API rate limit exceeded"}, text="Forbidden")
    with patch.object(adapter._session, "request", return_value=resp):
        with pytest.raises(GitHubError) as exc_info:
            adapter.all(REPO, {"state": "merged", "base": "2.x"})
    assert "rate limit" in str(exc_info.value).lower()


def test_custom_api_url_and_timeout() -> None:
    adapter = GitHubAdapter(token="t", api_url="https://ghe.example.com/api/v3/", timeout=5)
    with patch.object(adapter._session, "request", return_value=_response(200, [])) as req:
        adapter.all(REPO, {})
    assert req.call_args[0][1] == "https://ghe.example.com/api/v3/repos/acme/widgets/pulls"
    assert req.call_args[1]["timeout"] == 5


@pytest.mark.parametrize(
    "call",
    [lambda a: a.latest(REPO), lambda a: a.get(REPO, "2.x")],
    ids=["latest", "get"],
)
def test_non_404_error_uses_api_message(adapter: GitHubAdapter, call) -> None:
    """Server errors on release and branch lookups carry the API message, not the raw body."""
    resp = _response(500, {"message": "Server Error"}, text='{"message": "Server Error"}')
    with patch.object(adapter._session, "request", return_value=resp):
        with pytest.raises(GitHubError) as exc_info:
            call(adapter)
    assert not isinstance(exc_info.value, (LatestReleaseNotFound, BranchNotFound))
    assert str(exc_info.value) == "500: Server Error"


def test_get_branch_without_head_commit_raises(adapter: GitHubAdapter) -> None:
    """A branch payload without commit sha is a platform error."""
    with patch.object(adapter._session, "request", return_value=_response(200, {"name": "2.x", "commit": None})):
        with pytest.raises(GitHubError, match="no head commit"):
            adapter.get(REPO, "2.x")
