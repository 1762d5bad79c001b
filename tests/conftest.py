"""Shared fixtures: the acme/widgets project and its platform data."""

from datetime import UTC, datetime
from unittest.mock import Mock

import pytest

from nextrelease.models import (
    Branch,
    CombinedStatus,
    Commit,
    Project,
    PullRequest,
    Release,
    Repository,
    User,
)

BASELINE = datetime(2024, 1, 1, tzinfo=UTC)


def make_pr(
    number: int,
    login: str,
    merged_at: datetime | None,
    merged: bool = True,
    base: str = "2.x",
    labels: tuple[str, ...] = (),
) -> PullRequest:
    return PullRequest(
        number=number,
        title=f"Change {number}",
        user=User(login=login),
        base_branch=base,
        merged=merged,
        merged_at=merged_at,
        labels=labels,
    )


@pytest.fixture
def project() -> Project:
    return Project(
        name="widgets",
        repository=Repository(owner="acme", name="widgets"),
        branches=("3.x", "2.x"),
    )


@pytest.fixture
def platform() -> Mock:
    """One mock standing in for all four lookups, preloaded with the acme/widgets data."""
    api = Mock()
    api.latest.return_value = Release(tag="v2.3.0", published_at=BASELINE)
    api.all.return_value = [
        make_pr(10, "bot-account", datetime(2024, 2, 1, tzinfo=UTC)),
        make_pr(11, "alice", datetime(2023, 12, 15, tzinfo=UTC)),
        make_pr(12, "bob", datetime(2024, 2, 10, tzinfo=UTC)),
    ]
    api.get.return_value = Branch(name="2.x", commit=Commit(sha="abc123"))
    api.combined.return_value = CombinedStatus(sha="abc123", state="success", total_count=1)
    return api
