"""GitHub capability interfaces and the REST adapter implementing them."""

from nextrelease.github.adapter import GitHubAdapter
from nextrelease.github.api import (
    BranchNotFound,
    Branches,
    GitHubError,
    LatestReleaseNotFound,
    PullRequests,
    Releases,
    Statuses,
)

__all__ = [
    "BranchNotFound",
    "Branches",
    "GitHubAdapter",
    "GitHubError",
    "LatestReleaseNotFound",
    "PullRequests",
    "Releases",
    "Statuses",
]
