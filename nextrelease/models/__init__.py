"""Value objects for projects, releases, pull requests and statuses (Pydantic)."""

from nextrelease.models.branch import Branch, Commit
from nextrelease.models.next_release import NextRelease
from nextrelease.models.project import NoBranchesAvailable, Project
from nextrelease.models.pull_request import PullRequest, User
from nextrelease.models.release import Release
from nextrelease.models.repository import Repository
from nextrelease.models.status import CombinedStatus, Status

__all__ = [
    "Branch",
    "CombinedStatus",
    "Commit",
    "NextRelease",
    "NoBranchesAvailable",
    "Project",
    "PullRequest",
    "Release",
    "Repository",
    "Status",
    "User",
]
