"""Abstract capabilities the resolver consumes from the hosting platform."""

from abc import ABC, abstractmethod
from typing import Dict, List

from nextrelease.models import Branch, CombinedStatus, PullRequest, Release, Repository


class GitHubError(Exception):
    """Raised when a GitHub API call fails."""

    pass


class LatestReleaseNotFound(GitHubError):
    """Raised when a repository has no published release."""

    def __init__(self, repository: Repository) -> None:
        super().__init__(f"Latest release not found for {repository.full_name}")
        self.repository = repository


class BranchNotFound(GitHubError):
    """Raised when a branch does not exist in the repository."""

    def __init__(self, repository: Repository, name: str) -> None:
        super().__init__(f"Branch {name} not found in {repository.full_name}")
        self.repository = repository
        self.name = name


class Releases(ABC):
    @abstractmethod
    def latest(self, repository: Repository) -> Release:
        """Return the most recently published release."""
        ...


class Branches(ABC):
    @abstractmethod
    def get(self, repository: Repository, name: str) -> Branch:
        """Fetch branch; the returned branch always carries its head commit."""
        ...


class Statuses(ABC):
    @abstractmethod
    def combined(self, repository: Repository, sha: str) -> CombinedStatus:
        """Fetch the combined status of a commit."""
        ...


class PullRequests(ABC):
    @abstractmethod
    def all(self, repository: Repository, filters: Dict[str, str]) -> List[PullRequest]:
        """Search pull requests; filters carry "state" and "base"."""
        ...
