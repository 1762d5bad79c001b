"""Errors raised when the next release cannot be determined."""

from datetime import datetime

from nextrelease.models import Project


class NextReleaseError(Exception):
    """Base class for resolution failures reported to the operator."""

    def __init__(self, message: str, project: Project) -> None:
        super().__init__(message)
        self.project = project


class CannotDetermineNextRelease(NextReleaseError):
    """Stable branch or latest release of the project cannot be established."""

    def __init__(self, message: str, project: Project, cause: Exception) -> None:
        super().__init__(message, project)
        self.cause = cause

    @classmethod
    def for_project(cls, project: Project, cause: Exception) -> "CannotDetermineNextRelease":
        return cls(
            f"Cannot determine next release for {project.repository.full_name}: {cause}",
            project,
            cause,
        )


class NoPullRequestsMergedSinceLastRelease(NextReleaseError):
    """Nothing qualifying was merged after the latest release was published."""

    def __init__(self, message: str, project: Project, since: datetime) -> None:
        super().__init__(message, project)
        self.since = since

    @classmethod
    def for_project(cls, project: Project, since: datetime) -> "NoPullRequestsMergedSinceLastRelease":
        return cls(
            f"No pull requests merged into {project.repository.full_name} since {since.isoformat()}",
            project,
            since,
        )
