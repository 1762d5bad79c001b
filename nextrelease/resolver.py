"""Determine what goes into the next release of a project.

Resolution order: stable branch, latest published release, merged pull
requests since that release, head commit of the stable branch and its
combined status. Missing branch or release and an empty changeset raise
typed errors; other lookup failures propagate unchanged.
"""

import logging
from datetime import datetime

from nextrelease.errors import CannotDetermineNextRelease, NoPullRequestsMergedSinceLastRelease
from nextrelease.github.api import Branches, LatestReleaseNotFound, PullRequests, Releases, Statuses
from nextrelease.models import Branch, NextRelease, NoBranchesAvailable, Project, PullRequest, Repository

LOG = logging.getLogger("nextrelease.resolver")

DEFAULT_BOT_USERNAME = "SonataCI"


class NextReleaseResolver:
    """Build a NextRelease from the platform lookups."""

    def __init__(
        self,
        releases: Releases,
        branches: Branches,
        statuses: Statuses,
        pull_requests: PullRequests,
        bot_username: str | None = DEFAULT_BOT_USERNAME,
    ) -> None:
        self._releases = releases
        self._branches = branches
        self._statuses = statuses
        self._pull_requests = pull_requests
        self._bot_username = bot_username or None

    def __call__(self, project: Project) -> NextRelease:
        return self.resolve(project)

    def resolve(self, project: Project) -> NextRelease:
        repository = project.repository

        try:
            branch = project.stable_branch()
        except NoBranchesAvailable as e:
            raise CannotDetermineNextRelease.for_project(project, e) from e

        try:
            current_release = self._releases.latest(repository)
        except LatestReleaseNotFound as e:
            raise CannotDetermineNextRelease.for_project(project, e) from e
        LOG.debug(
            "%s: branch=%s latest=%s published_at=%s",
            repository.full_name,
            branch.name,
            current_release.tag,
            current_release.published_at.isoformat(),
        )

        pull_requests = self._find_pull_requests_since(repository, branch, current_release.published_at)
        if not pull_requests:
            raise NoPullRequestsMergedSinceLastRelease.for_project(project, current_release.published_at)

        branch_to_release = self._branches.get(repository, branch.name)
        head_sha = branch_to_release.commit.sha
        combined_status = self._statuses.combined(repository, head_sha)
        LOG.debug(
            "%s: %d pull request(s), %s is %s",
            repository.full_name,
            len(pull_requests),
            head_sha,
            combined_status.state,
        )

        return NextRelease.from_values(project, current_release.tag, combined_status, pull_requests)

    def _find_pull_requests_since(
        self,
        repository: Repository,
        branch: Branch,
        since: datetime,
    ) -> list[PullRequest]:
        merged = self._pull_requests.all(repository, {"state": "merged", "base": branch.name})
        return [pr for pr in merged if self._qualifies(pr, since)]

    def _qualifies(self, pr: PullRequest, since: datetime) -> bool:
        if self._bot_username is not None and pr.user.login == self._bot_username:
            return False
        if not pr.is_merged():
            return False
        # Merged PRs without a merge time are kept.
        if pr.merged_at is not None and pr.merged_at <= since:
            return False
        return True
