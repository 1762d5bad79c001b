"""Next release snapshot."""

from pydantic import BaseModel, ConfigDict

from nextrelease.models.project import Project
from nextrelease.models.pull_request import PullRequest
from nextrelease.models.status import CombinedStatus


class NextRelease(BaseModel):
    """What would go into the next release of a project.

    Computed per resolution and never persisted: the previous tag is the
    baseline, the combined status belongs to the stable branch head and the
    pull requests are those merged since the baseline was published.
    """

    model_config = ConfigDict(frozen=True)

    project: Project
    current_tag: str
    combined_status: CombinedStatus
    pull_requests: tuple[PullRequest, ...]

    @classmethod
    def from_values(
        cls,
        project: Project,
        current_tag: str,
        combined_status: CombinedStatus,
        pull_requests: list[PullRequest],
    ) -> "NextRelease":
        return cls(
            project=project,
            current_tag=current_tag,
            combined_status=combined_status,
            pull_requests=tuple(pull_requests),
        )

    def is_green(self) -> bool:
        return self.combined_status.is_successful()

    def labels(self) -> list[str]:
        """Distinct labels across pull requests, in first-seen order."""
        seen: list[str] = []
        for pr in self.pull_requests:
            for label in pr.labels:
                if label not in seen:
                    seen.append(label)
        return seen
