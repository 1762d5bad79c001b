"""Project model: repository plus maintained branches."""

from pydantic import BaseModel, ConfigDict

from nextrelease.models.branch import Branch
from nextrelease.models.repository import Repository


class NoBranchesAvailable(Exception):
    """Raised when a project has no configured branches."""

    def __init__(self, project_name: str) -> None:
        super().__init__(f"No branches available for project {project_name}")
        self.project_name = project_name


class Project(BaseModel):
    """Project released from one of its branches.

    Branches are ordered newest line first (e.g. ``("5.x", "4.x")``). The
    stable branch is the last one: the oldest maintained line, from which
    releases are currently cut.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    repository: Repository
    branches: tuple[str, ...] = ()

    def stable_branch(self) -> Branch:
        if not self.branches:
            raise NoBranchesAvailable(self.name)
        return Branch(name=self.branches[-1])
