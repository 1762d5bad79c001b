"""Pull request and author models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """Platform account."""

    model_config = ConfigDict(frozen=True)

    login: str
    html_url: str | None = None


class PullRequest(BaseModel):
    """Pull request as returned by the pull request search."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    user: User
    base_branch: str
    merged: bool = False
    merged_at: datetime | None = None
    html_url: str | None = None
    labels: tuple[str, ...] = ()
    body: str = ""

    def is_merged(self) -> bool:
        return self.merged
