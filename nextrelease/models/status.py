"""Commit status models."""

from pydantic import BaseModel, ConfigDict

SUCCESS = "success"


class Status(BaseModel):
    """Single status reported by one CI context."""

    model_config = ConfigDict(frozen=True)

    context: str
    state: str
    description: str | None = None
    target_url: str | None = None


class CombinedStatus(BaseModel):
    """Aggregate status (success, pending, failure, error) of a commit."""

    model_config = ConfigDict(frozen=True)

    sha: str
    state: str
    total_count: int = 0
    statuses: tuple[Status, ...] = ()

    def is_successful(self) -> bool:
        return self.state == SUCCESS
