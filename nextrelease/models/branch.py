"""Branch and commit models."""

from pydantic import BaseModel, ConfigDict


class Commit(BaseModel):
    """Commit reference."""

    model_config = ConfigDict(frozen=True)

    sha: str


class Branch(BaseModel):
    """Named ref in a repository; commit is set once fetched from the platform."""

    model_config = ConfigDict(frozen=True)

    name: str
    commit: Commit | None = None
