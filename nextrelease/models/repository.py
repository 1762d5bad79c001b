"""Repository (owner + name) model."""

from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """Remote hosting location of a project, e.g. sonata-project/SonataAdminBundle."""

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str

    @classmethod
    def from_string(cls, value: str) -> "Repository":
        """Parse "owner/name"; raise ValueError on any other shape."""
        parts = (value or "").strip().split("/")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise ValueError(f"Invalid repository {value!r}, expected owner/name")
        return cls(owner=parts[0], name=parts[1])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name
