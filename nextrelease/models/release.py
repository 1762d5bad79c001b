"""Published release model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Release(BaseModel):
    """Previously published release."""

    model_config = ConfigDict(frozen=True)

    tag: str
    published_at: datetime
    name: str | None = None
    html_url: str | None = None
