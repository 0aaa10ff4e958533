import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IntegrationType(enum.IntEnum):
    GENERIC = 0
    MATTERMOST = 1
    SLACK = 2
    NTFY = 3


class Webhook(BaseModel):
    """Rendered payload handed to the delivery client."""

    model_config = ConfigDict(frozen=True)

    data: Any
    headers: dict[str, list[str]] = Field(default_factory=dict)


class AdapterDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    icon: str
    color: str | None = None
