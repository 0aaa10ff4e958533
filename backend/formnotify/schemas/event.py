import enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class EventType(str, enum.Enum):
    FORM_FINISHED = "form.finished"


class NodeKind(str, enum.Enum):
    CHOICE = "choice"
    SELECT = "select"
    CONTACT = "contact"
    RATING = "rating"


class ContactInfo(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    company: str = ""
    phone: str = ""
    details: str = ""


class SelectInfo(BaseModel):
    label: str = ""
    options: list[str] = Field(default_factory=list)


class RatingElement(BaseModel):
    label: str = ""
    value: int = Field(..., ge=0, le=10)


class RatingInfo(BaseModel):
    label: str = ""
    elements: list[RatingElement] = Field(default_factory=list)


class ChoiceElement(BaseModel):
    label: str = ""
    short_answer: str | None = None
    long_answer: str | None = None


class ChoiceInfo(BaseModel):
    elements: list[ChoiceElement] = Field(default_factory=list)


class ChoiceNode(BaseModel):
    kind: Literal["choice"] = "choice"
    translation: str = ""
    choice: ChoiceInfo


class SelectNode(BaseModel):
    kind: Literal["select"] = "select"
    translation: str = ""
    select: SelectInfo


class ContactNode(BaseModel):
    kind: Literal["contact"] = "contact"
    translation: str = ""
    contact: ContactInfo


class RatingNode(BaseModel):
    kind: Literal["rating"] = "rating"
    translation: str = ""
    rating: RatingInfo


class UnknownNode(BaseModel):
    """A node whose kind this version cannot render. Extra fields are kept."""

    model_config = ConfigDict(extra="allow")

    kind: Any = None
    translation: str = ""


_KNOWN_KINDS = {kind.value for kind in NodeKind}


def _node_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("kind")
    else:
        kind = getattr(value, "kind", None)
    if isinstance(kind, NodeKind):
        return kind.value
    if isinstance(kind, str) and kind in _KNOWN_KINDS:
        return kind
    return "unknown"


FormNode = Annotated[
    Union[
        Annotated[ChoiceNode, Tag("choice")],
        Annotated[SelectNode, Tag("select")],
        Annotated[ContactNode, Tag("contact")],
        Annotated[RatingNode, Tag("rating")],
        Annotated[UnknownNode, Tag("unknown")],
    ],
    Discriminator(_node_tag),
]


class FormFinishedEvent(BaseModel):
    title: str
    link_text: str = ""
    link_url: str = ""
    form_translation: str = ""
    contact: ContactInfo | None = None
    nodes: list[FormNode] = Field(default_factory=list)


# Payload model expected for each event kind
EVENT_MODELS: dict[EventType, type[BaseModel]] = {
    EventType.FORM_FINISHED: FormFinishedEvent,
}
