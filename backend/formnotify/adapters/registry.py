from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ValidationError

from formnotify.adapters import generic, mattermost, ntfy, slack
from formnotify.adapters.errors import (
    InvalidInput,
    TypeMismatch,
    UnsupportedEventKind,
    UnsupportedIntegration,
)
from formnotify.schemas.event import EVENT_MODELS, EventType
from formnotify.schemas.webhook import AdapterDetail, IntegrationType, Webhook

Renderer = Callable[[Any], Webhook]


@dataclass(frozen=True)
class Adapter:
    detail: AdapterDetail
    renderers: Mapping[EventType, Renderer]


class AdapterRegistry:
    """Read-only mapping from integration type to its adapter."""

    def __init__(self, adapters: Mapping[IntegrationType, Adapter]):
        self._adapters = MappingProxyType(dict(adapters))

    def integrations(self) -> list[IntegrationType]:
        return sorted(self._adapters)

    def get(self, integration_type: IntegrationType | int) -> Adapter:
        try:
            integration_type = IntegrationType(integration_type)
        except (TypeError, ValueError):
            raise UnsupportedIntegration(
                f"Unknown integration type {integration_type!r}"
            )
        adapter = self._adapters.get(integration_type)
        if adapter is None:
            raise UnsupportedIntegration(
                f"No renderer registered for {integration_type.name}"
            )
        return adapter

    def detail(self, integration_type: IntegrationType | int) -> AdapterDetail:
        return self.get(integration_type).detail

    def details(self) -> dict[IntegrationType, AdapterDetail]:
        return {key: adapter.detail for key, adapter in self._adapters.items()}

    def render(
        self,
        event: Any,
        integration_type: IntegrationType | int,
        event_kind: EventType | str,
    ) -> Webhook:
        if event is None:
            raise InvalidInput("Event not defined")

        adapter = self.get(integration_type)

        try:
            event_kind = EventType(event_kind)
        except (TypeError, ValueError):
            raise UnsupportedEventKind(f"Unknown event kind {event_kind!r}")
        renderer = adapter.renderers.get(event_kind)
        if renderer is None:
            raise UnsupportedEventKind(
                f"{adapter.detail.name} cannot render {event_kind.value}"
            )

        return renderer(_coerce(event, EVENT_MODELS[event_kind], event_kind))


def _coerce(event: Any, model: type[BaseModel], event_kind: EventType) -> BaseModel:
    if isinstance(event, model):
        return event
    if isinstance(event, Mapping):
        try:
            return model.model_validate(dict(event))
        except ValidationError as e:
            raise TypeMismatch(
                f"Payload does not match {model.__name__} for {event_kind.value}: {e}"
            ) from e
    raise TypeMismatch(
        f"Expected {model.__name__} for {event_kind.value}, got {type(event).__name__}"
    )


@lru_cache
def get_registry() -> AdapterRegistry:
    return AdapterRegistry(
        {
            IntegrationType.GENERIC: Adapter(
                AdapterDetail(name="Generic Webhook", icon="logos:webhooks"),
                {EventType.FORM_FINISHED: generic.form_finished},
            ),
            IntegrationType.MATTERMOST: Adapter(
                AdapterDetail(name="Mattermost", icon="logos:mattermost-icon"),
                {EventType.FORM_FINISHED: mattermost.form_finished},
            ),
            IntegrationType.SLACK: Adapter(
                AdapterDetail(name="Slack", icon="logos:slack-icon"),
                {EventType.FORM_FINISHED: slack.form_finished},
            ),
            IntegrationType.NTFY: Adapter(
                AdapterDetail(
                    name="Ntfy", icon="simple-icons:ntfy", color="#10b981"
                ),
                {EventType.FORM_FINISHED: ntfy.form_finished},
            ),
        }
    )


def render(
    event: Any,
    integration_type: IntegrationType | int,
    event_kind: EventType | str,
    registry: AdapterRegistry | None = None,
) -> Webhook:
    return (registry or get_registry()).render(event, integration_type, event_kind)
