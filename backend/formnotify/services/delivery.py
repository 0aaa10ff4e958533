import logging
from typing import Any

import httpx

from formnotify.adapters.registry import AdapterRegistry, render
from formnotify.core.config import Settings, get_settings
from formnotify.schemas.event import EventType
from formnotify.schemas.webhook import IntegrationType, Webhook

logger = logging.getLogger(__name__)


class DeliveryError(Exception):
    def __init__(self, status_code: int, text: str = ""):
        super().__init__(f"Error status code {status_code}")
        self.status_code = status_code
        self.text = text


class AdapterClient:
    """Posts rendered webhooks to the relay service of a project."""

    def __init__(
        self,
        url: str,
        key: str,
        default_project: str = "",
        timeout: float = 10.0,
        registry: AdapterRegistry | None = None,
    ):
        self.url = url.rstrip("/")
        self.key = key
        self.default_project = default_project
        self.timeout = timeout
        self.registry = registry

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "AdapterClient":
        settings = settings or get_settings()
        return cls(
            url=settings.adapter_url,
            key=settings.adapter_key,
            default_project=settings.default_project,
            timeout=settings.request_timeout,
        )

    def send(
        self,
        webhook: Webhook,
        *,
        event_kind: EventType | str,
        endpoint_id: str,
        project: str | None = None,
    ) -> httpx.Response:
        project = project or self.default_project
        if not project:
            raise ValueError("No project given and no default project configured")

        envelope = {
            "data": webhook.data,
            "event_type": EventType(event_kind).value,
            "endpoint_id": endpoint_id,
        }

        # Provider headers first, auth and content type always win
        headers: list[tuple[str, str]] = [
            (name, value)
            for name, values in webhook.headers.items()
            if name.lower() not in ("authorization", "content-type")
            for value in values
        ]
        headers.append(("Authorization", f"Bearer {self.key}"))
        headers.append(("Content-Type", "application/json"))

        url = f"{self.url}/api/v1/projects/{project}/events"
        logger.info(f"Sending {envelope['event_type']} webhook to {url}")
        r = httpx.post(url, json=envelope, headers=headers, timeout=self.timeout)
        logger.info(f"Relay responded {r.status_code}: {r.text}")

        if r.status_code >= 400:
            logger.error(f"Webhook delivery failed with status {r.status_code}")
            raise DeliveryError(r.status_code, r.text)
        return r

    def send_event(
        self,
        event: Any,
        integration_type: IntegrationType | int,
        event_kind: EventType | str,
        *,
        endpoint_id: str,
        project: str | None = None,
    ) -> httpx.Response:
        webhook = render(event, integration_type, event_kind, registry=self.registry)
        return self.send(
            webhook, event_kind=event_kind, endpoint_id=endpoint_id, project=project
        )
