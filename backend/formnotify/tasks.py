import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx

from formnotify.adapters.registry import render
from formnotify.celery_app import celery
from formnotify.services.delivery import AdapterClient, DeliveryError

logger = logging.getLogger(__name__)

# Constants for retry logic
BASE_DELAY = 30  # seconds
MAX_ATTEMPTS = 5


@celery.task(bind=True)
def deliver_notification(
    self,
    payload: dict[str, Any],
    integration_type: int,
    event_kind: str,
    endpoint_id: str,
    project: str | None = None,
    attempt: int = 1,
):
    logger.info(
        f"Starting deliver_notification for endpoint {endpoint_id}, "
        f"integration={integration_type}, attempt={attempt}"
    )
    if self.request.id:
        logger.info(f"Task ID: {self.request.id}")

    # Render errors are final, a retry would render the same payload again
    webhook = render(payload, integration_type, event_kind)

    client = AdapterClient.from_settings()
    try:
        r = client.send(
            webhook, event_kind=event_kind, endpoint_id=endpoint_id, project=project
        )
        status = r.status_code
        success = True
    except DeliveryError as exc:
        status = exc.status_code
        success = False
    except httpx.HTTPError as exc:
        logger.error(f"Transport error delivering to endpoint {endpoint_id}: {exc}")
        status = 0
        success = False

    if not success and attempt < MAX_ATTEMPTS:
        backoff = BASE_DELAY * (2 ** (attempt - 1))  # 30s, 60s, 120s, ...
        next_run = datetime.now(UTC) + timedelta(seconds=backoff)
        logger.info(f"Scheduling attempt {attempt + 1} at {next_run.isoformat()}")
        deliver_notification.apply_async(
            args=[payload, integration_type, event_kind, endpoint_id],
            kwargs={"project": project, "attempt": attempt + 1},
            eta=next_run,
        )
    elif not success:
        logger.error(
            f"Giving up on endpoint {endpoint_id} after {attempt} attempts"
        )

    return {"status": status}
