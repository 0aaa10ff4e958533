from formnotify.schemas.event import FormFinishedEvent
from formnotify.schemas.webhook import Webhook


def form_finished(event: FormFinishedEvent) -> Webhook:
    return Webhook(data=event.model_dump(mode="json"))
