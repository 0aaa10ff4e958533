from formnotify.adapters.mattermost import form_document
from formnotify.schemas.event import FormFinishedEvent
from formnotify.schemas.webhook import Webhook


def form_finished(event: FormFinishedEvent) -> Webhook:
    """Ntfy takes the message as body and the rest as headers."""
    headers = {
        "X-Title": [event.title],
        "X-Markdown": ["yes"],
    }
    if event.link_url:
        headers["X-Click"] = [event.link_url]
    return Webhook(data=form_document(event), headers=headers)
