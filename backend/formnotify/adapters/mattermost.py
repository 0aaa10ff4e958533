import logging

from formnotify.adapters.common import contact_entries, node_label
from formnotify.builders.markdown import MarkdownBuilder, bold, link
from formnotify.schemas.event import (
    ChoiceNode,
    ContactInfo,
    ContactNode,
    FormFinishedEvent,
    RatingNode,
    SelectNode,
)
from formnotify.schemas.webhook import Webhook

logger = logging.getLogger(__name__)

ATTACHMENT_COLOR = "#1B5495"


def _contact_list(md: MarkdownBuilder, contact: ContactInfo | None) -> None:
    for label, value in contact_entries(contact):
        md.bullet(f"{bold(label + ':')} {value}")


def form_document(event: FormFinishedEvent) -> str:
    """Render a finished form as a markdown document."""
    md = MarkdownBuilder()
    md.h2(event.form_translation)
    _contact_list(md, event.contact)

    for node in event.nodes:
        if isinstance(node, ChoiceNode):
            md.h3(node_label(node.translation))
            for element in node.choice.elements:
                answers = [
                    answer
                    for answer in (element.short_answer, element.long_answer)
                    if answer
                ]
                if not element.label and not answers:
                    continue
                md.bullet(element.label)
                for answer in answers:
                    md.badge(answer)
        elif isinstance(node, SelectNode):
            md.h3(node_label(node.translation))
            md.h4(node.select.label or node_label(node.translation))
            md.bullet_list([option for option in node.select.options if option])
        elif isinstance(node, ContactNode):
            md.h3(node_label(node.translation))
            _contact_list(md, node.contact)
        elif isinstance(node, RatingNode):
            md.h3(node_label(node.translation))
            md.h4(node.rating.label or node_label(node.translation))
            md.table(
                ["Label", "Rating"],
                [
                    [element.label, f"{element.value}/10 ★"]
                    for element in node.rating.elements
                ],
            )
        else:
            logger.warning(f"Skipping form node with unknown kind {node.kind!r}")

    return md.build()


def form_finished(event: FormFinishedEvent) -> Webhook:
    return Webhook(
        data={
            "text": f"{event.title} {link(event.link_text, event.link_url)}",
            "attachments": [
                {"text": form_document(event), "color": ATTACHMENT_COLOR},
            ],
        }
    )
