import logging

from formnotify.adapters.common import CONTACT_TITLE, contact_entries, node_label
from formnotify.builders.blocks import BlockBuilder, RichTextBuilder
from formnotify.schemas.event import (
    ChoiceInfo,
    ChoiceNode,
    ContactInfo,
    ContactNode,
    FormFinishedEvent,
    RatingInfo,
    RatingNode,
    SelectInfo,
    SelectNode,
)
from formnotify.schemas.webhook import Webhook

logger = logging.getLogger(__name__)


def _escape(value: str) -> str:
    # Control characters of Slack mrkdwn
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _contact(title: str, contact: ContactInfo | None) -> RichTextBuilder:
    rich = RichTextBuilder()
    entries = contact_entries(contact)
    if entries:
        rich.title(title)
        rich.items([f"{label}: {value}" for label, value in entries])
    return rich


def _choice(title: str, choice: ChoiceInfo) -> RichTextBuilder:
    rich = RichTextBuilder().title(title)
    for element in choice.elements:
        if element.label:
            rich.item(element.label)
        if element.short_answer:
            rich.preformatted(element.short_answer)
        if element.long_answer:
            rich.preformatted(element.long_answer)
    return rich


def _select(title: str, select: SelectInfo) -> RichTextBuilder:
    return RichTextBuilder().title(select.label or title).items(select.options)


def _rating(title: str, rating: RatingInfo) -> RichTextBuilder:
    rows = [f"{element.label}: {element.value}/10 ⭐" for element in rating.elements]
    return RichTextBuilder().title(rating.label or title).items(rows)


def form_finished(event: FormFinishedEvent) -> Webhook:
    blocks = BlockBuilder()
    link_text = _escape(event.link_text).replace("|", "¦")
    blocks.section(f"{_escape(event.title)} <{_escape(event.link_url)}|{link_text}>")
    blocks.divider()

    contact = _contact(CONTACT_TITLE, event.contact)
    if contact:
        blocks.rich_text(contact)

    for node in event.nodes:
        title = node_label(node.translation)
        if isinstance(node, ChoiceNode):
            rich = _choice(title, node.choice)
        elif isinstance(node, SelectNode):
            rich = _select(title, node.select)
        elif isinstance(node, ContactNode):
            rich = _contact(node_label(node.translation, CONTACT_TITLE), node.contact)
        elif isinstance(node, RatingNode):
            rich = _rating(title, node.rating)
        else:
            logger.warning(f"Skipping form node with unknown kind {node.kind!r}")
            continue

        if rich:
            blocks.rich_text(rich)
        blocks.divider()

    return Webhook(data={"blocks": blocks.build()})
