from typing import Any

Block = dict[str, Any]


def text(value: str, bold: bool = False) -> Block:
    element: Block = {"type": "text", "text": value}
    if bold:
        element["style"] = {"bold": True}
    return element


def rich_text_section(*elements: Block) -> Block:
    return {"type": "rich_text_section", "elements": list(elements)}


def rich_text_preformatted(value: str) -> Block:
    return {"type": "rich_text_preformatted", "elements": [text(value)]}


def rich_text_list(items: list[str], style: str = "bullet", indent: int = 0) -> Block:
    # Slack list items must be sections; nested lists go through indent
    return {
        "type": "rich_text_list",
        "style": style,
        "indent": indent,
        "elements": [rich_text_section(text(item)) for item in items],
    }


class RichTextBuilder:
    """Collects the ordered child elements of a single rich_text block."""

    def __init__(self) -> None:
        self._elements: list[Block] = []

    def __bool__(self) -> bool:
        return bool(self._elements)

    def title(self, value: str) -> "RichTextBuilder":
        self._elements.append(rich_text_section(text(value, bold=True)))
        return self

    def item(self, value: str) -> "RichTextBuilder":
        """Add a bullet, extending the list directly above when there is one."""
        if not value:
            # Slack rejects empty text elements
            return self
        last = self._elements[-1] if self._elements else None
        if last is not None and last["type"] == "rich_text_list":
            last["elements"].append(rich_text_section(text(value)))
        else:
            self._elements.append(rich_text_list([value]))
        return self

    def items(self, values: list[str]) -> "RichTextBuilder":
        for value in values:
            self.item(value)
        return self

    def preformatted(self, value: str) -> "RichTextBuilder":
        # Preformatted text cannot live inside a list, so it closes the list above
        self._elements.append(rich_text_preformatted(value))
        return self

    def build(self) -> Block:
        return {"type": "rich_text", "elements": list(self._elements)}


class BlockBuilder:
    """Accumulates top level Slack blocks in order."""

    def __init__(self) -> None:
        self._blocks: list[Block] = []

    def section(self, markdown: str) -> "BlockBuilder":
        self._blocks.append(
            {"type": "section", "text": {"type": "mrkdwn", "text": markdown}}
        )
        return self

    def divider(self) -> "BlockBuilder":
        self._blocks.append({"type": "divider"})
        return self

    def rich_text(self, builder: RichTextBuilder) -> "BlockBuilder":
        self._blocks.append(builder.build())
        return self

    def build(self) -> list[Block]:
        return list(self._blocks)
