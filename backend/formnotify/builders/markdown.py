class MarkdownBuilder:
    """
    Accumulates markdown blocks in order and joins them on build().

    Consecutive bullets form one list; headings and tables are blocks of
    their own, separated from their neighbours by a blank line.
    """

    def __init__(self) -> None:
        self._blocks: list[list[str]] = []
        self._in_list = False

    def _block(self, *lines: str) -> "MarkdownBuilder":
        self._blocks.append(list(lines))
        self._in_list = False
        return self

    def heading(self, level: int, text: str) -> "MarkdownBuilder":
        if not 2 <= level <= 4:
            raise ValueError(f"Unsupported heading level {level}")
        return self._block(f"{'#' * level} {_inline(text)}")

    def h2(self, text: str) -> "MarkdownBuilder":
        return self.heading(2, text)

    def h3(self, text: str) -> "MarkdownBuilder":
        return self.heading(3, text)

    def h4(self, text: str) -> "MarkdownBuilder":
        return self.heading(4, text)

    def bullet(self, text: str) -> "MarkdownBuilder":
        # An empty bullet is a placeholder for the badges that follow
        line = f"- {_inline(text)}" if text else "-"
        if self._in_list:
            self._blocks[-1].append(line)
        else:
            self._blocks.append([line])
            self._in_list = True
        return self

    def bullet_list(self, items: list[str]) -> "MarkdownBuilder":
        for item in items:
            self.bullet(item)
        return self

    def badge(self, text: str) -> "MarkdownBuilder":
        """Append an inline code badge to the last line written."""
        if not self._blocks:
            raise ValueError("Badge needs a preceding line")
        token = _inline(text).replace("`", "'")
        self._blocks[-1][-1] += f" `{token}`"
        return self

    def table(self, header: list[str], rows: list[list[str]]) -> "MarkdownBuilder":
        lines = [
            _row(header),
            _row(["---"] * len(header)),
        ]
        for row in rows:
            if len(row) != len(header):
                raise ValueError(
                    f"Table row has {len(row)} cells, expected {len(header)}"
                )
            lines.append(_row(row))
        return self._block(*lines)

    def build(self) -> str:
        return "\n\n".join("\n".join(lines) for lines in self._blocks)


def bold(text: str) -> str:
    return f"**{text}**"


def link(text: str, url: str) -> str:
    return f"[{text}]({url})"


def _inline(text: str) -> str:
    # Line breaks would end the current block
    return " ".join(str(text).splitlines())


def _row(cells: list[str]) -> str:
    escaped = [_inline(cell).replace("|", "\\|") for cell in cells]
    return "| " + " | ".join(escaped) + " |"
