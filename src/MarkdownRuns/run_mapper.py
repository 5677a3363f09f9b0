from __future__ import annotations

from typing import Iterable, List, Sequence

from .model import (
    LIST_ITEM_TYPES,
    Bold,
    Code,
    CodeBlock,
    Header,
    Image,
    Italic,
    LineBreak,
    Link,
    MarkdownElement,
    OrderedListItem,
    Paragraph,
    Run,
    StyleConfiguration,
    Table,
    Text,
    UnorderedListItem,
)

LINE_SEPARATOR = "\n"
BULLET_PREFIX = "• "
IMAGE_MARKER = "🖼 "
TABLE_CELL_SEPARATOR = " | "


def map_elements(elements: Sequence[MarkdownElement], configuration: StyleConfiguration | None = None) -> List[Run]:
    """Map an element sequence to styled runs, keeping element order."""
    config = configuration or StyleConfiguration()
    runs: List[Run] = []
    for index, element in enumerate(elements):
        following = elements[index + 1] if index + 1 < len(elements) else None
        _map_element(element, following, config, runs)
    return runs


def needs_separator(current: MarkdownElement, following: MarkdownElement | None) -> bool:
    """Whether a paragraph boundary at ``current`` gets its own line separator.

    Headers and list items end with a separator of their own, so only a
    paragraph marker followed by one of them (or by another paragraph)
    needs one.
    """
    if not isinstance(current.type, Paragraph) or following is None:
        return False
    return isinstance(following.type, (Header, Paragraph) + LIST_ITEM_TYPES)


def plain_text(runs: Iterable[Run]) -> str:
    return "".join(run.text for run in runs)


def _map_element(
    element: MarkdownElement,
    following: MarkdownElement | None,
    config: StyleConfiguration,
    runs: List[Run],
) -> None:
    kind = element.type
    if isinstance(kind, Text):
        runs.append(Run(element.content, config.text))
    elif isinstance(kind, Bold):
        runs.append(Run(element.content, config.bold))
    elif isinstance(kind, Italic):
        runs.append(Run(element.content, config.italic))
    elif isinstance(kind, Code):
        runs.append(Run(element.content, config.code))
    elif isinstance(kind, CodeBlock):
        runs.append(Run(element.content, config.code_block))
    elif isinstance(kind, Header):
        runs.append(Run(element.content, config.heading(kind.level)))
        runs.append(_separator(config))
    elif isinstance(kind, (UnorderedListItem, OrderedListItem)):
        prefix = BULLET_PREFIX if isinstance(kind, UnorderedListItem) else f"{kind.number}. "
        runs.append(Run(prefix, config.list_prefix))
        inner = kind.inner
        for index, child in enumerate(inner):
            _map_element(child, inner[index + 1] if index + 1 < len(inner) else None, config, runs)
        runs.append(_separator(config))
    elif isinstance(kind, Link):
        runs.append(Run(kind.title, config.link, underline=True, url=kind.url))
    elif isinstance(kind, Image):
        runs.append(Run(IMAGE_MARKER + kind.title, config.text))
    elif isinstance(kind, LineBreak):
        runs.append(_separator(config))
    elif isinstance(kind, Paragraph):
        if needs_separator(element, following):
            runs.append(_separator(config))
    elif isinstance(kind, Table):
        runs.append(Run(element.content or _table_text(kind), config.text))
    else:
        raise TypeError(f"Unsupported element type: {type(kind).__name__}")


def _separator(config: StyleConfiguration) -> Run:
    return Run(LINE_SEPARATOR, config.text)


def _table_text(table: Table) -> str:
    lines = [TABLE_CELL_SEPARATOR.join(table.headers)] if table.headers else []
    lines.extend(TABLE_CELL_SEPARATOR.join(row) for row in table.rows)
    return LINE_SEPARATOR.join(lines)
