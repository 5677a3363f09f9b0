from __future__ import annotations

import re
from typing import List

from .inline_parser import parse_inline
from .model import (
    CodeBlock,
    Header,
    LineBreak,
    MarkdownElement,
    OrderedListItem,
    Paragraph,
    SourceSpan,
    UnorderedListItem,
)

LINE_BREAK_RE = re.compile(r"\r\n|[\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029]")
HEADER_RE = re.compile(r"(?P<hashes>#{1,6})\s+(?P<title>.+)")
ORDERED_ITEM_RE = re.compile(r"(?P<number>\d+)\.\s+(?P<content>.+)")

UNORDERED_PREFIXES = ("- ", "* ", "+ ")
FENCE = "```"


def parse_markdown(text: str) -> List[MarkdownElement]:
    """Classify every line of ``text`` into block elements, in source order.

    Each line is handled on its own: header, unordered item, ordered item,
    code fence, then inline content behind a paragraph marker. A line that
    matches none of the block rules is never an error.
    """
    elements: List[MarkdownElement] = []
    last_number = 0
    for lineno, raw_line in enumerate(LINE_BREAK_RE.split(text), start=1):
        line = raw_line.strip()
        indent = len(raw_line) - len(raw_line.lstrip())
        span = SourceSpan(lineno, indent, indent + len(line))

        if not line:
            elements.append(MarkdownElement(LineBreak(), "\n", span))
            continue

        header = _parse_header(line, span)
        if header is not None:
            elements.append(header)
            continue

        if line.startswith(UNORDERED_PREFIXES):
            inner = parse_inline(line[2:], lineno, indent + 2)
            elements.append(MarkdownElement(UnorderedListItem(inner=tuple(inner)), "", span))
            continue

        item = _parse_ordered_item(line, indent, span)
        if item is not None:
            # Kept per call and never read back: numbers come from the source.
            last_number = item.type.number
            elements.append(item)
            continue

        if line.startswith(FENCE):
            elements.append(MarkdownElement(CodeBlock(), line[len(FENCE) :], span))
            continue

        inline = parse_inline(line, lineno, indent)
        if inline:
            elements.append(MarkdownElement(Paragraph(), "", span))
            elements.extend(inline)
    return elements


def _parse_header(line: str, span: SourceSpan) -> MarkdownElement | None:
    match = HEADER_RE.fullmatch(line)
    if not match:
        return None
    title = match.group("title").strip()
    if not title:
        return None
    return MarkdownElement(Header(level=len(match.group("hashes"))), title, span)


def _parse_ordered_item(line: str, indent: int, span: SourceSpan) -> MarkdownElement | None:
    match = ORDERED_ITEM_RE.fullmatch(line)
    if not match:
        return None
    try:
        number = int(match.group("number"))
    except ValueError:
        # too many digits for int(); the line falls through to later rules
        return None
    inner = parse_inline(match.group("content"), span.lineno, indent + match.start("content"))
    return MarkdownElement(OrderedListItem(number=number, inner=tuple(inner)), "", span)
