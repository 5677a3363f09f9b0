from __future__ import annotations

from typing import List, Tuple

from .model import (
    Bold,
    Code,
    ElementType,
    Image,
    Italic,
    Link,
    MarkdownElement,
    SourceSpan,
    Text,
)

EMPHASIS_MARKERS = "*_"

_Match = Tuple[ElementType, str, int]


def parse_inline(line: str, lineno: int = 1, offset: int = 0) -> List[MarkdownElement]:
    """Tokenize one line into inline elements.

    The scan is a single left-to-right pass with one pending-text buffer.
    A marker that cannot be closed on this line stays in the buffer as
    literal text. ``lineno`` and ``offset`` only place the source spans of
    the returned elements; they never change what is recognized.
    """
    result: List[MarkdownElement] = []
    pending: list[str] = []
    pending_start = 0
    i = 0
    while i < len(line):
        char = line[i]
        match: _Match | None = None
        if char == "`":
            match = _match_code(line, i)
        elif char == "[":
            match = _match_link(line, i)
        elif char == "!" and line.startswith("[", i + 1):
            match = _match_image(line, i)
        elif char in EMPHASIS_MARKERS:
            match = _match_emphasis(line, i, char)

        if match is None:
            if not pending:
                pending_start = i
            pending.append(char)
            i += 1
            continue

        if pending:
            result.append(_element(Text(), "".join(pending), lineno, offset + pending_start, offset + i))
            pending = []
        element_type, content, end = match
        result.append(_element(element_type, content, lineno, offset + i, offset + end))
        i = end

    if pending:
        result.append(_element(Text(), "".join(pending), lineno, offset + pending_start, offset + len(line)))
    return result


def _element(element_type: ElementType, content: str, lineno: int, start: int, end: int) -> MarkdownElement:
    return MarkdownElement(type=element_type, content=content, span=SourceSpan(lineno, start, end))


def _match_code(line: str, start: int) -> _Match | None:
    close = line.find("`", start + 1)
    if close == -1:
        return None
    return Code(), line[start + 1 : close], close + 1


def _match_link(line: str, start: int) -> _Match | None:
    target = _match_target(line, start + 1)
    if target is None:
        return None
    title, url, end = target
    return Link(title=title, url=url), title, end


def _match_image(line: str, start: int) -> _Match | None:
    # title starts after the "![" pair
    target = _match_target(line, start + 2)
    if target is None:
        return None
    title, url, end = target
    return Image(title=title, url=url), title, end


def _match_target(line: str, title_start: int) -> tuple[str, str, int] | None:
    """Match ``title](url)`` beginning at ``title_start``."""
    title_end = line.find("]", title_start)
    if title_end == -1 or not line.startswith("(", title_end + 1):
        return None
    url_end = line.find(")", title_end + 2)
    if url_end == -1:
        return None
    return line[title_start:title_end], line[title_end + 2 : url_end], url_end + 1


def _match_emphasis(line: str, start: int, marker: str) -> _Match | None:
    run = marker * 2 if line.startswith(marker * 2, start) else marker
    close = line.find(run, start + len(run))
    if close == -1:
        return None
    element_type: ElementType = Bold() if len(run) == 2 else Italic()
    return element_type, line[start + len(run) : close], close + len(run)
