from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class SourceSpan:
    """Where an element came from: 1-indexed line, 0-indexed columns of the raw line."""

    lineno: int
    col_offset: int
    end_col_offset: int


@dataclass(frozen=True)
class ElementType:
    """Base class for the closed set of element kinds."""


@dataclass(frozen=True)
class Text(ElementType):
    pass


@dataclass(frozen=True)
class Header(ElementType):
    level: int


@dataclass(frozen=True)
class Bold(ElementType):
    pass


@dataclass(frozen=True)
class Italic(ElementType):
    pass


@dataclass(frozen=True)
class Code(ElementType):
    pass


@dataclass(frozen=True)
class CodeBlock(ElementType):
    pass


@dataclass(frozen=True)
class Link(ElementType):
    title: str
    url: str


@dataclass(frozen=True)
class Image(ElementType):
    title: str
    url: str


@dataclass(frozen=True)
class UnorderedListItem(ElementType):
    inner: Tuple["MarkdownElement", ...] = ()


@dataclass(frozen=True)
class OrderedListItem(ElementType):
    number: int
    inner: Tuple["MarkdownElement", ...] = ()


@dataclass(frozen=True)
class LineBreak(ElementType):
    pass


@dataclass(frozen=True)
class Paragraph(ElementType):
    """Boundary marker placed before the inline elements of a paragraph line."""


@dataclass(frozen=True)
class Table(ElementType):
    headers: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = ()


LIST_ITEM_TYPES = (UnorderedListItem, OrderedListItem)


@dataclass(frozen=True)
class MarkdownElement:
    type: ElementType
    content: str = ""
    span: SourceSpan | None = field(default=None, compare=False, repr=False)

    @property
    def inner(self) -> Tuple["MarkdownElement", ...]:
        if isinstance(self.type, LIST_ITEM_TYPES):
            return self.type.inner
        return ()


class FontWeight(str, Enum):
    REGULAR = "regular"
    BOLD = "bold"
    SEMIBOLD = "semibold"
    LIGHT = "light"


@dataclass(frozen=True)
class Style:
    font_size: float = 12
    weight: FontWeight = FontWeight.REGULAR
    italic: bool = False


@dataclass(frozen=True)
class StyleConfiguration:
    text: Style = Style()
    h1: Style = Style(font_size=24, weight=FontWeight.BOLD)
    h2: Style = Style(font_size=18, weight=FontWeight.BOLD)
    h3: Style = Style(font_size=15, weight=FontWeight.BOLD)
    h4: Style = Style(font_size=13, weight=FontWeight.BOLD)
    h5: Style = Style(font_size=11, weight=FontWeight.BOLD)
    h6: Style = Style(font_size=10, weight=FontWeight.BOLD)
    bold: Style = Style(weight=FontWeight.BOLD)
    italic: Style = Style(italic=True)
    code: Style = Style()
    code_block: Style = Style()
    link: Style = Style()
    list_prefix: Style = Style(weight=FontWeight.SEMIBOLD)

    def heading(self, level: int) -> Style:
        """Style slot for a header level; anything outside 1-6 uses h1."""
        if 1 <= level <= 6:
            return getattr(self, f"h{level}")
        return self.h1


@dataclass(frozen=True)
class Run:
    text: str
    style: Style
    underline: bool = False
    url: str | None = None
