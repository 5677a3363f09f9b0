from __future__ import annotations

import logging
from typing import List, Sequence

from . import markdown_parser, run_mapper
from .model import MarkdownElement, Run, StyleConfiguration

logger = logging.getLogger(__name__)


def parse(markdown_text: str) -> List[MarkdownElement]:
    """Parse Markdown text into its element sequence."""
    elements = markdown_parser.parse_markdown(markdown_text)
    logger.debug("Parsed %d chars into %d elements", len(markdown_text), len(elements))
    return elements


def convert(
    source: str | Sequence[MarkdownElement],
    configuration: StyleConfiguration | None = None,
) -> List[Run]:
    """Convert Markdown text, or an already parsed element sequence, into styled runs.

    Slots missing from ``configuration`` (or the whole configuration, when
    omitted) use the defaults of :class:`StyleConfiguration`.
    """
    elements = parse(source) if isinstance(source, str) else source
    runs = run_mapper.map_elements(elements, configuration)
    logger.debug("Mapped %d elements to %d runs", len(elements), len(runs))
    return runs
