from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from docx import Document as DocxDocument
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt

from .model import FontWeight, Run
from .run_mapper import LINE_SEPARATOR

logger = logging.getLogger(__name__)

FONT_NAME = "Times New Roman"
BOLD_WEIGHTS = {FontWeight.BOLD, FontWeight.SEMIBOLD}
# characters XML 1.0 cannot carry; lxml refuses them
XML_INVALID_RE = re.compile("[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def render_runs(runs: Iterable[Run], output_path: str | Path, font_name: str = FONT_NAME) -> None:
    """Write a run sequence to a .docx file.

    A separator run closes the current paragraph; every other run becomes a
    docx run carrying the size, weight, slant and underline of its style.
    """
    output_path = Path(output_path)
    docx = DocxDocument()
    paragraph = docx.add_paragraph()
    for run in runs:
        if run.text == LINE_SEPARATOR:
            paragraph = docx.add_paragraph()
        elif run.url:
            _add_hyperlink(paragraph, run, font_name)
        else:
            _set_run_font(paragraph.add_run(xml_safe(run.text)), run, font_name)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)
    logger.debug("Wrote %d paragraphs to %s", len(docx.paragraphs), output_path)


def _set_run_font(docx_run, run: Run, font_name: str) -> None:
    docx_run.font.name = font_name
    docx_run.font.size = Pt(run.style.font_size)
    docx_run.bold = run.style.weight in BOLD_WEIGHTS
    docx_run.italic = run.style.italic
    docx_run.underline = run.underline


def _add_hyperlink(paragraph, run: Run, font_name: str) -> None:
    """Append an external hyperlink wrapping a single formatted run."""
    r_id = paragraph.part.relate_to(xml_safe(run.url), RT.HYPERLINK, is_external=True)
    hyperlink = OxmlElement("w:hyperlink")
    hyperlink.set(qn("r:id"), r_id)
    docx_run = paragraph.add_run(xml_safe(run.text))
    _set_run_font(docx_run, run, font_name)
    # moves the run element out of the paragraph body
    hyperlink.append(docx_run._r)
    paragraph._p.append(hyperlink)


def xml_safe(text: str) -> str:
    """Drop characters that cannot appear in a .docx part."""
    return XML_INVALID_RE.sub("", text)
