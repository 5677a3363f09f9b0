from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .model import StyleConfiguration
from .style_config import load_configuration


LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DOCX_SUFFIX = ".docx"


def configure_logging(verbose: bool = False) -> None:
    """Send MarkdownRuns stage messages to stderr; DEBUG adds parser and exporter detail."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


def resolve_output_path(input_path: Path, output: Optional[str]) -> Path:
    """Pick the .docx target: explicit file, a file named after the input inside a directory, or next to the input."""
    if not output:
        return input_path.with_suffix(DOCX_SUFFIX)
    target = Path(output).expanduser()
    return target / input_path.with_suffix(DOCX_SUFFIX).name if target.is_dir() else target


def read_markdown(path: Path) -> str:
    # utf-8-sig drops a leading BOM so it never reaches the first header line
    return path.read_text(encoding="utf-8-sig")


def read_style(path: Optional[str]) -> StyleConfiguration | None:
    if not path:
        return None
    style_path = Path(path).expanduser()
    if not style_path.exists():
        raise FileNotFoundError(f"Style file not found: {style_path}")
    return load_configuration(style_path.read_text(encoding="utf-8"))
