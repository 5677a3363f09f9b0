from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import converter, renderer_docx, run_mapper
from .utils import configure_logging, read_markdown, read_style, resolve_output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="MarkdownRuns",
        description="Convert Markdown into styled text runs and export them as DOCX or plain text.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output DOCX path")
    parser.add_argument("--style", type=str, help="YAML file with style overrides")
    parser.add_argument("--text", action="store_true", help="Print the plain-text projection instead of writing DOCX")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    configuration = read_style(args.style)

    logging.info("Reading %s", input_path)
    markdown_text = read_markdown(input_path)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Converting markdown...")
    runs = converter.convert(markdown_text, configuration)

    if args.text:
        print(run_mapper.plain_text(runs))
        return

    output_path = resolve_output_path(input_path, args.output)
    logging.info("Rendering DOCX to %s", output_path)
    renderer_docx.render_runs(runs, output_path)

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
